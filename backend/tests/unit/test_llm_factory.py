"""测试 LLM 工厂模块"""

import json

import pytest
from unittest.mock import patch

from langchain_openai import ChatOpenAI

from resume_engine.agent.llm_factory import LLMFactory, get_llm


@pytest.fixture
def test_config():
    return {
        "active_model": "openai_official",
        "providers": {
            "openai_official": {
                "base_url": "https://api.openai.com/v1",
                "model_name": "gpt-4o",
                "env_key_map": "OPENAI_API_KEY",
                "temperature": 0.4,
                "timeout": 30
            },
            "moonshot": {
                "base_url": "https://api.moonshot.cn/v1",
                "model_name": "kimi-k2-turbo-preview",
                "env_key_map": "MOONSHOT_API_KEY",
                "temperature": 0.6
            },
            "gemini": {
                "base_url": None,
                "model_name": "gemini-2.5-flash",
                "env_key_map": "GEMINI_API_KEY",
                "temperature": 0.7
            }
        }
    }


@pytest.fixture
def write_config(tmp_path):
    """写入配置文件并返回路径"""
    def _write(config):
        path = tmp_path / "llm_config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return str(path)
    return _write


class TestLLMFactory:
    """测试 LLMFactory 类"""

    def test_load_config_success(self, write_config, test_config):
        """测试成功加载配置文件"""
        factory = LLMFactory(write_config(test_config))

        assert factory._load_config() == test_config
        assert factory.get_active_model_name() == "openai_official"

    def test_load_config_file_not_found(self, tmp_path):
        """测试配置文件不存在时的错误处理"""
        factory = LLMFactory(str(tmp_path / "nonexistent.json"))

        with pytest.raises(FileNotFoundError) as exc_info:
            factory._load_config()
        assert "配置文件不存在" in str(exc_info.value)

    def test_load_config_invalid_json(self, tmp_path):
        """测试 JSON 格式错误时的处理"""
        path = tmp_path / "invalid.json"
        path.write_text("{invalid json}", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            LLMFactory(str(path))._load_config()

    def test_default_path_from_env(self, monkeypatch, tmp_path):
        """测试默认路径读取 LLM_CONFIG_PATH"""
        monkeypatch.setenv("LLM_CONFIG_PATH", str(tmp_path / "custom.json"))

        assert LLMFactory().config_path == str(tmp_path / "custom.json")

    def test_missing_active_model(self, write_config):
        """测试配置文件缺少 active_model 字段"""
        factory = LLMFactory(write_config({"providers": {}}))

        with pytest.raises(ValueError) as exc_info:
            factory.get_active_model_config()
        assert "缺少 active_model" in str(exc_info.value)

    def test_missing_providers(self, write_config):
        """测试配置文件缺少 providers 字段"""
        factory = LLMFactory(write_config({"active_model": "moonshot"}))

        with pytest.raises(ValueError) as exc_info:
            factory.get_active_model_config()
        assert "缺少 providers" in str(exc_info.value)

    def test_active_model_not_found(self, write_config):
        """测试 active_model 对应的 provider 不存在"""
        factory = LLMFactory(write_config({
            "active_model": "nonexistent",
            "providers": {"moonshot": {"model_name": "x"}}
        }))

        with pytest.raises(ValueError) as exc_info:
            factory.get_active_model_config()
        assert "找不到 'nonexistent'" in str(exc_info.value)

    def test_missing_api_key(self, write_config, test_config, monkeypatch):
        """测试环境变量缺失"""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        with pytest.raises(ValueError) as exc_info:
            LLMFactory(write_config(test_config)).create_llm()
        assert "OPENAI_API_KEY" in str(exc_info.value)

    def test_missing_model_name(self, write_config, monkeypatch):
        """测试缺少 model_name"""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        factory = LLMFactory(write_config({
            "active_model": "openai_official",
            "providers": {"openai_official": {"env_key_map": "OPENAI_API_KEY"}}
        }))

        with pytest.raises(ValueError) as exc_info:
            factory.create_llm()
        assert "model_name" in str(exc_info.value)

    def test_create_openai_llm(self, write_config, test_config, monkeypatch):
        """测试创建 OpenAI 实例"""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        llm = LLMFactory(write_config(test_config)).create_llm()

        assert isinstance(llm, ChatOpenAI)
        assert llm.model_name == "gpt-4o"
        assert llm.temperature == 0.4

    def test_create_moonshot_llm(self, write_config, test_config, monkeypatch):
        """测试 Moonshot 走 OpenAI 兼容接口"""
        monkeypatch.setenv("MOONSHOT_API_KEY", "sk-moon")
        test_config["active_model"] = "moonshot"

        llm = LLMFactory(write_config(test_config)).create_llm()

        assert isinstance(llm, ChatOpenAI)
        assert llm.model_name == "kimi-k2-turbo-preview"

    def test_create_gemini_llm(self, write_config, test_config, monkeypatch):
        """测试创建 Gemini 实例"""
        monkeypatch.setenv("GEMINI_API_KEY", "gemini-test")
        test_config["active_model"] = "gemini"

        with patch("resume_engine.agent.llm_factory.ChatGoogleGenerativeAI") as mock_gemini:
            LLMFactory(write_config(test_config)).create_llm()

        kwargs = mock_gemini.call_args.kwargs
        assert kwargs["google_api_key"] == "gemini-test"
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["temperature"] == 0.7

    def test_unsupported_model(self, write_config, monkeypatch):
        """测试不支持的模型类型"""
        monkeypatch.setenv("OTHER_KEY", "k")
        factory = LLMFactory(write_config({
            "active_model": "other",
            "providers": {"other": {"env_key_map": "OTHER_KEY", "model_name": "m"}}
        }))

        with pytest.raises(NotImplementedError):
            factory.create_llm()

    def test_get_llm_helper(self, write_config, test_config, monkeypatch):
        """测试便捷函数"""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        assert isinstance(get_llm(write_config(test_config)), ChatOpenAI)
