"""LLM 工厂模块

根据配置文件创建结构化输出所用的 LLM 实例。
只从系统环境变量获取密钥，从不读取 .env 文件。
"""

import json
import os
from typing import Any, Dict, Optional

from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI

from resume_engine.config import get_llm_config_path

# 走 OpenAI 兼容接口的 provider
OPENAI_COMPATIBLE = ("openai_official", "moonshot")


class LLMFactory:
    """LLM 工厂类，负责读取配置并创建 LLM 实例"""

    def __init__(self, config_path: Optional[str] = None):
        """初始化工厂

        Args:
            config_path: 配置文件路径，为 None 时读取 LLM_CONFIG_PATH（默认 backend/llm_config.json）
        """
        self.config_path = config_path or get_llm_config_path()
        self._loaded_config = None

    def _load_config(self) -> Dict[str, Any]:
        """加载配置文件（只读一次）

        Raises:
            FileNotFoundError: 配置文件不存在
            json.JSONDecodeError: JSON 格式错误
        """
        if self._loaded_config is None:
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    self._loaded_config = json.load(f)
            except FileNotFoundError:
                raise FileNotFoundError(f"配置文件不存在: {self.config_path}")

        return self._loaded_config

    def get_active_model_name(self) -> str:
        """获取 active_model 字段

        Raises:
            ValueError: 缺少 active_model
        """
        active_model = self._load_config().get("active_model")
        if not active_model:
            raise ValueError("配置文件中缺少 active_model 字段")
        return active_model

    def get_active_model_config(self) -> Dict[str, Any]:
        """获取当前激活的模型配置

        Raises:
            ValueError: 缺少 providers 或找不到 active_model 对应的配置
        """
        active_model = self.get_active_model_name()

        providers = self._load_config().get("providers")
        if not providers:
            raise ValueError("配置文件中缺少 providers 字段")

        model_config = providers.get(active_model)
        if not model_config:
            raise ValueError(f"providers 中找不到 '{active_model}' 的配置")

        return model_config

    def _get_api_key(self, env_key: str) -> str:
        """从系统环境变量获取 API Key

        Raises:
            ValueError: 环境变量不存在或为空
        """
        api_key = os.getenv(env_key)
        if not api_key:
            raise ValueError(f"环境变量 '{env_key}' 未设置或为空，无法初始化 LLM")
        return api_key

    def create_llm(self) -> Any:
        """创建并返回 LLM 实例

        Returns:
            LangChain 聊天模型 (ChatOpenAI 或 ChatGoogleGenerativeAI)

        Raises:
            ValueError: 配置错误或环境变量缺失
            NotImplementedError: 不支持的模型类型
        """
        model_config = self.get_active_model_config()

        env_key_map = model_config.get("env_key_map")
        if not env_key_map:
            raise ValueError("模型配置中缺少 env_key_map 字段")
        api_key = self._get_api_key(env_key_map)

        model_name = model_config.get("model_name")
        if not model_name:
            raise ValueError("模型配置中缺少 model_name 字段")

        temperature = model_config.get("temperature", 0.7)
        # 超时由 SDK 抛出异常，生成管线统一转换为 GenerationError
        timeout = model_config.get("timeout", 60)

        active_model = self.get_active_model_name()

        if active_model in OPENAI_COMPATIBLE:
            return ChatOpenAI(
                api_key=api_key,
                base_url=model_config.get("base_url"),
                model=model_name,
                temperature=temperature,
                timeout=timeout
            )
        elif active_model == "gemini":
            return ChatGoogleGenerativeAI(
                google_api_key=api_key,
                model=model_name,
                temperature=temperature,
                timeout=timeout
            )
        else:
            raise NotImplementedError(f"不支持的模型类型: {active_model}")


def get_llm(config_path: Optional[str] = None) -> Any:
    """获取 LLM 实例的便捷函数"""
    return LLMFactory(config_path).create_llm()
