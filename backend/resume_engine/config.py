"""
配置模块
所有配置项都从系统环境变量读取，不读取 .env 文件，代码中不出现任何密钥
"""

import os
from pathlib import Path
from typing import Optional

# backend/ 目录，相对路径都从这里解析
BACKEND_ROOT = Path(__file__).parent.parent


def _resolve_path(raw_path: str) -> str:
    """相对路径按 backend/ 目录解析为绝对路径"""
    if os.path.isabs(raw_path):
        return raw_path
    return str(BACKEND_ROOT / raw_path)


def get_storage_root() -> str:
    """
    获取产物存储根目录（渲染结果、预览图）

    Returns:
        绝对路径，默认 backend/storage
    """
    return _resolve_path(os.environ.get("STORAGE_ROOT", "storage"))


def get_llm_config_path() -> str:
    """获取 LLM 配置文件路径，默认 backend/llm_config.json"""
    return _resolve_path(os.environ.get("LLM_CONFIG_PATH", "llm_config.json"))


def get_log_level() -> str:
    """获取日志级别，默认 INFO"""
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_enrichment_api_url() -> str:
    """获取外部画像补全服务地址"""
    return os.environ.get(
        "ENRICHMENT_API_URL",
        "https://api.scrapin.io/enrichment/profile"
    )


def get_enrichment_api_key() -> Optional[str]:
    """
    获取外部画像补全服务的 API Key

    Returns:
        API Key，未设置则返回 None
    """
    return os.environ.get("ENRICHMENT_API_KEY") or None
