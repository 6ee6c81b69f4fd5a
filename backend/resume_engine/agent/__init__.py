"""
Agent 模块
LLM 工厂、提示词与 AI 简历生成管线
"""

from .llm_factory import LLMFactory, get_llm
from .generation import GenerationPipeline

__all__ = [
    "LLMFactory",
    "get_llm",
    "GenerationPipeline"
]
