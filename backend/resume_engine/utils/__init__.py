"""
工具模块
"""

from .text import kebab_case, generate_random_name

__all__ = [
    "kebab_case",
    "generate_random_name"
]
