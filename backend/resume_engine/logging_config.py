"""
日志配置
各模块使用 logging.getLogger(__name__)，这里只负责挂载根处理器
"""

import logging
import sys
from typing import Optional

from resume_engine.config import get_log_level

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    配置 resume_engine 包的日志输出

    重复调用不会重复挂载处理器

    Args:
        level: 日志级别（如 "DEBUG"），为 None 时读取 LOG_LEVEL 环境变量

    Returns:
        resume_engine 包的根 logger
    """
    logger = logging.getLogger("resume_engine")
    logger.setLevel(getattr(logging, (level or get_log_level()).upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
