"""
Repository (DAO) 模块
提供数据库操作的抽象层，封装 CRUD 逻辑
"""

from .user_repository import UserRepository
from .resume_repository import ResumeRepository
from .statistics_repository import StatisticsRepository

__all__ = [
    "UserRepository",
    "ResumeRepository",
    "StatisticsRepository"
]
