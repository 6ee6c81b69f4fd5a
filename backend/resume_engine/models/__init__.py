"""
数据库模型模块
导出所有表模型和枚举类型
"""

# 用户域
from .user import User

# 简历域
from .resume import Resume, Visibility, generate_resume_id
from .statistics import ResumeStatistics

# 基础模型
from .base import TimestampModel, utc_now

__all__ = [
    # 用户域
    "User",
    # 简历域
    "Resume", "Visibility", "generate_resume_id",
    "ResumeStatistics",
    # 基础模型
    "TimestampModel", "utc_now"
]
