"""
简历域模型 - 访问统计表
与 resumes 一对一，首次匿名访问时懒创建
"""

from typing import Optional
from sqlmodel import Field

from .base import TimestampModel


class ResumeStatistics(TimestampModel, table=True):
    """
    访问统计表
    views / downloads 只增不减，简历删除时一并删除
    """
    __tablename__ = "statistics"

    id: Optional[int] = Field(default=None, primary_key=True)

    # 唯一约束保证并发懒创建时只有一行成功
    resume_id: str = Field(foreign_key="resumes.id", unique=True, index=True, nullable=False)

    views: int = Field(default=0, ge=0, nullable=False)
    downloads: int = Field(default=0, ge=0, nullable=False)
