"""
简历域模型 - 简历文档表
"""

import uuid
from enum import Enum
from typing import Optional, Dict, Any

from sqlmodel import Field, Column, JSON
from sqlalchemy import UniqueConstraint

from .base import TimestampModel


class Visibility(str, Enum):
    """可见性枚举：public 对任何人只读开放"""
    PRIVATE = "private"
    PUBLIC = "public"


def generate_resume_id() -> str:
    """生成不透明的简历 ID"""
    return uuid.uuid4().hex


class Resume(TimestampModel, table=True):
    """
    简历文档表
    data 始终是一份完整、通过 schema 校验的简历数据
    """
    __tablename__ = "resumes"

    # 同一用户下 slug 唯一
    __table_args__ = (UniqueConstraint("user_id", "slug", name="uix_user_slug"),)

    # 主键：创建时分配，之后不可变
    id: str = Field(default_factory=generate_resume_id, primary_key=True)

    # 外键：归属用户，创建后不可变
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)

    title: str = Field(nullable=False)
    slug: str = Field(index=True, nullable=False)

    visibility: Visibility = Field(default=Visibility.PRIVATE, nullable=False)

    # 锁定后除解锁外的所有修改都会被拒绝
    locked: bool = Field(default=False, nullable=False)

    # 完整的 ResumeData JSON
    data: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
