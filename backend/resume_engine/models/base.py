"""
基础模型模块
提供所有表模型共用的时间戳字段
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    """返回带时区的当前 UTC 时间"""
    return datetime.now(timezone.utc)


class TimestampModel(SQLModel):
    """时间戳基类，为所有表提供 created_at 和 updated_at 字段

    updated_at 在每次 UPDATE 时由数据库层刷新（包括 Core update 语句）
    """
    created_at: Optional[datetime] = Field(default_factory=utc_now, nullable=False)
    updated_at: Optional[datetime] = Field(
        default_factory=utc_now,
        nullable=False,
        index=True,
        sa_column_kwargs={"onupdate": utc_now}
    )
