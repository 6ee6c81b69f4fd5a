"""
用户域模型 - 用户表
身份解析的数据源：提供姓名、邮箱、头像，并通过 username 定位公开简历
"""

from typing import Optional
from sqlmodel import Field

from .base import TimestampModel


class User(TimestampModel, table=True):
    """
    用户表
    简历的唯一归属者
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)

    # 公开链接中的用户名：/{username}/{slug}
    username: str = Field(unique=True, index=True, nullable=False)

    # 以下三个字段会在创建简历时覆盖到 basics 中
    name: str = Field(nullable=False)
    email: str = Field(nullable=False)
    picture: Optional[str] = Field(default=None)
