"""
用户管理 Repository
提供 users 表的查询与创建，是身份解析的数据来源
"""

from typing import Optional

from sqlmodel import Session, select

from resume_engine.models.user import User


class UserRepository:
    """
    用户数据访问对象
    封装所有与 users 表相关的数据库操作
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        根据 ID 获取用户

        Args:
            user_id: 用户 ID

        Returns:
            User 对象，不存在则返回 None
        """
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        """
        根据用户名获取用户

        Args:
            username: 用户名

        Returns:
            User 对象，不存在则返回 None
        """
        statement = select(User).where(User.username == username)
        return self.session.exec(statement).first()

    def create(
        self,
        username: str,
        name: str,
        email: str,
        picture: Optional[str] = None
    ) -> User:
        """
        创建新用户

        Args:
            username: 用户名（必须唯一）
            name: 姓名
            email: 邮箱
            picture: 头像 URL（可选）

        Returns:
            创建的 User 对象
        """
        user = User(username=username, name=name, email=email, picture=picture)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user
