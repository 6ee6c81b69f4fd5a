"""
简历文档 Repository
提供 resumes 表的增删改查；锁检查与更新合并为一条条件 UPDATE
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, update
from sqlmodel import Session, select, col

from resume_engine.models.resume import Resume, Visibility
from resume_engine.models.statistics import ResumeStatistics
from resume_engine.models.user import User


class ResumeRepository:
    """
    简历数据访问对象
    封装所有与 resumes 表相关的数据库操作
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def create(
        self,
        user_id: int,
        title: str,
        slug: str,
        data: Dict[str, Any],
        visibility: Visibility = Visibility.PRIVATE
    ) -> Resume:
        """
        创建新简历

        slug 冲突时抛出 sqlalchemy.exc.IntegrityError，会话已回滚

        Args:
            user_id: 归属用户 ID
            title: 标题
            slug: 同一用户下唯一的 slug
            data: 完整的简历数据（dict）
            visibility: 可见性

        Returns:
            创建的 Resume 对象
        """
        resume = Resume(
            user_id=user_id,
            title=title,
            slug=slug,
            visibility=visibility,
            data=data
        )
        self.session.add(resume)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(resume)
        return resume

    def get_by_id(self, resume_id: str) -> Optional[Resume]:
        """
        根据 ID 获取简历（不做归属检查）

        Args:
            resume_id: 简历 ID

        Returns:
            Resume 对象，不存在则返回 None
        """
        return self.session.get(Resume, resume_id)

    def get_by_user_and_id(self, user_id: int, resume_id: str) -> Optional[Resume]:
        """
        根据 (user_id, id) 获取简历

        Args:
            user_id: 用户 ID
            resume_id: 简历 ID

        Returns:
            Resume 对象，不存在或不属于该用户则返回 None
        """
        statement = select(Resume).where(
            Resume.user_id == user_id,
            Resume.id == resume_id
        )
        return self.session.exec(statement).first()

    def get_all_by_user(self, user_id: int) -> List[Resume]:
        """
        获取用户的所有简历（最近更新的在前）

        Args:
            user_id: 用户 ID

        Returns:
            Resume 对象列表
        """
        statement = select(Resume).where(
            Resume.user_id == user_id
        ).order_by(col(Resume.updated_at).desc(), col(Resume.created_at).desc())
        return list(self.session.exec(statement).all())

    def get_public_by_username_slug(self, username: str, slug: str) -> Optional[Resume]:
        """
        根据 用户名 + slug 获取公开简历

        Args:
            username: 归属用户的用户名
            slug: 简历 slug

        Returns:
            公开的 Resume 对象，不存在或非公开则返回 None
        """
        statement = select(Resume).join(User, User.id == Resume.user_id).where(
            User.username == username,
            Resume.slug == slug,
            Resume.visibility == Visibility.PUBLIC
        )
        return self.session.exec(statement).first()

    def slug_exists(self, user_id: int, slug: str, exclude_id: Optional[str] = None) -> bool:
        """
        检查 slug 在该用户下是否已被占用

        Args:
            user_id: 用户 ID
            slug: 待检查的 slug
            exclude_id: 排除的简历 ID（更新自身 slug 时使用）
        """
        statement = select(Resume.id).where(
            Resume.user_id == user_id,
            Resume.slug == slug
        )
        if exclude_id is not None:
            statement = statement.where(Resume.id != exclude_id)
        return self.session.exec(statement).first() is not None

    def update_if_unlocked(self, user_id: int, resume_id: str, values: Dict[str, Any]) -> bool:
        """
        条件更新：仅当简历属于该用户且未锁定时写入

        锁检查和写入在同一条 UPDATE 语句中完成，不存在先读后写的竞争窗口

        Args:
            user_id: 用户 ID
            resume_id: 简历 ID
            values: 要写入的列

        Returns:
            写入成功返回 True；未命中（不存在、不属于该用户或已锁定）返回 False
        """
        statement = (
            update(Resume)
            .where(
                Resume.user_id == user_id,
                Resume.id == resume_id,
                Resume.locked == False  # noqa: E712
            )
            .values(**values)
        )
        try:
            result = self.session.connection().execute(statement)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return result.rowcount > 0

    def set_locked(self, user_id: int, resume_id: str, locked: bool) -> Optional[Resume]:
        """
        设置锁定状态（无论当前状态如何都允许）

        Args:
            user_id: 用户 ID
            resume_id: 简历 ID
            locked: 目标锁定状态

        Returns:
            更新后的 Resume 对象，不存在则返回 None
        """
        resume = self.get_by_user_and_id(user_id, resume_id)
        if resume:
            resume.locked = locked
            self.session.add(resume)
            self.session.commit()
            self.session.refresh(resume)
        return resume

    def delete(self, user_id: int, resume_id: str) -> bool:
        """
        删除简历及其统计行（同一事务）

        Args:
            user_id: 用户 ID
            resume_id: 简历 ID

        Returns:
            删除成功返回 True，简历不存在返回 False
        """
        resume = self.get_by_user_and_id(user_id, resume_id)
        if not resume:
            return False

        try:
            self.session.connection().execute(
                delete(ResumeStatistics).where(ResumeStatistics.resume_id == resume_id)
            )
            self.session.delete(resume)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True
