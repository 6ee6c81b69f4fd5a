"""
访问统计 Repository
计数使用相对自增（SET views = views + 1），不在内存中读改写
"""

from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from resume_engine.models.statistics import ResumeStatistics

COUNTER_FIELDS = ("views", "downloads")


class StatisticsRepository:
    """
    访问统计数据访问对象
    封装所有与 statistics 表相关的数据库操作
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def get_by_resume_id(self, resume_id: str) -> Optional[ResumeStatistics]:
        """
        获取简历的统计行

        Args:
            resume_id: 简历 ID

        Returns:
            ResumeStatistics 对象，尚未创建则返回 None
        """
        statement = select(ResumeStatistics).where(ResumeStatistics.resume_id == resume_id)
        return self.session.exec(statement).first()

    def _increment_existing(self, resume_id: str, field: str) -> bool:
        column = getattr(ResumeStatistics, field)
        statement = (
            update(ResumeStatistics)
            .where(ResumeStatistics.resume_id == resume_id)
            .values({field: column + 1})
        )
        result = self.session.connection().execute(statement)
        return result.rowcount > 0

    def increment(self, resume_id: str, field: str) -> None:
        """
        对指定计数器做 upsert 自增

        1. 先尝试原子自增已有行
        2. 没有行则插入（触发的计数器为 1，另一个为 0）
        3. 插入撞上唯一约束（并发懒创建）则回滚后再自增一次

        Args:
            resume_id: 简历 ID
            field: "views" 或 "downloads"

        Raises:
            ValueError: field 不是合法的计数器
        """
        if field not in COUNTER_FIELDS:
            raise ValueError(f"未知的计数器字段: {field}")

        try:
            if self._increment_existing(resume_id, field):
                self.session.commit()
                return

            counters = {name: 0 for name in COUNTER_FIELDS}
            counters[field] = 1
            self.session.add(ResumeStatistics(resume_id=resume_id, **counters))
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            try:
                self._increment_existing(resume_id, field)
                self.session.commit()
            except Exception:
                self.session.rollback()
                raise
        except Exception:
            self.session.rollback()
            raise
