"""
数据库初始化脚本
负责创建表结构和默认用户
"""

import logging
import os

from sqlmodel import SQLModel, Session, create_engine, select

from resume_engine.config import BACKEND_ROOT
from resume_engine.models.user import User
# 导入以注册表结构
from resume_engine.models.resume import Resume  # noqa: F401
from resume_engine.models.statistics import ResumeStatistics  # noqa: F401

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = "me"


def get_database_url() -> str:
    """
    获取数据库连接 URL
    优先使用 DATABASE_PATH 环境变量，否则使用 backend/ 下的 SQLite 文件
    """
    db_path = os.environ.get("DATABASE_PATH", "database.db")
    if not os.path.isabs(db_path):
        db_path = str(BACKEND_ROOT / db_path)
    return f"sqlite:///{db_path}"


def get_engine(database_url: str = None):
    """
    创建并返回数据库引擎

    Args:
        database_url: 连接 URL，为 None 时使用 get_database_url()
    """
    return create_engine(
        database_url or get_database_url(),
        echo=False,
        connect_args={"check_same_thread": False}
    )


def create_tables(engine) -> None:
    """
    创建所有数据库表
    """
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created at %s", engine.url)


def create_default_user(session: Session) -> User:
    """
    创建默认用户 'me'
    如果用户已存在，则返回现有用户
    """
    statement = select(User).where(User.username == DEFAULT_USERNAME)
    existing = session.exec(statement).first()
    if existing:
        logger.debug("Default user already exists (ID: %s)", existing.id)
        return existing

    user = User(username=DEFAULT_USERNAME, name="Me", email="me@example.com")
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Created default user '%s' (ID: %s)", DEFAULT_USERNAME, user.id)
    return user


def create_default_data(session: Session) -> None:
    """
    创建所有默认数据
    """
    create_default_user(session)


def init_db(database_url: str = None) -> None:
    """
    完整的数据库初始化流程
    1. 创建数据库引擎
    2. 创建所有表结构
    3. 创建默认数据
    """
    engine = get_engine(database_url)
    create_tables(engine)

    with Session(engine) as session:
        create_default_data(session)


if __name__ == "__main__":
    from resume_engine.logging_config import setup_logging

    setup_logging()
    init_db()
