"""
Pytest 测试配置
提供测试数据库、测试用户、假 LLM 与服务实例等测试基础设施
"""

import sys
from pathlib import Path
from typing import Any, Dict, Generator, List
from unittest.mock import Mock

import pytest
from langchain_core.runnables import RunnableLambda
from sqlmodel import Session, create_engine

# 添加 backend 目录到 sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from resume_engine.db.init_db import create_tables
from resume_engine.models import User
from resume_engine.repositories import ResumeRepository, StatisticsRepository, UserRepository
from resume_engine.schema.lean import LeanBasics, LeanSections
from resume_engine.services.lifecycle_service import LifecycleManager
from resume_engine.services.storage_service import LocalStorageService


# ==================== 数据库 Fixtures ====================

@pytest.fixture(scope="function")
def test_db_engine():
    """
    创建测试用的内存数据库引擎
    每个测试函数都会获得一个全新的数据库
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False}
    )
    create_tables(engine)
    yield engine


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """
    创建测试用的数据库会话
    """
    with Session(test_db_engine) as session:
        yield session


# ==================== 测试数据 Fixtures ====================

@pytest.fixture(scope="function")
def test_user(test_db_session: Session) -> User:
    """
    创建测试用户
    """
    user = User(
        username="kevin",
        name="Kevin Zhang",
        email="kevin@example.com",
        picture="https://example.com/kevin.png"
    )
    test_db_session.add(user)
    test_db_session.commit()
    test_db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
def other_user(test_db_session: Session) -> User:
    """
    创建另一个用户（用于归属检查），没有头像
    """
    user = User(username="lily", name="Lily Wang", email="lily@example.com")
    test_db_session.add(user)
    test_db_session.commit()
    test_db_session.refresh(user)
    return user


# ==================== Mock LLM ====================

class FakeStructuredLLM:
    """
    假的结构化输出 LLM

    outputs 以 schema 类名为键；值为 Exception 时该次调用抛出异常
    """

    def __init__(self, outputs: Dict[str, Any]):
        self.outputs = outputs
        self.schemas: List[type] = []
        self.inputs: List[Any] = []

    def with_structured_output(self, schema):
        self.schemas.append(schema)

        def _respond(messages):
            self.inputs.append(messages)
            value = self.outputs[schema.__name__]
            if isinstance(value, Exception):
                raise value
            return value

        return RunnableLambda(_respond)


@pytest.fixture(scope="function")
def fake_llm_cls():
    """
    返回 FakeStructuredLLM 类，用于按需构造失败场景
    """
    return FakeStructuredLLM


@pytest.fixture(scope="function")
def lean_basics() -> LeanBasics:
    return LeanBasics(
        name="Generated Name",
        headline="Senior Backend Engineer",
        email="generated@example.com",
        phone="+86 138 0000 0000",
        location="Shanghai",
        url={"label": "Blog", "href": "https://kevin.dev"}
    )


@pytest.fixture(scope="function")
def lean_sections() -> LeanSections:
    return LeanSections(
        summary="Backend engineer focused on Python services.",
        experience=[
            {"company": "ABC", "position": "Developer", "date": "2020 - 2023", "summary": "Built APIs"}
        ],
        skills=[
            {"name": "Python", "level": 4, "keywords": ["FastAPI", "SQLModel"]}
        ]
    )


@pytest.fixture(scope="function")
def fake_llm(lean_basics, lean_sections) -> FakeStructuredLLM:
    """
    两个片段都正常返回的假 LLM
    """
    return FakeStructuredLLM({
        "LeanBasics": lean_basics,
        "LeanSections": lean_sections
    })


# ==================== Repository Fixtures ====================

@pytest.fixture(scope="function")
def user_repository(test_db_session: Session) -> UserRepository:
    return UserRepository(test_db_session)


@pytest.fixture(scope="function")
def resume_repository(test_db_session: Session) -> ResumeRepository:
    return ResumeRepository(test_db_session)


@pytest.fixture(scope="function")
def statistics_repository(test_db_session: Session) -> StatisticsRepository:
    return StatisticsRepository(test_db_session)


# ==================== Service Fixtures ====================

@pytest.fixture(scope="function")
def storage_service(tmp_path) -> LocalStorageService:
    """
    存放在临时目录的本地存储
    """
    return LocalStorageService(root=str(tmp_path / "storage"))


@pytest.fixture(scope="function")
def printer_service() -> Mock:
    """
    Mock 渲染服务
    """
    printer = Mock()
    printer.print_resume.return_value = "https://cdn.example.com/resumes/resume.pdf"
    printer.print_preview.return_value = "https://cdn.example.com/previews/resume.jpg"
    return printer


@pytest.fixture(scope="function")
def lifecycle_manager(test_db_session, storage_service, printer_service, fake_llm) -> LifecycleManager:
    """
    使用测试数据库、临时存储、Mock 渲染服务和假 LLM 的生命周期服务
    """
    return LifecycleManager(
        test_db_session,
        storage_service=storage_service,
        printer_service=printer_service,
        llm=fake_llm
    )


# ==================== Pytest 配置 ====================

def pytest_configure(config):
    """
    Pytest 初始化配置
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
