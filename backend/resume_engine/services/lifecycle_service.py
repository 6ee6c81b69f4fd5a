"""
简历生命周期服务

封装简历的全部业务规则：
1. 三种创建路径：空白 / AI 生成 / 导入
2. 归属检查：写操作一律按 (user_id, id) 定位
3. 锁定规则：锁定后只允许 lock/unlock 和删除
4. 匿名访问统计：公开访问计浏览量，渲染计下载量（失败只记日志）
5. 删除时尽力清理存储中的产物
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from resume_engine.agent.generation import GenerationPipeline
from resume_engine.errors import ConflictError, LockedError, NotFoundError, ValidationError
from resume_engine.models.resume import Resume, Visibility
from resume_engine.repositories.resume_repository import ResumeRepository
from resume_engine.repositories.statistics_repository import StatisticsRepository
from resume_engine.repositories.user_repository import UserRepository
from resume_engine.schema.merger import DocumentMerger
from resume_engine.schema.requests import (
    CreateAiResumeRequest,
    CreateResumeRequest,
    IdentityProfile,
    ImportResumeRequest,
    ResumeStatisticsView,
    UpdateResumeRequest,
)
from resume_engine.schema.resume_data import ResumeData, default_resume_data
from resume_engine.services.printer_service import PrinterService
from resume_engine.services.statistics_service import StatisticsTracker
from resume_engine.services.storage_service import ARTIFACT_CATEGORIES, LocalStorageService, StorageService
from resume_engine.utils.text import generate_random_name, kebab_case

logger = logging.getLogger(__name__)

AI_TITLE_SUFFIX = " (AI)"


class LifecycleManager:
    """
    简历生命周期服务类

    使用示例：
        with Session(get_engine()) as session:
            manager = LifecycleManager(session)
            resume = manager.create(user_id, CreateResumeRequest(title="Engineer Resume"))
    """

    def __init__(
        self,
        session: Session,
        storage_service: Optional[StorageService] = None,
        printer_service: Optional[PrinterService] = None,
        generation_pipeline: Optional[GenerationPipeline] = None,
        llm: Any = None,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            session: SQLModel 数据库会话
            storage_service: 产物存储（默认本地文件系统）
            printer_service: 渲染服务（只有 print_* 方法需要）
            generation_pipeline: AI 生成管线（默认懒创建）
            llm: 懒创建生成管线时使用的 LLM（默认 get_llm()）
            rng: 随机标题使用的随机数生成器
        """
        self.session = session
        self.user_repo = UserRepository(session)
        self.resume_repo = ResumeRepository(session)
        self.statistics = StatisticsTracker(StatisticsRepository(session))
        self.merger = DocumentMerger()
        self.storage_service = storage_service or LocalStorageService()
        self.printer_service = printer_service
        self._generation_pipeline = generation_pipeline
        self._llm = llm
        self._rng = rng

    @property
    def generation_pipeline(self) -> GenerationPipeline:
        if self._generation_pipeline is None:
            llm = self._llm
            if llm is None:
                from resume_engine.agent.llm_factory import get_llm
                llm = get_llm()
            self._generation_pipeline = GenerationPipeline(llm, self.resume_repo, self.merger)
        return self._generation_pipeline

    # ==================== 创建 ====================

    def get_identity(self, user_id: int) -> IdentityProfile:
        """
        解析用户身份字段

        Raises:
            NotFoundError: 用户不存在
        """
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("用户不存在", {"user_id": user_id})
        return IdentityProfile(user_id=user.id, name=user.name, email=user.email, picture=user.picture)

    def create(self, user_id: int, request: CreateResumeRequest) -> Resume:
        """
        创建空白简历：默认数据 + 用户身份字段

        Raises:
            NotFoundError: 用户不存在
            ConflictError: slug 在该用户下已存在
        """
        profile = self.get_identity(user_id)
        data = self.merger.merge(default_resume_data(), {
            "basics": {
                "name": profile.name,
                "email": profile.email,
                "picture": {"url": profile.picture or ""}
            }
        })

        return self._persist(
            user_id=user_id,
            title=request.title,
            slug=request.slug or kebab_case(request.title),
            visibility=request.visibility,
            data=data
        )

    def create_from_ai(self, user_id: int, request: CreateAiResumeRequest) -> Resume:
        """
        AI 生成简历，标题追加 " (AI)"

        生成失败时不会写入任何数据

        Raises:
            NotFoundError: 用户不存在
            ValidationError: existing_resume_id 不属于该用户
            GenerationError: 生成失败
            ConflictError: slug 冲突
        """
        profile = self.get_identity(user_id)
        logger.info(
            "AI resume creation for user %s (existing=%s)",
            user_id, request.existing_resume_id
        )

        data = self.generation_pipeline.generate(
            profile,
            job_description=request.job_description or "",
            existing_resume_id=request.existing_resume_id
        )

        return self._persist(
            user_id=user_id,
            title=request.title + AI_TITLE_SUFFIX,
            slug=request.slug or kebab_case(request.title),
            visibility=request.visibility,
            data=data
        )

    def import_document(self, user_id: int, request: ImportResumeRequest) -> Resume:
        """
        导入调用方提供的完整简历

        - 未提供标题时生成随机可读标题
        - 未提供 slug 时由实际使用的标题生成
        - 一律 private，忽略请求中的 visibility
        """
        if self.user_repo.get_by_id(user_id) is None:
            raise NotFoundError("用户不存在", {"user_id": user_id})

        title = request.title or generate_random_name(self._rng)
        return self._persist(
            user_id=user_id,
            title=title,
            slug=request.slug or kebab_case(title),
            visibility=Visibility.PRIVATE,
            data=request.data
        )

    def _persist(
        self,
        user_id: int,
        title: str,
        slug: str,
        visibility: Visibility,
        data: ResumeData
    ) -> Resume:
        if not slug:
            raise ValidationError("无法从标题生成 slug，请显式提供 slug", {"title": title})
        if self.resume_repo.slug_exists(user_id, slug):
            raise ConflictError("slug 已存在", {"slug": slug})

        try:
            resume = self.resume_repo.create(
                user_id=user_id,
                title=title,
                slug=slug,
                data=data.model_dump(),
                visibility=visibility
            )
        except IntegrityError as e:
            raise ConflictError("slug 已存在", {"slug": slug}) from e

        logger.info("Created resume %s for user %s (slug=%s)", resume.id, user_id, slug)
        return resume

    # ==================== 查询 ====================

    def find_all(self, user_id: int) -> List[Resume]:
        """获取用户的所有简历（最近更新的在前）"""
        return self.resume_repo.get_all_by_user(user_id)

    def find_one(self, resume_id: str, user_id: Optional[int] = None) -> Resume:
        """
        获取单份简历

        Args:
            resume_id: 简历 ID
            user_id: 提供时做归属检查；不提供时按 ID 直接查询（内部路径）

        Raises:
            NotFoundError: 不存在或不属于该用户
        """
        if user_id is not None:
            resume = self.resume_repo.get_by_user_and_id(user_id, resume_id)
        else:
            resume = self.resume_repo.get_by_id(resume_id)

        if resume is None:
            raise NotFoundError("简历不存在", {"resume_id": resume_id})
        return resume

    def find_public_by_slug(self, username: str, slug: str, viewer_id: Optional[int] = None) -> Resume:
        """
        按 用户名 + slug 获取公开简历；匿名访问时浏览量 +1

        Raises:
            NotFoundError: 不存在或非公开
        """
        resume = self.resume_repo.get_public_by_username_slug(username, slug)
        if resume is None:
            raise NotFoundError("公开简历不存在", {"username": username, "slug": slug})

        resume_id = resume.id
        if viewer_id is None:
            self._record_safely(self.statistics.record_view, resume_id, "view")
        return resume

    def get_statistics(self, resume_id: str) -> ResumeStatisticsView:
        """获取浏览量 / 下载量，没有统计行时均为 0"""
        return self.statistics.get_statistics(resume_id)

    # ==================== 修改 ====================

    def update(self, user_id: int, resume_id: str, request: UpdateResumeRequest) -> Resume:
        """
        更新简历（标题、slug、可见性、整份数据替换）

        锁检查与写入是同一条条件 UPDATE

        Raises:
            LockedError: 简历已锁定，数据保持不变
            NotFoundError: 简历不存在或不属于该用户
            ConflictError: 新 slug 与该用户的其他简历冲突
        """
        values = request.to_values()

        if values:
            try:
                updated = self.resume_repo.update_if_unlocked(user_id, resume_id, values)
            except IntegrityError as e:
                raise ConflictError("slug 已存在", {"slug": values.get("slug")}) from e
        else:
            updated = False

        resume = self.resume_repo.get_by_user_and_id(user_id, resume_id)
        if resume is None:
            raise NotFoundError("简历不存在", {"resume_id": resume_id})
        # 行存在而条件 UPDATE 未命中，即被锁定条件排除
        if not updated and (values or resume.locked):
            raise LockedError("简历已锁定，请先解锁", {"resume_id": resume_id})

        if updated:
            logger.info("Updated resume %s fields=%s", resume_id, sorted(values))
        return resume

    def lock(self, user_id: int, resume_id: str, locked: bool) -> Resume:
        """
        设置锁定状态，任何状态下都允许

        Raises:
            NotFoundError: 简历不存在或不属于该用户
        """
        resume = self.resume_repo.set_locked(user_id, resume_id, locked)
        if resume is None:
            raise NotFoundError("简历不存在", {"resume_id": resume_id})
        logger.info("Resume %s locked=%s", resume_id, locked)
        return resume

    def remove(self, user_id: int, resume_id: str) -> None:
        """
        删除简历记录（连同统计行），再并发清理存储中的产物

        产物清理失败只记日志，不会回滚已完成的删除

        Raises:
            NotFoundError: 简历不存在或不属于该用户
        """
        if not self.resume_repo.delete(user_id, resume_id):
            raise NotFoundError("简历不存在", {"resume_id": resume_id})
        logger.info("Deleted resume %s for user %s", resume_id, user_id)

        with ThreadPoolExecutor(max_workers=len(ARTIFACT_CATEGORIES)) as executor:
            futures = {
                category: executor.submit(self.storage_service.delete_object, user_id, category, resume_id)
                for category in ARTIFACT_CATEGORIES
            }
            for category, future in futures.items():
                try:
                    future.result()
                except Exception:
                    logger.warning(
                        "Failed to delete %s artifact of resume %s", category, resume_id,
                        exc_info=True
                    )

    # ==================== 渲染 ====================

    def print_resume(self, resume: Resume, viewer_id: Optional[int] = None) -> str:
        """
        渲染可下载文件；匿名调用在渲染完成后下载量 +1

        Returns:
            下载 URL
        """
        url = self._require_printer().print_resume(resume)
        if viewer_id is None:
            self._record_safely(self.statistics.record_download, resume.id, "download")
        return url

    def print_preview(self, resume: Resume) -> str:
        """渲染预览图，返回预览 URL"""
        return self._require_printer().print_preview(resume)

    def _require_printer(self) -> PrinterService:
        if self.printer_service is None:
            raise RuntimeError("未配置渲染服务 (printer_service)")
        return self.printer_service

    def _record_safely(self, record: Callable[[str], None], resume_id: str, kind: str) -> None:
        """统计失败不影响主操作，只记日志"""
        try:
            record(resume_id)
        except Exception:
            logger.warning("Failed to record %s for resume %s", kind, resume_id, exc_info=True)
