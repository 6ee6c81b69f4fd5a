"""
AI 简历生成管线

流程：
1. 解析可选的已有简历（必须属于当前用户）
2. 并发发起两次结构化生成：basics 片段 / sections 片段
3. 两个片段都校验通过后，用用户真实身份覆盖 basics
4. 与默认简历合并，得到完整文档

任一片段失败都会中止，不会只应用其中一个。
"""

import json
import logging
from typing import Any, List, Optional, Type

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import RunnableParallel
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from resume_engine.agent.prompts import (
    NO_EXISTING_RESUME,
    RESUME_GENERATION_PROMPT,
    RESUME_SYSTEM_PROMPT,
)
from resume_engine.errors import GenerationError, ValidationError
from resume_engine.models.resume import Resume
from resume_engine.repositories.resume_repository import ResumeRepository
from resume_engine.schema.lean import LeanBasics, LeanSections
from resume_engine.schema.resume_data import ResumeData, default_resume_data
from resume_engine.schema.merger import DocumentMerger
from resume_engine.schema.requests import IdentityProfile

logger = logging.getLogger(__name__)


class GenerationPipeline:
    """
    AI 简历生成管线

    使用示例：
        pipeline = GenerationPipeline(get_llm(), ResumeRepository(session))
        data = pipeline.generate(profile, job_description="...", existing_resume_id=resume.id)
    """

    def __init__(
        self,
        llm: Any,
        resume_repository: ResumeRepository,
        merger: Optional[DocumentMerger] = None
    ):
        """
        Args:
            llm: 支持 with_structured_output 的 LangChain 聊天模型
            resume_repository: 用于解析已有简历
            merger: 文档合并器（默认 DocumentMerger()）
        """
        self.llm = llm
        self.resume_repository = resume_repository
        self.merger = merger or DocumentMerger()

    def generate(
        self,
        profile: IdentityProfile,
        job_description: str = "",
        existing_resume_id: Optional[str] = None
    ) -> ResumeData:
        """
        生成完整的简历数据

        Args:
            profile: 当前用户的身份字段
            job_description: 岗位描述
            existing_resume_id: 作为参考的已有简历 ID（可选）

        Returns:
            完整的 ResumeData

        Raises:
            ValidationError: existing_resume_id 不属于该用户
            GenerationError: 任一生成调用失败或输出不符合 schema
        """
        existing = self._resolve_existing(profile.user_id, existing_resume_id)
        messages = self._build_messages(existing, job_description or "")

        basics, sections = self._generate_fragments(messages)

        basics_partial = basics.to_partial()
        basics_partial.update(
            name=profile.name,
            email=profile.email,
            picture={"url": profile.picture or ""}
        )

        try:
            return self.merger.merge(
                default_resume_data(),
                {"basics": basics_partial, "sections": sections.to_partial()}
            )
        except ValidationError as e:
            raise GenerationError("生成的简历数据无法合并为完整文档", e.details) from e

    def _resolve_existing(self, user_id: int, existing_resume_id: Optional[str]) -> Optional[Resume]:
        if not existing_resume_id:
            return None

        resume = self.resume_repository.get_by_user_and_id(user_id, existing_resume_id)
        if resume is None:
            raise ValidationError(
                "引用的已有简历不存在或不属于当前用户",
                {"existing_resume_id": existing_resume_id}
            )
        return resume

    def _build_messages(self, existing: Optional[Resume], job_description: str) -> List[BaseMessage]:
        if existing is None:
            existing_json = NO_EXISTING_RESUME
        else:
            existing_json = json.dumps(
                {"title": existing.title, "data": existing.data},
                ensure_ascii=False
            )

        return [
            SystemMessage(content=RESUME_SYSTEM_PROMPT),
            HumanMessage(content=RESUME_GENERATION_PROMPT.format(
                existing_resume=existing_json,
                job_description=job_description
            ))
        ]

    def _generate_fragments(self, messages: List[BaseMessage]):
        """并发生成两个片段，两个都成功才返回"""
        chain = RunnableParallel(
            basics=self.llm.with_structured_output(LeanBasics),
            sections=self.llm.with_structured_output(LeanSections),
        )

        try:
            raw = chain.invoke(messages)
        except Exception as e:
            logger.warning("Structured generation failed: %s", e)
            raise GenerationError("AI 生成服务调用失败", {"reason": str(e)}) from e

        basics = self._validate_fragment(LeanBasics, raw.get("basics"), "basics")
        sections = self._validate_fragment(LeanSections, raw.get("sections"), "sections")
        return basics, sections

    @staticmethod
    def _validate_fragment(schema: Type[BaseModel], value: Any, name: str) -> BaseModel:
        if isinstance(value, schema):
            return value
        if value is None:
            raise GenerationError(f"{name} 片段为空", {"fragment": name})

        if isinstance(value, BaseModel):
            value = value.model_dump()
        try:
            return schema.model_validate(value)
        except PydanticValidationError as e:
            raise GenerationError(
                f"{name} 片段不符合 schema",
                {"fragment": name, "errors": e.errors(include_url=False, include_context=False)}
            ) from e
