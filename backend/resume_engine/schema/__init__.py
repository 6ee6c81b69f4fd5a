"""
简历数据 schema 模块
完整 schema 用于存储与校验，精简 schema 用于 LLM 结构化输出，
merger 负责按 schema 递归合并，requests 定义服务层请求模型
"""

from .resume_data import (
    ResumeData, Basics, Sections, Metadata,
    Url, Picture, CustomField,
    Experience, Education, Skill, Project,
    default_resume_data,
)
from .lean import LeanBasics, LeanSections
from .merger import DocumentMerger
from .requests import (
    IdentityProfile,
    CreateResumeRequest, CreateAiResumeRequest,
    ImportResumeRequest, UpdateResumeRequest,
    ResumeStatisticsView,
)

__all__ = [
    "ResumeData", "Basics", "Sections", "Metadata",
    "Url", "Picture", "CustomField",
    "Experience", "Education", "Skill", "Project",
    "default_resume_data",
    "LeanBasics", "LeanSections",
    "DocumentMerger",
    "IdentityProfile",
    "CreateResumeRequest", "CreateAiResumeRequest",
    "ImportResumeRequest", "UpdateResumeRequest",
    "ResumeStatisticsView"
]
