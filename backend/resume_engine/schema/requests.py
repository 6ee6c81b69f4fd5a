"""
服务层请求/响应模型
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from resume_engine.models.resume import Visibility
from resume_engine.schema.resume_data import ResumeData


class IdentityProfile(BaseModel):
    """身份字段：创建简历时覆盖到 basics 上"""
    user_id: int
    name: str
    email: str
    picture: Optional[str] = None


class CreateResumeRequest(BaseModel):
    title: str = Field(min_length=1)
    visibility: Visibility = Visibility.PRIVATE
    slug: Optional[str] = None


class CreateAiResumeRequest(CreateResumeRequest):
    """AI 生成请求：可基于已有简历，针对岗位描述改写"""
    existing_resume_id: Optional[str] = None
    job_description: Optional[str] = None


class ImportResumeRequest(BaseModel):
    """
    导入请求

    visibility 会被忽略，导入的简历一律为 private
    """
    data: ResumeData
    title: Optional[str] = None
    slug: Optional[str] = None
    visibility: Optional[Visibility] = None


class UpdateResumeRequest(BaseModel):
    """更新请求：只写入显式给出的字段，data 为整体替换"""
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    visibility: Optional[Visibility] = None
    data: Optional[ResumeData] = None

    def to_values(self) -> Dict[str, Any]:
        """转换为要写入的列（忽略未设置和为 None 的字段）"""
        values: Dict[str, Any] = {}
        for key in self.model_fields_set:
            value = getattr(self, key)
            if value is None:
                continue
            values[key] = value.model_dump() if isinstance(value, ResumeData) else value
        return values


class ResumeStatisticsView(BaseModel):
    views: int = 0
    downloads: int = 0
