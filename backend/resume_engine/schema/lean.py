"""
精简 schema - LLM 结构化输出模式

去掉了 id、visible、布局等与内容无关的字段，降低模型输出出错的概率。
生成结果经 to_partial() 转换为局部覆盖数据，再与默认简历合并。
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class LeanUrl(BaseModel):
    label: str = Field(default="", description="链接显示文字")
    href: str = Field(default="", description="完整 URL，没有则留空")


class LeanBasics(BaseModel):
    """
    基本信息片段

    name / email / picture 会在合并前被用户真实资料覆盖
    """
    name: str = Field(default="", description="姓名")
    headline: str = Field(default="", description="一句话职业定位，贴合目标岗位")
    email: str = Field(default="", description="邮箱")
    phone: str = Field(default="", description="电话")
    location: str = Field(default="", description="所在城市")
    url: LeanUrl = Field(default_factory=LeanUrl, description="个人主页")

    def to_partial(self) -> Dict[str, Any]:
        return self.model_dump()


class LeanExperience(BaseModel):
    company: str = Field(description="公司名称")
    position: str = Field(default="", description="职位")
    location: str = Field(default="", description="工作地点")
    date: str = Field(default="", description="时间段，如 2020 - 2023")
    summary: str = Field(default="", description="职责与成果，突出与岗位相关的部分")


class LeanEducation(BaseModel):
    institution: str = Field(description="学校")
    study_type: str = Field(default="", description="学位类型")
    area: str = Field(default="", description="专业")
    date: str = Field(default="", description="时间段")
    summary: str = Field(default="")


class LeanSkill(BaseModel):
    name: str = Field(description="技能类别或名称")
    description: str = Field(default="", description="熟练程度描述")
    level: int = Field(default=1, ge=0, le=5, description="0-5 的熟练度")
    keywords: List[str] = Field(default_factory=list, description="具体技术关键词")


class LeanProject(BaseModel):
    name: str = Field(description="项目名称")
    description: str = Field(default="", description="一句话描述")
    date: str = Field(default="")
    summary: str = Field(default="", description="项目亮点")
    keywords: List[str] = Field(default_factory=list)


class LeanLanguage(BaseModel):
    name: str
    description: str = ""
    level: int = Field(default=1, ge=0, le=5)


class LeanCertification(BaseModel):
    name: str
    issuer: str = ""
    date: str = ""
    summary: str = ""


class LeanAward(BaseModel):
    title: str
    awarder: str = ""
    date: str = ""
    summary: str = ""


class LeanInterest(BaseModel):
    name: str
    keywords: List[str] = Field(default_factory=list)


class LeanVolunteer(BaseModel):
    organization: str
    position: str = ""
    location: str = ""
    date: str = ""
    summary: str = ""


class LeanSections(BaseModel):
    """
    分区内容片段

    每个列表字段整体替换默认简历中对应分区的 items
    """
    summary: str = Field(default="", description="个人总结，针对岗位描述改写")
    experience: List[LeanExperience] = Field(default_factory=list)
    education: List[LeanEducation] = Field(default_factory=list)
    skills: List[LeanSkill] = Field(default_factory=list)
    projects: List[LeanProject] = Field(default_factory=list)
    languages: List[LeanLanguage] = Field(default_factory=list)
    certifications: List[LeanCertification] = Field(default_factory=list)
    awards: List[LeanAward] = Field(default_factory=list)
    interests: List[LeanInterest] = Field(default_factory=list)
    volunteer: List[LeanVolunteer] = Field(default_factory=list)

    def to_partial(self) -> Dict[str, Any]:
        """转换为 Sections 的局部覆盖数据"""
        partial: Dict[str, Any] = {"summary": {"content": self.summary}}
        for key in (
            "experience", "education", "skills", "projects", "languages",
            "certifications", "awards", "interests", "volunteer"
        ):
            partial[key] = {"items": [item.model_dump() for item in getattr(self, key)]}
        return partial
