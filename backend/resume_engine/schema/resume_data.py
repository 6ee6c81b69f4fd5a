"""
简历数据 schema（完整版）

Resume.data 列中保存的就是 ResumeData.model_dump() 的结果。
所有模型都禁止未知字段，合并与校验时多余的键会直接报错。
"""

import uuid
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


def generate_item_id() -> str:
    """生成条目 ID"""
    return uuid.uuid4().hex


class SchemaModel(BaseModel):
    """schema 基类：禁止未知字段"""
    model_config = ConfigDict(extra="forbid")


# ==================== basics ====================

class Url(SchemaModel):
    label: str = ""
    href: str = ""


class Picture(SchemaModel):
    url: str = ""
    size: int = Field(default=64, ge=0)
    aspect_ratio: float = Field(default=1.0, gt=0)
    border_radius: int = Field(default=0, ge=0)


class CustomField(SchemaModel):
    id: str = Field(default_factory=generate_item_id)
    icon: str = ""
    name: str = ""
    value: str = ""


class Basics(SchemaModel):
    """个人基本信息"""
    name: str = ""
    headline: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    url: Url = Field(default_factory=Url)
    custom_fields: List[CustomField] = Field(default_factory=list)
    picture: Picture = Field(default_factory=Picture)


# ==================== section items ====================

class Item(SchemaModel):
    """所有条目的公共字段"""
    id: str = Field(default_factory=generate_item_id)
    visible: bool = True


class Profile(Item):
    network: str
    username: str = ""
    icon: str = ""
    url: Url = Field(default_factory=Url)


class Experience(Item):
    company: str
    position: str = ""
    location: str = ""
    date: str = ""
    summary: str = ""
    url: Url = Field(default_factory=Url)


class Education(Item):
    institution: str
    study_type: str = ""
    area: str = ""
    score: str = ""
    date: str = ""
    summary: str = ""
    url: Url = Field(default_factory=Url)


class Skill(Item):
    name: str
    description: str = ""
    level: int = Field(default=1, ge=0, le=5)
    keywords: List[str] = Field(default_factory=list)


class Language(Item):
    name: str
    description: str = ""
    level: int = Field(default=1, ge=0, le=5)


class Award(Item):
    title: str
    awarder: str = ""
    date: str = ""
    summary: str = ""
    url: Url = Field(default_factory=Url)


class Certification(Item):
    name: str
    issuer: str = ""
    date: str = ""
    summary: str = ""
    url: Url = Field(default_factory=Url)


class Interest(Item):
    name: str
    keywords: List[str] = Field(default_factory=list)


class Project(Item):
    name: str
    description: str = ""
    date: str = ""
    summary: str = ""
    keywords: List[str] = Field(default_factory=list)
    url: Url = Field(default_factory=Url)


class Publication(Item):
    name: str
    publisher: str = ""
    date: str = ""
    summary: str = ""
    url: Url = Field(default_factory=Url)


class Volunteer(Item):
    organization: str
    position: str = ""
    location: str = ""
    date: str = ""
    summary: str = ""
    url: Url = Field(default_factory=Url)


class Reference(Item):
    name: str
    description: str = ""
    summary: str = ""
    url: Url = Field(default_factory=Url)


# ==================== sections ====================

class Section(SchemaModel):
    """分区的展示属性"""
    name: str
    columns: int = Field(default=1, ge=1, le=5)
    separate_links: bool = True
    visible: bool = True


class SummarySection(Section):
    name: str = "Summary"
    content: str = ""


class ProfilesSection(Section):
    name: str = "Profiles"
    items: List[Profile] = Field(default_factory=list)


class ExperienceSection(Section):
    name: str = "Experience"
    items: List[Experience] = Field(default_factory=list)


class EducationSection(Section):
    name: str = "Education"
    items: List[Education] = Field(default_factory=list)


class SkillsSection(Section):
    name: str = "Skills"
    items: List[Skill] = Field(default_factory=list)


class LanguagesSection(Section):
    name: str = "Languages"
    items: List[Language] = Field(default_factory=list)


class AwardsSection(Section):
    name: str = "Awards"
    items: List[Award] = Field(default_factory=list)


class CertificationsSection(Section):
    name: str = "Certifications"
    items: List[Certification] = Field(default_factory=list)


class InterestsSection(Section):
    name: str = "Interests"
    items: List[Interest] = Field(default_factory=list)


class ProjectsSection(Section):
    name: str = "Projects"
    items: List[Project] = Field(default_factory=list)


class PublicationsSection(Section):
    name: str = "Publications"
    items: List[Publication] = Field(default_factory=list)


class VolunteerSection(Section):
    name: str = "Volunteering"
    items: List[Volunteer] = Field(default_factory=list)


class ReferencesSection(Section):
    name: str = "References"
    items: List[Reference] = Field(default_factory=list)


class Sections(SchemaModel):
    summary: SummarySection = Field(default_factory=SummarySection)
    profiles: ProfilesSection = Field(default_factory=ProfilesSection)
    experience: ExperienceSection = Field(default_factory=ExperienceSection)
    education: EducationSection = Field(default_factory=EducationSection)
    skills: SkillsSection = Field(default_factory=SkillsSection)
    languages: LanguagesSection = Field(default_factory=LanguagesSection)
    awards: AwardsSection = Field(default_factory=AwardsSection)
    certifications: CertificationsSection = Field(default_factory=CertificationsSection)
    interests: InterestsSection = Field(default_factory=InterestsSection)
    projects: ProjectsSection = Field(default_factory=ProjectsSection)
    publications: PublicationsSection = Field(default_factory=PublicationsSection)
    volunteer: VolunteerSection = Field(default_factory=VolunteerSection)
    references: ReferencesSection = Field(default_factory=ReferencesSection)


# ==================== metadata ====================

def _default_layout() -> List[List[List[str]]]:
    # 页 -> [主栏, 侧栏] -> 分区 key
    return [
        [
            ["profiles", "summary", "experience", "education", "projects", "volunteer", "references"],
            ["skills", "interests", "certifications", "awards", "publications", "languages"],
        ]
    ]


class Page(SchemaModel):
    margin: int = Field(default=18, ge=0)
    format: Literal["a4", "letter"] = "a4"


class Theme(SchemaModel):
    background: str = "#ffffff"
    text: str = "#000000"
    primary: str = "#dc2626"


class Metadata(SchemaModel):
    template: str = "rhyhorn"
    layout: List[List[List[str]]] = Field(default_factory=_default_layout)
    page: Page = Field(default_factory=Page)
    theme: Theme = Field(default_factory=Theme)
    notes: str = ""


class ResumeData(SchemaModel):
    """完整的简历数据"""
    basics: Basics = Field(default_factory=Basics)
    sections: Sections = Field(default_factory=Sections)
    metadata: Metadata = Field(default_factory=Metadata)


def default_resume_data() -> ResumeData:
    """返回一份全新的默认简历数据（每次调用都是独立对象）"""
    return ResumeData()
