from __future__ import annotations

from typing import List, Optional, Dict, Literal

from pydantic import BaseModel, Field, ConfigDict, validator

from .matching.config import DEFAULT_MATCH_THRESHOLD


class Basics(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None


class Project(BaseModel):
    name: str = ""
    description: Optional[str] = None
    highlights: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)


class Experience(BaseModel):
    company: Optional[str] = None
    position: str = ""
    responsibilities: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)


class Skills(BaseModel):
    programming_languages: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    databases: List[str] = Field(default_factory=list)
    devops_tools: List[str] = Field(default_factory=list)
    other: List[str] = Field(default_factory=list)


class Education(BaseModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)
    gpa: Optional[float] = None

    @validator("gpa", pre=True)
    def blank_gpa(cls, v):
        # LLM output sometimes carries "" or "N/A" for a missing GPA
        if isinstance(v, str):
            try:
                return float(v.strip())
            except ValueError:
                return None
        return v


class ResumeRecord(BaseModel):
    """Structured resume as produced by the upstream extractor."""
    basics: Optional[Basics] = None
    projects: List[Project] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)
    skills: Optional[Skills] = None
    education: List[Education] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    extracurriculars: List[str] = Field(default_factory=list)


class CourseRecord(BaseModel):
    code: str
    name: str


class CategorizedCourse(CourseRecord):
    category: str


class CourseMatch(BaseModel):
    resume_course: str
    uf_course: CourseRecord
    score: float = Field(ge=0.0, le=100.0)
    category: str


class ScoreBreakdownEntry(BaseModel):
    category: str
    quality_score: int = Field(ge=0, le=100)
    quantity_score: int = Field(ge=0, le=100)
    combined_score: int = Field(ge=0, le=100)
    weight: int
    contribution: int


class ActionableInsight(BaseModel):
    id: str
    category: Literal["projects", "experience", "skills", "links", "gpa", "coursework"]
    insight: str
    priority: Literal["high", "medium", "low"]
    checked: bool = False


class ScoreStatus(BaseModel):
    label: str
    level: str


class ResumeScoreResponse(BaseModel):
    total_score: int = Field(ge=0, le=100)
    breakdown: List[ScoreBreakdownEntry]
    insights: List[ActionableInsight]
    analysis: Dict[str, Dict]
    status: ScoreStatus
    improvement_message: str
    completeness_score: int = Field(description="Presence-based score, independent of total_score")


class InsightsResponse(BaseModel):
    insights: List[ActionableInsight]
    count: int


class MatchCourseworkRequest(BaseModel):
    resume: ResumeRecord
    term: Optional[str] = Field(default=None, description="Academic term code, e.g. 2251")
    threshold: Optional[float] = Field(
        default=None, ge=0.0, le=100.0,
        description="Minimum similarity score; defaults to the MATCH_THRESHOLD setting"
    )
    catalog: Optional[List[CourseRecord]] = Field(
        default=None,
        description="Catalog to match against; fetched for the term when omitted"
    )


class MatchCourseworkResponse(BaseModel):
    success: bool = True
    resume_courses: List[str]
    matches: List[CourseMatch]
    by_category: Dict[str, List[CourseMatch]]
    all_courses: List[CategorizedCourse]
    all_by_category: Dict[str, List[CategorizedCourse]] = Field(default_factory=dict)
    total_matches: int
    courses_scanned: int
    last_updated: str
    message: Optional[str] = None


class CategorizeRequest(BaseModel):
    code: str
    name: str


class CategorizeResponse(BaseModel):
    code: str
    name: str
    category: str


class CatalogResponse(BaseModel):
    success: bool = True
    courses: List[CourseRecord]
    count: int


class ParseResumeRequest(BaseModel):
    text: str = Field(..., description="Plain resume text")

    @validator("text")
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Resume text cannot be empty")
        return v


class ParseResumeResponse(BaseModel):
    details: ResumeRecord
    missing: List[str] = Field(default_factory=list)


class Settings(BaseModel):
    model_config = ConfigDict(protected_namespaces=())
    openai_api_key: Optional[str] = None
    model_name: str = "gpt-4o"
    catalog_term: str = "2251"
    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    catalog_cache_ttl_seconds: int = 3600
    request_timeout_seconds: int = 20
    rate_limit_requests_per_minute: int = 60
