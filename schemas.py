from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    """Wire format uses camelCase names; Python code uses snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# Uploaded resume with its extracted text
class ResumeDocument(CamelModel):
    file_name: str
    size_bytes: int
    mime_type: str
    extracted_text: str


# Job description, pasted or fetched from a posting URL
class JobDescription(CamelModel):
    source_url: Optional[str] = None
    raw_text: str


class SalaryTrend(FrozenModel):
    role: str
    salary_in_inr: str = Field(alias="salaryInINR")
    growth: str


class SkillRecommendation(FrozenModel):
    title: str
    type: str = "Course"
    provider: str = ""
    duration: str = ""
    priority: str = "Medium"
    url: str = ""


class SkillMatch(FrozenModel):
    matched: List[str] = []
    missing: List[str] = []
    overall_match_percentage: int = 0


class SkillGap(FrozenModel):
    skill: str
    current: int
    required: int


class IndustryDemand(FrozenModel):
    skill: str
    demand_level: str = ""
    growth_trend: str = ""


class PersonalityFit(FrozenModel):
    trait: str
    match_score: int = 0
    job_requirement: str = ""


class CareerPathSuggestion(FrozenModel):
    role: str
    timeframe: str = ""
    potential_salary: str = ""
    required_skills: List[str] = []


# Full resume/job compatibility report produced by one analysis run
class ComprehensiveAnalysis(FrozenModel):
    skill_match: SkillMatch = SkillMatch()
    skill_gap_data: List[SkillGap] = []
    recommendations: List[SkillRecommendation] = []
    industry_demand: List[IndustryDemand] = []
    personality_fit: List[PersonalityFit] = []
    career_path_suggestions: List[CareerPathSuggestion] = []
    strengths: List[str] = []
    weaknesses: List[str] = []
    competitive_advantage: str = ""
    match_score_reasoning: Optional[str] = None


# Persisted summary of one past analysis
class HistoryRecord(FrozenModel):
    id: str
    date: str
    match_percentage: int
    job_title: Optional[str] = None
    resume_text: Optional[str] = None
    job_description: Optional[str] = None


class JobExtractRequest(CamelModel):
    url: str


class AnalysisRequest(CamelModel):
    resume_text: str = ""
    job_description: str = ""


class AnalysisResponse(CamelModel):
    result: ComprehensiveAnalysis
    recommendations: List[SkillRecommendation] = []
    history_record: Optional[HistoryRecord] = None
