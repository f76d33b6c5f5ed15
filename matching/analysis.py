"""
Gemini-backed career analysis.

Three call sites with different failure policies:

- get_salary_trends() and get_learning_recommendations() are secondary data.
  Any failure (network, API, unparseable reply) returns the static fallback
  so the results page is never empty.
- analyze_resume_job_match() is the primary report. Inputs that are too
  short raise AnalysisValidationError before anything is sent, and a reply
  without a decodable JSON object raises ResponseParseError so the caller
  can offer a retry. Only an unreachable or failing Gemini service is masked
  with the default analysis.
"""
import logging
from typing import List

from pydantic import ValidationError

from schemas import ComprehensiveAnalysis, SalaryTrend, SkillRecommendation
from matching.gemini import call_gemini, LLMError
from matching.prompts import (
    SALARY_TRENDS_PROMPT,
    LEARNING_RECOMMENDATIONS_PROMPT,
    build_analysis_prompt,
)
from matching.response import extract_json_array, extract_json_object, ResponseParseError
from matching.scorer import normalize_analysis
from matching import fallbacks

logger = logging.getLogger(__name__)

MIN_INPUT_CHARS = 50


class AnalysisValidationError(ValueError):
    """Input text is too short to analyze. Always reported to the user."""


def _fallback_trends() -> List[SalaryTrend]:
    return [SalaryTrend.model_validate(t) for t in fallbacks.SALARY_TRENDS]


def _fallback_recommendations() -> List[SkillRecommendation]:
    return [SkillRecommendation.model_validate(r) for r in fallbacks.LEARNING_RECOMMENDATIONS]


def get_salary_trends(session=None) -> List[SalaryTrend]:
    """Current salary trends for three in-demand roles."""
    try:
        reply = call_gemini(SALARY_TRENDS_PROMPT, session=session)
        trends = extract_json_array(reply, "salary trends")
        return [SalaryTrend.model_validate(t) for t in trends[:3]]
    except (LLMError, ResponseParseError, ValidationError) as e:
        logger.error("Error getting salary trends: %s", e)
        return _fallback_trends()


def get_learning_recommendations(session=None) -> List[SkillRecommendation]:
    """Three learning recommendations for the current market."""
    try:
        reply = call_gemini(LEARNING_RECOMMENDATIONS_PROMPT, session=session)
        recs = extract_json_array(reply, "learning recommendations")
        return [SkillRecommendation.model_validate(r) for r in recs[:3]]
    except (LLMError, ResponseParseError, ValidationError) as e:
        logger.error("Error getting learning recommendations: %s", e)
        return _fallback_recommendations()


def validate_inputs(resume_text: str, job_description: str) -> None:
    if not resume_text or len(resume_text.strip()) < MIN_INPUT_CHARS:
        raise AnalysisValidationError(
            "Resume text is too short for accurate analysis. "
            "Please provide a more detailed resume with at least 50 characters.")
    if not job_description or len(job_description.strip()) < MIN_INPUT_CHARS:
        raise AnalysisValidationError(
            "Job description is too short for accurate analysis. "
            "Please provide a more detailed job description with at least 50 characters.")


def default_analysis() -> ComprehensiveAnalysis:
    return ComprehensiveAnalysis.model_validate(fallbacks.DEFAULT_ANALYSIS)


def analyze_resume_job_match(resume_text: str, job_description: str, session=None) -> ComprehensiveAnalysis:
    """
    Compare a resume with a job description.

    Raises:
        AnalysisValidationError: either input is under 50 characters
        ResponseParseError: the reply held no usable JSON object
    """
    validate_inputs(resume_text, job_description)

    resume = resume_text.strip()
    jd = job_description.strip()
    logger.info("Resume excerpt: %s...", resume[:100])
    logger.info("Job description excerpt: %s...", jd[:100])

    try:
        reply = call_gemini(build_analysis_prompt(resume, jd), session=session)
    except LLMError as e:
        logger.error("Error analyzing resume and job description: %s", e)
        return default_analysis()

    raw = extract_json_object(reply, "resume analysis")
    try:
        return ComprehensiveAnalysis.model_validate(normalize_analysis(raw))
    except ValidationError as e:
        logger.error("Analysis reply did not match the expected shape: %s", e)
        raise ResponseParseError("Failed to parse resume analysis data") from e
