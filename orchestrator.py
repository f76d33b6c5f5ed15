"""
Analysis orchestration for one resume/job pair.

AnalysisSession walks an explicit state machine:

    IDLE -> READY -> ANALYZING -> DISPLAYED -> SAVED
                          \\-> FAILED

READY requires both texts to reach MIN_INPUT_CHARS. A history record is
written only on the DISPLAYED -> SAVED transition, so repeated save() calls
for the same result return the record already written. Sessions replayed
from a history record never save.
"""
import enum
import logging
from typing import Callable, List, Optional

from tenacity import Retrying, stop_after_attempt, wait_exponential, retry_if_exception_type, before_sleep_log

from schemas import ComprehensiveAnalysis, HistoryRecord, SkillRecommendation
from matching.analysis import (
    analyze_resume_job_match,
    get_learning_recommendations,
    AnalysisValidationError,
    MIN_INPUT_CHARS,
)
from matching.response import ResponseParseError
from history_store import HistoryStore, HistoryConflict, new_record

logger = logging.getLogger(__name__)

# The first attempt plus two transparent retries
MAX_ATTEMPTS = 3


class AnalysisState(str, enum.Enum):
    IDLE = "idle"
    READY = "ready"
    ANALYZING = "analyzing"
    DISPLAYED = "displayed"
    SAVED = "saved"
    FAILED = "failed"


class HistoryUnavailable(LookupError):
    """A history record cannot be replayed."""


class AnalysisSession:

    def __init__(
        self,
        history: Optional[HistoryStore] = None,
        user_email: Optional[str] = None,
        analyze_fn: Callable[[str, str], ComprehensiveAnalysis] = analyze_resume_job_match,
        recommend_fn: Callable[[], List[SkillRecommendation]] = get_learning_recommendations,
        retry_wait=None,
        replay: bool = False,
    ):
        self.history = history
        self.user_email = user_email
        self.analyze_fn = analyze_fn
        self.recommend_fn = recommend_fn
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=30)
        self.replay = replay

        self.resume_text = ""
        self.job_text = ""
        self.state = AnalysisState.IDLE
        self.result: Optional[ComprehensiveAnalysis] = None
        self.recommendations: List[SkillRecommendation] = []
        self.record: Optional[HistoryRecord] = None
        self.error: Optional[str] = None
        self.attempts = 0

    @classmethod
    def from_history(cls, record: HistoryRecord, **kwargs) -> "AnalysisSession":
        """Session that re-derives a stored analysis from its inputs without saving it again."""
        if not record.resume_text or not record.job_description:
            raise HistoryUnavailable(
                "Unable to load analysis history. Resume or job description data is missing.")
        kwargs["replay"] = True
        session = cls(**kwargs)
        session.set_resume_text(record.resume_text)
        session.set_job_text(record.job_description)
        return session

    # -------------------- inputs --------------------
    def set_resume_text(self, text: Optional[str]) -> None:
        self.resume_text = text or ""
        self._inputs_changed()

    def set_job_text(self, text: Optional[str]) -> None:
        self.job_text = text or ""
        self._inputs_changed()

    def _inputs_changed(self) -> None:
        # New inputs mean a new result; the old one can no longer be saved
        self.result = None
        self.record = None
        self.error = None
        self.recommendations = []
        ready = (len(self.resume_text.strip()) >= MIN_INPUT_CHARS
                 and len(self.job_text.strip()) >= MIN_INPUT_CHARS)
        self.state = AnalysisState.READY if ready else AnalysisState.IDLE

    def validate(self) -> None:
        """Raise AnalysisValidationError naming the input that blocks analysis."""
        if not self.resume_text.strip():
            raise AnalysisValidationError("Please upload your resume first")
        if not self.job_text.strip():
            raise AnalysisValidationError("Please enter a job description")
        if len(self.resume_text.strip()) < MIN_INPUT_CHARS:
            raise AnalysisValidationError("Resume content is too short for meaningful analysis")
        if len(self.job_text.strip()) < MIN_INPUT_CHARS:
            raise AnalysisValidationError("Job description is too short for meaningful analysis")

    # -------------------- running --------------------
    def _run(self) -> ComprehensiveAnalysis:
        retrying = Retrying(
            stop=stop_after_attempt(MAX_ATTEMPTS),
            wait=self.retry_wait,
            retry=retry_if_exception_type(ResponseParseError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                self.attempts += 1
                return self.analyze_fn(self.resume_text, self.job_text)

    def analyze(self) -> ComprehensiveAnalysis:
        """
        Run the comprehensive analysis.

        On success the result is displayed, saved once to history (unless this
        is a replay) and learning recommendations are fetched. On failure no
        recommendations are requested.

        Raises:
            AnalysisValidationError: inputs missing or too short; nothing is sent
            ResponseParseError: every attempt returned an unusable reply
        """
        try:
            self.validate()
        except AnalysisValidationError as e:
            self.error = str(e)
            logger.info(f"Analysis blocked: {e}")
            raise

        self.state = AnalysisState.ANALYZING
        self.result = None
        self.record = None
        self.error = None
        self.recommendations = []
        self.attempts = 0
        logger.info(f"Starting analysis: resume {len(self.resume_text)} chars, "
                    f"job description {len(self.job_text)} chars")

        try:
            result = self._run()
        except (AnalysisValidationError, ResponseParseError) as e:
            self.state = AnalysisState.FAILED
            self.error = str(e)
            logger.error(f"Analysis failed after {self.attempts} attempt(s): {e}")
            raise

        self.result = result
        self.state = AnalysisState.DISPLAYED
        self.save()
        self.recommendations = self.recommend_fn()
        return result

    def retry(self) -> ComprehensiveAnalysis:
        """Manual retry: a fresh run whose result may be saved again."""
        return self.analyze()

    def save(self) -> Optional[HistoryRecord]:
        """Persist the current result once. Further calls return the same record."""
        if self.state == AnalysisState.SAVED:
            return self.record
        if self.state != AnalysisState.DISPLAYED or self.result is None:
            return None
        if self.replay or self.history is None or not self.user_email:
            return None

        record = new_record(
            self.result.skill_match.overall_match_percentage,
            self.resume_text,
            self.job_text,
        )
        try:
            self.history.append(self.user_email, record)
        except HistoryConflict as e:
            logger.error(f"Analysis not saved to history: {e}")
            return None
        self.record = record
        self.state = AnalysisState.SAVED
        return record
