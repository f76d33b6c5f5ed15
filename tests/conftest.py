import os

os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["AUTH_DISABLED"] = "true"
os.environ["USE_DOCUMENT_PARSERS"] = "true"

import json
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from models import Base
from history_store import HistoryStore

RESUME_TEXT = (
    "Jane Doe - Backend engineer with 5 years of Python, Django, PostgreSQL "
    "and AWS experience building REST APIs."
)
JOB_TEXT = (
    "Senior Backend Engineer\nWe need strong Python, Kubernetes and AWS skills "
    "to build and operate scalable microservices."
)

ANALYSIS_REPLY = {
    "skillMatch": {
        "matched": ["Python", "AWS", "REST APIs"],
        "missing": ["Kubernetes", "python", "Microservices"],
        "overallMatchPercentage": 72,
    },
    "skillGapData": [{"skill": "Kubernetes", "current": 20, "required": 80}],
    "recommendations": [],
    "industryDemand": [{"skill": "Kubernetes", "demandLevel": "High", "growthTrend": "Growing"}],
    "personalityFit": [{"trait": "Ownership", "matchScore": 80, "jobRequirement": "Operate services"}],
    "careerPathSuggestions": [],
    "strengths": ["Solid Python backend experience"],
    "weaknesses": ["No container orchestration"],
    "competitiveAdvantage": "Cloud-native Python background",
    "matchScoreReasoning": "Strong Python and AWS, missing Kubernetes.",
}

RECOMMENDATIONS_REPLY = [
    {"title": "CKA", "type": "Certification", "provider": "CNCF", "duration": "8 weeks",
     "priority": "High", "url": "https://www.cncf.io/certification/cka/"},
    {"title": "Docker Deep Dive", "type": "Course", "provider": "Udemy", "duration": "10 hours",
     "priority": "Medium", "url": "https://www.udemy.com/"},
    {"title": "System Design", "type": "Course", "provider": "Educative", "duration": "6 weeks",
     "priority": "Medium", "url": "https://www.educative.io/"},
    {"title": "Extra", "type": "Course", "provider": "X", "duration": "1 week",
     "priority": "Low", "url": "https://example.com/"},
]


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text if json_data is None else json.dumps(json_data)
        self.reason = "OK" if status_code < 400 else "Error"

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError("No JSON")
        return self._json


class FakeGemini:
    """Answers each prompt kind with a configured reply text, exception or response."""

    def __init__(self):
        self.analysis = "```json\n" + json.dumps(ANALYSIS_REPLY) + "\n```"
        self.recommendations = "Here you go: " + json.dumps(RECOMMENDATIONS_REPLY)
        self.salary = json.dumps([
            {"role": "ML Engineer", "salaryInINR": "₹15,00,000 - ₹30,00,000", "growth": "↗ 22%"},
        ])
        self.calls = []

    def kind(self, prompt):
        if "perform a comprehensive analysis" in prompt:
            return "analysis"
        if "learning recommendations" in prompt:
            return "recommendations"
        return "salary"

    def post(self, url, params=None, headers=None, json=None, timeout=None):
        prompt = json["contents"][0]["parts"][0]["text"]
        kind = self.kind(prompt)
        self.calls.append(kind)
        reply = getattr(self, kind)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, FakeResponse):
            return reply
        return FakeResponse(200, {"candidates": [{"content": {"parts": [{"text": reply}]}}]})

    def count(self, kind):
        return self.calls.count(kind)


@pytest.fixture
def gemini(monkeypatch):
    fake = FakeGemini()
    monkeypatch.setattr("matching.gemini.requests.post", fake.post)
    return fake


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'history.db'}",
        connect_args={"check_same_thread": False},
        future=True,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, future=True)
    engine.dispose()


@pytest.fixture
def store(session_factory):
    return HistoryStore(session_factory)


@pytest.fixture
def resume_text():
    return RESUME_TEXT


@pytest.fixture
def job_text():
    return JOB_TEXT
