import random
from typing import Any, Dict, List


def clamp_percent(value: Any) -> int:
    """Coerce a model-supplied score (int, float, "75%") to an int in 0..100."""
    if isinstance(value, str):
        value = value.strip().rstrip("%").strip()
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0
    if score != score:  # NaN
        return 0
    return int(round(max(0.0, min(100.0, score))))


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _clean_skills(skills: Any) -> List[str]:
    out, seen = [], set()
    for s in _as_list(skills):
        if s is None:
            continue
        s = str(s).strip()
        if s and s.lower() not in seen:
            seen.add(s.lower())
            out.append(s)
    return out


def split_skills(matched: Any, missing: Any) -> Dict[str, List[str]]:
    """Deduplicate both lists and drop from missing anything already matched."""
    m = _clean_skills(matched)
    have = set(s.lower() for s in m)
    gaps = [s for s in _clean_skills(missing) if s.lower() not in have]
    return {"matched": m, "missing": gaps}


def _short(skill: str) -> str:
    return skill[:20] + "..." if len(skill) > 20 else skill


def synthesize_skill_gaps(matched: List[str], missing: List[str], rng=None) -> List[Dict[str, Any]]:
    # Matched skills sit near the requirement, missing ones well below it
    rng = rng or random
    gaps = []
    for skill in matched[:4]:
        gaps.append({"skill": _short(skill), "current": rng.randint(70, 94), "required": rng.randint(75, 89)})
    for skill in missing[:4]:
        gaps.append({"skill": _short(skill), "current": rng.randint(10, 49), "required": rng.randint(75, 89)})
    return gaps


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


# String fields of each list section; the first one names the item
TEXT_FIELDS = {
    "recommendations": ("title", "type", "provider", "duration", "priority", "url"),
    "industryDemand": ("skill", "demandLevel", "growthTrend"),
    "careerPathSuggestions": ("role", "timeframe", "potentialSalary"),
    "personalityFit": ("trait", "jobRequirement"),
}


def _clean_items(items: Any, fields) -> List[Dict[str, Any]]:
    out = []
    for item in _as_list(items):
        if not isinstance(item, dict) or not _text(item.get(fields[0])):
            continue
        cleaned = dict(item)
        for field in fields:
            if field in cleaned:
                cleaned[field] = _text(cleaned[field])
        out.append(cleaned)
    return out


def normalize_analysis(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Make a decoded model reply safe to load into ComprehensiveAnalysis.

    Nulls and numbers in text fields become strings, items missing their name
    are dropped, and scores are clamped to 0..100.
    """
    data = dict(raw)

    skill_match = data.get("skillMatch")
    if not isinstance(skill_match, dict):
        skill_match = {}
    skills = split_skills(skill_match.get("matched"), skill_match.get("missing"))
    data["skillMatch"] = {
        **skills,
        "overallMatchPercentage": clamp_percent(skill_match.get("overallMatchPercentage")),
    }

    gaps = []
    for item in _as_list(data.get("skillGapData")):
        if not isinstance(item, dict):
            continue
        gaps.append({
            "skill": _text(item.get("skill")) or "Unknown Skill",
            "current": clamp_percent(item.get("current")),
            "required": clamp_percent(item.get("required")),
        })
    data["skillGapData"] = gaps or synthesize_skill_gaps(skills["matched"], skills["missing"])

    for key, fields in TEXT_FIELDS.items():
        data[key] = _clean_items(data.get(key), fields)
    for fit in data["personalityFit"]:
        fit["matchScore"] = clamp_percent(fit.get("matchScore"))
    for path in data["careerPathSuggestions"]:
        path["requiredSkills"] = _clean_skills(path.get("requiredSkills"))
    # Recommendation defaults apply when the model sends null
    for rec in data["recommendations"]:
        for field in ("type", "priority"):
            if not rec.get(field):
                rec.pop(field, None)

    for key in ("strengths", "weaknesses"):
        data[key] = [_text(s) for s in _as_list(data.get(key)) if s]
    data["competitiveAdvantage"] = _text(data.get("competitiveAdvantage"))
    reasoning = data.get("matchScoreReasoning")
    data["matchScoreReasoning"] = None if reasoning is None else _text(reasoning)
    return data
