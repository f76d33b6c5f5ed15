import re
import json
import logging

logger = logging.getLogger(__name__)

_ARRAY = re.compile(r"\[[\s\S]*\]")
_OBJECT = re.compile(r"\{[\s\S]*\}")


class ResponseParseError(ValueError):
    """The model reply held no decodable JSON of the expected shape."""


def _extract(reply: str, pattern, expected_type, label: str):
    # Greedy: from the first opening bracket to the last closing one
    m = pattern.search(reply or "")
    json_str = m.group(0) if m else (reply or "")
    logger.info("Parsing %s JSON: %s...", label, json_str[:300])
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        logger.error("Error parsing Gemini %s response: %s", label, e)
        raise ResponseParseError(f"Failed to parse {label} data") from e
    if not isinstance(data, expected_type):
        raise ResponseParseError(f"Failed to parse {label} data")
    return data


def extract_json_array(reply: str, label: str) -> list:
    return _extract(reply, _ARRAY, list, label)


def extract_json_object(reply: str, label: str) -> dict:
    return _extract(reply, _OBJECT, dict, label)
