"""
Turns the provider's free-text reply into ATS feedback.

The model is asked for a single JSON object but often wraps it in prose
or markdown. We take everything from the first "{" to the last "}" and
try to parse that. Replies without a JSON object, or with a broken one,
degrade to a fixed fallback result instead of failing the request.

A reply that parses is returned as-is: score range and friendliness label
are NOT checked.
"""

import json
import re
from typing import Any, Dict

from jobboard.core.logging import get_logger
from jobboard.schemas.schemas import Feedback, AtsFriendliness

logger = get_logger(__name__)

# Greedy on purpose: first "{" through last "}"
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")

NO_JSON_REASON = "AI did not return JSON"
INVALID_JSON_REASON = "AI returned invalid JSON"


def fallback_feedback(reason: str) -> Feedback:
    """Zero-score feedback carrying the failure reason as its only weakness."""
    return Feedback(
        ats_score=0,
        ats_friendliness=AtsFriendliness.poor,
        strengths=[],
        weaknesses=[reason],
        recommendations=[],
    )


def _reject_constant(name: str):
    # NaN and Infinity are not JSON and cannot be sent back to the client
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_feedback(text: str) -> Dict[str, Any]:
    """
    Extract the feedback object from a provider reply.

    Returns:
        The parsed JSON object, or the fallback feedback as a dict
    """
    match = JSON_OBJECT_PATTERN.search(text or "")
    if not match:
        logger.warning("AI reply contained no JSON object; using fallback feedback")
        return fallback_feedback(NO_JSON_REASON).model_dump()

    try:
        return json.loads(match.group(0), parse_constant=_reject_constant)
    except ValueError as e:
        logger.warning(f"JSON parse error from AI response: {e}")
        return fallback_feedback(INVALID_JSON_REASON).model_dump()
