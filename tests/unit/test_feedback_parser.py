"""Test extraction of ATS feedback from provider replies."""
import pytest
from pydantic import ValidationError as PydanticValidationError

from jobboard.services.feedback_parser import fallback_feedback, parse_feedback


NO_JSON = {
    "ats_score": 0,
    "ats_friendliness": "Poor",
    "strengths": [],
    "weaknesses": ["AI did not return JSON"],
    "recommendations": [],
}

INVALID_JSON = dict(NO_JSON, weaknesses=["AI returned invalid JSON"])


def test_json_surrounded_by_prose():
    reply = (
        'Here you go: {"ats_score": 85, "ats_friendliness": "Good", '
        '"strengths": ["clear formatting"], "weaknesses": [], '
        '"recommendations": ["add metrics"]} thanks'
    )
    assert parse_feedback(reply) == {
        "ats_score": 85,
        "ats_friendliness": "Good",
        "strengths": ["clear formatting"],
        "weaknesses": [],
        "recommendations": ["add metrics"],
    }


def test_json_in_markdown_fence():
    reply = '```json\n{"ats_score": 70, "ats_friendliness": "Average"}\n```'
    assert parse_feedback(reply) == {"ats_score": 70, "ats_friendliness": "Average"}


@pytest.mark.parametrize("reply", ["", "No JSON here at all.", "only an opening {", "closing } first {"])
def test_no_json_object(reply):
    assert parse_feedback(reply) == NO_JSON


def test_none_reply():
    assert parse_feedback(None) == NO_JSON


def test_invalid_json():
    assert parse_feedback("{not valid json}") == INVALID_JSON


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_standard_constants_are_invalid(constant):
    reply = f'{{"ats_score": {constant}, "ats_friendliness": "Good"}}'
    assert parse_feedback(reply) == INVALID_JSON


def test_greedy_match_spans_multiple_objects():
    # First "{" to last "}" covers both fragments, which is not valid JSON
    assert parse_feedback('{"a": 1} and also {"b": 2}') == INVALID_JSON


def test_nested_objects_parse():
    assert parse_feedback('x {"a": {"b": 1}} y') == {"a": {"b": 1}}


def test_parsed_values_are_not_validated():
    reply = '{"ats_score": 250, "ats_friendliness": "Stellar"}'
    assert parse_feedback(reply) == {"ats_score": 250, "ats_friendliness": "Stellar"}


def test_fallback_feedback_is_frozen():
    feedback = fallback_feedback("why")
    with pytest.raises(PydanticValidationError):
        feedback.ats_score = 50
