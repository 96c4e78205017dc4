"""Tests for JSON extraction from generator text."""

import json

import pytest

from calorie_curve.services.extraction import (
    extract_json_array,
    extract_json_object,
    strip_code_fences,
)

PAYLOAD = [{"name": "Banana", "tags": ["fruit", "yellow"]}, {"name": "Plantain"}]


@pytest.mark.parametrize(
    "wrapped",
    [
        json.dumps(PAYLOAD),
        f"```json\n{json.dumps(PAYLOAD)}\n```",
        f"```\n{json.dumps(PAYLOAD)}```",
        f"Here you go:\n{json.dumps(PAYLOAD)}\nHope this helps!",
        f"Sure!\n```json\n{json.dumps(PAYLOAD, indent=2)}\n```\nHope this helps!",
    ],
)
def test_extract_json_array_recovers_wrapped_payload(wrapped: str) -> None:
    assert extract_json_array(wrapped) == PAYLOAD


def test_extract_json_array_handles_empty_input() -> None:
    assert extract_json_array(None) is None
    assert extract_json_array("") is None
    assert extract_json_array("```json\n```") is None


def test_extract_json_array_rejects_prose() -> None:
    assert extract_json_array("I could not find that food, sorry.") is None


def test_extract_json_array_rejects_object() -> None:
    assert extract_json_array('{"name": "Banana"}') is None


def test_extract_json_array_rejects_truncated_payload() -> None:
    assert extract_json_array('[{"name": "Banana", "calories": 10') is None


def test_extract_json_array_extra_bracketed_prose_is_not_guessed() -> None:
    text = '[{"name": "Banana"}] and also [see notes]'

    assert extract_json_array(text) is None


def test_extract_json_object_recovers_from_prose() -> None:
    text = 'Result:\n```json\n{"suggestions": ["Eat more greens"]}\n```\nEnjoy!'

    assert extract_json_object(text) == {"suggestions": ["Eat more greens"]}


def test_extract_json_object_rejects_array() -> None:
    assert extract_json_object('["Eat more greens"]') is None


def test_strip_code_fences_removes_language_tags() -> None:
    assert strip_code_fences("```python\n[1, 2]\n```") == "[1, 2]"
