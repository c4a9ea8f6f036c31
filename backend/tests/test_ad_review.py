"""
Tests for the AI review step: prompt building, response parsing, LLM wrapper.
"""
import asyncio
from types import SimpleNamespace

import pytest

from ad_analyzer.services.ad_review import (
    AIReview,
    LLMAdReviewer,
    build_review_prompt,
    interpret_score,
    parse_review,
)
from ad_analyzer.services.llm_service import LLMService


# --- Prompt ---


@pytest.mark.parametrize(
    "score, verdict",
    [
        (100, "strong and close to ready to run"),
        (80, "strong and close to ready to run"),
        (79, "decent but still missing key elements"),
        (60, "decent but still missing key elements"),
        (40, "average and needs important improvements before running paid spend"),
        (39, "weak and not aligned with the goal yet"),
        (0, "weak and not aligned with the goal yet"),
    ],
)
def test_interpret_score(score, verdict):
    assert interpret_score(score) == verdict


def test_build_review_prompt_contains_inputs():
    prompt = build_review_prompt(
        "Try it {free} today", "clicks", 65, {"CTA": 50, "Urgency": 100, "Curiosity": 50}
    )
    assert "GOAL: clicks" in prompt
    assert '"""Try it {free} today"""' in prompt
    assert "NUMERICAL_SCORE_FOR_THIS_GOAL: 65 / 100 (decent but still missing key elements)" in prompt
    assert '"Urgency": 100' in prompt
    assert '"aiSummary"' in prompt and '"rewrite"' in prompt


# --- Parsing ---


def test_parse_review_valid_json():
    review = parse_review('{"aiSummary": "Solid hook.", "rewrite": "Tap now."}')
    assert review == AIReview(summary="Solid hook.", rewrite="Tap now.")


def test_parse_review_strips_code_fence():
    content = '```json\n{"aiSummary": "Good", "rewrite": "Better"}\n```'
    assert parse_review(content) == AIReview(summary="Good", rewrite="Better")


def test_parse_review_invalid_json_uses_raw_text():
    content = "This ad is fine but needs a CTA."
    assert parse_review(content) == AIReview(summary=content, rewrite="")


def test_parse_review_missing_fields():
    content = '{"rewrite": "Shorter ad."}'
    review = parse_review(content)
    assert review.summary == content
    assert review.rewrite == "Shorter ad."

    review = parse_review('{"aiSummary": "Only a summary"}')
    assert review == AIReview(summary="Only a summary", rewrite="")


def test_parse_review_non_object_json():
    assert parse_review("[1, 2]") == AIReview(summary="[1, 2]", rewrite="")


def test_parse_review_empty():
    assert parse_review(None) == AIReview(summary="", rewrite="")


# --- LLM service ---


def test_llm_service_requires_configuration():
    service = LLMService(openai_api_key=None)
    assert service.is_configured() is False
    with pytest.raises(RuntimeError):
        service.execute_prompt("system", "user")


def test_llm_service_blank_key_is_not_configured():
    assert LLMService(openai_api_key="   ").is_configured() is False


def _fake_openai(captured, content="hello", error=None):
    def create(**params):
        captured.update(params)
        if error:
            raise error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
            usage=SimpleNamespace(total_tokens=42),
        )

    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def test_llm_service_executes_prompt():
    service = LLMService(openai_api_key="sk-test", model="gpt-4o-mini", temperature=0.7)
    captured = {}
    service._client = _fake_openai(captured, content="reply")

    result = service.execute_prompt("be honest", "review this")

    assert result == {"content": "reply", "tokens_used": 42, "model": "gpt-4o-mini"}
    assert captured["model"] == "gpt-4o-mini"
    assert captured["temperature"] == 0.7
    assert captured["messages"][0] == {"role": "system", "content": "be honest"}
    assert captured["messages"][1] == {"role": "user", "content": "review this"}


def test_llm_service_wraps_errors():
    service = LLMService(openai_api_key="sk-test")
    service._client = _fake_openai({}, error=TimeoutError("read timed out"))

    with pytest.raises(RuntimeError, match="read timed out"):
        service.execute_prompt("system", "user")


# --- Reviewer ---


class FakeLLMService:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def is_configured(self):
        return True

    def execute_prompt(self, system_message, user_message, model=None):
        self.calls.append((system_message, user_message))
        if self.error:
            raise self.error
        return {"content": self.content, "tokens_used": 1, "model": "fake"}


def test_reviewer_parses_llm_reply():
    llm = FakeLLMService(content='{"aiSummary": "Nice.", "rewrite": "Tap to start today."}')
    reviewer = LLMAdReviewer(llm)

    review = asyncio.run(reviewer.analyze("PROMPT"))

    assert review == AIReview(summary="Nice.", rewrite="Tap to start today.")
    system_message, user_message = llm.calls[0]
    assert "performance marketing strategist" in system_message
    assert user_message == "PROMPT"


def test_reviewer_propagates_llm_errors():
    reviewer = LLMAdReviewer(FakeLLMService(error=RuntimeError("boom")))
    with pytest.raises(RuntimeError):
        asyncio.run(reviewer.analyze("PROMPT"))
