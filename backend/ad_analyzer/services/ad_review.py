"""
AI ad review: prompt building, the LLM call, and tolerant parsing of its reply.

The model is asked for {"aiSummary": ..., "rewrite": ...} as JSON. Replies that
are not a JSON object are still used: the raw text becomes the summary and the
rewrite is left empty.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ad_analyzer.services.llm_service import LLMService

logger = logging.getLogger(__name__)

AD_REVIEW_SYSTEM_PROMPT = (
    "You are a brutally honest performance marketing strategist. "
    "Be direct, practical, and conversion-minded."
)

AD_REVIEW_PROMPT_TEMPLATE = """
You are an expert paid ads strategist. Your job is to evaluate ads for a specific campaign goal and then improve them.

GOAL: {goal}
ORIGINAL_AD_TEXT: \"\"\"{ad_text}\"\"\"

NUMERICAL_SCORE_FOR_THIS_GOAL: {score} / 100 ({verdict})
SCORE_BREAKDOWN (0-100 each):
{breakdown}

TASKS:
1. Give a short honest performance review for this ad *for this goal*. Mention what's working and what's missing.
2. Give the top 2-3 fixes that would most improve performance.
3. Write a stronger revised version of the ad that's under 30 words, punchy, and does not invent fake numbers or fake guarantees.

Return ONLY valid JSON:
{{
  "aiSummary": "...human readable analysis + top fixes...",
  "rewrite": "...short improved ad copy under 30 words..."
}}
"""


@dataclass
class AIReview:
    summary: str
    rewrite: str


def interpret_score(score: int) -> str:
    """Plain-language verdict for a 0-100 goal score."""
    if score >= 80:
        return "strong and close to ready to run"
    if score >= 60:
        return "decent but still missing key elements"
    if score >= 40:
        return "average and needs important improvements before running paid spend"
    return "weak and not aligned with the goal yet"


def build_review_prompt(ad_text: str, goal: str, score: int, breakdown: Dict[str, int]) -> str:
    """Build the user prompt sent to the model for one ad."""
    return AD_REVIEW_PROMPT_TEMPLATE.format(
        goal=goal,
        ad_text=ad_text,
        score=score,
        verdict=interpret_score(score),
        breakdown=json.dumps(breakdown, indent=2),
    )


def _strip_code_fence(text: str) -> str:
    if not text.startswith("```"):
        return text
    lines = text.split("\n")
    if lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)


def parse_review(content: Optional[str]) -> AIReview:
    """Parse the model reply into an AIReview, falling back to the raw text."""
    raw = content or ""
    try:
        parsed: Any = json.loads(_strip_code_fence(raw.strip()))
    except json.JSONDecodeError as e:
        logger.warning("Ad review response is not valid JSON, using raw text: %s", e)
        return AIReview(summary=raw, rewrite="")

    if not isinstance(parsed, dict):
        return AIReview(summary=raw, rewrite="")

    summary = parsed.get("aiSummary")
    rewrite = parsed.get("rewrite")
    return AIReview(
        summary=summary if isinstance(summary, str) and summary else raw,
        rewrite=rewrite if isinstance(rewrite, str) else "",
    )


class LLMAdReviewer:
    """Sends a review prompt to the LLM and returns the parsed summary and rewrite."""

    def __init__(self, llm_service: LLMService, system_message: str = AD_REVIEW_SYSTEM_PROMPT):
        self.llm_service = llm_service
        self.system_message = system_message

    def is_configured(self) -> bool:
        return self.llm_service.is_configured()

    async def analyze(self, prompt: str) -> AIReview:
        """
        Run one review. Raises whatever the LLM service raises; the caller
        decides how to degrade.
        """
        result = await asyncio.to_thread(
            self.llm_service.execute_prompt,
            system_message=self.system_message,
            user_message=prompt,
        )
        return parse_review((result or {}).get("content"))
