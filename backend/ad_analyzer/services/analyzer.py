"""
Ad analysis orchestration: validate, score for the goal, advise on the image,
then ask the LLM for a summary and rewrite.

Scoring is finished before the LLM is called and never depends on it. A failed
LLM call only swaps the AI fields for placeholder text.
"""
import logging
from typing import Any, Optional

from ad_analyzer.schemas.analysis import AnalysisResult, AnalyzeAdRequest
from ad_analyzer.services.ad_review import build_review_prompt
from ad_analyzer.services.image_advice import analyze_image_for_goal
from ad_analyzer.services.scoring import resolve_goal, score_ad

logger = logging.getLogger(__name__)

MISSING_INPUT_ERROR = "Please provide adText and goal"
GOAL_NOT_IMPLEMENTED_MESSAGE = "Goal not implemented. Use 'clicks', 'conversions', or 'awareness'."
AI_SUMMARY_UNAVAILABLE = "AI summary unavailable. (Model call failed or not configured.)"
REWRITE_UNAVAILABLE = "Rewrite unavailable. Add your OpenAI API key in .env to enable AI rewrites."


class InvalidAdRequest(ValueError):
    """Raised when required request fields are missing."""


def validate_request(request: AnalyzeAdRequest) -> None:
    if not (request.ad_text or "").strip() or not request.goal:
        raise InvalidAdRequest(MISSING_INPUT_ERROR)


def goal_not_implemented(goal: Optional[str]) -> AnalysisResult:
    return AnalysisResult(
        goal_analyzed=goal,
        message=GOAL_NOT_IMPLEMENTED_MESSAGE,
        score=None,
        breakdown=None,
        ai_summary=None,
        rewrite=None,
        image_advice=None,
        suggestions=[],
    )


async def run_ad_analysis(request: AnalyzeAdRequest, reviewer: Any) -> AnalysisResult:
    """
    Analyze one ad for its goal.

    Args:
        request: The parsed request body
        reviewer: Object with an async ``analyze(prompt)`` returning an AIReview

    Returns:
        AnalysisResult with every field populated (nullable ones may be None)

    Raises:
        InvalidAdRequest: When adText or goal is missing
    """
    validate_request(request)

    goal = resolve_goal(request.goal)
    if goal is None:
        logger.info("Goal %r is not supported", request.goal)
        return goal_not_implemented(request.goal)

    result, suggestions = score_ad(request.ad_text, goal)
    logger.info("Scored ad for %s: %s %s", goal.value, result.final_score, result.breakdown)

    image_advice = analyze_image_for_goal(goal, request.img_signals)

    ai_summary = AI_SUMMARY_UNAVAILABLE
    rewrite = REWRITE_UNAVAILABLE
    prompt = build_review_prompt(request.ad_text, goal.value, result.final_score, result.breakdown)
    try:
        review = await reviewer.analyze(prompt)
        ai_summary = review.summary
        rewrite = review.rewrite
    except Exception as e:
        logger.warning("LLM review failed, using placeholders: %s", e)

    return AnalysisResult(
        goal_analyzed=goal.value,
        score=result.final_score,
        breakdown=dict(result.breakdown),
        ai_summary=ai_summary,
        rewrite=rewrite,
        image_advice=image_advice,
        suggestions=suggestions,
    )
