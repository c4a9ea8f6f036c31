"""
Goal dispatch: the closed set of supported goals and their scorer/feedback pairs.
"""
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional

from ad_analyzer.services.scoring.feedback import (
    feedback_for_awareness,
    feedback_for_clicks,
    feedback_for_conversions,
)
from ad_analyzer.services.scoring.scorers import (
    GoalScore,
    score_for_awareness,
    score_for_clicks,
    score_for_conversions,
)


class Goal(str, Enum):
    CLICKS = "clicks"
    CONVERSIONS = "conversions"
    AWARENESS = "awareness"


class GoalHandlers(NamedTuple):
    score: Callable[[str], GoalScore]
    feedback: Callable[[GoalScore], List[str]]


GOAL_HANDLERS: Dict[Goal, GoalHandlers] = {
    Goal.CLICKS: GoalHandlers(score_for_clicks, feedback_for_clicks),
    Goal.CONVERSIONS: GoalHandlers(score_for_conversions, feedback_for_conversions),
    Goal.AWARENESS: GoalHandlers(score_for_awareness, feedback_for_awareness),
}


def resolve_goal(value) -> Optional[Goal]:
    """Return the Goal for a raw request value, or None when it is not supported."""
    if isinstance(value, Goal):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Goal(value)
    except ValueError:
        return None


def score_ad(ad_text: str, goal: Goal):
    """Run the scorer and feedback generator for a goal. Returns (GoalScore, suggestions)."""
    handlers = GOAL_HANDLERS[goal]
    result = handlers.score(ad_text)
    return result, handlers.feedback(result)
