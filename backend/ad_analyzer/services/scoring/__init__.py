"""
Rule-based ad copy scoring: phrase tables, goal scorers and feedback tips.
"""
from ad_analyzer.services.scoring.goals import Goal, GOAL_HANDLERS, resolve_goal, score_ad
from ad_analyzer.services.scoring.scorers import GoalScore

__all__ = ["Goal", "GOAL_HANDLERS", "GoalScore", "resolve_goal", "score_ad"]
