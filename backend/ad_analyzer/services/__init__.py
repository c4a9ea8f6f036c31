from .ad_review import AIReview, LLMAdReviewer
from .analyzer import InvalidAdRequest, run_ad_analysis
from .image_advice import analyze_image_for_goal
from .llm_service import LLMService

__all__ = [
    "AIReview",
    "InvalidAdRequest",
    "LLMAdReviewer",
    "LLMService",
    "analyze_image_for_goal",
    "run_ad_analysis",
]
