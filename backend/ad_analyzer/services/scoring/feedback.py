"""
Feedback generators: canned tips for each dimension the ad is missing.

Tips are driven by the raw counts in GoalScore.details, not the normalized
breakdown. When nothing is missing a single affirming tip is returned, so the
list is never empty.
"""
from typing import List, Tuple

from ad_analyzer.services.scoring.scorers import GoalScore

AWARENESS_MAX_WORDS = 30

CLICKS_TIPS: List[Tuple[str, str]] = [
    (
        "ctaScore",
        "Add a direct call to action like 'Tap to learn more', 'Sign up now', or 'Get started'.",
    ),
    (
        "urgencyScore",
        "Add urgency to push immediate action. Example: 'Limited time offer', 'Ends today', 'Only a few left'.",
    ),
    (
        "curiosityScore",
        "Add curiosity to earn the click. Example: 'You won't believe this...', 'What nobody tells you...', "
        "'The secret they don't want you to know...'.",
    ),
]
CLICKS_AFFIRMATION = (
    "Strong click-focused ad. You use CTA, urgency, and curiosity to drive high click-through."
)

CONVERSIONS_TIPS: List[Tuple[str, str]] = [
    (
        "offerScore",
        "Add an incentive or offer. Example: 'Start your free trial', '20% off today', 'Try it risk-free'. "
        "This pushes people to buy NOW.",
    ),
    (
        "proofScore",
        "Add social proof to build trust. Example: 'Trusted by 10,000+ customers', '5-star rated', "
        "'Award-winning results'.",
    ),
    (
        "benefitScore",
        "Make the benefit obvious. Tell the user what THEY get: 'Sleep better in 7 days', "
        "'Grow your business without extra work', 'Save $200 a month'.",
    ),
]
CONVERSIONS_AFFIRMATION = (
    "Strong conversion copy. You communicate benefits, provide proof, and include an incentive to act."
)

AWARENESS_BRANDING_TIP = (
    "Make the brand more explicit. Say who you are or what you stand for "
    "(e.g. 'Introducing ___', 'Our mission is ___')."
)
AWARENESS_EMOTIONAL_TIP = (
    "Use more emotional or identity-heavy language. Words like 'bold', 'fearless', 'premium', "
    "'unforgettable' make the brand feel distinct."
)
AWARENESS_SHORTEN_TIP = (
    "Shorten the message. Awareness ads should be punchy and easy to remember. "
    "Aim for one clear sentence or tagline."
)
AWARENESS_AFFIRMATION = (
    "Strong awareness copy. Message is emotionally memorable, clearly tied to brand identity, "
    "and easy to remember."
)


def _missing_dimension_tips(result: GoalScore, tips: List[Tuple[str, str]]) -> List[str]:
    return [tip for detail_key, tip in tips if result.details.get(detail_key, 0) == 0]


def feedback_for_clicks(result: GoalScore) -> List[str]:
    suggestions = _missing_dimension_tips(result, CLICKS_TIPS)
    return suggestions or [CLICKS_AFFIRMATION]


def feedback_for_conversions(result: GoalScore) -> List[str]:
    suggestions = _missing_dimension_tips(result, CONVERSIONS_TIPS)
    return suggestions or [CONVERSIONS_AFFIRMATION]


def feedback_for_awareness(result: GoalScore) -> List[str]:
    # Shorten only fires past 30 words; 16-30 words drops simplicity to 50 without a tip
    suggestions = []
    if result.details.get("brandingScore", 0) == 0:
        suggestions.append(AWARENESS_BRANDING_TIP)
    if result.details.get("emotionalScore", 0) == 0:
        suggestions.append(AWARENESS_EMOTIONAL_TIP)
    if result.details.get("wordCount", 0) > AWARENESS_MAX_WORDS:
        suggestions.append(AWARENESS_SHORTEN_TIP)
    return suggestions or [AWARENESS_AFFIRMATION]
