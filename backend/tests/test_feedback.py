"""
Tests for the per-goal feedback generators.
"""
from ad_analyzer.services.scoring.feedback import (
    AWARENESS_AFFIRMATION,
    AWARENESS_BRANDING_TIP,
    AWARENESS_EMOTIONAL_TIP,
    AWARENESS_SHORTEN_TIP,
    CLICKS_AFFIRMATION,
    CLICKS_TIPS,
    CONVERSIONS_AFFIRMATION,
    CONVERSIONS_TIPS,
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


def _result(**details):
    return GoalScore(final_score=0, breakdown={}, details=details)


def test_clicks_all_missing_in_order():
    tips = feedback_for_clicks(_result(ctaScore=0, urgencyScore=0, curiosityScore=0))
    assert tips == [tip for _, tip in CLICKS_TIPS]


def test_clicks_only_missing_dimension():
    tips = feedback_for_clicks(_result(ctaScore=2, urgencyScore=0, curiosityScore=1))
    assert tips == [CLICKS_TIPS[1][1]]
    assert tips[0].startswith("Add urgency")


def test_clicks_affirmation_when_nothing_missing():
    result = score_for_clicks("Click now for a limited time secret offer!")
    tips = feedback_for_clicks(result)
    assert tips == [CLICKS_AFFIRMATION]
    assert tips[0].startswith("Strong click-focused ad.")


def test_conversions_buy_our_product():
    tips = feedback_for_conversions(score_for_conversions("Buy our product."))
    assert len(tips) == 3
    assert tips[0].startswith("Add an incentive or offer.")
    assert tips[1].startswith("Add social proof")
    assert tips[2].startswith("Make the benefit obvious.")
    assert tips == [tip for _, tip in CONVERSIONS_TIPS]


def test_conversions_affirmation():
    result = score_for_conversions("Trusted by pros: save time with a free trial.")
    assert feedback_for_conversions(result) == [CONVERSIONS_AFFIRMATION]


def test_awareness_missing_branding_and_emotion():
    tips = feedback_for_awareness(score_for_awareness("Socks for everyone."))
    assert tips == [AWARENESS_BRANDING_TIP, AWARENESS_EMOTIONAL_TIP]


def test_awareness_shorten_tip_only_above_thirty_words():
    base = "Introducing our bold new look. "
    at_limit = base + " ".join(["alpha"] * 25)
    over_limit = base + " ".join(["alpha"] * 26)

    at_result = score_for_awareness(at_limit)
    over_result = score_for_awareness(over_limit)
    assert at_result.details["wordCount"] == 30
    assert over_result.details["wordCount"] == 31

    assert feedback_for_awareness(at_result) == [AWARENESS_AFFIRMATION]
    assert feedback_for_awareness(over_result) == [AWARENESS_SHORTEN_TIP]


def test_awareness_mid_length_gets_no_tip():
    """16-30 words drops simplicity to 50 but does not trigger the shorten tip."""
    text = "Introducing our bold new look. " + " ".join(["alpha"] * 15)
    result = score_for_awareness(text)
    assert result.breakdown["MemorabilitySimplicity"] == 50
    assert feedback_for_awareness(result) == [AWARENESS_AFFIRMATION]


def test_feedback_never_empty():
    for feedback, score in (
        (feedback_for_clicks, score_for_clicks),
        (feedback_for_conversions, score_for_conversions),
        (feedback_for_awareness, score_for_awareness),
    ):
        assert feedback(score("x"))
