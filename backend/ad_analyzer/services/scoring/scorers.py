"""
Goal scorers: turn ad copy into a 0-100 score plus a per-dimension breakdown.

Each pattern dimension counts distinct phrase hits, caps the count at 2 and
scales it to 0/50/100. The goal score is the weighted sum of its dimensions.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from ad_analyzer.services.scoring.patterns import (
    BENEFIT_PHRASES,
    BRANDING_PHRASES,
    CTA_PHRASES,
    CURIOSITY_PHRASES,
    EMOTIONAL_PHRASES,
    OFFER_PHRASES,
    PROOF_PHRASES,
    URGENCY_PHRASES,
)

HIT_CAP = 2

# Awareness simplicity: (max words, score); anything longer scores 0
SIMPLICITY_STEPS = ((15, 100), (30, 50))


@dataclass
class GoalScore:
    """Result of scoring one ad for one goal."""

    final_score: int
    breakdown: Dict[str, int]
    # Raw pre-normalization counts, read by the feedback generators
    details: Dict[str, int] = field(default_factory=dict)


def count_hits(text: str, phrases: Iterable[str]) -> int:
    """Number of distinct phrases contained in text (case-insensitive substring match)."""
    if not text:
        return 0
    lowered = text.lower()
    return sum(1 for phrase in set(phrases) if phrase and phrase in lowered)


def normalize(raw: int) -> int:
    """Map a raw hit count onto 0 / 50 / 100."""
    capped = min(max(raw, 0), HIT_CAP)
    return int(capped / HIT_CAP * 100)


def count_words(text: str) -> int:
    return len((text or "").split())


def simplicity_score(word_count: int) -> int:
    for max_words, score in SIMPLICITY_STEPS:
        if word_count <= max_words:
            return score
    return 0


def _weighted_total(weighted: List[Tuple[int, float]]) -> int:
    total = round(sum(score * weight for score, weight in weighted))
    return max(0, min(100, int(total)))


def score_for_clicks(ad_text: str) -> GoalScore:
    """CTA 40%, urgency 30%, curiosity 30%."""
    cta = count_hits(ad_text, CTA_PHRASES)
    urgency = count_hits(ad_text, URGENCY_PHRASES)
    curiosity = count_hits(ad_text, CURIOSITY_PHRASES)

    cta_norm = normalize(cta)
    urgency_norm = normalize(urgency)
    curiosity_norm = normalize(curiosity)

    return GoalScore(
        final_score=_weighted_total([(cta_norm, 0.4), (urgency_norm, 0.3), (curiosity_norm, 0.3)]),
        breakdown={
            "CTA": cta_norm,
            "Urgency": urgency_norm,
            "Curiosity": curiosity_norm,
        },
        details={
            "ctaScore": cta,
            "urgencyScore": urgency,
            "curiosityScore": curiosity,
        },
    )


def score_for_conversions(ad_text: str) -> GoalScore:
    """Offer 40%, social proof 30%, benefit clarity 30%."""
    benefit = count_hits(ad_text, BENEFIT_PHRASES)
    proof = count_hits(ad_text, PROOF_PHRASES)
    offer = count_hits(ad_text, OFFER_PHRASES)

    benefit_norm = normalize(benefit)
    proof_norm = normalize(proof)
    offer_norm = normalize(offer)

    return GoalScore(
        final_score=_weighted_total([(offer_norm, 0.4), (proof_norm, 0.3), (benefit_norm, 0.3)]),
        breakdown={
            "OfferIncentive": offer_norm,
            "SocialProofTrust": proof_norm,
            "BenefitClarity": benefit_norm,
        },
        details={
            "benefitScore": benefit,
            "proofScore": proof,
            "offerScore": offer,
        },
    )


def score_for_awareness(ad_text: str) -> GoalScore:
    """
    Branding 40%, emotional tone 30%, simplicity 30%.

    Simplicity is a step function of the word count rather than a phrase
    count: up to 15 words scores 100, up to 30 scores 50, longer scores 0.
    """
    branding = count_hits(ad_text, BRANDING_PHRASES)
    emotional = count_hits(ad_text, EMOTIONAL_PHRASES)
    word_count = count_words(ad_text)

    branding_norm = normalize(branding)
    emotional_norm = normalize(emotional)
    simplicity_norm = simplicity_score(word_count)

    return GoalScore(
        final_score=_weighted_total([(branding_norm, 0.4), (emotional_norm, 0.3), (simplicity_norm, 0.3)]),
        breakdown={
            "BrandClarityIdentity": branding_norm,
            "EmotionalImpactTone": emotional_norm,
            "MemorabilitySimplicity": simplicity_norm,
        },
        details={
            "brandingScore": branding,
            "emotionalScore": emotional,
            "wordCount": word_count,
        },
    )
