"""
Image advice: a fixed decision table over the goal and three image flags.
"""
import logging
from typing import Any, Mapping, Optional

from ad_analyzer.schemas.analysis import ImageSignals
from ad_analyzer.services.scoring.goals import Goal, resolve_goal

logger = logging.getLogger(__name__)

NO_SIGNALS_ADVICE = (
    "No image signals provided. (Optional: tell us if the image shows a person, "
    "the product, or promo text and we’ll evaluate it.)"
)

_SIGNAL_KEYS = {
    "has_person": ("hasPerson", "has_person"),
    "has_product": ("hasProduct", "has_product"),
    "has_offer_text": ("hasOfferText", "has_offer_text"),
}


def _read_signals(signals: Any) -> Optional[dict]:
    """Flatten ImageSignals or a plain mapping into three booleans; None when absent."""
    if signals is None:
        return None
    flags = {}
    for name, keys in _SIGNAL_KEYS.items():
        if isinstance(signals, ImageSignals):
            value = getattr(signals, name)
        elif isinstance(signals, Mapping):
            value = next((signals[k] for k in keys if k in signals), None)
        else:
            value = getattr(signals, name, None)
        flags[name] = bool(value)
    return flags


def analyze_image_for_goal(goal: Any, signals: Any = None) -> str:
    """Return one advice string for the image; never raises."""
    resolved = resolve_goal(goal)
    flags = _read_signals(signals)
    if resolved is None or flags is None:
        return NO_SIGNALS_ADVICE

    has_person = flags["has_person"]
    has_product = flags["has_product"]
    has_offer_text = flags["has_offer_text"]

    if resolved is Goal.AWARENESS:
        if has_person and not has_offer_text:
            return (
                "Good for awareness: showing a real person helps create emotional connection. "
                "The image isn't cluttered with promo text, so the brand vibe is clear."
            )
        if not has_person:
            return (
                "For awareness, consider using a human or lifestyle shot. "
                "Faces and emotion help people remember the brand."
            )
        return (
            "Image is okay for awareness. Keep it clean, bold, and identity-focused "
            "instead of feeling like a coupon."
        )

    if resolved is Goal.CLICKS:
        if has_offer_text:
            return (
                "Great for clicks: bold promo text on the image grabs attention fast "
                "and can boost tap-through."
            )
        return (
            "To drive clicks, consider putting short bold text directly on the image "
            "(like 'FREE TRIAL TODAY'). That kind of visual hook stops the scroll."
        )

    if resolved is Goal.CONVERSIONS:
        if has_product and has_offer_text:
            return (
                "Strong for conversions: the image shows the product and a clear offer. "
                "This helps people understand what they're buying and why to act now."
            )
        if not has_product:
            return (
                "For conversions, show the actual product or result in the image "
                "so buyers know what they're getting."
            )
        return (
            "Consider adding a clear offer stamp on the image (e.g. '20% Off — Today Only'). "
            "That visual nudge can push last-second signups."
        )

    logger.warning("No image advice rule for goal %s", resolved)
    return NO_SIGNALS_ADVICE
