"""
Trigger-phrase tables for ad copy scoring, one tuple per goal dimension.
Matching is plain substring containment on lower-cased copy, so every entry
must itself be lower case.
"""

# --- Clicks ---

CTA_PHRASES = (
    "click",
    "tap",
    "learn more",
    "sign up",
    "get started",
    "try it",
)

URGENCY_PHRASES = (
    "now",
    "today",
    "limited time",
    "last chance",
    "ends tonight",
    "don't miss",
)

CURIOSITY_PHRASES = (
    "secret",
    "you won't believe",
    "what no one tells you",
    "nobody talks about",
    "they don't want you to know",
)

# --- Conversions ---

BENEFIT_PHRASES = (
    "save",
    "so you can",
    "get results",
    "improve",
    "feel better",
    "look better",
    "faster",
    "easier",
    "stress-free",
    "time-saving",
)

PROOF_PHRASES = (
    "trusted by",
    "5-star",
    "★★★★★",
    "10,000+",
    "thousands of customers",
    "proven",
    "award-winning",
    "backed by experts",
    "clinically tested",
)

OFFER_PHRASES = (
    "free trial",
    "free demo",
    "money-back guarantee",
    "% off",
    "off today",
    "discount",
    "risk-free",
    "no commitment",
    "limited-time offer",
)

# --- Awareness ---

BRANDING_PHRASES = (
    "we are",
    "we're",
    "our mission",
    "our vision",
    "introducing",
    "the new",
    "official",
    "experience",
    "this is us",
)

EMOTIONAL_PHRASES = (
    "premium",
    "luxury",
    "bold",
    "fearless",
    "unforgettable",
    "iconic",
    "elevate",
    "next-level",
    "redefining",
    "exclusive",
)
