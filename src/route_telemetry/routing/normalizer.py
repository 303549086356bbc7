"""Route name normalization onto the canonical dashboard vocabulary."""

from __future__ import annotations

CANONICAL_ROUTES: tuple[str, ...] = (
    "pattern",
    "t5",
    "slm",
    "gemini",
    "direct_llm",
    "fallback",
)

# Checked in order; the first matching rule wins.
_EXACT_ALIASES: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({"pattern", "direct"}), "pattern"),
    (frozenset({"t5", "t5-distilled"}), "t5"),
    (frozenset({"slm"}), "slm"),
)
_LATE_ALIASES: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({"direct_llm", "direct llm"}), "direct_llm"),
    (frozenset({"fallback"}), "fallback"),
)


def normalize_route(raw: str) -> str:
    """Map a producer-supplied route name to its canonical bucket.

    Matching is case-insensitive. Names that match no rule are returned
    lowercased, so each unrecognized route keeps its own bucket.
    """

    lower = raw.lower()
    for aliases, canonical in _EXACT_ALIASES:
        if lower in aliases:
            return canonical
    if "gemini" in lower:
        return "gemini"
    for aliases, canonical in _LATE_ALIASES:
        if lower in aliases:
            return canonical
    return lower


def is_canonical_route(name: str) -> bool:
    return name in CANONICAL_ROUTES
