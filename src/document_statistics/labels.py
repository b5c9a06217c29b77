"""Human-readable labels for published statistics."""

from __future__ import annotations

LESS_THAN_ONE_MINUTE = "< 1 minute"

# Upper bounds (exclusive) of the LIX reading-ease bands.
LIX_BANDS = (
    (30, "Very easy"),
    (40, "Easy"),
    (50, "Medium"),
    (60, "Difficult"),
)
LIX_HARDEST = "Very difficult"


def format_reading_time(minutes: int) -> str:
    if minutes <= 0:
        return LESS_THAN_ONE_MINUTE
    if minutes < 60:
        return "1 minute" if minutes == 1 else f"{minutes} minutes"
    hours, rest = divmod(minutes, 60)
    return f"{hours} h {rest} min"


def lix_label(score: int) -> str:
    """Map a LIX score to its reading-ease band."""
    for upper, label in LIX_BANDS:
        if score < upper:
            return label
    return LIX_HARDEST


def coleman_liau_label(score: int) -> str:
    """Map a Coleman-Liau index to a US school grade."""
    if score <= 0:
        return "Kindergarten"
    if score >= 13:
        return "College"
    return f"Grade {score}"


def snapshot_labels(lix_score: int, coleman_liau_score: int, minutes: int) -> dict[str, str]:
    return {
        "reading_time": format_reading_time(minutes),
        "lix": lix_label(lix_score),
        "coleman_liau": coleman_liau_label(coleman_liau_score),
    }
