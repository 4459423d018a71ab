"""Visual analysis of modal fields."""

from drumhead.analysis.cymatics import CYMATIC_FAMILIES, chladni_pattern, cymatics

__all__ = [
    "cymatics",
    "chladni_pattern",
    "CYMATIC_FAMILIES",
]
