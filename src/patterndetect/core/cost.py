from __future__ import annotations

import math

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Rough language-model token count for ``text``.

    Used only to rank duplicates by how much context they waste.
    """
    return math.ceil(len(text) / CHARS_PER_TOKEN)
