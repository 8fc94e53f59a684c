from __future__ import annotations

import re

STRING_PLACEHOLDER = "STR"
NUMBER_PLACEHOLDER = "NUM"

_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LITERALS = (
    (re.compile(r'"[^"]*"'), f'"{STRING_PLACEHOLDER}"'),
    (re.compile(r"'[^']*'"), f"'{STRING_PLACEHOLDER}'"),
    (re.compile(r"`[^`]*`"), f"`{STRING_PLACEHOLDER}`"),
)
_INTEGER = re.compile(r"\b\d+\b")
_WHITESPACE = re.compile(r"\s+")


def normalize_code(code: str) -> str:
    """Canonical form of ``code`` for comparison.

    Comments are dropped, string and integer literals become placeholders and
    whitespace is flattened, while keywords and punctuation are kept. The
    result is a fixed point: normalizing it again returns it unchanged.
    """
    text = _LINE_COMMENT.sub("", code)
    text = _BLOCK_COMMENT.sub("", text)
    for pattern, placeholder in _LITERALS:
        text = pattern.sub(placeholder, text)
    text = _INTEGER.sub(NUMBER_PLACEHOLDER, text)
    return _WHITESPACE.sub(" ", text).strip()
