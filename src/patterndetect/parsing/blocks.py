"""Heuristic extraction of function-like blocks from brace-delimited source.

This is a line scanner, not a parser. Braces inside strings, template
literals and comments are counted like any other brace, and languages
without brace-delimited bodies produce no blocks.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from patterndetect.core.types import RawBlock
from patterndetect.parsing.classify import classify_pattern

_FUNCTION_DECL = re.compile(r"^(export\s+)?(async\s+)?function\s+")
_ARROW_ASSIGN = re.compile(r"^(export\s+)?const\s+\w+\s*=\s*(async\s*)?\(")


def starts_region(trimmed: str) -> bool:
    return (
        "function " in trimmed
        or "=>" in trimmed
        or "async " in trimmed
        or _FUNCTION_DECL.match(trimmed) is not None
        or _ARROW_ASSIGN.match(trimmed) is not None
    )


def count_lines_of_code(lines: list[str]) -> int:
    count = 0
    in_comment = False
    for line in lines:
        stripped = line.strip()
        if in_comment:
            in_comment = "*/" not in stripped
            continue
        if stripped.startswith("/*"):
            in_comment = "*/" not in stripped[2:]
            continue
        if stripped and not stripped.startswith("//"):
            count += 1
    return count


def extract_blocks(content: str, min_lines: int) -> Iterator[RawBlock]:
    """Yield function-like regions with at least ``min_lines`` lines of code.

    Brace depth is tracked across every line, inside or outside a region, so
    a region that opens while residual depth is non-zero closes only once the
    whole nesting unwinds. Regions still open at end of input are dropped.
    """
    current: list[str] = []
    block_start = 0
    depth = 0
    in_region = False

    for idx, line in enumerate(content.split("\n")):
        if not in_region and starts_region(line.strip()):
            in_region = True
            block_start = idx

        depth += line.count("{") - line.count("}")

        if not in_region:
            continue
        current.append(line)
        if depth != 0:
            continue

        lines_of_code = count_lines_of_code(current)
        if lines_of_code >= min_lines:
            text = "\n".join(current)
            yield RawBlock(
                start_line=block_start + 1,
                content=text,
                pattern_type=classify_pattern(text),
                lines_of_code=lines_of_code,
            )
        current = []
        in_region = False
