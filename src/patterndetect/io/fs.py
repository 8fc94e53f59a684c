from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from patterndetect.core.logging import get_logger
from patterndetect.core.types import SourceFile


def _matches(globs: list[str], rel_path: Path) -> bool:
    rel = rel_path.as_posix()
    if rel.startswith("./"):
        rel = rel[2:]
    rel_posix = PurePosixPath(rel)
    for glob in globs:
        pattern = glob.removeprefix("./")
        if rel_posix.match(pattern):
            return True
        if pattern.startswith("**/") and rel_posix.match(pattern[3:]):
            return True
        if pattern.endswith("/**"):
            if _under(pattern[:-3], rel):
                return True
        elif "/**/" in pattern:
            base, tail = pattern.rsplit("/**/", 1)
            if _under(base, rel_posix.parent.as_posix()) and rel_posix.match(tail):
                return True
    return False


def _under(base: str, rel: str) -> bool:
    # A leading "**/" lets the base directory sit at any depth.
    if base.startswith("**/"):
        return f"/{base[3:]}/" in f"/{rel}/"
    return f"{rel}/".startswith(f"{base}/")


def _relative_path(path: Path) -> Path:
    if path.is_absolute():
        try:
            return path.relative_to(Path.cwd())
        except ValueError:
            return Path(path.name)
    return path


def _iter_files(
    paths: Iterable[str], include_globs: list[str], exclude_globs: list[str]
) -> list[Path]:
    gathered: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            for root, dirnames, files in os.walk(p):
                root_path = Path(root)
                rel_root = root_path.relative_to(p)
                # prune excluded directories early
                dirnames[:] = sorted(
                    d for d in dirnames if not _matches(exclude_globs, rel_root / d)
                )
                for name in sorted(files):
                    rel_file = rel_root / name
                    if _matches(include_globs, rel_file) and not _matches(
                        exclude_globs, rel_file
                    ):
                        gathered.append(root_path / name)
        elif p.is_file():
            rel = _relative_path(p)
            if _matches(include_globs, rel) and not _matches(exclude_globs, rel):
                gathered.append(p)
    return gathered


def collect_files(
    paths: list[str], include_globs: list[str], exclude_globs: list[str]
) -> list[SourceFile]:
    """Read every matching file once, in walk order."""
    logger = get_logger()
    results: list[SourceFile] = []
    seen: set[Path] = set()
    for path in _iter_files(paths, include_globs, exclude_globs):
        resolved = path.resolve()
        if resolved in seen:
            continue
        seen.add(resolved)
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Skipping unreadable file %s: %s", path, exc)
            continue
        results.append(SourceFile(path=str(path), content=content))
    return results
