"""Case-insensitive glob expansion into per-depth path filters."""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable
from pathlib import Path

from ..file_tree.filters import DepthFilter

logger = logging.getLogger(__name__)


def _other_case(ch: str) -> str:
    swapped = ch.swapcase()
    return swapped if len(swapped) == 1 and swapped != ch else ""


def case_insensitive_pattern(pattern: str) -> str:
    """Rewrite ``pattern`` so every letter matches either case.

    Letters outside brackets become ``[xX]`` classes; letters inside an
    existing class get their other-case variants appended to the class.
    """
    out: list[str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "[":
            start = i + 1
            if pattern[start : start + 1] in ("!", "^"):
                start += 1
            # a leading "]" is a literal member of the class
            end = pattern.find("]", start + 1)
            if end != -1:
                negate = pattern[i + 1 : start]
                inner = pattern[start:end]
                extra = inner.swapcase().replace("]", "")
                if extra == inner.replace("]", ""):
                    extra = ""
                out.append(f"[{negate}{inner}{extra}]")
                i = end + 1
                continue
        other = _other_case(ch)
        if other:
            out.append(f"[{ch}{other}]")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def expand_pattern(base_dir: Path, pattern: str) -> list[tuple[str, ...]]:
    """Return component sequences of paths under ``base_dir`` matching ``pattern``."""
    translated = case_insensitive_pattern(pattern.strip().lstrip("/"))
    matches = glob.glob(translated, root_dir=base_dir, recursive=True, include_hidden=True)
    logger.debug("Glob %r matched %d path(s)", pattern, len(matches))
    return [Path(match).parts for match in sorted(matches)]


def build_depth_filter(base_dir: Path, patterns: Iterable[str]) -> DepthFilter:
    """Expand every pattern against ``base_dir`` and collect unique matches in order."""
    seen: dict[tuple[str, ...], None] = {}
    for pattern in patterns:
        for parts in expand_pattern(base_dir, pattern):
            if parts:
                seen.setdefault(parts, None)
    return DepthFilter(seen)
