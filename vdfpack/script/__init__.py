"""Build-script loading and resolution.

Reads YAML build scripts and merges them with command-line overrides.
Include globs are expanded into the tree builder's depth filter.
"""

from __future__ import annotations

from .globs import build_depth_filter, case_insensitive_pattern, expand_pattern
from .loader import VolumeScript, load_script, parse_script
from .resolve import ResolvedScript, resolve_script

__all__ = [
    "ResolvedScript",
    "VolumeScript",
    "build_depth_filter",
    "case_insensitive_pattern",
    "expand_pattern",
    "load_script",
    "parse_script",
    "resolve_script",
]
