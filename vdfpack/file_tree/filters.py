"""Per-depth name filter derived from accepted relative paths."""

from __future__ import annotations

from collections.abc import Iterable


class DepthFilter:
    """Accepts a name at a depth when some accepted path has it at that depth.

    Depth 0 is the walk root, which is always accepted; depth ``n`` compares
    against component ``n - 1`` of each accepted path. Names compare
    case-insensitively. Only the node's own depth is checked: ancestors are
    already enforced by the walk never descending into rejected directories.
    """

    def __init__(self, paths: Iterable[Iterable[str]]) -> None:
        self.paths: tuple[tuple[str, ...], ...] = tuple(tuple(parts) for parts in paths)
        levels: list[set[str]] = []
        for parts in self.paths:
            for index, part in enumerate(parts):
                if index == len(levels):
                    levels.append(set())
                levels[index].add(part.lower())
        self._levels = tuple(frozenset(level) for level in levels)

    def accepts(self, name: str, depth: int) -> bool:
        if depth <= 0:
            return True
        index = depth - 1
        if index >= len(self._levels):
            return False
        return name.lower() in self._levels[index]

    def __len__(self) -> int:
        return len(self.paths)

    def __repr__(self) -> str:
        return f"DepthFilter({list(self.paths)!r})"
