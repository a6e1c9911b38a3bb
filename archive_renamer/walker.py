"""
Directory Walker
Enumerates filesystem entries one level deep or recursively.

Both modes share one traversal; WalkDepth only decides whether
subdirectories are descended into.
"""

import logging
import os
import stat
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator

from .exceptions import WalkError
from .models import FileCandidate

logger = logging.getLogger(__name__)

Visitor = Callable[[FileCandidate], None]


class WalkDepth(str, Enum):
    """Traversal depth policy."""
    SHALLOW = "shallow"
    RECURSIVE = "recursive"


def _stat_candidate(path: Path, follow_symlinks: bool = False) -> FileCandidate:
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as e:
        raise WalkError(str(path), str(e)) from e
    return FileCandidate(path=path, name=path.name, is_dir=stat.S_ISDIR(st.st_mode))


def _list_dir(path: Path) -> list[Path]:
    try:
        return sorted(path.iterdir())
    except OSError as e:
        raise WalkError(str(path), str(e)) from e


class Walker:
    """
    Walk a file or directory and hand every entry to a visitor.

    Usage:
        walker = Walker(WalkDepth.RECURSIVE)
        walker.walk("/downloads", visitor)

    Shallow mode visits the children of a directory (or a single file
    on its own). Recursive mode visits the root itself and then every
    descendant depth-first, in lexical order. Symlinked directories are
    not followed.
    """

    def __init__(self, depth: WalkDepth = WalkDepth.SHALLOW):
        self.depth = depth

    @classmethod
    def from_flag(cls, recursive: bool) -> "Walker":
        return cls(WalkDepth.RECURSIVE if recursive else WalkDepth.SHALLOW)

    def iter_candidates(self, root: str | Path) -> Iterator[FileCandidate]:
        """Yield entries lazily; listing failures raise WalkError."""
        root = Path(root)

        if self.depth == WalkDepth.SHALLOW:
            # A symlinked root directory is still listed
            top = _stat_candidate(root, follow_symlinks=True)
            if not top.is_dir:
                yield top
                return
            for child in _list_dir(root):
                yield _stat_candidate(child)
            return

        yield from self._iter_recursive(root)

    def _iter_recursive(self, root: Path) -> Iterator[FileCandidate]:
        # Explicit stack so depth is not bounded by the recursion limit.
        # Children are pushed in reverse to pop in lexical order.
        stack = [root]
        while stack:
            candidate = _stat_candidate(stack.pop())
            yield candidate
            if candidate.is_dir:
                stack.extend(reversed(_list_dir(candidate.path)))

    def walk(self, root: str | Path, visitor: Visitor) -> None:
        """
        Call visitor for every entry under root.

        An exception raised by the visitor stops the walk and propagates.
        """
        logger.debug(f"Walking {root} ({self.depth.value})")
        for candidate in self.iter_candidates(root):
            visitor(candidate)
