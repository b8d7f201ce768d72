"""Directory traversal feeding matched artboards to a callback."""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterator, Mapping

from protter.core.logger import get_logger

from .models import ArtboardPath, Project, WalkError, WalkStats
from .paths import ArtboardMatcher

LOGGER = get_logger()

MatchCallback = Callable[[Project, ArtboardPath], None]
UnknownProjectCallback = Callable[[str], None]


class ArtboardWalker:
    """Visit every entry under a root and hand known-project artboards on."""

    def __init__(
        self,
        matcher: ArtboardMatcher | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._matcher = matcher or ArtboardMatcher()
        self._logger = logger or LOGGER

    def iter_paths(self, root: str | os.PathLike[str]) -> Iterator[str]:
        """Yield ``root`` and every directory and file below it.

        Raises:
            WalkError: When a directory cannot be read.
        """

        top = os.fspath(root)
        if not os.path.isdir(top):
            raise WalkError(f"not a directory: {top}")
        yield top

        def _raise(exc: OSError) -> None:
            raise WalkError(f"failed to read {exc.filename}: {exc.strerror}") from exc

        for dirpath, dirnames, filenames in os.walk(top, onerror=_raise):
            dirnames.sort()
            for name in dirnames:
                yield os.path.join(dirpath, name)
            for name in sorted(filenames):
                yield os.path.join(dirpath, name)

    def walk(
        self,
        root: str | os.PathLike[str],
        projects: Mapping[str, Project],
        on_match: MatchCallback,
        *,
        on_unknown: UnknownProjectCallback | None = None,
    ) -> WalkStats:
        """Call ``on_match`` for each artboard whose project is known.

        Paths that are not artboards are skipped silently, unknown projects
        are reported through ``on_unknown`` and skipped. Errors raised by
        ``on_match`` stop the walk and propagate unchanged.
        """

        stats = WalkStats()
        for path in self.iter_paths(root):
            stats.visited += 1
            artboard = self._matcher.match(path)
            if artboard is None:
                continue
            stats.matched += 1
            project = projects.get(artboard.project_name)
            if project is None:
                stats.unknown += 1
                self._logger.info(
                    "prott.walker unknown_project project=%s path=%s",
                    artboard.project_name,
                    path,
                )
                if on_unknown is not None:
                    on_unknown(artboard.project_name)
                continue
            on_match(project, artboard)
            stats.uploaded += 1

        self._logger.info(
            "prott.walker finished root=%s visited=%d matched=%d uploaded=%d unknown=%d",
            os.fspath(root),
            stats.visited,
            stats.matched,
            stats.uploaded,
            stats.unknown,
        )
        return stats


__all__ = ["ArtboardWalker", "MatchCallback", "UnknownProjectCallback"]
