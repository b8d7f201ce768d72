"""Recognise exported artboard images by their location on disk."""

from __future__ import annotations

import os
import re

from .models import ArtboardPath

EXPORT_DIR_NAME = "exportedArtboards"
SCREEN_SUFFIX = ".png"


class ArtboardMatcher:
    """Match ``.../exportedArtboards/<project>/<screen>.png`` paths.

    The project part keeps any nested directories (``Proj/sub``) and is empty
    when the image sits directly under the export directory.
    """

    def __init__(self, *, sep: str = os.sep, export_dir: str = EXPORT_DIR_NAME) -> None:
        self.sep = sep
        self.export_dir = export_dir
        escaped = re.escape(sep)
        self.pattern: re.Pattern[str] = re.compile(
            rf"(?:^|{escaped}){re.escape(export_dir)}{escaped}(.*{re.escape(SCREEN_SUFFIX)})$"
        )

    def match(self, path: str | os.PathLike[str]) -> ArtboardPath | None:
        """Return the parsed artboard, or ``None`` when ``path`` is not one."""

        text = os.fspath(path)
        found = self.pattern.search(text)
        if found is None:
            return None
        relative = found.group(1)
        head, _, tail = relative.rpartition(self.sep)
        return ArtboardPath(
            project_name=head,
            screen_name=tail[: -len(SCREEN_SUFFIX)],
            path=text,
        )


__all__ = ["ArtboardMatcher", "EXPORT_DIR_NAME"]
