"""Screen upload helpers for Prott."""

from __future__ import annotations

import logging
import mimetypes
import os
from pathlib import Path

from protter.core.logger import get_logger

from .http import HttpClient
from .models import Project, ScreenUpload, TransportError, UploadError

LOGGER = get_logger()

SCREENS_PATH = "/api/sketch_app/screens.json"


def detect_mime_type(path: str | os.PathLike[str]) -> str:
    """Best-effort MIME type detection."""

    mime, _ = mimetypes.guess_type(str(path))
    return mime or "application/octet-stream"


class ScreenUploader:
    """Post artboard images as new screens of a project."""

    def __init__(self, http_client: HttpClient, *, logger: logging.Logger | None = None) -> None:
        self._http = http_client
        self._logger = logger or LOGGER

    def upload(self, project: Project, screen_name: str, path: str | os.PathLike[str]) -> ScreenUpload:
        """Upload ``path`` as screen ``screen_name`` of ``project``.

        The response status is returned, not checked: a rejected upload is
        logged but does not raise.

        Raises:
            UploadError: When the file cannot be read or the request cannot be sent.
        """

        file_path = Path(path)
        form = {
            "project_id": project.id,
            # The API wants the Sketch artboard id; the screen name stands in for it.
            "screen[sketch_artboard_id]": screen_name,
            "screen[name]": screen_name,
        }
        try:
            handle = file_path.open("rb")
        except OSError as exc:
            raise UploadError(f"cannot open {file_path}: {exc.strerror or exc}") from exc

        with handle:
            try:
                content = handle.read()
            except OSError as exc:
                raise UploadError(f"cannot read {file_path}: {exc.strerror or exc}") from exc
            files = {"screen[file]": (os.fspath(path), content, detect_mime_type(file_path))}
            try:
                response = self._http.request("POST", SCREENS_PATH, data=form, files=files)
            except TransportError as exc:
                raise UploadError(f"failed to upload {file_path}: {exc}", payload=exc.payload) from exc

        result = ScreenUpload(
            project=project,
            screen_name=screen_name,
            path=os.fspath(path),
            status_code=response.status_code,
            reason=response.reason or "",
        )
        if result.ok:
            self._logger.info(
                "prott.uploader uploaded project=%s screen=%s status=%d bytes=%d",
                project.name,
                screen_name,
                result.status_code,
                len(content),
            )
        else:
            self._logger.warning(
                "prott.uploader upload_not_accepted project=%s screen=%s status=%d",
                project.name,
                screen_name,
                result.status_code,
            )
        return result


__all__ = ["ScreenUploader", "SCREENS_PATH", "detect_mime_type"]
