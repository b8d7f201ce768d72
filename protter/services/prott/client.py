"""Primary client implementation for Prott."""

from __future__ import annotations

import logging
import os
from typing import Callable

from protter.core.logger import get_logger

from .auth import AuthClient
from .config import ProttConfig
from .directory import DirectoryClient, index_projects
from .http import HttpClient
from .models import ArtboardPath, Project, ScreenUpload, WalkStats
from .paths import ArtboardMatcher
from .uploader import ScreenUploader
from .walker import ArtboardWalker, UnknownProjectCallback

LOGGER = get_logger()

UploadCallback = Callable[[ScreenUpload], None]
ProjectsCallback = Callable[[list[Project]], None]


class ProttClient:
    """Sign in, list projects and upload exported artboards as screens.

    One instance shares one HTTP session, so the cookie set by ``login`` is
    sent with every later request.
    """

    def __init__(
        self,
        config: ProttConfig,
        *,
        http_client: HttpClient | None = None,
        matcher: ArtboardMatcher | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._logger = logger or LOGGER
        if http_client is None:
            self._http = HttpClient(config, logger=self._logger)
        else:
            self._http = http_client
        self._auth = AuthClient(self._http, logger=self._logger)
        self._directory = DirectoryClient(self._http, logger=self._logger)
        self._uploader = ScreenUploader(self._http, logger=self._logger)
        self._walker = ArtboardWalker(matcher, logger=self._logger)

    @property
    def http(self) -> HttpClient:
        return self._http

    @property
    def logged_in(self) -> bool:
        return self._auth.logged_in

    def login(self) -> None:
        self._auth.login(self._config.email, self._config.password)

    def list_projects(self) -> list[Project]:
        return self._directory.list_projects()

    def upload_screen(self, project: Project, screen_name: str, path: str | os.PathLike[str]) -> ScreenUpload:
        return self._uploader.upload(project, screen_name, path)

    def upload_tree(
        self,
        root: str | os.PathLike[str],
        projects: dict[str, Project],
        *,
        on_upload: UploadCallback | None = None,
        on_unknown: UnknownProjectCallback | None = None,
    ) -> WalkStats:
        """Upload every artboard under ``root`` whose project is in ``projects``."""

        def _upload(project: Project, artboard: ArtboardPath) -> None:
            result = self._uploader.upload(project, artboard.screen_name, artboard.path)
            if on_upload is not None:
                on_upload(result)

        return self._walker.walk(root, projects, _upload, on_unknown=on_unknown)

    def sync(
        self,
        root: str | os.PathLike[str],
        *,
        on_projects: ProjectsCallback | None = None,
        on_upload: UploadCallback | None = None,
        on_unknown: UnknownProjectCallback | None = None,
    ) -> WalkStats:
        """Run the whole flow: login, list projects, walk ``root`` and upload.

        The first failure (other than non-artboard paths and unknown
        projects) aborts the run; screens uploaded before it stay uploaded.
        """

        self.login()
        projects = self.list_projects()
        if on_projects is not None:
            on_projects(projects)
        index = index_projects(projects)
        self._logger.info(
            "prott.client sync_start root=%s projects=%d",
            os.fspath(root),
            len(index),
        )
        return self.upload_tree(root, index, on_upload=on_upload, on_unknown=on_unknown)

    def close(self) -> None:
        """Release the underlying HTTP session."""

        self._http.close()


__all__ = ["ProttClient", "UploadCallback", "ProjectsCallback"]
