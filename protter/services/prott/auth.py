"""Session authentication against the Prott sign-in endpoint."""

from __future__ import annotations

import logging

from protter.core.logger import get_logger

from .http import HttpClient, safe_json
from .models import AuthError, LoginCredentials, TransportError

LOGGER = get_logger()

SIGN_IN_PATH = "/users/sign_in.json"


class AuthClient:
    """Sign in once; the session cookie then rides along on later requests."""

    def __init__(self, http_client: HttpClient, *, logger: logging.Logger | None = None) -> None:
        self._http = http_client
        self._logger = logger or LOGGER
        self._logged_in = False

    @property
    def logged_in(self) -> bool:
        return self._logged_in

    def login(self, email: str, password: str) -> None:
        """Submit credentials; any 2xx status counts as success.

        Raises:
            AuthError: On a non-2xx status or when the request cannot be sent.
        """

        credentials = LoginCredentials(email=email, password=password)
        try:
            response = self._http.request(
                "POST",
                SIGN_IN_PATH,
                headers={"Content-Type": "application/json"},
                json_body=credentials.to_payload(),
            )
        except TransportError as exc:
            raise AuthError(f"Unable to reach sign-in endpoint: {exc}", payload=exc.payload) from exc

        status = response.status_code
        if status // 100 != 2:
            self._logger.error("prott.auth login_rejected email=%s status=%d", email, status)
            raise AuthError("invalid login", status_code=status, payload=safe_json(response))

        self._logged_in = True
        self._logger.info("prott.auth login_ok email=%s status=%d", email, status)


__all__ = ["AuthClient", "SIGN_IN_PATH"]
