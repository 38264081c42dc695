"""HTTP client - executes `RestRequest`s against the Trello REST API with httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from trellokit.core.auth import TrelloAuthorization
from trellokit.core.config import APIConfig, get_config
from trellokit.core.exceptions import (
    TrelloConnectionError,
    TrelloInteractionError,
    TrelloTimeoutError,
)
from trellokit.rest.request import RestRequest, RestResponse

logger = logging.getLogger(__name__)


class TrelloRestClient:
    """Thin wrapper around one `httpx.Client`.

    Authorization is appended as `key`/`token` query parameters. Parameters
    always travel on the query string; files are sent as multipart form data.
    """

    def __init__(
        self,
        api_config: APIConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            api_config: API settings. Defaults to the active configuration.
            transport: Optional httpx transport (tests inject `httpx.MockTransport`).
        """
        self.api_config = api_config or get_config().api
        self._http = httpx.Client(
            base_url=self.api_config.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.api_config.timeout_seconds),
            headers={
                "User-Agent": self.api_config.user_agent,
                "Accept": "application/json",
            },
            transport=transport,
        )

    def execute(self, request: RestRequest) -> RestResponse:
        """Send one request and return the response.

        Raises:
            TrelloTimeoutError: If the request timed out.
            TrelloConnectionError: If the service could not be reached.
            TrelloInteractionError: If the service answered with status >= 400.
        """
        auth = request.auth or TrelloAuthorization.default()
        params = self._build_params(request.parameters)
        params.update(auth.as_query_params())

        files = None
        if request.files:
            files = [
                ("file", (rest_file.file_name, rest_file.content)) for rest_file in request.files
            ]

        url = str(self._http.base_url.join(request.resource))
        logger.debug(f"{request.method} {request.resource}")
        try:
            response = self._http.request(request.method, request.resource, params=params, files=files)
        except httpx.TimeoutException as e:
            raise TrelloTimeoutError(url, self.api_config.timeout_seconds) from e
        except httpx.TransportError as e:
            raise TrelloConnectionError(url, e) from e

        logger.debug(f"{request.method} {request.resource} -> {response.status_code}")
        if response.status_code >= 400:
            raise TrelloInteractionError(
                response.status_code, request.method, request.resource, response.text
            )

        return RestResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    @staticmethod
    def _build_params(parameters: dict[str, Any]) -> dict[str, Any]:
        params: dict[str, Any] = {}
        for key, value in parameters.items():
            if isinstance(value, (list, tuple, set)):
                params[key] = ",".join(str(item) for item in value)
            elif hasattr(value, "isoformat"):
                params[key] = value.isoformat()
            elif hasattr(value, "value") and not isinstance(value, (str, bytes)):
                params[key] = value.value
            else:
                params[key] = value
        return params

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> TrelloRestClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
