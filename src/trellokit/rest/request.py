"""Request and response records passed between the repository, the queue and the client."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization


@dataclass
class RestFile:
    """A file uploaded as multipart form data."""

    PARAMETER_KEY = "file"

    content: bytes
    file_name: str


@dataclass
class RestRequest:
    """One call against the REST API."""

    method: str
    resource: str
    parameters: dict[str, Any] = field(default_factory=dict)
    files: list[RestFile] = field(default_factory=list)
    auth: TrelloAuthorization | None = None


@dataclass
class RestResponse:
    """The service's answer to a `RestRequest`."""

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body, or None when the body is empty."""
        if not self.content.strip():
            return None
        return json.loads(self.content)
