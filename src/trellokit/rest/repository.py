"""JSON repository - the single funnel between entities and the request queue."""

from __future__ import annotations

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter

from trellokit.core.auth import TrelloAuthorization
from trellokit.core.config import get_config
from trellokit.core.exceptions import TrelloInteractionError, TrelloTimeoutError
from trellokit.rest.endpoints import Endpoint
from trellokit.rest.processor import get_request_processor
from trellokit.rest.request import RestFile, RestRequest

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


class JsonRepository:
    """Executes endpoints through the request processor and decodes JSON."""

    @staticmethod
    def execute(
        auth: TrelloAuthorization | None,
        endpoint: Endpoint,
        parameters: dict[str, Any] | None = None,
        *,
        response_type: Any = None,
    ) -> Any:
        """Execute an endpoint and wait for its result.

        Args:
            auth: Authorization for the call (None uses the processor's).
            endpoint: The method and resource to call.
            parameters: Query/form parameters. `RestFile` values are uploaded.
            response_type: Type to validate the JSON body into (a pydantic
                model, `list[Model]`, ...). None returns the decoded JSON.

        Returns:
            The decoded response, or None if the body is empty or the service
            returned an error while `requests.throw_on_error` is disabled.

        Raises:
            TrelloInteractionError: The service returned an error status.
            TrelloTimeoutError: No response within `requests.response_timeout_seconds`.
            TrelloConnectionError: The service could not be reached.
        """
        request_config = get_config().requests
        params = dict(parameters or {})
        files = [params.pop(key) for key, value in list(params.items()) if isinstance(value, RestFile)]

        request = RestRequest(
            method=endpoint.method,
            resource=endpoint.resource,
            parameters=params,
            files=files,
            auth=auth,
        )
        future = get_request_processor().add_request(request)

        try:
            response = future.result(timeout=request_config.response_timeout_seconds)
        except FutureTimeoutError as e:
            future.cancel()
            raise TrelloTimeoutError(endpoint.resource, request_config.response_timeout_seconds) from e
        except TrelloInteractionError as e:
            if request_config.throw_on_error:
                raise
            logger.warning(f"Ignoring service error: {e.message}")
            return None

        data = response.json()
        if data is None or response_type is None:
            return data
        return _adapter(response_type).validate_python(data)
