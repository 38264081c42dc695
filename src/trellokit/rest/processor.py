"""Request processor - a FIFO queue drained by one worker thread.

Callers get a `concurrent.futures.Future` per request and either block on
`result()` or poll `done()`. Exactly one HTTP call is in flight per processor.
While the processor is inactive, requests stay queued until it is re-activated.
"""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Future

from trellokit.core.auth import TrelloAuthorization
from trellokit.core.config import get_config
from trellokit.core.exceptions import RequestProcessorShutDownError
from trellokit.rest.client import TrelloRestClient
from trellokit.rest.request import RestRequest, RestResponse

logger = logging.getLogger(__name__)

_STOP = object()


class RestRequestProcessor:
    """Processes REST requests as they appear on the queue."""

    def __init__(
        self,
        client: TrelloRestClient | None = None,
        *,
        auth: TrelloAuthorization | None = None,
        active: bool | None = None,
    ):
        """Initialize the processor.

        Args:
            client: HTTP client used for dispatch. Built from config if None.
            auth: Authorization for requests that carry none. Uses the
                default authorization if None.
            active: Whether to dispatch immediately. Defaults to config
                `requests.start_active`.
        """
        self.client = client or TrelloRestClient()
        self._auth = auth
        self._queue: queue.Queue[tuple[RestRequest, Future[RestResponse]] | object] = queue.Queue()
        self._active = threading.Event()
        if get_config().requests.start_active if active is None else active:
            self._active.set()
        self._lock = threading.Lock()
        # Signalled when the processor is activated or shut down.
        self._wake = threading.Condition()
        self._worker: threading.Thread | None = None
        self._shut_down = False
        self._discard_pending = False
        self._pending = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self._active.is_set()

    @is_active.setter
    def is_active(self, value: bool) -> None:
        with self._wake:
            if value:
                self._active.set()
            else:
                self._active.clear()
            self._wake.notify_all()

    @property
    def auth(self) -> TrelloAuthorization:
        if self._auth is None:
            self._auth = TrelloAuthorization.default()
        return self._auth

    @property
    def app_key(self) -> str:
        return self.auth.app_key

    @property
    def user_token(self) -> str | None:
        return self.auth.user_token

    @user_token.setter
    def user_token(self, value: str | None) -> None:
        self._auth = self.auth.model_copy(update={"user_token": value})

    @property
    def pending_count(self) -> int:
        """Requests added but not yet dispatched or cancelled."""
        with self._lock:
            return self._pending

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    # -------------------------------------------------------------------------
    # Queue
    # -------------------------------------------------------------------------

    def add_request(self, request: RestRequest) -> Future[RestResponse]:
        """Queue a request for dispatch.

        Args:
            request: The request. Requests without authorization use the
                processor's.

        Returns:
            A future resolved with the `RestResponse`, or with the exception
            raised while sending it.

        Raises:
            RequestProcessorShutDownError: If `shut_down()` has been called.
        """
        future: Future[RestResponse] = Future()
        with self._lock:
            if self._shut_down:
                raise RequestProcessorShutDownError()
            if request.auth is None:
                request.auth = self.auth
            self._pending += 1
            self._queue.put((request, future))
            self._ensure_worker()
        return future

    def shut_down(self, wait: bool = True) -> None:
        """Stop accepting requests and stop the worker.

        Requests already queued are still sent if the processor is active and
        cancelled if it is not.

        Args:
            wait: Block until the worker has finished.
        """
        with self._lock:
            if self._shut_down:
                return
            self._shut_down = True
            worker = self._worker
            if not self.is_active:
                self._discard_pending = True
            self._queue.put(_STOP)

        if worker is None:
            self.client.close()
            return

        with self._wake:
            self._wake.notify_all()
        if wait:
            worker.join()

    def _ensure_worker(self) -> None:
        if self._worker is None or not self._worker.is_alive():
            self._worker = threading.Thread(
                target=self._run, name="trellokit-requests", daemon=True
            )
            self._worker.start()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            request, future = item  # type: ignore[misc]
            with self._wake:
                self._wake.wait_for(lambda: self._active.is_set() or self._discard_pending)
            with self._lock:
                self._pending -= 1
            if self._discard_pending:
                future.cancel()
                continue
            if not future.set_running_or_notify_cancel():
                continue
            try:
                response = self.client.execute(request)
            except Exception as e:
                logger.debug(f"{request.method} {request.resource} failed: {e}")
                future.set_exception(e)
            else:
                future.set_result(response)
        self.client.close()


# =============================================================================
# Process-wide Processor
# =============================================================================

_processor: RestRequestProcessor | None = None
_processor_lock = threading.Lock()


def get_request_processor() -> RestRequestProcessor:
    """Get the process-wide processor, creating it on first use."""
    global _processor
    with _processor_lock:
        if _processor is None or _processor.is_shut_down:
            _processor = RestRequestProcessor()
        return _processor


def set_request_processor(processor: RestRequestProcessor | None) -> None:
    """Replace the process-wide processor (None creates a fresh one on next use)."""
    global _processor
    with _processor_lock:
        _processor = processor


def shut_down_request_processor(wait: bool = True) -> None:
    """Shut down the process-wide processor, if one was created."""
    global _processor
    with _processor_lock:
        processor, _processor = _processor, None
    if processor is not None:
        processor.shut_down(wait=wait)
