"""Collection base - typed wrappers around list endpoints.

A collection belongs to an owner (board, card, member, ...) whose id it reads
lazily. Iterating, indexing or measuring the collection refreshes it once per
`sync.refresh_interval_seconds`; adding or removing items expires it.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from trellokit.core.config import get_config
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization

T = TypeVar("T")


class ReadOnlyCollection(Generic[T]):
    """A read-only, lazily refreshed list of entities."""

    _default_read_request: ClassVar[EntityRequestType | None] = None

    def __init__(
        self,
        get_owner_id: Callable[[], str],
        auth: TrelloAuthorization | None = None,
        *,
        read_request: EntityRequestType | None = None,
    ):
        self._get_owner_id = get_owner_id
        self.auth = auth
        self.read_request = read_request or self._default_read_request
        self.limit: int | None = None
        self._items: list[T] = []
        self._expires_at = 0.0
        self._lock = threading.RLock()

    @property
    def owner_id(self) -> str:
        return self._get_owner_id()

    @property
    def is_expired(self) -> bool:
        return time.monotonic() >= self._expires_at

    def expire(self) -> None:
        self._expires_at = 0.0

    def refresh(self, force: bool = False) -> None:
        """Reload the items if they have expired (or always with `force`)."""
        with self._lock:
            if not force and not self.is_expired:
                return
            self.update()
            self._expires_at = time.monotonic() + get_config().sync.refresh_interval_seconds

    def update(self) -> None:
        """Implement to provide data to the collection."""
        entity_type = self._entity_type()
        new_data = self._read(entity_type._json_type)
        self._items = [
            entity_type.from_json(json, self.auth, **self._item_url_params()) for json in new_data
        ]

    def _entity_type(self) -> Any:
        raise NotImplementedError

    def _item_url_params(self) -> dict[str, Any]:
        return {}

    def _read(self, json_type: type, parameters: dict[str, Any] | None = None) -> list[Any]:
        params = dict(parameters or {})
        if self.limit is not None:
            params["limit"] = self.limit
        endpoint = EndpointFactory.build(self.read_request, {"id": self.owner_id})
        return (
            JsonRepository.execute(self.auth, endpoint, params, response_type=list[json_type])
            or []
        )

    def __iter__(self) -> Iterator[T]:
        self.refresh()
        return iter(list(self._items))

    def __len__(self) -> int:
        self.refresh()
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        self.refresh()
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        self.refresh()
        return item in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}(owner_id={self._get_owner_id()!r})"
