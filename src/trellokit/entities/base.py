"""Base class shared by every entity."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from pydantic import BaseModel

from trellokit.core.cache import get_cache
from trellokit.core.config import get_config
from trellokit.core.synchronization import SynchronizationContext
from trellokit.entities.json_models import TrelloJsonModel
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization

E = TypeVar("E", bound="TrelloEntity")


class TrelloEntity:
    """A cacheable, refreshable mirror of one remote object.

    Subclasses declare their JSON model and endpoints as class attributes and
    expose JSON fields through `Field` descriptors.
    """

    _json_type: ClassVar[type[TrelloJsonModel]] = TrelloJsonModel
    _read_request: ClassVar[EntityRequestType | None] = None
    _write_request: ClassVar[EntityRequestType | None] = None
    _delete_request: ClassVar[EntityRequestType | None] = None

    def __init__(self, id: str, auth: TrelloAuthorization | None = None, **url_params: Any):
        if not id:
            raise ValueError(f"{type(self).__name__} requires an id")
        self._id = id
        self.auth = auth
        self._context = SynchronizationContext(
            self._json_type,
            auth,
            read=self._read_request,
            write=self._write_request,
            delete=self._delete_request,
            url_params={"id": id, **url_params},
            entity_name=type(self).__name__,
        )
        if get_config().sync.enable_cache:
            get_cache().add(self)

    @classmethod
    def from_id(cls: type[E], id: str, auth: TrelloAuthorization | None = None, **url_params: Any) -> E:
        """Get the cached instance for an id, or create one."""
        if get_config().sync.enable_cache:
            cached = get_cache().find(cls, id)
            if cached is not None:
                return cached
        return cls(id, auth, **url_params)

    @classmethod
    def from_json(
        cls: type[E],
        json: BaseModel | dict[str, Any],
        auth: TrelloAuthorization | None = None,
        **url_params: Any,
    ) -> E:
        """Get or create the instance for a payload and merge the payload into it."""
        if not isinstance(json, cls._json_type):
            json = cls._json_type.model_validate(json)
        entity = cls.from_id(json.id, auth, **url_params)
        entity._context.merge(json)
        return entity

    @property
    def id(self) -> str:
        return self._id

    @property
    def creation_date(self) -> datetime:
        """When the object was created, decoded from its id."""
        return datetime.fromtimestamp(int(self._id[:8], 16), tz=timezone.utc)

    @property
    def json(self) -> TrelloJsonModel:
        """The raw payload as last synchronized."""
        return self._context.data

    def refresh(self) -> None:
        """Mark the data to be refreshed the next time it is accessed."""
        self._context.expire()

    def _delete(self) -> None:
        self._context.delete()
        get_cache().remove(self)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
