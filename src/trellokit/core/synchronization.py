"""Synchronization - lazy, expiring mirrors of remote JSON fields.

A `SynchronizationContext` owns the JSON data of one entity. Reading a `Field`
on the entity refreshes the context when its data is older than
`sync.refresh_interval_seconds` (one read call), then converts the raw JSON
value. Assigning a `Field` validates the new value, stages it in the local JSON
and sends one update call carrying only that field.

Child contexts (board preferences) have no endpoints of their own: they read
through and write through their parent with a parameter prefix.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from trellokit.core.config import get_config
from trellokit.core.exceptions import ObjectDeletedError
from trellokit.core.validation import EnumerationRule, ValidationRule, validate_value
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization

logger = logging.getLogger(__name__)

# =============================================================================
# Context
# =============================================================================


class SynchronizationContext:
    """Holds one entity's JSON data, its endpoints and its expiry."""

    def __init__(
        self,
        json_type: type[BaseModel],
        auth: TrelloAuthorization | None = None,
        *,
        read: EntityRequestType | None = None,
        write: EntityRequestType | None = None,
        delete: EntityRequestType | None = None,
        url_params: dict[str, Any] | None = None,
        read_parameters: Callable[[], dict[str, Any]] | None = None,
        entity_name: str = "Entity",
    ):
        self.json_type = json_type
        self.auth = auth
        self.read_request = read
        self.write_request = write
        self.delete_request = delete
        self.url_params = url_params or {}
        self.read_parameters = read_parameters
        self.entity_name = entity_name
        self.is_deleted = False
        self._data = json_type()
        self._expires_at = 0.0
        self._lock = threading.RLock()

    @property
    def data(self) -> BaseModel:
        return self._data

    @property
    def is_expired(self) -> bool:
        return time.monotonic() >= self._expires_at

    def expire(self) -> None:
        """Force the next read to refresh."""
        self._expires_at = 0.0

    def synchronize(self, force: bool = False) -> None:
        """Refresh the data with one read call if it has expired.

        Args:
            force: Refresh even if the data is still fresh.
        """
        if self.read_request is None or self.is_deleted:
            return
        with self._lock:
            if not force and not self.is_expired:
                return
            endpoint = EndpointFactory.build(self.read_request, self.url_params)
            parameters = self.read_parameters() if self.read_parameters else None
            logger.debug(f"Refreshing {self.entity_name} from {endpoint.resource}")
            json = JsonRepository.execute(
                self.auth, endpoint, parameters, response_type=self.json_type
            )
            if json is not None:
                self.merge(json)

    def merge(self, json: BaseModel | dict[str, Any]) -> None:
        """Accept fresh data obtained elsewhere and reset the expiry.

        Only fields present in `json` replace the current values.
        """
        if not isinstance(json, self.json_type):
            json = self.json_type.model_validate(json)
        update = {name: getattr(json, name) for name in json.model_fields_set}
        update.update(json.model_extra or {})
        with self._lock:
            self._data = self._data.model_copy(update=update)
            self._expires_at = time.monotonic() + get_config().sync.refresh_interval_seconds

    def get_value(self, name: str) -> Any:
        return getattr(self.data, name, None)

    def set_value(self, name: str, raw: Any) -> None:
        """Stage a raw value locally and send it to the service.

        Raises:
            ObjectDeletedError: If the entity was deleted.
            NotImplementedError: If the entity has no update endpoint.
        """
        if self.is_deleted:
            raise ObjectDeletedError(self.entity_name, self.url_params.get("id"))
        if self.write_request is None:
            raise NotImplementedError(f"{self.entity_name} cannot be updated")
        setattr(self.data, name, raw)
        self.submit({self.parameter_name(name): raw})

    def parameter_name(self, name: str) -> str:
        field_info = type(self.data).model_fields.get(name)
        return (field_info.alias if field_info and field_info.alias else None) or name

    def submit(self, parameters: dict[str, Any]) -> None:
        """Send changed fields with the write endpoint."""
        if self.write_request is None:
            raise NotImplementedError(f"{self.entity_name} cannot be updated")
        endpoint = EndpointFactory.build(self.write_request, self.url_params)
        json = JsonRepository.execute(self.auth, endpoint, parameters, response_type=self.json_type)
        if json is not None:
            self.merge(json)

    def delete(self) -> None:
        """Delete the remote entity. Later writes raise `ObjectDeletedError`."""
        if self.is_deleted:
            return
        if self.delete_request is None:
            raise NotImplementedError(f"{self.entity_name} cannot be deleted")
        endpoint = EndpointFactory.build(self.delete_request, self.url_params)
        JsonRepository.execute(self.auth, endpoint)
        self.is_deleted = True

    def child(self, json_type: type[BaseModel], attribute: str, prefix: str) -> ChildContext:
        return ChildContext(self, json_type, attribute, prefix)


class ChildContext(SynchronizationContext):
    """A nested JSON object that reads and writes through its parent."""

    def __init__(
        self,
        parent: SynchronizationContext,
        json_type: type[BaseModel],
        attribute: str,
        prefix: str,
    ):
        super().__init__(json_type, parent.auth, entity_name=parent.entity_name)
        self.parent = parent
        self.attribute = attribute
        self.prefix = prefix

    @property
    def data(self) -> BaseModel:
        value = getattr(self.parent.data, self.attribute, None)
        if value is None:
            value = self.json_type()
            setattr(self.parent.data, self.attribute, value)
        return value

    @property
    def is_expired(self) -> bool:
        return self.parent.is_expired

    @property
    def is_deleted(self) -> bool:  # type: ignore[override]
        return self.parent.is_deleted

    @is_deleted.setter
    def is_deleted(self, value: bool) -> None:
        pass

    def expire(self) -> None:
        self.parent.expire()

    def synchronize(self, force: bool = False) -> None:
        self.parent.synchronize(force)

    def merge(self, json: BaseModel | dict[str, Any]) -> None:
        self.parent.merge({self.attribute: json})

    def set_value(self, name: str, raw: Any) -> None:
        if self.is_deleted:
            raise ObjectDeletedError(self.entity_name, self.parent.url_params.get("id"))
        if self.parent.write_request is None:
            raise NotImplementedError(f"{self.entity_name} cannot be updated")
        setattr(self.data, name, raw)
        self.submit({self.parameter_name(name): raw})

    def submit(self, parameters: dict[str, Any]) -> None:
        self.parent.submit({f"{self.prefix}{key}": value for key, value in parameters.items()})


# =============================================================================
# Fields
# =============================================================================


class Field:
    """Descriptor mapping an attribute to one JSON field of the owner's context."""

    def __init__(
        self,
        json_name: str | None = None,
        *,
        rules: Iterable[ValidationRule] = (),
        readonly: bool = False,
    ):
        self.json_name = json_name
        self.rules = list(rules)
        self.readonly = readonly
        self.name = json_name or ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.json_name is None:
            self.json_name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        context: SynchronizationContext = instance._context
        context.synchronize()
        return self.to_python(context.get_value(self.json_name), instance)

    def __set__(self, instance: Any, value: Any) -> None:
        if self.readonly:
            raise AttributeError(f"{type(instance).__name__}.{self.name} is read-only")
        context: SynchronizationContext = instance._context
        current = self.to_python(context.get_value(self.json_name), instance)
        validate_value(value, *self.rules, current=current)
        context.set_value(self.json_name, self.to_json(value))

    def to_python(self, raw: Any, instance: Any) -> Any:
        return raw

    def to_json(self, value: Any) -> Any:
        return value


class EnumField(Field):
    """A string JSON field exposed as an enum member."""

    def __init__(
        self,
        enum_type: type[Enum],
        json_name: str | None = None,
        *,
        rules: Iterable[ValidationRule] = (),
        readonly: bool = False,
    ):
        super().__init__(
            json_name, rules=[*rules, EnumerationRule(enum_type)], readonly=readonly
        )
        self.enum_type = enum_type

    def to_python(self, raw: Any, instance: Any) -> Any:
        if raw is None:
            return None
        try:
            return self.enum_type(raw)
        except ValueError:
            logger.debug(f"Unknown {self.enum_type.__name__} value from service: {raw!r}")
            return None

    def to_json(self, value: Any) -> Any:
        if value is None:
            return None
        return self.enum_type(value).value


class ReferenceField(Field):
    """An id JSON field exposed as the referenced entity."""

    def __init__(
        self,
        entity_type: type,
        json_name: str | None = None,
        *,
        rules: Iterable[ValidationRule] = (),
        readonly: bool = False,
    ):
        super().__init__(json_name, rules=rules, readonly=readonly)
        self.entity_type = entity_type

    def to_python(self, raw: Any, instance: Any) -> Any:
        if not raw:
            return None
        return self.entity_type.from_id(raw, auth=instance.auth)

    def to_json(self, value: Any) -> Any:
        if value is None:
            return None
        return value if isinstance(value, str) else value.id


class ListField(Field):
    """A JSON list of objects exposed as entities (read-only)."""

    def __init__(self, entity_type: type, json_name: str | None = None):
        super().__init__(json_name, readonly=True)
        self.entity_type = entity_type

    def to_python(self, raw: Any, instance: Any) -> Any:
        return [self.entity_type.from_json(item, auth=instance.auth) for item in raw or []]
