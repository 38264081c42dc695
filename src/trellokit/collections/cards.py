"""Card collections on boards and lists."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from trellokit.collections.base import ReadOnlyCollection
from trellokit.core.validation import NOT_NULL_OR_WHITESPACE, POSITION, validate_value
from trellokit.entities.json_models import JsonCard
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.entities.card import Card


class ReadOnlyCardCollection(ReadOnlyCollection["Card"]):
    """Cards on a board (the default) or a list."""

    _default_read_request = EntityRequestType.BOARD_READ_CARDS

    def _entity_type(self) -> Any:
        from trellokit.entities.card import Card

        return Card


class CardCollection(ReadOnlyCardCollection):
    """The cards on a list, which can be added to."""

    _default_read_request = EntityRequestType.LIST_READ_CARDS

    def add(
        self,
        name: str,
        description: str | None = None,
        position: float | str | None = None,
        due_date: datetime | None = None,
    ) -> Card:
        """Create a card at the end (or `position`) of the list.

        Args:
            name: The card name.
            description: Optional description.
            position: "top", "bottom" or a positive number.
            due_date: Optional due date.

        Returns:
            The new card.

        Raises:
            TrelloValidationError: If `name` is blank or `position` is invalid.
        """
        from trellokit.entities.card import Card

        validate_value(name, NOT_NULL_OR_WHITESPACE)
        validate_value(position, POSITION)

        parameters: dict[str, Any] = {"name": name, "idList": self.owner_id}
        if description is not None:
            parameters["desc"] = description
        if position is not None:
            parameters["pos"] = position
        if due_date is not None:
            parameters["due"] = due_date

        endpoint = EndpointFactory.build(EntityRequestType.LIST_WRITE_ADD_CARD)
        new_data = JsonRepository.execute(self.auth, endpoint, parameters, response_type=JsonCard)
        self.expire()
        return Card.from_json(new_data, self.auth)
