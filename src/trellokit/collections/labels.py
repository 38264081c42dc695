"""Label collection on a board."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.base import ReadOnlyCollection
from trellokit.core.validation import NOT_NULL, EnumerationRule, validate_value
from trellokit.entities.enums import LabelColor
from trellokit.entities.json_models import JsonLabel
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.entities.label import Label


class LabelCollection(ReadOnlyCollection["Label"]):
    """The labels defined on a board."""

    _default_read_request = EntityRequestType.BOARD_READ_LABELS

    def _entity_type(self) -> Any:
        from trellokit.entities.label import Label

        return Label

    def add(self, name: str, color: LabelColor | str | None) -> Label:
        """Create a label on the board.

        Args:
            name: The label name (may be empty).
            color: The label colour, or None for a colourless label.

        Raises:
            TrelloValidationError: If `name` is None or `color` is not a `LabelColor`.
        """
        from trellokit.entities.label import Label

        validate_value(name, NOT_NULL)
        validate_value(color, EnumerationRule(LabelColor))

        parameters: dict[str, Any] = {"name": name}
        if color is not None:
            parameters["color"] = LabelColor(color).value

        endpoint = EndpointFactory.build(EntityRequestType.BOARD_WRITE_ADD_LABEL, {"id": self.owner_id})
        new_data = JsonRepository.execute(self.auth, endpoint, parameters, response_type=JsonLabel)
        self.expire()
        return Label.from_json(new_data, self.auth)
