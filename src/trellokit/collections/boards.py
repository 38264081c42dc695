"""Board collections on members and organizations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.base import ReadOnlyCollection
from trellokit.core.validation import NOT_NULL_OR_WHITESPACE, validate_value
from trellokit.entities.json_models import JsonBoard
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.entities.board import Board
    from trellokit.entities.organization import Organization


class ReadOnlyBoardCollection(ReadOnlyCollection["Board"]):
    """Boards a member belongs to, or an organization owns."""

    _default_read_request = EntityRequestType.MEMBER_READ_BOARDS

    def _entity_type(self) -> Any:
        from trellokit.entities.board import Board

        return Board


class BoardCollection(ReadOnlyBoardCollection):
    """A member's boards, which can be added to."""

    def add(
        self,
        name: str,
        description: str | None = None,
        source: Board | None = None,
        organization: Organization | None = None,
    ) -> Board:
        """Create a board.

        Args:
            name: The board name.
            description: Optional description.
            source: Optional board to copy lists, cards and preferences from.
            organization: Optional organization to create the board in.

        Returns:
            The new board.

        Raises:
            TrelloValidationError: If `name` is None, empty, or whitespace.
        """
        from trellokit.entities.board import Board

        validate_value(name, NOT_NULL_OR_WHITESPACE)

        parameters: dict[str, Any] = {"name": name}
        if description is not None:
            parameters["desc"] = description
        if source is not None:
            parameters["idBoardSource"] = source.id
        if organization is not None:
            parameters["idOrganization"] = organization.id

        endpoint = EndpointFactory.build(EntityRequestType.MEMBER_WRITE_ADD_BOARD)
        new_data = JsonRepository.execute(self.auth, endpoint, parameters, response_type=JsonBoard)
        self.expire()
        return Board.from_json(new_data, self.auth)
