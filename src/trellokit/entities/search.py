"""Search across actions, boards, cards, members and organizations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from trellokit.core.synchronization import ListField, SynchronizationContext
from trellokit.core.validation import NOT_NULL_OR_WHITESPACE, validate_value
from trellokit.entities.action import Action
from trellokit.entities.board import Board
from trellokit.entities.card import Card
from trellokit.entities.enums import SearchModelType
from trellokit.entities.json_models import JsonSearch
from trellokit.entities.member import Member
from trellokit.entities.organization import Organization
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization

# Entity types that can scope a search, and the parameter carrying their ids.
_CONTEXT_PARAMETERS: dict[type, str] = {
    Board: "idBoards",
    Card: "idCards",
    Organization: "idOrganizations",
}


class Search:
    """A search query and its results.

    The search runs once, on the first access to a result, and again after
    the results expire or `refresh()` is called.

    Example:
        >>> search = Search("release", SearchModelType.CARDS | SearchModelType.BOARDS)
        >>> [card.name for card in search.cards]
    """

    actions = ListField(Action)
    boards = ListField(Board)
    cards = ListField(Card)
    members = ListField(Member)
    organizations = ListField(Organization)

    def __init__(
        self,
        query: str,
        model_types: SearchModelType = SearchModelType.ALL,
        context: Iterable[Board | Card | Organization] | None = None,
        auth: TrelloAuthorization | None = None,
        *,
        partial: bool = False,
    ):
        """Create a search.

        Args:
            query: The search text.
            model_types: Result types to return; combine with `|`.
            context: Boards, cards or organizations to limit the search to.
            auth: Authorization. Uses the default authorization if None.
            partial: Match words by prefix.

        Raises:
            TrelloValidationError: If `query` is None, empty, or whitespace.
            TypeError: If `context` holds something other than boards, cards
                or organizations.
        """
        validate_value(query, NOT_NULL_OR_WHITESPACE)
        self.query = query
        self.model_types = model_types
        self.context = list(context or [])
        for item in self.context:
            if type(item) not in _CONTEXT_PARAMETERS:
                raise TypeError(f"Cannot search within a {type(item).__name__}")
        self.partial = partial
        self.auth = auth
        self._context = SynchronizationContext(
            JsonSearch,
            auth,
            read=EntityRequestType.SERVICE_READ_SEARCH,
            read_parameters=self._parameters,
            entity_name="Search",
        )

    def refresh(self) -> None:
        """Mark the results to be fetched again on next access."""
        self._context.expire()

    def _parameters(self) -> dict[str, Any]:
        parameters: dict[str, Any] = {
            "query": self.query,
            "modelTypes": self.model_types.to_param(),
        }
        for entity_type, name in _CONTEXT_PARAMETERS.items():
            ids = [item.id for item in self.context if type(item) is entity_type]
            if ids:
                parameters[name] = ids
        if self.partial:
            parameters["partial"] = True
        return parameters

    def __repr__(self) -> str:
        return f"Search(query={self.query!r}, model_types={self.model_types!r})"
