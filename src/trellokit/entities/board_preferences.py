"""Board preferences and backgrounds.

Preferences have no endpoint of their own: they are the `prefs` object of the
board payload and are written with `prefs/<name>` parameters on the board's
update call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from trellokit.core.synchronization import EnumField, Field
from trellokit.core.validation import NOT_NULL, NULLABLE_HAS_VALUE
from trellokit.entities.enums import (
    BoardCommentPermission,
    BoardInvitationPermission,
    BoardPermissionLevel,
    BoardVotingPermission,
    CardAgingStyle,
)
from trellokit.entities.json_models import JsonBoardPreferences

if TYPE_CHECKING:
    from trellokit.entities.board import Board


@dataclass(frozen=True)
class BoardBackground:
    """A board background: a built-in colour or an uploaded image."""

    id: str
    color: str | None = None
    image: str | None = None

    BLUE: ClassVar[BoardBackground]
    ORANGE: ClassVar[BoardBackground]
    GREEN: ClassVar[BoardBackground]
    RED: ClassVar[BoardBackground]
    PURPLE: ClassVar[BoardBackground]
    PINK: ClassVar[BoardBackground]
    LIME: ClassVar[BoardBackground]
    SKY: ClassVar[BoardBackground]
    GREY: ClassVar[BoardBackground]


BoardBackground.BLUE = BoardBackground("blue", "#0079BF")
BoardBackground.ORANGE = BoardBackground("orange", "#D29034")
BoardBackground.GREEN = BoardBackground("green", "#519839")
BoardBackground.RED = BoardBackground("red", "#B04632")
BoardBackground.PURPLE = BoardBackground("purple", "#89609E")
BoardBackground.PINK = BoardBackground("pink", "#CD5A91")
BoardBackground.LIME = BoardBackground("lime", "#4BBF6B")
BoardBackground.SKY = BoardBackground("sky", "#00AECC")
BoardBackground.GREY = BoardBackground("grey", "#838C91")


class BackgroundField(Field):
    """The `background` id joined with its colour and image."""

    def to_python(self, raw: Any, instance: Any) -> BoardBackground | None:
        if raw is None:
            return None
        data = instance._context.data
        return BoardBackground(raw, data.background_color, data.background_image)

    def to_json(self, value: Any) -> Any:
        if value is None:
            return None
        return value if isinstance(value, str) else value.id


class BoardPreferences:
    """Preferences of one board.

    Every preference may read as None before the board is loaded, but none
    can be set to None.
    """

    permission_level = EnumField(BoardPermissionLevel, rules=[NULLABLE_HAS_VALUE])
    voting = EnumField(BoardVotingPermission, rules=[NULLABLE_HAS_VALUE])
    commenting = EnumField(BoardCommentPermission, "comments", rules=[NULLABLE_HAS_VALUE])
    invitations = EnumField(BoardInvitationPermission, rules=[NULLABLE_HAS_VALUE])
    allow_self_join = Field("self_join", rules=[NULLABLE_HAS_VALUE])
    show_card_covers = Field("card_covers", rules=[NULLABLE_HAS_VALUE])
    is_calendar_feed_enabled = Field("calendar_feed_enabled", rules=[NULLABLE_HAS_VALUE])
    card_aging_style = EnumField(CardAgingStyle, "card_aging", rules=[NULLABLE_HAS_VALUE])
    background = BackgroundField(rules=[NOT_NULL])

    def __init__(self, board: Board):
        self.board = board
        self.auth = board.auth
        self._context = board._context.child(JsonBoardPreferences, "prefs", "prefs/")

    def __repr__(self) -> str:
        return f"BoardPreferences(board={self.board.id!r})"
