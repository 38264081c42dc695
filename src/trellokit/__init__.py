"""trellokit - typed, lazily synchronized bindings for the Trello REST API.

Entities (boards, cards, members, ...) are thin objects whose properties read
through to the remote JSON on demand and write changes straight back.

Usage:
    from trellokit import Board, TrelloAuthorization

    TrelloAuthorization.set_default(TrelloAuthorization(app_key="...", user_token="..."))
    board = Board("5a1b2c3d4e5f60718293a4b5")
    print(board.name)
    for card in board.cards:
        print(card.name)
"""

__version__ = "0.4.0"

from trellokit.core.auth import TrelloAuthorization
from trellokit.core.exceptions import (
    ObjectDeletedError,
    TrelloError,
    TrelloInteractionError,
    TrelloValidationError,
)
from trellokit.entities import (
    Action,
    Attachment,
    Board,
    BoardBackground,
    BoardPreferences,
    Card,
    Label,
    List,
    Member,
    Organization,
    PowerUp,
    Search,
    Sticker,
)
from trellokit.entities.enums import (
    BoardCommentPermission,
    BoardInvitationPermission,
    BoardPermissionLevel,
    BoardVotingPermission,
    CardAgingStyle,
    LabelColor,
    SearchModelType,
)

__all__ = [
    "__version__",
    "TrelloAuthorization",
    # Exceptions
    "TrelloError",
    "TrelloValidationError",
    "TrelloInteractionError",
    "ObjectDeletedError",
    # Entities
    "Action",
    "Attachment",
    "Board",
    "BoardBackground",
    "BoardPreferences",
    "Card",
    "Label",
    "List",
    "Member",
    "Organization",
    "PowerUp",
    "Search",
    "Sticker",
    # Enums
    "BoardCommentPermission",
    "BoardInvitationPermission",
    "BoardPermissionLevel",
    "BoardVotingPermission",
    "CardAgingStyle",
    "LabelColor",
    "SearchModelType",
]
