"""Tests for Member, Organization, Action and PowerUp."""

import pytest

from tests.fixtures.trello_api import (
    BOARD_ID,
    CARD_ID,
    MEMBER_ID,
    ORGANIZATION_ID,
    board_json,
    member_json,
)
from trellokit.core.exceptions import TrelloInteractionError, TrelloValidationError
from trellokit.entities import Action, Board, Card, Member, Organization, PowerUp

ACTION_ID = "5a1b2c3d4e5f60718293a527"
POWER_UP_ID = "55a5d916446f517774210004"


class TestMember:
    """Tests for members."""

    def test_fields(self, trello):
        trello.add("GET", f"members/{MEMBER_ID}", member_json())
        member = Member(MEMBER_ID)

        assert member.username == "alexdoe"
        assert member.full_name == "Alex Doe"
        assert member.initials == "AD"
        assert member.is_confirmed is True
        assert str(member) == "Alex Doe"

    def test_me_resolves_real_id(self, trello):
        trello.add("GET", "members/me", member_json())

        me = Member.me()

        assert me.id == MEMBER_ID
        assert me is Member.from_id(MEMBER_ID)
        assert me.username == "alexdoe"
        assert len(trello.requests) == 1

    def test_me_unauthorized(self, trello):
        trello.add("GET", "members/me", "invalid token", status=401)

        with pytest.raises(TrelloInteractionError) as exc_info:
            Member.me()

        assert exc_info.value.status_code == 401

    def test_update_full_name(self, trello):
        trello.add("PUT", f"members/{MEMBER_ID}", member_json(fullName="Alex Q. Doe"))
        member = Member(MEMBER_ID)

        member.full_name = "Alex Q. Doe"

        assert trello.last_params("PUT", f"members/{MEMBER_ID}")["fullName"] == "Alex Q. Doe"

    def test_boards(self, trello):
        trello.add("GET", f"members/{MEMBER_ID}/boards", [board_json()])

        boards = list(Member(MEMBER_ID).boards)

        assert boards == [Board.from_id(BOARD_ID)]
        assert boards[0].name == "Roadmap"

    def test_add_board(self, trello):
        trello.add("POST", "boards", board_json(id="5a1b2c3d4e5f607182930001", name="Launch"))
        source = Board(BOARD_ID)
        organization = Organization(ORGANIZATION_ID)

        board = Member(MEMBER_ID).boards.add(
            "Launch", description="Go-live", source=source, organization=organization
        )

        params = trello.last_params("POST", "boards")
        assert params["name"] == "Launch"
        assert params["desc"] == "Go-live"
        assert params["idBoardSource"] == BOARD_ID
        assert params["idOrganization"] == ORGANIZATION_ID
        assert board.name == "Launch"

    def test_add_board_requires_name(self, trello):
        with pytest.raises(TrelloValidationError):
            Member(MEMBER_ID).boards.add(" ")

        assert trello.requests == []


class TestOrganization:
    def test_fields_and_collections(self, trello):
        trello.add(
            "GET",
            f"organizations/{ORGANIZATION_ID}",
            {
                "id": ORGANIZATION_ID,
                "name": "acme",
                "displayName": "Acme Inc.",
                "desc": "",
                "website": "https://acme.example.com",
            },
        )
        trello.add("GET", f"organizations/{ORGANIZATION_ID}/boards", [board_json()])
        trello.add("GET", f"organizations/{ORGANIZATION_ID}/members", [member_json()])
        organization = Organization(ORGANIZATION_ID)

        assert organization.display_name == "Acme Inc."
        assert organization.website == "https://acme.example.com"
        assert [board.id for board in organization.boards] == [BOARD_ID]
        assert [member.id for member in organization.members] == [MEMBER_ID]

    def test_invalid_website(self, trello):
        with pytest.raises(TrelloValidationError):
            Organization(ORGANIZATION_ID).website = "not a url"

        assert trello.requests == []


class TestAction:
    """Tests for actions."""

    def test_fields_and_references(self, trello):
        trello.add(
            "GET",
            f"actions/{ACTION_ID}",
            {
                "id": ACTION_ID,
                "type": "createCard",
                "date": "2024-05-01T12:00:00.000Z",
                "idMemberCreator": MEMBER_ID,
                "data": {
                    "board": {"id": BOARD_ID, "name": "Roadmap"},
                    "card": {"id": CARD_ID, "name": "Write release notes"},
                },
            },
        )
        action = Action(ACTION_ID)

        assert action.type == "createCard"
        assert action.date.year == 2024
        assert action.creator is Member.from_id(MEMBER_ID)
        assert action.board is Board.from_id(BOARD_ID)
        assert action.card is Card.from_id(CARD_ID)
        assert action.list is None

    def test_board_actions(self, trello):
        trello.add(
            "GET",
            f"boards/{BOARD_ID}/actions",
            [{"id": ACTION_ID, "type": "commentCard", "data": {"text": "Looks good"}}],
        )

        actions = list(Board(BOARD_ID).actions)

        assert actions[0].type == "commentCard"
        assert actions[0].data == {"text": "Looks good"}

    def test_readonly(self):
        with pytest.raises(AttributeError):
            Action(ACTION_ID).type = "deleteCard"


class TestPowerUp:
    def test_fields(self, trello):
        trello.add("GET", f"plugins/{POWER_UP_ID}", {"id": POWER_UP_ID, "name": "Card Aging", "public": True})
        power_up = PowerUp(POWER_UP_ID)

        assert power_up.name == "Card Aging"
        assert power_up.is_public is True
        assert str(power_up) == "Card Aging"

    def test_board_power_ups(self, trello):
        trello.add(
            "GET",
            f"boards/{BOARD_ID}/plugins",
            [{"id": POWER_UP_ID, "name": "Calendar", "public": True}],
        )

        power_ups = list(Board(BOARD_ID).power_ups)

        assert power_ups == [PowerUp.from_id(POWER_UP_ID)]
        assert power_ups[0].name == "Calendar"

    def test_refresh(self, trello):
        trello.add("GET", f"plugins/{POWER_UP_ID}", {"id": POWER_UP_ID, "name": "Old"})
        power_up = PowerUp(POWER_UP_ID)
        assert power_up.name == "Old"
        trello.add("GET", f"plugins/{POWER_UP_ID}", {"id": POWER_UP_ID, "name": "New"})

        power_up.refresh()

        assert power_up.name == "New"
