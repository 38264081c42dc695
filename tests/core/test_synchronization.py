"""Tests for synchronization contexts and fields."""

import pytest

from tests.fixtures.trello_api import BOARD_ID, ORGANIZATION_ID, board_json
from trellokit.core.config import RequestConfig, SyncConfig, TrelloKitConfig, set_config
from trellokit.core.exceptions import ObjectDeletedError, TrelloInteractionError, TrelloValidationError
from trellokit.core.synchronization import SynchronizationContext
from trellokit.entities import Board, Organization
from trellokit.entities.json_models import JsonBoard
from trellokit.rest.endpoints import EntityRequestType

BOARD_PATH = f"boards/{BOARD_ID}"


def _echo_update(request):
    """Answer a board update with the board payload carrying the sent values."""
    params = dict(request.url.params)
    updates = {key: value for key, value in params.items() if key not in ("key", "token")}
    if "closed" in updates:
        updates["closed"] = updates["closed"] == "true"
    return board_json(**updates)


# =============================================================================
# Context
# =============================================================================


class TestSynchronizationContext:
    """Tests for SynchronizationContext used directly."""

    def _context(self, **kwargs):
        return SynchronizationContext(
            JsonBoard,
            read=EntityRequestType.BOARD_READ_REFRESH,
            write=EntityRequestType.BOARD_WRITE_UPDATE,
            url_params={"id": BOARD_ID},
            **kwargs,
        )

    def test_new_context_is_expired(self):
        assert self._context().is_expired is True

    def test_synchronize_reads_once(self, trello):
        """Test one read call, then the data stays fresh."""
        trello.add("GET", BOARD_PATH, board_json())
        context = self._context()

        context.synchronize()
        context.synchronize()

        assert len(trello.calls("GET", BOARD_PATH)) == 1
        assert context.get_value("name") == "Roadmap"
        assert context.is_expired is False

    def test_force_synchronize(self, trello):
        trello.add("GET", BOARD_PATH, board_json())
        context = self._context()

        context.synchronize()
        context.synchronize(force=True)

        assert len(trello.calls("GET", BOARD_PATH)) == 2

    def test_expire(self, trello):
        trello.add("GET", BOARD_PATH, board_json())
        context = self._context()
        context.synchronize()

        context.expire()

        assert context.is_expired is True

    def test_merge_keeps_unsent_fields(self):
        """Test a partial payload only replaces the fields it carries."""
        context = self._context()
        context.merge({"id": BOARD_ID, "name": "Roadmap", "desc": "Plans"})

        context.merge({"id": BOARD_ID, "name": "Renamed"})

        assert context.get_value("name") == "Renamed"
        assert context.get_value("desc") == "Plans"
        assert context.is_expired is False

    def test_merge_keeps_unknown_keys(self):
        context = self._context()

        context.merge({"id": BOARD_ID, "starred": True})

        assert context.data.model_extra["starred"] is True

    def test_read_parameters(self, trello):
        """Test read parameters are built at call time."""
        trello.add("GET", BOARD_PATH, board_json())
        context = self._context(read_parameters=lambda: {"fields": "name"})

        context.synchronize()

        assert trello.last_params("GET", BOARD_PATH)["fields"] == "name"

    def test_write_without_write_request(self, trello):
        """Test a context without an update endpoint refuses writes."""
        context = SynchronizationContext(JsonBoard, url_params={"id": BOARD_ID})

        with pytest.raises(NotImplementedError):
            context.set_value("name", "x")
        with pytest.raises(NotImplementedError):
            context.submit({"name": "x"})

        assert context.data.name is None
        assert trello.requests == []

    def test_delete_without_delete_request(self):
        with pytest.raises(NotImplementedError):
            self._context().delete()


# =============================================================================
# Fields on entities
# =============================================================================


class TestFieldReads:
    """Tests for reading fields through an entity."""

    def test_lazy_read(self, trello):
        """Test creating an entity makes no call until a field is read."""
        trello.add("GET", BOARD_PATH, board_json())
        board = Board(BOARD_ID)

        assert trello.requests == []
        assert board.name == "Roadmap"
        assert board.description == "Planning board"
        assert board.is_closed is False
        assert len(trello.calls("GET", BOARD_PATH)) == 1

    def test_refresh_interval_zero_reads_every_time(self, trello):
        set_config(TrelloKitConfig(sync=SyncConfig(refresh_interval_seconds=0)))
        trello.add("GET", BOARD_PATH, board_json())
        board = Board(BOARD_ID)

        _ = board.name
        _ = board.name

        assert len(trello.calls("GET", BOARD_PATH)) == 2

    def test_refresh_marks_expired(self, trello):
        trello.add("GET", BOARD_PATH, board_json())
        board = Board(BOARD_ID)
        _ = board.name
        trello.add("GET", BOARD_PATH, board_json(name="Updated elsewhere"))

        board.refresh()

        assert board.name == "Updated elsewhere"
        assert len(trello.calls("GET", BOARD_PATH)) == 2

    def test_reference_field(self, trello):
        """Test an id field resolves to the cached entity."""
        trello.add("GET", BOARD_PATH, board_json())
        board = Board(BOARD_ID)

        organization = board.organization

        assert isinstance(organization, Organization)
        assert organization.id == ORGANIZATION_ID
        assert Organization.from_id(ORGANIZATION_ID) is organization

    def test_error_propagates(self, trello):
        board = Board(BOARD_ID)

        with pytest.raises(TrelloInteractionError) as exc_info:
            _ = board.name

        assert exc_info.value.status_code == 404

    def test_error_swallowed_when_configured(self, trello):
        """Test fields read as None when throw_on_error is off."""
        set_config(TrelloKitConfig(requests=RequestConfig(throw_on_error=False)))
        board = Board(BOARD_ID)

        assert board.name is None


class TestFieldWrites:
    """Tests for assigning fields through an entity."""

    def test_write_sends_only_that_field(self, trello):
        trello.add("GET", BOARD_PATH, board_json())
        trello.add("PUT", BOARD_PATH, _echo_update)
        board = Board(BOARD_ID)

        board.name = "Q3 Roadmap"

        params = trello.last_params("PUT", BOARD_PATH)
        assert params == {"name": "Q3 Roadmap", "key": "test-key", "token": "test-token"}
        assert board.name == "Q3 Roadmap"
        # The update response refreshed the data, so no read was needed.
        assert trello.calls("GET", BOARD_PATH) == []

    def test_write_uses_json_names(self, trello):
        """Test Python attribute names map to the service's parameter names."""
        trello.add("PUT", BOARD_PATH, _echo_update)
        board = Board(BOARD_ID)

        board.description = "New description"
        board.is_closed = True

        assert trello.calls("PUT", BOARD_PATH)[0].url.params["desc"] == "New description"
        assert trello.calls("PUT", BOARD_PATH)[1].url.params["closed"] == "true"

    def test_reference_write_sends_id(self, trello):
        trello.add("PUT", BOARD_PATH, _echo_update)
        board = Board(BOARD_ID)

        board.organization = Organization("5a1b2c3d4e5f607182930000")

        assert trello.last_params("PUT", BOARD_PATH)["idOrganization"] == "5a1b2c3d4e5f607182930000"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_invalid_value_makes_no_call(self, trello, value):
        board = Board(BOARD_ID)

        with pytest.raises(TrelloValidationError):
            board.name = value

        assert trello.requests == []

    def test_readonly_field(self, trello):
        board = Board(BOARD_ID)

        with pytest.raises(AttributeError, match="read-only"):
            board.url = "https://example.com"

    def test_write_after_delete(self, trello):
        """Test a deleted entity rejects writes and stops refreshing."""
        trello.add("DELETE", BOARD_PATH, {"_value": None})
        board = Board(BOARD_ID)

        board.delete()

        with pytest.raises(ObjectDeletedError):
            board.name = "Too late"
        assert board.name is None
        assert [request.method for request in trello.requests] == ["DELETE"]
