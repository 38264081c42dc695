"""Tests for JsonRepository."""

from concurrent.futures import Future
from unittest.mock import MagicMock, patch

import pytest

from tests.fixtures.trello_api import BOARD_ID, board_json, sticker_json
from trellokit.core.config import RequestConfig, TrelloKitConfig, set_config
from trellokit.core.exceptions import TrelloInteractionError, TrelloTimeoutError
from trellokit.entities.json_models import JsonBoard, JsonSticker
from trellokit.rest import repository
from trellokit.rest.endpoints import Endpoint
from trellokit.rest.repository import JsonRepository
from trellokit.rest.request import RestFile


class TestExecute:
    """Tests for JsonRepository.execute."""

    def test_model_response(self, trello):
        trello.add("GET", f"boards/{BOARD_ID}", board_json())

        board = JsonRepository.execute(
            None, Endpoint("GET", f"boards/{BOARD_ID}"), response_type=JsonBoard
        )

        assert isinstance(board, JsonBoard)
        assert board.name == "Roadmap"
        assert board.short_url == "https://trello.com/b/abc123"
        assert board.prefs.permission_level == "private"

    def test_list_response(self, trello):
        trello.add("GET", "cards/c1/stickers", [sticker_json(), sticker_json(id="s2")])

        stickers = JsonRepository.execute(
            None, Endpoint("GET", "cards/c1/stickers"), response_type=list[JsonSticker]
        )

        assert [sticker.id for sticker in stickers] == [sticker_json()["id"], "s2"]
        assert stickers[0].z_index == 1

    def test_raw_response(self, trello):
        trello.add("GET", "search", {"boards": []})

        assert JsonRepository.execute(None, Endpoint("GET", "search")) == {"boards": []}

    def test_empty_response(self, trello):
        trello.add("DELETE", "cards/c1", "")

        assert JsonRepository.execute(None, Endpoint("DELETE", "cards/c1")) is None

    def test_parameters_sent(self, trello):
        trello.add("POST", "cards/c1/stickers", sticker_json())

        JsonRepository.execute(
            None, Endpoint("POST", "cards/c1/stickers"), {"image": "check", "top": 5}
        )

        params = trello.last_params("POST", "cards/c1/stickers")
        assert params["image"] == "check"
        assert params["top"] == "5"

    def test_files_moved_out_of_parameters(self):
        """Test RestFile parameters travel as files, not query values."""
        processor = MagicMock()
        processor.add_request.return_value.result.return_value.json.return_value = {"id": "s1"}
        upload = RestFile(b"data", "star.png")

        with patch.object(repository, "get_request_processor", return_value=processor):
            JsonRepository.execute(None, Endpoint("POST", "x"), {"file": upload, "name": "star"})

        request = processor.add_request.call_args.args[0]
        assert request.parameters == {"name": "star"}
        assert request.files == [upload]

    def test_error_raised(self, trello):
        with pytest.raises(TrelloInteractionError):
            JsonRepository.execute(None, Endpoint("GET", "boards/missing"))

    def test_error_swallowed_when_configured(self, trello, caplog):
        set_config(TrelloKitConfig(requests=RequestConfig(throw_on_error=False)))

        result = JsonRepository.execute(None, Endpoint("GET", "boards/missing"))

        assert result is None
        assert "Ignoring service error" in caplog.text

    def test_response_timeout(self):
        """Test a request still queued after the timeout raises TrelloTimeoutError."""
        set_config(TrelloKitConfig(requests=RequestConfig(response_timeout_seconds=0.01)))
        processor = MagicMock()
        processor.add_request.return_value = Future()

        with patch.object(repository, "get_request_processor", return_value=processor):
            with pytest.raises(TrelloTimeoutError) as exc_info:
                JsonRepository.execute(None, Endpoint("GET", "boards/slow"))

        assert exc_info.value.timeout == 0.01

    def test_timed_out_request_is_not_sent(self, trello):
        """Test a request that timed out while held is never dispatched."""
        set_config(TrelloKitConfig(requests=RequestConfig(response_timeout_seconds=0.05)))
        processor = repository.get_request_processor()
        processor.is_active = False

        with pytest.raises(TrelloTimeoutError):
            JsonRepository.execute(None, Endpoint("PUT", f"boards/{BOARD_ID}"), {"name": "Late"})

        processor.is_active = True
        processor.shut_down()
        assert trello.calls("PUT", f"boards/{BOARD_ID}") == []
