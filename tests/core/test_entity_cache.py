"""Tests for the entity cache."""

from tests.fixtures.trello_api import BOARD_ID, CARD_ID
from trellokit.core.cache import Cache, get_cache
from trellokit.core.config import SyncConfig, TrelloKitConfig, set_config
from trellokit.entities import Board, Card


class TestCache:
    """Tests for the Cache identity map."""

    def test_add_find_remove(self):
        cache = Cache()
        board = Board(BOARD_ID)
        cache.add(board)

        assert cache.find(Board, BOARD_ID) is board
        assert board in cache
        assert len(cache) == 1

        cache.remove(board)

        assert cache.find(Board, BOARD_ID) is None
        assert len(cache) == 0

    def test_keyed_by_type(self):
        """Test entities of different types with the same id do not collide."""
        cache = Cache()
        cache.add(Board("same-id"))

        assert cache.find(Card, "same-id") is None

    def test_find_without_id(self):
        assert Cache().find(Board, None) is None

    def test_clear(self):
        cache = Cache()
        cache.add(Board(BOARD_ID))
        cache.add(Card(CARD_ID))

        cache.clear()

        assert len(cache) == 0


class TestEntityCaching:
    """Tests for how entities use the process-wide cache."""

    def test_new_entities_are_cached(self):
        board = Board(BOARD_ID)

        assert get_cache().find(Board, BOARD_ID) is board

    def test_from_id_reuses_instance(self):
        board = Board(BOARD_ID)

        assert Board.from_id(BOARD_ID) is board

    def test_cache_disabled(self):
        """Test from_id creates fresh instances when caching is off."""
        set_config(TrelloKitConfig(sync=SyncConfig(enable_cache=False)))
        first = Board.from_id(BOARD_ID)
        second = Board.from_id(BOARD_ID)

        assert first is not second
        assert first == second
        assert len(get_cache()) == 0
