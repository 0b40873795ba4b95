"""Tests for GameSettings."""

import pytest

from tierchess.core.enums import Color
from tierchess.engine.search import SearchLimits
from tierchess.game.settings import GameSettings


class TestGameSettings:
    def test_defaults(self) -> None:
        settings = GameSettings()
        assert settings.computer_color == Color.BLACK
        assert settings.human_color == Color.WHITE
        assert settings.search_depth == 2
        assert settings.seed is None
        assert settings.move_delay_ms == 400
        settings.validate()

    def test_search_limits(self) -> None:
        assert GameSettings(search_depth=3).search_limits() == SearchLimits(max_depth=3)

    @pytest.mark.parametrize("depth", [0, 5])
    def test_rejects_bad_depth(self, depth: int) -> None:
        with pytest.raises(ValueError, match="search_depth"):
            GameSettings(search_depth=depth).validate()

    def test_rejects_negative_delay(self) -> None:
        with pytest.raises(ValueError, match="move_delay_ms"):
            GameSettings(move_delay_ms=-1).validate()
