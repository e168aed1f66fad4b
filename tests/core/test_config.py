"""Unit tests for /src/core/config.py and /src/core/models.py"""

import pytest
from pydantic import ValidationError

from src.core.config import ClientConfig, random_player_name
from src.core.models import MoveIntent, SelectIntent
from src.core.shared_types import PLAYING


def test_defaults() -> None:
    config = ClientConfig()
    assert config.server_url == "wss://chess-server-9na6.onrender.com/"
    assert config.room_name == "chess_room"
    assert config.active_status == PLAYING


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_SERVER_URL", "ws://localhost:2567")
    monkeypatch.setenv("CHESS_ACTIVE_STATUS", "in progress")
    monkeypatch.delenv("CHESS_ROOM_NAME", raising=False)
    config = ClientConfig.from_env()
    assert config.server_url == "ws://localhost:2567"
    assert config.active_status == "in progress"
    assert config.room_name == "chess_room"


def test_from_env_ignores_empty_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_ROOM_NAME", "")
    assert ClientConfig.from_env().room_name == "chess_room"


def test_config_is_frozen() -> None:
    config = ClientConfig()
    with pytest.raises(ValidationError):
        config.room_name = "other"  # type: ignore[misc]


def test_join_options() -> None:
    options = ClientConfig(player_name_prefix="Guest_").join_options()
    assert list(options.keys()) == ["name"]
    assert options["name"].startswith("Guest_")


def test_random_player_name() -> None:
    name = random_player_name("Player_")
    suffix = name.removeprefix("Player_")
    assert len(suffix) == 6
    assert suffix.isalnum() and suffix == suffix.lower()


# -- OUTBOUND INTENTS --
def test_select_intent_payload() -> None:
    assert SelectIntent(5, 9).to_payload() == {"row": 5, "col": 9}


def test_move_intent_payload() -> None:
    move = MoveIntent(from_row=6, from_col=4, to_row=4, to_col=4)
    assert move.to_payload() == {"fromRow": 6, "fromCol": 4, "toRow": 4, "toCol": 4}
