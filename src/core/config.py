"""Client settings. Defaults point at the public game server; override through environment variables."""

import os
import random
import string
from typing import Self

from pydantic import BaseModel, ConfigDict

from src.core.shared_types import PLAYING

ENV_PREFIX = "CHESS_"
ENV_OVERRIDABLE = ("server_url", "room_name", "active_status")
PLAYER_NAME_SUFFIX_LENGTH = 6


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    server_url: str = "wss://chess-server-9na6.onrender.com/"
    room_name: str = "chess_room"
    player_name_prefix: str = "Player_"
    # The one status token during which players may select and move
    active_status: str = PLAYING

    @classmethod
    def from_env(cls) -> Self:
        """Read CHESS_SERVER_URL, CHESS_ROOM_NAME and CHESS_ACTIVE_STATUS (unset variables keep their default)."""
        overrides: dict[str, str] = {}
        for name in ENV_OVERRIDABLE:
            value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value:
                overrides[name] = value
        return cls(**overrides)

    def join_options(self) -> dict[str, str]:
        """Options sent along when joining (or creating) the room"""
        return {"name": random_player_name(self.player_name_prefix)}


def random_player_name(prefix: str) -> str:
    alphabet = string.ascii_lowercase + string.digits
    suffix = "".join(random.choices(alphabet, k=PLAYER_NAME_SUFFIX_LENGTH))
    return f"{prefix}{suffix}"
