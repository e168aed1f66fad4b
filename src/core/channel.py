"""Protocol for the outbound side of the transport (implemented by whatever connects us to the game room)"""

from typing import Optional, Protocol

Payload = dict[str, int]


class IntentChannel(Protocol):
    """Fire-and-forget messages to the server. Nothing is returned; the outcome arrives later as a new room state."""

    def send(self, message_type: str, payload: Optional[Payload] = None) -> None:
        """Deliver one message to the room."""
        ...
