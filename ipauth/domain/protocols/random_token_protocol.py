"""Random opaque token protocol.

Opaque tokens back email verification and password reset. They have no
decodable structure and are matched by exact value against stored state.
"""

from datetime import datetime
from typing import Protocol


class RandomTokenProtocol(Protocol):
    """Generator of cryptographically random opaque tokens."""

    def generate_token(self) -> str:
        """Return a new random hex token."""
        ...

    def calculate_expiration(self, hours: int) -> datetime:
        """Return the UTC timestamp ``hours`` from now."""
        ...
