"""User model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered user. Users are never updated once created."""

    id: int
    username: str

    def to_dict(self) -> dict:
        """Convert to the public response shape."""
        return {"id": self.id, "username": self.username}
