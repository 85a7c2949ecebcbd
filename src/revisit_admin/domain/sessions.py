"""Domain models for the signed-in admin session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionIdentity:
    """Represents the locally fabricated signed-in user."""

    id: str
    email: str
    name: str
    token: str


def identity_to_snapshot(identity: SessionIdentity) -> dict[str, str]:
    """Serialize an identity for persistence."""
    return {
        "id": identity.id,
        "email": identity.email,
        "name": identity.name,
        "token": identity.token,
    }


def parse_identity(row: object) -> SessionIdentity:
    """Parse a persisted identity, raising ValueError when malformed."""
    if not isinstance(row, dict):
        raise ValueError("Session snapshot must be an object")
    values: dict[str, str] = {}
    for key in ("id", "email", "name", "token"):
        value = row.get(key)
        if not isinstance(value, str):
            raise ValueError(f"Session snapshot is missing {key}")
        values[key] = value
    return SessionIdentity(**values)
