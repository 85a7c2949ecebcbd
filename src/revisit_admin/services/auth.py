"""Session store holding the signed-in admin identity."""

import asyncio
import json
import logging
import secrets
import string
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from revisit_admin.domain.sessions import (
    SessionIdentity,
    identity_to_snapshot,
    parse_identity,
)
from revisit_admin.services.notifications import Notifier, Severity
from revisit_admin.services.storage import SESSION_STORAGE_KEY, KeyValueStorage
from revisit_admin.services.subscriptions import Listener, Subscribers

logger = logging.getLogger(__name__)

CredentialVerifier = Callable[[str, str], Awaitable[bool]]

_BASE36 = string.digits + string.ascii_lowercase


async def accept_any_credentials(email: str, password: str) -> bool:
    """Mock verifier: every email and password combination is accepted."""
    return True


def _random_token(length: int) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def fabricate_identity(email: str, name: str) -> SessionIdentity:
    """Build a local identity with fresh random id and token."""
    return SessionIdentity(
        id=f"user_{_random_token(9)}",
        email=email,
        name=name,
        token=f"mock_jwt_token_{_random_token(16)}",
    )


@dataclass
class SessionStore:
    """Owns the current identity and mirrors it to storage.

    The persisted snapshot is read when the store is constructed. A malformed
    snapshot is removed and the store starts signed out.
    """

    storage: KeyValueStorage
    notifier: Notifier
    latency_seconds: float = 0.0
    verify_credentials: CredentialVerifier = accept_any_credentials
    _user: SessionIdentity | None = field(default=None, init=False)
    _subscribers: Subscribers = field(default_factory=Subscribers, init=False)

    def __post_init__(self) -> None:
        self._restore()

    @property
    def user(self) -> SessionIdentity | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback invoked after every session change."""
        return self._subscribers.subscribe(listener)

    async def login(self, email: str, password: str) -> bool:
        """Sign in with any credentials the verifier accepts."""
        try:
            await self._simulate_latency()
            if not await self.verify_credentials(email, password):
                self.notifier.notify("Invalid email or password.", Severity.ERROR)
                return False
            identity = fabricate_identity(email, email.split("@")[0])
            self._establish(identity)
        except Exception:
            logger.exception("Login failed for %s", email)
            self.notifier.notify("Login failed. Please try again.", Severity.ERROR)
            return False
        self.notifier.notify("Login successful!", Severity.SUCCESS)
        return True

    async def signup(self, name: str, email: str, password: str) -> bool:
        """Register a new local account and sign it in."""
        try:
            await self._simulate_latency()
            self._establish(fabricate_identity(email, name))
        except Exception:
            logger.exception("Signup failed for %s", email)
            self.notifier.notify("Signup failed. Please try again.", Severity.ERROR)
            return False
        self.notifier.notify("Account created successfully!", Severity.SUCCESS)
        return True

    def logout(self) -> None:
        """Forget the current identity and its snapshot."""
        self._user = None
        try:
            self.storage.remove_item(SESSION_STORAGE_KEY)
        except OSError:
            logger.exception("Failed to remove persisted session")
        self._subscribers.publish()
        self.notifier.notify("Logged out successfully!", Severity.SUCCESS)

    def _establish(self, identity: SessionIdentity) -> None:
        self.storage.set_item(
            SESSION_STORAGE_KEY, json.dumps(identity_to_snapshot(identity))
        )
        self._user = identity
        self._subscribers.publish()

    def _restore(self) -> None:
        raw = self.storage.get_item(SESSION_STORAGE_KEY)
        if raw is None:
            return
        try:
            self._user = parse_identity(json.loads(raw))
        except (ValueError, RecursionError):
            logger.warning("Discarding malformed session snapshot", exc_info=True)
            self.storage.remove_item(SESSION_STORAGE_KEY)

    async def _simulate_latency(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
