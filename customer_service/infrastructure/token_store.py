"""Token Store: in-memory issuance and validation of opaque bearer tokens.

Invariants:
    - Tokens are opaque random strings; they carry no claims themselves
    - validate() never returns an expired token (expired entries are dropped)
    - issue() purges expired entries before adding its own
    - Client credentials are compared in constant time

Design Decisions:
    - In-memory dict: single-process uvicorn; tokens are lost on restart and
      clients simply request a new one
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedToken:
    """A bearer token granted to a client."""
    access_token: str
    client_id: str
    scopes: tuple[str, ...]
    expires_at: datetime

    def expires_in(self, now: datetime | None = None) -> int:
        """Whole seconds left before expiry (never negative)."""
        now = now or datetime.now(timezone.utc)
        return max(0, int((self.expires_at - now).total_seconds()))


class InMemoryTokenStore:
    """Registry of one OAuth2 client and the tokens issued to it."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        scopes: list[str],
        ttl_seconds: int,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._scopes = tuple(scopes)
        self._ttl = timedelta(seconds=ttl_seconds)
        self._tokens: dict[str, IssuedToken] = {}

    def check_client(self, client_id: str, client_secret: str) -> bool:
        id_ok = secrets.compare_digest(
            client_id.encode("utf-8"), self._client_id.encode("utf-8"),
        )
        secret_ok = secrets.compare_digest(
            client_secret.encode("utf-8"), self._client_secret.encode("utf-8"),
        )
        return id_ok and secret_ok

    def issue(self, client_id: str, now: datetime | None = None) -> IssuedToken:
        now = now or datetime.now(timezone.utc)
        self._tokens = {
            key: t for key, t in self._tokens.items() if t.expires_at > now
        }
        token = IssuedToken(
            access_token=secrets.token_urlsafe(32),
            client_id=client_id,
            scopes=self._scopes,
            expires_at=now + self._ttl,
        )
        self._tokens[token.access_token] = token
        logger.info("Access token issued", extra={"client_id": client_id})
        return token

    def validate(self, access_token: str, now: datetime | None = None) -> IssuedToken | None:
        token = self._tokens.get(access_token)
        if token is None:
            return None
        now = now or datetime.now(timezone.utc)
        if token.expires_at <= now:
            self._tokens.pop(access_token, None)
            logger.info("Expired access token dropped", extra={"client_id": token.client_id})
            return None
        return token

    def revoke(self, access_token: str) -> None:
        self._tokens.pop(access_token, None)

    def __len__(self) -> int:
        return len(self._tokens)


# Singleton (initialized on startup)
token_store: InMemoryTokenStore | None = None


def init_token_store(
    client_id: str, client_secret: str, scopes: list[str], ttl_seconds: int,
) -> InMemoryTokenStore:
    global token_store
    token_store = InMemoryTokenStore(client_id, client_secret, scopes, ttl_seconds)
    return token_store


def get_token_store() -> InMemoryTokenStore:
    """FastAPI dependency for the process-wide token store."""
    if token_store is None:
        raise RuntimeError("Token store not initialized")
    return token_store
