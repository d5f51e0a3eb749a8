"""OAuth2 Token Endpoint: client-credentials grant issuing opaque bearer tokens.

Invariants:
    - POST /oauth/token requires HTTP Basic client credentials
    - Only grant_type=client_credentials is accepted (400 otherwise)
    - Wrong or missing client credentials -> 401
"""

import logging

from fastapi import APIRouter, Depends, Form
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from customer_service.core.errors import AuthenticationError, UnsupportedGrantError
from customer_service.infrastructure.token_store import InMemoryTokenStore, get_token_store
from customer_service.schemas.token import TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/oauth", tags=["oauth"])

_basic = HTTPBasic(auto_error=False)

CLIENT_CREDENTIALS = "client_credentials"


@router.post("/token", response_model=TokenResponse)
async def issue_token(
    grant_type: str = Form(...),
    credentials: HTTPBasicCredentials | None = Depends(_basic),
    store: InMemoryTokenStore = Depends(get_token_store),
):
    """Exchange client credentials for an access token."""
    if credentials is None or not store.check_client(
        credentials.username, credentials.password,
    ):
        raise AuthenticationError("Bad client credentials")
    if grant_type != CLIENT_CREDENTIALS:
        raise UnsupportedGrantError(grant_type)
    token = store.issue(credentials.username)
    return TokenResponse(
        access_token=token.access_token,
        expires_in=token.expires_in(),
        scope=" ".join(token.scopes),
    )
