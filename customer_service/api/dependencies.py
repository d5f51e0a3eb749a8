"""API Dependencies: repository and bearer-token guards injected into routes.

Invariants:
    - Routes never build infrastructure objects themselves
    - require_bearer_token raises AuthenticationError for missing, unknown
      or expired tokens; it never returns None
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from customer_service.core.errors import AuthenticationError
from customer_service.core.repository_protocols import CustomerRepository
from customer_service.infrastructure.customer_repository import SqlAlchemyCustomerRepository
from customer_service.infrastructure.database import DatabaseSessionManager, get_db_manager
from customer_service.infrastructure.token_store import (
    InMemoryTokenStore, IssuedToken, get_token_store,
)

_bearer = HTTPBearer(auto_error=False)


def get_customer_repository(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> CustomerRepository:
    return SqlAlchemyCustomerRepository(db)


def require_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    store: InMemoryTokenStore = Depends(get_token_store),
) -> IssuedToken:
    if credentials is None:
        raise AuthenticationError("Full authentication is required to access this resource")
    token = store.validate(credentials.credentials)
    if token is None:
        raise AuthenticationError("Invalid or expired access token")
    return token
