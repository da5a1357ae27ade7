"""Access control gate

Every route depends on ``require_access(operation)``. The dependency
resolves the caller from a bearer token (or the ``token`` cookie), rejects
missing or invalid credentials and inactive accounts with 401, and roles
outside ``ACCESS_POLICY[operation]`` with 403, before any use case runs.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel.ext.asyncio.session import AsyncSession
from libs.result import Error
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.api.error import ClientError
from src.api.policy import ACCESS_POLICY, is_allowed
from src.app.services.token_service import InvalidTokenError, TokenService
from src.depends import get_session, get_token_service
from src.domain.user import UserRole

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "token"

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller of the current request"""

    id: str
    email: str
    role: UserRole
    main_owner_id: Optional[str] = None


def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(TOKEN_COOKIE)


def require_access(operation: str):
    """
    Build the gate dependency for one operation

    Raises:
        KeyError: If the operation is missing from ACCESS_POLICY
    """
    if operation not in ACCESS_POLICY:
        raise KeyError(f"No access policy for operation {operation!r}")

    async def gate(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
        session: AsyncSession = Depends(get_session),
        token_service: TokenService = Depends(get_token_service),
    ) -> CurrentUser:
        token = _extract_token(request, credentials)
        if not token:
            raise ClientError(Error(code="AUTHENTICATION_REQUIRED", message="Authentication required"))

        try:
            claims = token_service.decode(token)
        except InvalidTokenError as e:
            logger.info(f"Rejected token for {operation}: {e}")
            raise ClientError(Error(code="INVALID_TOKEN", message="Invalid or expired token"))

        user = await SqlAlchemyUserRepository(session).get_by_id(claims.user_id)
        if not user or not user.is_active:
            raise ClientError(Error(code="ACCOUNT_INACTIVE", message="User not found or inactive"))

        role = UserRole(user.role)
        if not is_allowed(operation, role):
            raise ClientError(Error(code="FORBIDDEN", message="Insufficient permissions"))

        return CurrentUser(
            id=user.id,
            email=user.email,
            role=role,
            main_owner_id=user.main_owner_id,
        )

    return gate
