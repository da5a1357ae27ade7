"""PyJWT Token Service Implementation

HS256 bearer tokens carrying the user id (``sub``) and role.
"""

from datetime import datetime, timedelta, timezone
import jwt
from src.app.services.token_service import InvalidTokenError, TokenClaims, TokenService
from src.domain.user import UserRole


class JwtTokenService(TokenService):
    """
    PyJWT implementation of TokenService

    Tokens are signed with a shared secret; ``exp`` is always required.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_seconds: int = 3600):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_seconds = expires_seconds

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
            return TokenClaims(user_id=str(payload["sub"]), role=UserRole(payload["role"]))
        except (jwt.PyJWTError, KeyError, ValueError) as e:
            raise InvalidTokenError(str(e)) from e

    def issue(self, user_id: str, role: UserRole) -> str:
        payload = {
            "sub": user_id,
            "role": UserRole(role).value,
            "exp": datetime.now(timezone.utc) + timedelta(seconds=self.expires_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)
