"""Token Service Interface

Verifies the access credentials presented to the API. Issuing credentials
belongs to the external login flow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from src.domain.user import UserRole


class InvalidTokenError(Exception):
    """Credential is malformed, badly signed or expired"""


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    role: UserRole


class TokenService(ABC):

    @abstractmethod
    def decode(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims

        Raises:
            InvalidTokenError: If the token cannot be trusted
        """
        pass

    @abstractmethod
    def issue(self, user_id: str, role: UserRole) -> str:
        pass
