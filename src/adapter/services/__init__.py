from .unit_of_work import SqlAlchemyUnitOfWork
from .jwt_token_service import JwtTokenService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "JwtTokenService",
]
