"""Response envelope shared by every endpoint"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """``{success, data, error, code}``; errors are rendered by the API error handler"""

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    code: Optional[str] = None


def ok(data) -> Envelope:
    return Envelope(success=True, data=data)
