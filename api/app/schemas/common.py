"""
Shared response schemas.
"""
from pydantic import BaseModel


class OkResponse(BaseModel):
    """Acknowledgement for writes that return no data."""
    ok: bool = True


class CountResponse(BaseModel):
    """Response carrying a single count."""
    count: int
