"""
Pydantic schemas shared across routes.
"""
from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Outcome of a mutation that returns no entity."""
    success: bool
