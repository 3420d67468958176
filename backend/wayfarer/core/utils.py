"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional
from decimal import Decimal


def money_to_float(value: Optional[Decimal]) -> Optional[float]:
    """Convert a fixed-point amount read from the database to a float."""
    if value is None:
        return None
    return float(value)


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response body."""
    response = {"detail": message}
    if details:
        response["details"] = details
    return response
