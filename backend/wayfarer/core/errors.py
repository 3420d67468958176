"""
Domain exceptions raised by the service layer.

Routes let these propagate; the handlers registered in ``wayfarer.main``
translate them into HTTP responses.
"""


class WayfarerError(Exception):
    """Base exception for all Wayfarer service errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(WayfarerError):
    """A referenced trip, activity or expense does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class InvalidOrderError(WayfarerError):
    """Requested activity position cannot be applied."""

    status_code = 400
