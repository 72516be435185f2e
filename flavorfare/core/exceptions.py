"""
Domain errors raised by the service layer.

The HTTP layer maps these to responses in ``flavorfare.main``.
"""


class FlavorFareError(Exception):
    """Base class for domain errors."""


class ResourceNotFoundError(FlavorFareError):
    """Raised when an operation targets an id that is not stored."""

    def __init__(self, resource: str, resource_id: int):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} with id {resource_id} not found")
