"""Service-layer error definitions."""


class ServiceError(Exception):
    """Base class for service-layer errors."""


class UnknownPersistenceFailure(ServiceError):
    """Raised when a save fails without any validation error attached."""

    status_code = 500

    def __init__(self, resource: str) -> None:
        super().__init__("Failed to create the object for unknown reason.")
        self.resource = resource
