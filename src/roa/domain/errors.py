"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class RoaError(Exception):
    """Base class for domain-layer errors."""


class ResourceNotFoundError(RoaError):
    """Raised when a resource record cannot be found in storage."""

    status_code = 404

    def __init__(self, resource: str, record_id: object) -> None:
        super().__init__(f"{resource} ({record_id}) not found.")
        self.resource = resource
        self.record_id = record_id


# ============================================================================
#                           Link resolution errors
# ============================================================================


class LinkError(RoaError):
    """Base class for errors raised while resolving resource links."""


class UnresolvedLinkError(LinkError):
    """Raised when a self link is requested before the resource link was resolved.

    This is a sequencing error in the calling code: the post-load step (or a
    forced resolution) must run before links are read.
    """

    def __init__(self, resource: str) -> None:
        super().__init__(
            f"Resource link of '{resource}' has not been resolved; "
            "resolve the slug before requesting its self link."
        )
        self.resource = resource


class ParentNotFoundError(LinkError):
    """Raised when a forced parent lookup finds no parent record."""

    status_code = 404

    def __init__(self, resource: str, relation: str) -> None:
        super().__init__(f"Parent '{relation}' of '{resource}' not found.")
        self.resource = resource
        self.relation = relation


class ParentCycleError(LinkError):
    """Raised when following parents leads back to a record already being loaded."""

    status_code = 409

    def __init__(self, resource: str, record_id: object) -> None:
        super().__init__(f"Parent chain of {resource} ({record_id}) loops back on itself.")
        self.resource = resource
        self.record_id = record_id


# ============================================================================
#                           Access control errors
# ============================================================================


class AuthorizationError(RoaError):
    """Raised by access predicates to deny access to a resource.

    Attributes:
        status_code: HTTP status the transport boundary should answer with
            (403 by default, 401 when the caller is not authenticated).
    """

    def __init__(
        self, message: str = "Access denied.", status_code: int = 403
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


# ============================================================================
#                           Registry errors
# ============================================================================


class RegistryError(RoaError):
    """Base class for resource registry errors."""


class UnknownResourceTypeError(RegistryError, LookupError):
    """Raised when a resource type name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown resource type '{name}'.")
        self.name = name


class DuplicateResourceTypeError(RegistryError):
    """Raised when a resource type name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Resource type '{name}' is already registered.")
        self.name = name


class UnknownRelationError(RegistryError):
    """Raised when a resource type references a relation it does not declare."""

    def __init__(self, resource: str, relation: str) -> None:
        super().__init__(f"Resource type '{resource}' has no relation '{relation}'.")
        self.resource = resource
        self.relation = relation
