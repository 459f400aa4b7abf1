"""Domain layer errors.

Each error maps to one structured result at the API boundary:

- ValidationError       -> validation-error
- InvalidVoteValueError -> invalid-value
- AccessDeniedError     -> access-denied
- NotAdminError         -> not-admin
- NotFoundError         -> not-found
- ConflictError         -> conflict
"""


class DomainError(Exception):
    """Base domain error."""

    kind = "domain-error"


class ValidationError(DomainError):
    """Domain validation error."""

    kind = "validation-error"


class InvalidVoteValueError(ValidationError):
    """Raised when a vote value is not +1 or -1."""

    kind = "invalid-value"

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Vote value must be 1 or -1, got {value!r}")


class AccessDeniedError(DomainError):
    """Raised when an authenticated principal is not entitled to a question."""

    kind = "access-denied"

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"User {user_id} does not have access to {resource} {resource_id}")


class NotAdminError(AccessDeniedError):
    """Raised when a non-admin attempts an admin-only operation."""

    kind = "not-admin"

    def __init__(self, action: str, user_id: str):
        self.action = action
        DomainError.__init__(self, f"Admin access required to {action} (user {user_id})")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found (or is hidden)."""

    kind = "not-found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a concurrent write could not be resolved atomically.

    Safe to retry once.
    """

    kind = "conflict"
