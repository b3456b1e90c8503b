"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed or missing input)."""

    pass


class SelfReferenceError(ValidationError):
    """Raised when a user targets themself (follow, collaborate)."""

    def __init__(self, message: str = "You cannot follow yourself"):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when an operation conflicts with current state."""

    pass


class AlreadyFollowingError(ConflictError):
    """Raised when following a user that is already followed."""

    def __init__(self, user_id: str, target_id: str):
        self.user_id = user_id
        self.target_id = target_id
        super().__init__("Already following")


class AlreadyLikedError(ConflictError):
    """Raised when liking a project twice."""

    def __init__(self, user_id: str, project_id: str):
        self.user_id = user_id
        self.project_id = project_id
        super().__init__("You have already liked this project")


class AuthenticationError(DomainError):
    """Raised when a bearer credential is missing, invalid or expired."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they are not permitted to change."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
