"""Typed errors raised by the repository and mapped to HTTP responses."""


class SkillServiceError(Exception):
    """Base error for Skill Service.

    Subclasses set ``status_code`` and ``code``; the application exception
    handler renders them as an error envelope.
    """

    status_code: int = 500
    code: str = "internal_error"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class SkillNotFoundError(SkillServiceError):
    """No skill row matches the requested key."""

    status_code = 404
    code = "not_found"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Skill '{key}' not found")


class SkillConflictError(SkillServiceError):
    """A skill with the same key already exists."""

    status_code = 409
    code = "conflict"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Skill '{key}' already exists")


class InvalidInputError(SkillServiceError):
    """Request body is missing required fields or has wrong types."""

    status_code = 400
    code = "invalid_input"
    message = "Invalid request body"


class InvalidFieldError(SkillServiceError):
    """Patch action names a field that is not mutable."""

    status_code = 400
    code = "invalid_field"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' cannot be patched")


class StorageUnavailableError(SkillServiceError):
    """The database could not be reached."""

    status_code = 503
    code = "storage_unavailable"
    message = "Storage is unavailable"
