"""Application errors."""


class ApplicationError(Exception):
    """Failure of an application operation (search, storage, validation of input data)."""

    def __init__(self, message: str = "Application error"):
        self.message = message
        super().__init__(self.message)


class PermissionDeniedError(ApplicationError):
    """Acting user lacks the permission required for an operation."""

    def __init__(self, permission: str, auth_id: str | None):
        self.permission = permission
        self.auth_id = auth_id
        super().__init__(f"User {auth_id!r} lacks permission {permission}")


class InvalidFeaturedArticleError(ApplicationError):
    """Featured article override could not be created."""

    def __init__(self, message: str = "No records created, invalid journalKey or DOI specified."):
        super().__init__(message)
