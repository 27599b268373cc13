"""
Catalog error taxonomy.

Store operations raise these synchronously. The API layer converts them
to HTTP responses using the carried status code; the message is safe to
show to the caller.
"""


class CatalogError(Exception):
    """
    Base class for explainable catalog failures.

    Subclass this for errors where the store knows exactly what went wrong.
    """

    status_code: int = 500

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ValidationError(CatalogError):
    """Missing or malformed input on a create operation."""

    status_code = 400


class NotFoundError(CatalogError):
    """A referenced category does not exist."""

    status_code = 404

    def __init__(self, resource: str, resource_id: int):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} with ID {resource_id} not found")


class UnexpectedError(CatalogError):
    """Any other store failure. Never shown verbatim to callers."""

    status_code = 500
