"""Exception classes for jsonapi-openapi-lint."""


class ReferenceResolverError(Exception):
    """Base exception for all reference resolution errors."""

    def __init__(self, message: str, pointer: str | None = None):
        super().__init__(message)
        self.message = message
        self.pointer = pointer


class InvalidReferencePathError(ReferenceResolverError):
    """A $ref is malformed or walks through a value that cannot be traversed."""


class UnresolvableReferenceError(ReferenceResolverError):
    """A $ref points at a location absent from the root document."""


class CircularReferenceError(ReferenceResolverError):
    """A $ref cycle closed before its target finished resolving."""


class MergeConflictError(ReferenceResolverError):
    """Sibling properties of a $ref conflict with the referenced value."""


class DocumentLoadError(ReferenceResolverError):
    """A document could not be read or parsed."""
