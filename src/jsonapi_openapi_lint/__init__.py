from .exceptions import (
    CircularReferenceError,
    DocumentLoadError,
    InvalidReferencePathError,
    MergeConflictError,
    ReferenceResolverError,
    UnresolvableReferenceError,
)
from .loader import dereference_document, dereference_file, load_document
from .resolver import ReferenceResolver, resolve_ref
from .settings import ResolverSettings

__all__ = [
    "resolve_ref",
    "ReferenceResolver",
    "ResolverSettings",
    "load_document",
    "dereference_document",
    "dereference_file",
    "ReferenceResolverError",
    "InvalidReferencePathError",
    "UnresolvableReferenceError",
    "CircularReferenceError",
    "MergeConflictError",
    "DocumentLoadError",
]
