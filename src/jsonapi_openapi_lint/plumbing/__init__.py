"""Building blocks for $ref resolution."""

from jsonapi_openapi_lint.plumbing.cache import ResolutionCache
from jsonapi_openapi_lint.plumbing.definitions import prune_definitions
from jsonapi_openapi_lint.plumbing.pointer import PointerWalker

__all__ = ["PointerWalker", "ResolutionCache", "prune_definitions"]
