"""Reference resolution for OpenAPI documents."""

import copy
import logging
from typing import Any

from deepmerge import always_merger

from jsonapi_openapi_lint.exceptions import MergeConflictError, ReferenceResolverError
from jsonapi_openapi_lint.plumbing.cache import ResolutionCache
from jsonapi_openapi_lint.plumbing.definitions import is_definition_ref, prune_definition, prune_definitions
from jsonapi_openapi_lint.plumbing.pointer import PointerWalker
from jsonapi_openapi_lint.settings import ResolverSettings

logger = logging.getLogger(__name__)

REF_KEY = "$ref"


class ReferenceResolver:
    """Resolves local $ref pointers against a fixed root document.

    One instance covers one top-level resolution: the pointer cache and the
    list of consumed shared definitions live on the instance.
    """

    def __init__(
        self,
        root: Any,
        *,
        settings: ResolverSettings | None = None,
        seen: set[str] | None = None,
        cache: dict[str, Any] | None = None,
    ):
        self.root = root
        self.settings = settings or ResolverSettings()
        self.walker = PointerWalker()
        self.cache = ResolutionCache(seen, cache)
        self._consumed: dict[str, None] = {}

    @property
    def consumed(self) -> list[str]:
        """Shared-definition pointers inlined so far, in resolution order."""
        return list(self._consumed)

    def resolve(self, value: Any) -> Any:
        """Recursively replace every $ref in a value.

        Args:
            value: Mapping, list or scalar taken from (or matching) the root document

        Returns:
            A new value of the same shape with every reference node replaced

        Raises:
            InvalidReferencePathError: If a $ref is malformed or walks through a scalar
            UnresolvableReferenceError: If a $ref points at an absent location
            CircularReferenceError: If a $ref cycle closes on a pointer still being resolved
        """
        match value:
            case list():
                return [self.resolve(item) for item in value]
            case dict() if REF_KEY in value:
                return self._resolve_single_ref(value)
            case dict():
                return self._resolve_mapping(value)
            case _:
                return value

    def prune(self) -> list[str]:
        """Delete consumed shared definitions from the root document.

        Only needed when ``settings.prune_definitions`` is off; otherwise the
        definitions are already gone and nothing is deleted.

        Returns:
            The pointers whose definitions were deleted by this call
        """
        return prune_definitions(self.root, self._consumed, self.settings.definitions_prefix)

    def _resolve_mapping(self, data: dict[str, Any]) -> dict[str, Any]:
        resolved = {}
        for key in list(data):
            # pruning may delete members of a mapping while it is being walked
            if key in data:
                resolved[key] = self.resolve(data[key])
        return resolved

    def _resolve_single_ref(self, data: dict[str, Any]) -> Any:
        """Resolve a single reference node.

        Args:
            data: Dictionary containing $ref

        Returns:
            Resolved target, with sibling properties merged when enabled
        """
        ref = data[REF_KEY]
        self.walker.parse_ref(ref)

        referenced_data = self._resolve_pointer(ref)
        self._consume(ref)

        return self._merge_with_siblings(data, referenced_data)

    def _resolve_pointer(self, ref: str) -> Any:
        if ref in self.cache:
            logger.debug(f"Reusing resolution of {ref}")
            return self.cache.lookup(ref)

        self.cache.enter(ref)
        target = self.walker.walk(self.root, ref)
        logger.debug(f"Resolving {ref}")

        resolved = self.resolve(target)
        self.cache.store(ref, resolved)
        return resolved

    def _consume(self, ref: str) -> None:
        if ref in self._consumed or not is_definition_ref(ref, self.settings.definitions_prefix):
            return

        self._consumed[ref] = None
        if self.settings.prune_definitions:
            prune_definition(self.root, ref)

    def _merge_with_siblings(self, ref_dict: dict[str, Any], referenced_data: Any) -> Any:
        """Merge referenced data with sibling properties.

        Args:
            ref_dict: Dictionary containing $ref and siblings
            referenced_data: The resolved reference data

        Returns:
            Merged data, or the referenced data alone when merging is disabled
        """
        siblings = {k: v for k, v in ref_dict.items() if k != REF_KEY}

        if not siblings:
            return referenced_data

        if not self.settings.merge_siblings:
            logger.debug(f"Ignoring properties next to $ref {ref_dict[REF_KEY]}: {', '.join(siblings)}")
            return referenced_data

        if not isinstance(referenced_data, dict):
            raise ReferenceResolverError("Cannot merge non-dict reference with sibling properties", pointer=ref_dict[REF_KEY])

        resolved_siblings = self._resolve_mapping(siblings)

        self._detect_merge_conflicts(referenced_data, resolved_siblings, ref_dict[REF_KEY])

        # cached values are shared between every use of a pointer, merge into a copy
        return always_merger.merge(copy.deepcopy(referenced_data), resolved_siblings)

    def _detect_merge_conflicts(self, base: Any, overlay: Any, ref: str, path: str = "") -> None:
        """Detect conflicts during merge.

        Raises:
            MergeConflictError: If a scalar in the overlay differs from the base
        """
        if base is None or overlay is None:
            return

        if isinstance(base, dict) and isinstance(overlay, dict):
            for key, value in overlay.items():
                if key in base:
                    new_path = f"{path}.{key}" if path else key
                    self._detect_merge_conflicts(base[key], value, ref, new_path)
            return

        if isinstance(base, list) and isinstance(overlay, list):
            return

        if base == overlay:
            return

        raise MergeConflictError(f"Merge conflict at {path if path else 'root'} while merging into {ref}", pointer=ref)


def resolve_ref(
    value: Any,
    root: Any,
    seen: set[str] | None = None,
    cache: dict[str, Any] | None = None,
    *,
    settings: ResolverSettings | None = None,
) -> Any:
    """Resolve every $ref in ``value`` against ``root``.

    Shared definitions (``#/components/...`` by default) are deleted from
    ``root`` as they are inlined, so resolving the same root twice is not
    idempotent. Pass copies of fixture documents, or use
    ``loader.dereference_document``. Deletions are not rolled back when
    resolution fails, so after an error ``root`` may already be missing
    some definitions.

    Args:
        value: Value to resolve, often ``root`` itself
        root: Root document all pointers resolve against
        seen: Pointers already dispatched, shared with the caller when given
        cache: Pointer to resolved value mapping, shared with the caller when given
        settings: Resolution options, read from the environment when omitted

    Returns:
        The resolved value
    """
    return ReferenceResolver(root, settings=settings, seen=seen, cache=cache).resolve(value)
