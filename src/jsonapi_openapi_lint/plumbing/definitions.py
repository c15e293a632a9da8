"""Removal of inlined shared definitions from a root document."""

import logging
from collections.abc import Iterable
from typing import Any

from jsonapi_openapi_lint.plumbing.pointer import PointerWalker

logger = logging.getLogger(__name__)

DEFAULT_DEFINITIONS_PREFIX = "#/components/"


def is_definition_ref(ref: str, prefix: str = DEFAULT_DEFINITIONS_PREFIX) -> bool:
    return ref.startswith(prefix)


def prune_definition(root: Any, ref: str) -> bool:
    """Delete the leaf a pointer names from the root document.

    Args:
        root: Root document to modify in place
        ref: Local $ref pointing at the leaf

    Returns:
        True if a key was deleted, False if the leaf was already gone
    """
    parts = PointerWalker.parse_json_pointer(PointerWalker.parse_ref(ref))
    if not parts:
        return False

    parent = root
    for part in parts[:-1]:
        if not isinstance(parent, dict) or part not in parent:
            logger.debug(f"Definition {ref} already removed")
            return False
        parent = parent[part]

    # only mapping members are removed; deleting list items would shift siblings
    if not isinstance(parent, dict) or PointerWalker.mapping_key(parent, parts[-1]) not in parent:
        logger.debug(f"Definition {ref} not removable")
        return False

    del parent[PointerWalker.mapping_key(parent, parts[-1])]
    logger.debug(f"Pruned definition {ref}")
    return True


def prune_definitions(root: Any, refs: Iterable[str], prefix: str = DEFAULT_DEFINITIONS_PREFIX) -> list[str]:
    """Delete every shared definition named by ``refs`` from the root document.

    Pointers outside the shared-definitions prefix are ignored.

    Returns:
        The pointers whose leaves were deleted, in order
    """
    pruned = []
    for ref in dict.fromkeys(refs):
        if is_definition_ref(ref, prefix) and prune_definition(root, ref):
            pruned.append(ref)
    return pruned
