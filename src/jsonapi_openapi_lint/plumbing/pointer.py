"""Parsing and walking of local $ref pointers."""

import re
from typing import Any

from jsonapi_openapi_lint.exceptions import InvalidReferencePathError, UnresolvableReferenceError

# Only local fragment references are supported: "#" or "#/a/b"
REF_PATTERN = re.compile(r"^#(?P<pointer>/.*)?$")

ARRAY_INDEX_PATTERN = re.compile(r"^(0|[1-9][0-9]*)$")


class PointerWalker:
    """Parses $ref values and follows them through a root document."""

    @staticmethod
    def parse_ref(ref: Any) -> str:
        """Extract the JSON pointer from a $ref value.

        Args:
            ref: Value of a "$ref" key

        Returns:
            JSON pointer without the leading "#" ("" for the whole document)

        Raises:
            InvalidReferencePathError: If the value is not a local fragment reference
        """
        if not isinstance(ref, str):
            raise InvalidReferencePathError(f"Invalid $ref format: {ref!r} (must be a string)", pointer=None)

        match = REF_PATTERN.match(ref)
        if not match:
            raise InvalidReferencePathError(f"Invalid $ref format: {ref} (only local '#/...' references are supported)", pointer=ref)

        return match.group("pointer") or ""

    @staticmethod
    def parse_json_pointer(pointer: str) -> list[str]:
        """Parse a JSON pointer into path components.

        Args:
            pointer: JSON pointer string (e.g., "/path/to/node")

        Returns:
            List of unescaped path components

        Raises:
            InvalidReferencePathError: If the pointer is invalid
        """
        if not pointer:
            return []

        if not pointer.startswith("/"):
            raise InvalidReferencePathError(f"Invalid JSON pointer: {pointer} (must start with '/')", pointer=pointer)

        # ~1 first, so that "~01" decodes to "~1"
        return [part.replace("~1", "/").replace("~0", "~") for part in pointer[1:].split("/")]

    @classmethod
    def walk(cls, root: Any, ref: str) -> Any:
        """Return the value a $ref points at inside the root document.

        Raises:
            InvalidReferencePathError: If an intermediate value is not a mapping or sequence
            UnresolvableReferenceError: If a segment is absent
        """
        current = root
        for part in cls.parse_json_pointer(cls.parse_ref(ref)):
            match current:
                case dict():
                    key = cls.mapping_key(current, part)
                    if key not in current:
                        raise UnresolvableReferenceError(f"Reference not found: {ref}", pointer=ref)
                    current = current[key]
                case list():
                    current = current[cls._array_index(current, part, ref)]
                case _:
                    raise InvalidReferencePathError(f"Invalid reference path: {ref} ('{part}' cannot be looked up in a {type(current).__name__})", pointer=ref)
        return current

    @staticmethod
    def mapping_key(mapping: dict[Any, Any], part: str) -> Any:
        """Return the key of ``mapping`` a pointer segment names.

        YAML loads unquoted keys such as response codes (``404:``) as ints,
        so a decimal segment falls back to the int key when the string is absent.
        """
        if part not in mapping and ARRAY_INDEX_PATTERN.match(part) and int(part) in mapping:
            return int(part)
        return part

    @staticmethod
    def _array_index(items: list[Any], part: str, ref: str) -> int:
        if len(part) > 1 and part.startswith("0") and part.isdigit():
            raise InvalidReferencePathError(f"Invalid reference path: {ref} (array index '{part}' has leading zeros)", pointer=ref)
        if not ARRAY_INDEX_PATTERN.match(part) or int(part) >= len(items):
            raise UnresolvableReferenceError(f"Reference not found: {ref}", pointer=ref)
        return int(part)
