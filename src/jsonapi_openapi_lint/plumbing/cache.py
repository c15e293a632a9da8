"""Per-resolution pointer bookkeeping."""

from typing import Any

from jsonapi_openapi_lint.exceptions import CircularReferenceError


class ResolutionCache:
    """Tracks dispatched pointers and their resolved values.

    A pointer enters ``seen`` when its resolution starts and is never removed.
    Its value is stored in ``resolved`` once the resolution finishes, so a
    pointer that is seen but not resolved is still in progress.
    """

    def __init__(self, seen: set[str] | None = None, resolved: dict[str, Any] | None = None):
        self.seen = seen if seen is not None else set()
        self.resolved = resolved if resolved is not None else {}

    def __contains__(self, ref: str) -> bool:
        return ref in self.seen

    def enter(self, ref: str) -> None:
        self.seen.add(ref)

    def store(self, ref: str, value: Any) -> None:
        self.resolved[ref] = value

    def lookup(self, ref: str) -> Any:
        """Return the resolved value of an already seen pointer.

        Raises:
            CircularReferenceError: If the pointer is still being resolved
        """
        if ref not in self.resolved:
            still_resolving = ", ".join(sorted(self.in_progress))
            raise CircularReferenceError(f"Circular reference detected: {ref} (still resolving: {still_resolving})", pointer=ref)
        return self.resolved[ref]

    @property
    def in_progress(self) -> set[str]:
        return self.seen - self.resolved.keys()
