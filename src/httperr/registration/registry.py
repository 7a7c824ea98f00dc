import collections.abc
import logging
from types import MappingProxyType

from httperr.definitions.errors import DuplicateErrorCodeError, DuplicateStatusError

from .entities import ErrorKind
from .kinds import DEFAULT_KINDS

logger = logging.getLogger(__name__)


class StatusRegistry:
    """
    Read-only table of HTTP status to ErrorKind associations.

    The table is filled once at construction and never changes afterwards, so a
    registry can be shared between threads without locking. Use `extend` to
    derive a registry with additional kinds.
    """

    def __init__(self, kinds: collections.abc.Iterable[ErrorKind] = ()) -> None:
        registry: dict[int, ErrorKind] = {}
        codes: set[str] = set()
        for kind in kinds:
            if kind.http_status in registry:
                raise DuplicateStatusError(kind.http_status)
            if kind.error_code in codes:
                raise DuplicateErrorCodeError(kind.error_code)
            registry[kind.http_status] = kind
            codes.add(kind.error_code)
        self._registry = MappingProxyType(dict(sorted(registry.items())))
        logger.debug("Built status registry with %d kinds", len(self._registry))

    def lookup(self, status: int) -> ErrorKind | None:
        return self._registry.get(status)

    def extend(self, *kinds: ErrorKind) -> "StatusRegistry":
        return StatusRegistry((*self, *kinds))

    def statuses(self) -> tuple[int, ...]:
        return tuple(self._registry)

    def __contains__(self, status: object) -> bool:
        return status in self._registry

    def __iter__(self) -> collections.abc.Generator[ErrorKind, None, None]:
        yield from self._registry.values()

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} kinds)"


DEFAULT_REGISTRY = StatusRegistry(DEFAULT_KINDS)
