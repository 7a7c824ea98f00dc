from .entities import ErrorKind
from .kinds import DEFAULT_KINDS, FALLBACK_KIND
from .registry import DEFAULT_REGISTRY, StatusRegistry

__all__ = ["ErrorKind", "StatusRegistry", "DEFAULT_KINDS", "DEFAULT_REGISTRY", "FALLBACK_KIND"]
