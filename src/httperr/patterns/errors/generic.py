import copy
from dataclasses import dataclass, field
from typing import Any

import zodchy


@dataclass(frozen=True, kw_only=True, slots=True)
class Error(zodchy.codex.cqea.Error):
    code: str = "HTTP-09069"
    message: str = "Internal Server Error"
    http_status: int = 500
    context: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "http_status": self.http_status,
            "context": copy.deepcopy(self.context),
        }
