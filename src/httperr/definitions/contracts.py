from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, TypeAlias

StatusLike: TypeAlias = int | HTTPStatus

ContextValue: TypeAlias = str | int | float | bool | None | list[Any] | dict[str, Any]
ContextContract: TypeAlias = Mapping[str, ContextValue]
