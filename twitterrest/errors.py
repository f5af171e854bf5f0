"""Error types reported by the Twitter REST API."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ErrorDetail:
    """A single message/code pair from an API error response."""

    message: str = ""
    code: int = 0


class APIError(Exception):
    """An error response from the Twitter API, holding one or more details."""

    def __init__(self, errors: Iterable[ErrorDetail] = (), response: Any = None) -> None:
        self.errors: list[ErrorDetail] = list(errors)
        self.response = response
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.errors:
            first = self.errors[0]
            return f"twitter: {first.code} {first.message}"
        return ""

    def __repr__(self) -> str:
        return f"APIError(errors={self.errors!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self) -> int:
        return hash(tuple(self.errors))

    def is_empty(self) -> bool:
        """Return True when no error detail is present."""
        return not self.errors

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "APIError":
        """Build an APIError from a decoded error response body."""
        raw = (data or {}).get("errors")
        details = []
        if isinstance(raw, list):
            for item in raw:
                if isinstance(item, Mapping):
                    details.append(
                        ErrorDetail(
                            message=item.get("message") or "",
                            code=item.get("code") or 0,
                        )
                    )
        return cls(details)


def relevant_error(
    http_error: BaseException | None, api_error: APIError | None
) -> BaseException | None:
    """Pick the error that matters: a transport error first, then a non-empty API error."""
    if http_error is not None:
        return http_error
    if api_error is None or api_error.is_empty():
        return None
    return api_error