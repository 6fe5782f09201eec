"""HTTP helpers shared across the Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import Response, jsonify

NO_CACHE_HEADERS: Mapping[str, str] = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@dataclass(frozen=True)
class ProblemResponse:
    """Machine-readable error payload returned by the API blueprints."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the JSON body, merging any extra fields after ``message``."""

        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        """Return a Flask ``(body, status)`` tuple for this problem."""

        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Build a :class:`ProblemResponse`; keyword extras are merged into the payload."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


def disable_caching(response: Response) -> Response:
    """Mark ``response`` as uncacheable so the UI always sees fresh files."""

    response.headers.update(NO_CACHE_HEADERS)
    return response


__all__ = ["NO_CACHE_HEADERS", "ProblemResponse", "disable_caching", "problem_response"]
