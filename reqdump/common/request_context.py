"""Request context utilities for per-request state management."""

from __future__ import annotations

import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class RequestContext:
    """Structured context data attached to each inbound request."""

    correlation_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    path: Optional[str] = None
    method: Optional[str] = None

    # Arbitrary extras for logging annotations
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self, include_none: bool = False) -> Dict[str, Any]:
        """Serialize context for structured logging."""
        result: Dict[str, Any] = {}
        for key, value in {'correlation_id': self.correlation_id, 'path': self.path, 'method': self.method}.items():
            if include_none or value is not None:
                result[key] = value
        result.update(self.extra)
        return result


request_context_var: ContextVar[Optional[RequestContext]] = ContextVar('request_context', default=None)


def get_request_context() -> RequestContext:
    """Return the active request context, creating a detached one outside requests."""
    ctx = request_context_var.get()
    if ctx is None:
        ctx = RequestContext()
        request_context_var.set(ctx)
    return ctx


def set_request_context(context: RequestContext) -> None:
    request_context_var.set(context)


def get_correlation_id() -> str:
    return get_request_context().correlation_id


__all__ = [
    'RequestContext',
    'get_correlation_id',
    'get_request_context',
    'request_context_var',
    'set_request_context',
]
