"""Middleware that logs a bordered dump of every request/response exchange."""

from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from reqdump.config.log import get_logger
from reqdump.config.models import DumpConfig
from reqdump.observability.dumper import RequestDumper

logger = get_logger(__name__)


class RequestDumpMiddleware(BaseHTTPMiddleware):
    """Dump request, cookies, response and session once the handler has run.

    The dump is written in a ``finally`` block, so a handler that raises is still
    logged (with ``Response: not created``) before the exception propagates. A
    failure while dumping is logged and never replaces the handler's outcome.
    """

    def __init__(self, app, config: Optional[DumpConfig] = None):
        super().__init__(app)
        self.dumper = RequestDumper(config or DumpConfig())

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not self.dumper.enabled:
            return await call_next(request)

        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            try:
                self.dumper.log(self.dumper.dump(request, response))
            except Exception as e:
                logger.error(f'Failed to dump request {request.method} {request.url.path}: {e}', exc_info=True)
