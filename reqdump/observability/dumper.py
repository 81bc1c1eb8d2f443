"""Render a whole request/response exchange as one block of dump tables."""

from __future__ import annotations

from io import StringIO
from typing import Optional, TextIO

from starlette.requests import Request
from starlette.responses import Response

from reqdump.config.log import get_logger
from reqdump.config.models import DumpConfig
from reqdump.rendering import write_object_table, write_string_table

from . import snapshot
from .snapshot import HeaderSanitizer

BEGIN_BANNER = '============================== Request dump begin ======================================'
END_BANNER = '============================== Request dump end ========================================'

log = get_logger(__name__)


class RequestDumper:
    """Builds the dump text for one request according to the section toggles."""

    def __init__(self, cfg: DumpConfig):
        self.cfg = cfg
        self.sanitizer = HeaderSanitizer(cfg.redact_headers)

    @property
    def enabled(self) -> bool:
        return self.cfg.enabled

    def _strings(self, writer: TextIO, title: str, values) -> None:
        write_string_table(writer, title, values, self.cfg.max_length)

    def _objects(self, writer: TextIO, title: str, values) -> None:
        write_object_table(writer, title, values, self.cfg.max_length)

    def dump_request(self, request: Request, writer: TextIO) -> None:
        """Properties, headers and parameters, then cookies when enabled, then attributes."""
        self._strings(writer, snapshot.request_title(request), snapshot.request_properties(request))
        self._strings(writer, 'Request Headers', snapshot.request_headers(request, self.sanitizer))
        self._strings(writer, 'Request Parameters', snapshot.request_parameters(request))
        if self.cfg.has_cookie:
            self.dump_cookies(request, writer)
        self._objects(writer, 'Request Attributes', snapshot.request_attributes(request))

    def dump_cookies(self, request: Request, writer: TextIO) -> None:
        for name, value in request.cookies.items():
            self._strings(writer, f'Cookie: {name}', snapshot.cookie_properties(name, value, self.sanitizer))

    def dump_response(self, response: Optional[Response], writer: TextIO) -> None:
        if response is None:
            writer.write('Response: not created\n')
            return
        self._strings(writer, snapshot.response_title(response), snapshot.response_properties(response))
        self._strings(writer, 'Response Headers', snapshot.response_headers(response, self.sanitizer))

    def dump_session(self, request: Request, writer: TextIO) -> None:
        attributes = snapshot.session_attributes(request)
        if attributes is None:
            writer.write('Session: not created\n')
            return
        self._objects(writer, 'Session Attributes', attributes)

    def dump(self, request: Request, response: Optional[Response] = None) -> str:
        """Return the full dump block, framed by begin/end banners."""
        writer = StringIO()
        writer.write('\n')
        writer.write(BEGIN_BANNER + '\n')

        if self.cfg.has_request:
            self.dump_request(request, writer)
        elif self.cfg.has_cookie:
            self.dump_cookies(request, writer)

        if self.cfg.has_response:
            self.dump_response(response, writer)

        if self.cfg.has_session:
            self.dump_session(request, writer)

        writer.write(END_BANNER + '\n')
        return writer.getvalue()

    def log(self, text: str) -> None:
        log.info(text)


__all__ = ['BEGIN_BANNER', 'END_BANNER', 'RequestDumper']
