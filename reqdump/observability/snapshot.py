"""Collect ordered name/value snapshots of requests, responses and sessions.

Every collector returns a plain ``dict`` whose insertion order is the row order
of the rendered table. Nothing here raises on missing data: absent values are
reported as ``None`` and become ``(null)`` when rendered.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from starlette.requests import HTTPConnection, Request
from starlette.responses import Response

from reqdump.rendering.models import display_text_of

REDACTED = '***REDACTED***'


class HeaderSanitizer:
    """Redact sensitive header values before they reach a log line."""

    def __init__(self, redact_headers: Optional[List[str]] = None):
        base_sensitive = {'authorization', 'cookie', 'set-cookie'}
        additional = {value.lower() for value in (redact_headers or [])}
        self.sensitive_headers = base_sensitive | additional

    def is_sensitive(self, name: str) -> bool:
        return name.lower() in self.sensitive_headers

    def sanitize(self, headers: Mapping[str, Optional[str]]) -> Dict[str, Optional[str]]:
        return {name: (REDACTED if self.is_sensitive(name) else value) for name, value in headers.items()}


def _joined(values: List[str]) -> Optional[str]:
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return display_text_of(values)


def _address(pair) -> Optional[str]:
    if not pair:
        return None
    host, port = pair[0], pair[1]
    return f'{host}:{port}'


def _charset(content_type: Optional[str]) -> Optional[str]:
    if not content_type:
        return None
    for param in content_type.split(';')[1:]:
        key, _, value = param.strip().partition('=')
        if key.strip().lower() == 'charset' and value:
            return value.strip().strip('"')
    return None


def _locales(accept_language: Optional[str]) -> List[str]:
    """Return Accept-Language tags ordered by quality, as sent for equal weights."""
    if not accept_language:
        return []
    weighted = []
    for position, part in enumerate(accept_language.split(',')):
        tag, _, params = part.strip().partition(';')
        tag = tag.strip()
        if not tag:
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith('q='):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        weighted.append((-quality, position, tag))
    return [tag for _, _, tag in sorted(weighted)]


def _multi_map(names: Iterable[str], getlist) -> Dict[str, Optional[str]]:
    return {name: _joined(getlist(name)) for name in sorted(set(names))}


def request_title(request: Request) -> str:
    return f'Request: {request.method} {request.url}'


def request_properties(request: Request) -> Dict[str, Optional[str]]:
    """Transport-level facts about a request."""
    content_type = request.headers.get('content-type')
    locales = _locales(request.headers.get('accept-language'))
    http_version = request.scope.get('http_version')
    scheme = request.scope.get('scheme', 'http')
    query_string = request.scope.get('query_string', b'').decode('latin-1')
    return {
        'Local': _address(request.scope.get('server')),
        'Remote': _address(request.client),
        'Scheme': scheme,
        'Protocol': f'HTTP/{http_version}' if http_version else None,
        'Method': request.method,
        'RequestURI': request.url.path,
        'RootPath': request.scope.get('root_path') or None,
        'QueryString': query_string or None,
        'ContentType': content_type,
        'ContentLength': request.headers.get('content-length', '-1'),
        'CharacterEncoding': _charset(content_type),
        'Secure': 'true' if scheme in ('https', 'wss') else 'false',
        'Locale': locales[0] if locales else None,
        'Locales': display_text_of(locales),
    }


def request_headers(request: Request, sanitizer: Optional[HeaderSanitizer] = None) -> Dict[str, Optional[str]]:
    headers = _multi_map(request.headers.keys(), request.headers.getlist)
    return sanitizer.sanitize(headers) if sanitizer else headers


def request_parameters(request: Request) -> Dict[str, Optional[str]]:
    return _multi_map(request.query_params.keys(), request.query_params.getlist)


def request_attributes(request: Request) -> Dict[str, Any]:
    """Values stored on ``request.state`` by middlewares and handlers."""
    state = request.scope.get('state') or {}
    return {name: state[name] for name in sorted(state)}


def cookie_properties(name: str, value: Optional[str], sanitizer: Optional[HeaderSanitizer] = None) -> Dict[str, Optional[str]]:
    """Cookie name and value.

    ``cookie`` is always in the sanitizer's sensitive set, so with a sanitizer the
    value is always redacted whatever ``redact_headers`` holds.
    """
    if sanitizer and sanitizer.is_sensitive('cookie'):
        value = REDACTED
    return {'Name': name, 'Value': value}


def response_title(response: Response) -> str:
    return f'Response: {response.status_code}'


def response_properties(response: Response) -> Dict[str, Optional[str]]:
    content_type = response.headers.get('content-type')
    return {
        'Status': str(response.status_code),
        'ContentType': content_type,
        'CharacterEncoding': _charset(content_type) or getattr(response, 'charset', None),
        'MediaType': getattr(response, 'media_type', None),
    }


def response_headers(response: Response, sanitizer: Optional[HeaderSanitizer] = None) -> Dict[str, Optional[str]]:
    headers = _multi_map(response.headers.keys(), response.headers.getlist)
    return sanitizer.sanitize(headers) if sanitizer else headers


def session_attributes(connection: HTTPConnection) -> Optional[Dict[str, Any]]:
    """Session contents, or ``None`` when no session middleware populated the scope."""
    session = connection.scope.get('session')
    if session is None:
        return None
    return {name: session[name] for name in sorted(session)}


__all__ = [
    'HeaderSanitizer',
    'REDACTED',
    'cookie_properties',
    'request_attributes',
    'request_headers',
    'request_parameters',
    'request_properties',
    'request_title',
    'response_headers',
    'response_properties',
    'response_title',
    'session_attributes',
]
