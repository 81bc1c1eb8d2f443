"""Domain exceptions for request dumping."""

from typing import Optional


class ReqDumpException(Exception):
    """Base exception for request dump operations."""

    def __init__(self, message: str, correlation_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class RenderContractError(ReqDumpException, ValueError):
    """A table was built with arguments the renderer cannot lay out."""

    pass
