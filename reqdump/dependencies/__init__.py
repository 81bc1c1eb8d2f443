"""Common dependency injection functions for FastAPI."""

from fastapi import Request

from reqdump.config import ConfigurationService


def get_config_service_dependency(request: Request) -> ConfigurationService:
    """Get configuration service from app state for dependency injection."""
    return request.app.state.config_service
