"""Dump configuration and table preview endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from reqdump.common.exceptions import RenderContractError
from reqdump.config import ConfigurationService
from reqdump.config.log import get_logger
from reqdump.dependencies import get_config_service_dependency
from reqdump.rendering import format_object_table, format_string_table

router = APIRouter(prefix='/api', tags=['Dump'])
logger = get_logger(__name__)


class TablePreviewRequest(BaseModel):
    """Request model for the table preview endpoint."""

    title: str
    values: Dict[str, Any] = Field(default_factory=dict)
    chunk_limit: Optional[int] = None
    typed: bool = Field(default=False, description='Render values with their type labels')


@router.get('/dump/config')
async def get_dump_config(config_service: ConfigurationService = Depends(get_config_service_dependency)) -> Dict[str, Any]:
    """Return the active request dump settings."""
    return config_service.get_config().dump.model_dump()


@router.post('/dump/preview', response_class=PlainTextResponse)
async def preview_table(body: TablePreviewRequest, config_service: ConfigurationService = Depends(get_config_service_dependency)) -> str:
    """Render ``values`` the way the request dump would and return the box as text."""
    chunk_limit = body.chunk_limit if body.chunk_limit is not None else config_service.get_config().dump.max_length
    try:
        if body.typed:
            return format_object_table(body.title, body.values, chunk_limit)
        values = {name: None if value is None else str(value) for name, value in body.values.items()}
        return format_string_table(body.title, values, chunk_limit)
    except RenderContractError as e:
        logger.warning('table preview rejected', error=e.message)
        raise HTTPException(status_code=400, detail=e.message)


__all__ = ['router']
