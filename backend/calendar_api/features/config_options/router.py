"""
Config options feature: API routes.
"""

from fastapi import APIRouter, Depends

from calendar_api.core.dependencies import get_config_service
from calendar_api.features.config_options.schemas import ConfigResponse
from calendar_api.features.config_options.service import ConfigService

router = APIRouter()


@router.get("/options", response_model=ConfigResponse)
async def get_config_options(service: ConfigService = Depends(get_config_service)):
    """Selectable config options. Always 200, falling back to defaults."""
    return service.get_config_options()
