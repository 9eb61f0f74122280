# argus/api/routers/health.py

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from argus.api.dependencies import get_enums
from argus.config.enums import AuditEnums, EnumCategory
from argus.config.settings import get_settings

router = APIRouter()


@router.get("/health")
async def health(request: Request, enums: Annotated[AuditEnums, Depends(get_enums)]):
    """Health check: storage backend and size of each loaded vocabulary category."""
    settings = get_settings()
    return {
        "status": "ok",
        "correlation_id": request.state.correlation_id,
        "environment": settings.environment,
        "version": settings.version,
        "storage_backend": settings.storage_backend,
        "vocabulary": {
            category.value: len(enums.values_for(category)) for category in EnumCategory
        },
    }
