from fastapi import APIRouter

from app.dependencies import SettingsDep
from app.schemas.responses import HealthResponse, InfoResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="UP")


@router.get("/info", response_model=InfoResponse)
async def info(settings: SettingsDep) -> InfoResponse:
    return InfoResponse(
        name=settings.app_name,
        version=settings.app_version,
    )
