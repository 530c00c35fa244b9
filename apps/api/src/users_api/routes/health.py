"""Health check routes."""

from fastapi import APIRouter, Depends

from users_api.config import Settings, get_settings
from users_api.models.health import HealthCheckResponse
from users_api.services import get_user_repository
from users_common.services.user_repository import UserRepository

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    repository: UserRepository = Depends(get_user_repository),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and user count
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        total_users=repository.count(),
    )
