"""Health check routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from uniflow.application.usecase.health import CheckHealthUseCase
from uniflow.application.usecase.health.check_health import CheckHealthResponse

router = APIRouter(tags=["health"], route_class=DishkaRoute)


@router.get("/health", response_model=CheckHealthResponse)
async def health_check(
    check_health_use_case: FromDishka[CheckHealthUseCase],
) -> CheckHealthResponse:
    """Report liveness and which collaborators are usable.

    Example:
        GET /health

        Response:
        {
            "status": "ok",
            "timestamp": "2025-01-15T12:34:56Z",
            "version": "0.1.0",
            "git_sha": "unknown",
            "identity_provider": true,
            "database": true,
            "email_delivery": false
        }
    """
    return await check_health_use_case.execute()
