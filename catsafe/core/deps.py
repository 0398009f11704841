"""
FastAPI dependency injection utilities for the Cat Safe system.

This module provides dependency injection functions for FastAPI routes.
"""

from typing import TYPE_CHECKING

from fastapi import Depends, HTTPException, Request

if TYPE_CHECKING:
    from catsafe.services.plant_safety import PlantSafetyService


def _get_plant_safety_service(request: Request) -> "PlantSafetyService":
    service = getattr(request.app.state, "plant_safety_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Plant safety service is not initialized")
    return service


async def depends_plant_safety(
    service: "PlantSafetyService" = Depends(_get_plant_safety_service),
) -> "PlantSafetyService":
    """
    FastAPI dependency injection for PlantSafetyService.

    The service is built once during application startup and stored on
    ``app.state``.

    Usage in routes:
        @router.post("/check-harmful")
        async def check_harmful(
            image: UploadFile,
            service: PlantSafetyService = Depends(depends_plant_safety),
        ):
            return await service.analyze(await image.read(), lon, lat)

    Returns:
        PlantSafetyService: The application's plant safety service
    """
    return service
