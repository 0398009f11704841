"""
Cat Safe API endpoints.

This module provides the plant safety check: a photo upload plus coordinates
in, a structured toxicity verdict for cats out.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from catsafe.agents.base import AgentError, AgentTimeoutError
from catsafe.core import depends_plant_safety
from catsafe.models.results import AnalysisResult
from catsafe.services.plant_safety import PlantSafetyService


router = APIRouter(prefix="/cat-safe", tags=["cat-safe"])

# Allowed file types
ALLOWED_CONTENT_TYPES = ["image/jpeg", "image/jpg", "image/png"]
ALLOWED_EXTENSIONS = ["jpg", "jpeg", "png"]
# Maximum file size (5MB)
MAX_FILE_SIZE = 5 * 1024 * 1024


def _file_extension(filename: Optional[str]) -> Optional[str]:
    if not filename or "." not in filename:
        return None
    return filename.rsplit(".", 1)[-1].lower()


async def read_validated_image(image: UploadFile) -> bytes:
    """
    Validate an uploaded image and return its bytes.

    Raises:
        HTTPException: 422 when the type is not JPEG/PNG, the file is empty,
            or it exceeds MAX_FILE_SIZE
    """
    if image.content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(
            status_code=422,
            detail=f"Unsupported file type: {image.content_type}. Allowed: {', '.join(ALLOWED_CONTENT_TYPES)}",
        )

    extension = _file_extension(image.filename)
    if extension is not None and extension not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=422,
            detail=f"Unsupported file extension: .{extension}. Allowed: {', '.join(ALLOWED_EXTENSIONS)}",
        )

    # Read one byte past the limit so oversized uploads are detected without
    # loading the whole body
    content = await image.read(MAX_FILE_SIZE + 1)
    file_size = len(content)

    if file_size > MAX_FILE_SIZE:
        raise HTTPException(
            status_code=422,
            detail=f"File too large. Maximum size: {MAX_FILE_SIZE} bytes",
        )

    if file_size == 0:
        raise HTTPException(status_code=422, detail="Empty file")

    return content


@router.post("/check-harmful", response_model=AnalysisResult)
async def check_harmful(
    image: UploadFile = File(..., description="Photo of the plant (jpg, jpeg or png, max 5MB)"),
    longitude: float = Form(..., description="The longitude of the plant", examples=[-73.968285]),
    latitude: float = Form(..., description="The latitude of the plant", examples=[40.785091]),
    service: PlantSafetyService = Depends(depends_plant_safety),
):
    """
    Check whether the plant in a photo is safe for cats.

    Args:
        image: Uploaded plant photo
        longitude: Longitude where the plant was found
        latitude: Latitude where the plant was found
        service: PlantSafetyService dependency injection

    Returns:
        A Harmful result (``agentType: "HARMFUL"``) or a Poisonous result
        (``agentType: "POISONOUS"``)

    Raises:
        HTTPException: 422 on invalid upload, 502 on upstream failure,
            504 on upstream timeout

    Example:
        POST /cat-safe/check-harmful
        Content-Type: multipart/form-data
        image=@lily.jpg, longitude=-73.968285, latitude=40.785091

        Response:
        {
            "isPoisonous": true,
            "plantName": "Lily",
            "toxicityLevel": "Lethal",
            ...
            "locationCoordinates": {"latitude": 40.785091, "longitude": -73.968285},
            "agentType": "POISONOUS"
        }
    """
    content = await read_validated_image(image)

    try:
        return await service.analyze(
            content,
            longitude,
            latitude,
            content_type=image.content_type,
        )
    except AgentTimeoutError as e:
        raise HTTPException(status_code=504, detail=f"Plant analysis timed out: {str(e)}")
    except AgentError as e:
        raise HTTPException(status_code=502, detail=f"Plant analysis failed: {str(e)}")
