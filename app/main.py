"""Main FastAPI application module for the jigsaw generator."""

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from fractal_jigsaw import InvalidDimensions, InvalidPieceBounds, JigsawResult

from app.config import settings
from app.models.jigsaw_model import GenerateJigsawRequest, GenerateJigsawResponse
from app.services.jigsaw_service import JigsawService, get_jigsaw_service

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title=settings.PROJECT_NAME)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

SVG_MEDIA_TYPE = "image/svg+xml"


def _run_generation(request: GenerateJigsawRequest, service: JigsawService) -> JigsawResult:
    """Generate a jigsaw, mapping domain errors to HTTP 400.

    Raises:
        HTTPException: If the request is outside the allowed dimensions or bounds.
    """
    try:
        return service.generate(request)
    except (InvalidDimensions, InvalidPieceBounds) as e:
        logger.warning("Rejected jigsaw request: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e


def _svg_attachment(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post(f"{settings.API_V1_STR}/jigsaw/generate", response_model=GenerateJigsawResponse)
def generate(
    request: GenerateJigsawRequest,
    service: Annotated[JigsawService, Depends(get_jigsaw_service)],
) -> GenerateJigsawResponse:
    """Generate a jigsaw and return every exported document.

    Args:
        request: Generation parameters.
        service: The jigsaw service.

    Returns:
        GenerateJigsawResponse: Piece count, documents and the seed used.

    Raises:
        HTTPException: If the request exceeds the configured limits.
    """
    result = _run_generation(request, service)
    return GenerateJigsawResponse(**result.to_dict())


@app.post(f"{settings.API_V1_STR}/jigsaw/design.svg")
def download_design(
    request: GenerateJigsawRequest,
    service: Annotated[JigsawService, Depends(get_jigsaw_service)],
) -> Response:
    """Download the multi-path preview document as an SVG attachment."""
    result = _run_generation(request, service)
    return _svg_attachment(result.design_svg, f"design_{result.seed}.svg")


@app.post(f"{settings.API_V1_STR}/jigsaw/laser.svg")
def download_laser(
    request: GenerateJigsawRequest,
    service: Annotated[JigsawService, Depends(get_jigsaw_service)],
) -> Response:
    """Download the single-path cutting document as an SVG attachment."""
    result = _run_generation(request, service)
    return _svg_attachment(result.laser_svg, f"laser_{result.seed}.svg")
