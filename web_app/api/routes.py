"""API routes implementation."""

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
    HealthResponse,
    ErrorResponse,
)
from shortener.common.url_builder import build_short_url
from shortener.common.headers import build_base_url, get_forwarded_path_prefix
from shortener.errors import InvalidURLError, StoreError

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create or fetch short URL",
    description="Return the short URL for a long URL, creating it on first use.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create or fetch a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config
    
    try:
        result = await service.create_or_fetch(body.url)
    except InvalidURLError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    
    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
    )
    
    short_url = build_short_url(
        short_id=result["short_id"],
        base_url=base_url,
        path_prefix=get_forwarded_path_prefix(dict(request.headers)) or config.path_prefix,
    )
    
    return ShortenResponse(
        short_id=result["short_id"],
        short_url=short_url,
        original_url=result["original_url"],
        created_at=result["created_at"],
        created=result["created"],
    )


@router.get(
    "/urls/{short_id}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short id not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Get URL information",
)
async def get_url_info(request: Request, short_id: str):
    """Get the mapping stored for a short id."""
    service = request.app.state.service
    
    try:
        info = await service.get_url_info(short_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    
    if not info:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="URL not found",
        )
    
    return URLInfoResponse(**info)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Store and cache reachability.",
)
async def health_check(request: Request):
    """Report whether the store and cache answer."""
    service = request.app.state.service
    
    health = await service.health_check()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
