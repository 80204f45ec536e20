"""Web interface routes implementation."""

import logging
import os

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from shortener.common.url_builder import build_short_url, normalize_path_prefix
from shortener.common.headers import build_base_url, get_forwarded_path_prefix
from shortener.errors import InvalidURLError, StoreError

router = APIRouter()
logger = logging.getLogger("url_shortener.web")

# Jinja2 autoescaping covers & < > " ' in every rendered value
template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)

INVALID_URL = "Invalid URL"
NOT_FOUND = "URL not found"
INTERNAL_ERROR = "Internal server error"


def _path_prefix_from_request(request: Request, config) -> str:
    """Path prefix from X-Forwarded-Prefix (proxy) or config. Normalized: leading slash, no trailing."""
    prefix = get_forwarded_path_prefix(dict(request.headers))
    if prefix:
        return prefix
    return normalize_path_prefix(getattr(config, "path_prefix", ""))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the URL submission form."""
    config = request.app.state.config
    return templates.TemplateResponse(
        request,
        "index.html",
        {"path_prefix": _path_prefix_from_request(request, config)},
    )


@router.post("/api/short", response_class=HTMLResponse, include_in_schema=False)
async def create_short_url_web(request: Request):
    """Handle form submission: create or fetch the short URL and render it."""
    service = request.app.state.service
    config = request.app.state.config

    form = await request.form()
    url = form.get("url")

    # Uploaded files and missing fields are rejected before touching the store
    if not isinstance(url, str) or not url.strip():
        return PlainTextResponse(INVALID_URL, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        result = await service.create_or_fetch(url.strip())
    except InvalidURLError as e:
        logger.info(f"Rejected URL submission: {e}")
        return PlainTextResponse(INVALID_URL, status_code=status.HTTP_400_BAD_REQUEST)
    except StoreError:
        return PlainTextResponse(INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
    )
    path_prefix = _path_prefix_from_request(request, config)
    short_url = build_short_url(
        short_id=result["short_id"],
        base_url=base_url,
        path_prefix=path_prefix,
    )

    return templates.TemplateResponse(
        request,
        "result.html",
        {
            "original_url": result["original_url"],
            "short_url": short_url,
            "path_prefix": path_prefix,
        },
    )


@router.get("/{short_id}", include_in_schema=False)
async def redirect_to_url(request: Request, short_id: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = await service.resolve(short_id)
    except StoreError:
        return PlainTextResponse(INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if original_url is None:
        return PlainTextResponse(NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
