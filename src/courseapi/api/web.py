"""Static client serving and the templated landing page.

The landing page carries an empty `<script id="api-config"></script>` marker which
is replaced at request time with the configured API base URL, so the client finds
the server without a build step.
"""

from __future__ import annotations

import json
from pathlib import Path

from fastapi import APIRouter, status
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, Response

from courseapi.api.dependencies import SettingsDep
from courseapi.api.models import ErrorResponse
from courseapi.logging import get_logger

logger = get_logger("api.web")

API_CONFIG_MARKER = '<script id="api-config"></script>'
INDEX_FILE = "index.html"

router = APIRouter(tags=["web"])


def render_index(template: str, api_url: str) -> str:
    """Replace the api-config marker with a script assigning window.API_URL."""
    literal = json.dumps(api_url).replace("</", "<\\/")
    script = f'<script id="api-config">window.API_URL = {literal};</script>'
    return template.replace(API_CONFIG_MARKER, script)


def resolve_asset(web_dir: Path, path: str) -> Path | None:
    """Return the file under web_dir matching path, or None.

    Paths escaping web_dir and the index template itself never resolve.
    """
    if not path:
        return None
    root = web_dir.resolve()
    candidate = (root / path).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    if candidate == root / INDEX_FILE:
        return None
    return candidate


@router.get("/{path:path}", include_in_schema=False, response_model=None)
def serve_client(path: str, settings: SettingsDep) -> Response:
    """Serve a client asset, or the landing page for any other path."""
    if path == "api" or path.startswith("api/"):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error="Not found").model_dump(),
        )

    asset = resolve_asset(settings.web_dir, path)
    if asset is not None:
        return FileResponse(asset)

    index_path = settings.web_dir / INDEX_FILE
    try:
        template = index_path.read_text(encoding="utf-8")
    except OSError:
        logger.error("Error reading %s", index_path)
        return HTMLResponse("Error loading the page.", status_code=500)

    return HTMLResponse(render_index(template, settings.api_url))
