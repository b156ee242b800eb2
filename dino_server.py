"""Dino Compare backend server.

Mounts the infographic router under a single FastAPI application.
The router is mounted inside a guard so that a broken record file
does not prevent the server from starting -- the infographic
endpoints are simply absent and the health endpoint reports the
failure.

Usage::

    # Development (auto-reload)
    uvicorn dino_server:app --reload --port 8430

    # Use another record file
    DINO_DATA_PATH=/path/to/dino.json uvicorn dino_server:app

    # Or run directly
    python dino_server.py
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger("dino_compare")

VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Dino Compare API",
    description=(
        "Compares a human with the reference dinosaurs and returns "
        "the infographic grid tiles."
    ),
    version=VERSION,
)

# ---------------------------------------------------------------------------
# CORS -- allow the local page to call the API
# ---------------------------------------------------------------------------

_ALLOWED_ORIGINS = [
    "http://localhost:5173",   # Vite dev server
    "http://localhost:8430",   # Self (for Swagger UI)
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8430",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_router_status: dict[str, dict[str, Any]] = {
    "infographic": {"loaded": False, "error": None},
}


def _mount_infographic() -> None:
    """Load the dinosaur records and mount the router at ``/api/infographic/``."""
    try:
        from infographic.src.server import init_infographic, router as infographic_router
        from shared.hardening import ErrorFormatter

        try:
            dinosaurs = init_infographic()
        except Exception as exc:
            error = ErrorFormatter().format_data_error(exc)
            logger.error("%s (%s)", error.message, error.technical_detail)
            raise

        app.include_router(
            infographic_router, prefix="/api/infographic", tags=["infographic"]
        )
        _router_status["infographic"]["loaded"] = True
        logger.info(
            "Infographic router mounted at /api/infographic/ with %d dinosaurs",
            len(dinosaurs),
        )
    except Exception as exc:
        _router_status["infographic"]["error"] = str(exc)
        logger.warning("Infographic router failed to load: %s", exc)


# ---------------------------------------------------------------------------
# Unified health endpoint
# ---------------------------------------------------------------------------


@app.get("/api/health")
async def unified_health() -> dict[str, Any]:
    """Return health status for the mounted routers.

    Returns:
        Dictionary with overall status and per-router breakdown.
    """
    loaded = all(r["loaded"] for r in _router_status.values())
    return {
        "status": "ok" if loaded else "error",
        "version": VERSION,
        "routers": _router_status,
    }


_mount_infographic()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def run_server(host: str = "127.0.0.1", port: int = 8430) -> None:
    """Start the server via uvicorn.

    Args:
        host: Bind address. Defaults to localhost.
        port: Port number. Defaults to 8430.
    """
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    run_server()
