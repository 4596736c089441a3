"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rectgrid import __version__
from rectgrid.config import settings
from rectgrid.engine.registry import register_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.rectgrid_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="RectGrid",
        description="Rectangle edge mesh — grid cells shaded by covering rectangle",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all transform modules to trigger registration
    register_transforms()

    from rectgrid.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
