# trackee/main.py
from typing import Optional

from fastapi import FastAPI

from trackee.api.routes import dashboard, health, meetings, members, session
from trackee.core.config import get_settings
from trackee.core.logging import configure_logging
from trackee.services.api_client import TrackeeApiClient, build_api_client
from trackee.services.session_manager import SessionManager


def create_app(api_client: Optional[TrackeeApiClient] = None) -> FastAPI:
    """
    Application factory for the Trackee dashboard service.

    One SessionManager is built here and handed to routes through
    `app.state`; there is no module-level session.
    """
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Dashboard service for vertical attendance tracking.\n"
            "Mediates global admin and vertical lead sessions against the attendance\n"
            "backend and aggregates attendance summaries per vertical."
        ),
        version="0.1.0",
    )

    if api_client is None:
        api_client = build_api_client()

    session_manager = SessionManager(api_client)
    session_manager.initialize()

    app.state.api_client = api_client
    app.state.session_manager = session_manager

    # Routers
    app.include_router(health.router)
    app.include_router(session.router)
    app.include_router(dashboard.router)
    app.include_router(members.router)
    app.include_router(meetings.router)

    return app


app = create_app()
