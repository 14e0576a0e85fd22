import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.routes import router
from folklorerun.engine import GameEngine
from folklorerun.loader import load_content
from folklorerun.models import ContentRepository
from folklorerun.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    content: ContentRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the API app.

    With no content given, startup fetches it from settings.content_url
    (falling back to the embedded datasets) before the first request.
    """
    resolved = settings or get_settings()
    logging.basicConfig(level=resolved.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "engine", None) is None:
            repository = await load_content(
                resolved.content_url,
                timeout=resolved.fetch_timeout,
                creature_resource=resolved.creature_resource,
                ui_resource=resolved.ui_resource,
            )
            app.state.engine = GameEngine(repository)
            logger.info("engine ready creatures=%s", repository.creature_ids())
        yield

    app = FastAPI(title="FolkloreRun", lifespan=lifespan)
    app.state.engine = GameEngine(content) if content is not None else None
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (content loaded on startup)
app = create_app()
