import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from langchain_core.language_models import BaseChatModel

from app.api.router import api_router
from app.core.config import Settings, settings as default_settings
from app.core.database import init_db
from app.core.handlers import register_exception_handlers
from app.core.llm import build_llm
from app.core.logging import setup_logging
from app.services.ai.gateway import AIGateway

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, llm: Optional[BaseChatModel] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The database engine and the AI gateway are created when the app starts
    and released when it stops; tests pass their own settings and chat model.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = init_db(settings)
        app.state.database = database
        app.state.ai_gateway = AIGateway(llm if llm is not None else build_llm(settings))
        logger.info(f"{settings.PROJECT_NAME} started, model={settings.OPENAI_MODEL}")
        try:
            yield
        finally:
            database.close()
            logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()


def run():
    import uvicorn

    logger.info(f"Server running on http://localhost:{default_settings.PORT}")
    logger.info(f"OpenAI Model: {default_settings.OPENAI_MODEL}")
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
