import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import create_db_and_tables
from app.server import mcp

# Registers every tool on the shared MCP server
from app import tools  # noqa: F401

setup_logging()
logger = logging.getLogger(__name__)

# Both transports serve the same tool set:
#   /sse (+ /sse/message/)  server-sent events
#   /mcp                    streamable HTTP
sse_app = mcp.sse_app()
streamable_app = mcp.streamable_http_app()

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    async with mcp.session_manager.run():
        logger.info("%s ready: SSE on /sse, streamable HTTP on /mcp", settings.PROJECT_NAME)
        yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
    description="MCP tools for a supermarket catalog and shopping carts",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Any other path falls through to the router's 404
app.router.routes.extend(sse_app.routes)
app.router.routes.extend(streamable_app.routes)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
