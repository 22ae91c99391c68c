"""
MCP application instance.

Creates the FastMCP server shared by the whole service. Tool modules under
``app.tools`` register themselves on it with ``@mcp.tool``; importing
``app.tools`` is what makes the tool set complete.
"""
from mcp.server.fastmcp import FastMCP
from app.core.config import settings

mcp = FastMCP(
    settings.PROJECT_NAME,
    instructions="Supermarket catalog and per-user shopping carts.",
    sse_path="/sse",
    message_path="/sse/message/",
    streamable_http_path="/mcp",
    host=settings.HOST,
    port=settings.PORT,
    log_level=settings.LOG_LEVEL.upper(),
)
