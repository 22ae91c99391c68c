import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(level: str = None):
    """Configure root logging to stderr so stdio MCP clients keep a clean stdout."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],  # defaults to stderr
        force=True,  # replaces the handler FastMCP installs
    )
