# Importing the tool modules registers their tools on the shared server
from app.tools import cart, catalog

__all__ = ["cart", "catalog"]
