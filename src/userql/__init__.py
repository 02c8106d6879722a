"""
userql
Read-only GraphQL API over a fixed in-memory user directory
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
