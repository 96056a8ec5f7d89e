"""
API Module Exports
"""

from .app import app
from .public import router as public_router
from .ld import router as ld_router

__all__ = ['app', 'public_router', 'ld_router']
