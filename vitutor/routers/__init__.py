"""
Routers package for vitutor.
"""

from vitutor.routers.gemini import router as gemini_router

__all__ = ["gemini_router"]
