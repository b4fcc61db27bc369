"""
API Routers - FastAPI endpoint definitions.
"""

from adoption_api.presentation.api.animals import router as animals_router
from adoption_api.presentation.api.chats import router as chats_router

__all__ = [
    "animals_router",
    "chats_router",
]
