"""
API Routers - FastAPI endpoint definitions.
"""

from farmer_network.presentation.api.conversations import router as conversations_router
from farmer_network.presentation.api.auth import router as auth_router
from farmer_network.presentation.api.users import router as users_router
from farmer_network.presentation.api.posts import router as posts_router
from farmer_network.presentation.api.comments import router as comments_router
from farmer_network.presentation.api.resources import router as resources_router
from farmer_network.presentation.api.weather import router as weather_router
from farmer_network.presentation.api.assistant import router as assistant_router

__all__ = [
    "conversations_router",
    "auth_router",
    "users_router",
    "posts_router",
    "comments_router",
    "resources_router",
    "weather_router",
    "assistant_router",
]
