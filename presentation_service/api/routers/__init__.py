"""API routers"""

from fastapi import APIRouter

from .presentations import router as presentations_router
from .slides import router as slides_router

api_router = APIRouter()

api_router.include_router(presentations_router)
api_router.include_router(slides_router)
