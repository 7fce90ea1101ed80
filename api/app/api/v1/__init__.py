"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from app.api.v1.endpoints import (
    card_states, review_logs, review, user_settings, lesson_progress, user_data
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(card_states.router)
api_router.include_router(review_logs.router)
api_router.include_router(review.router)
api_router.include_router(user_settings.router)
api_router.include_router(lesson_progress.router)
api_router.include_router(user_data.router)
