from app.router.api.topics import router as topics_router
from app.router.api.questions import router as questions_router
from app.router.api.contests import router as contests_router
from app.router.api.streaks import router as streaks_router
from app.router.api.dashboard import router as dashboard_router
__all__ = [
    "topics_router",
    "questions_router",
    "contests_router",
    "streaks_router",
    "dashboard_router",
]
