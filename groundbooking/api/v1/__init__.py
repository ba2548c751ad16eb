from fastapi import APIRouter

from .booking_routes import router as booking_router
from .ground_routes import router as ground_router
from .health_routes import router as health_router
from .report_routes import router as report_router
from .user_routes import router as user_router

router = APIRouter()
router.include_router(health_router)
router.include_router(ground_router)
router.include_router(booking_router)
router.include_router(report_router)
router.include_router(user_router)

__all__ = [
    "router",
    "booking_router",
    "ground_router",
    "health_router",
    "report_router",
    "user_router",
]
