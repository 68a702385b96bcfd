"""
API v1 Router - Main Entry Point
Aggregates all v1 endpoints of the hostel facility desk
"""
from fastapi import APIRouter

from hostel_ops.api.v1 import admin, auth, cleaner, complaints, dashboard, electrician, warden

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(auth.router)
router.include_router(admin.router)
router.include_router(complaints.router)
router.include_router(warden.router)
router.include_router(cleaner.router)
router.include_router(electrician.router)
router.include_router(dashboard.router)
