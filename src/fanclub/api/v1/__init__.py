"""API version 1 routes."""

from fastapi import APIRouter

from fanclub.api.v1 import football, leagues, reminders, session, users

router = APIRouter(prefix="/api/v1")

# Include routers
router.include_router(session.router)
router.include_router(users.router)
router.include_router(reminders.router)
router.include_router(leagues.router)
router.include_router(football.router)
