"""Authentication API routes."""

from fastapi import APIRouter

from omni_auth.features.auth.routes.signin import router as signin_router
from omni_auth.features.auth.routes.signup import router as signup_router
from omni_auth.features.auth.routes.verification import (
    router as verification_router,
)

router = APIRouter(prefix="/auth", tags=["auth"])

# Include all route handlers
router.include_router(signup_router)
router.include_router(signin_router)
router.include_router(verification_router)
