"""Authentication router package. Bundles the account lifecycle endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from .routes import confirm_email as confirm_email_route
from .routes import forgot_password as forgot_password_route
from .routes import login as login_route
from .routes import me as me_route
from .routes import register as register_route
from .routes import reset_password as reset_password_route

router = APIRouter(prefix="/auth", tags=["auth"])

# Delegate to sub-routers ----------------------------------------------------

router.include_router(register_route.router, prefix="/register")
router.include_router(login_route.router, prefix="/login")
router.include_router(confirm_email_route.router, prefix="/confirmemail")
router.include_router(forgot_password_route.router, prefix="/forgotpassword")
router.include_router(reset_password_route.router, prefix="/resetpassword")
router.include_router(me_route.router, prefix="/me")

__all__ = ["router"]
