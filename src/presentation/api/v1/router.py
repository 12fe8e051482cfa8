from fastapi import APIRouter

from .accounts import accounts_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(accounts_router, tags=["Accounts"])
