from fastapi import APIRouter

from .auth import router as auth_router
from .students import router as students_router
from .groups import router as groups_router
from .teachers import router as teachers_router
from .gallery import router as gallery_router
from .messages import router as messages_router
from .home import router as home_router
from .admin import router as admin_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(auth_router, prefix="/auth", tags=["authentication"])
api_router.include_router(home_router, prefix="/home", tags=["home"])
api_router.include_router(students_router, prefix="/students", tags=["students"])
api_router.include_router(groups_router, prefix="/groups", tags=["groups"])
api_router.include_router(teachers_router, prefix="/teachers", tags=["teachers"])
api_router.include_router(gallery_router, prefix="/gallery", tags=["gallery"])
api_router.include_router(messages_router, prefix="/messages", tags=["messages"])
api_router.include_router(admin_router, prefix="/admin", tags=["admin"])
