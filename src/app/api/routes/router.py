from fastapi import APIRouter

from src.app.api.routes import issues

api_router = APIRouter(prefix="/api")
api_router.include_router(issues.router)
