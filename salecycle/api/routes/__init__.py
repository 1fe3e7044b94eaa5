from fastapi import APIRouter
from salecycle.api.routes import tag

api_router = APIRouter()
api_router.include_router(tag.router, tags=["salecycle"])
