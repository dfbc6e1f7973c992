"""API routes."""
from fastapi import APIRouter
from healthtrack.api import auth, activities

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(activities.router, prefix="/activities", tags=["Activities"])
