"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from wayfarer.api.routes import users, activities, expenses

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(activities.router)
api_router.include_router(expenses.router)
