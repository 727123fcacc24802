"""
Main API router aggregator
"""
from fastapi import APIRouter

from app.api.v1.endpoints import (
    cases,
    documents,
    health,
    sections,
    user,
)

api_router = APIRouter()

# Include routers
api_router.include_router(user.router, prefix="/user", tags=["User"])
api_router.include_router(cases.router, prefix="/cases", tags=["Cases"])
api_router.include_router(sections.router, prefix="/sections", tags=["Sections"])
api_router.include_router(documents.router, prefix="/documents", tags=["Documents"])
api_router.include_router(health.router, prefix="/health", tags=["Health"])
