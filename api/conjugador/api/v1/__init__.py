"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from conjugador.api.v1.endpoints import regions, verbs, conjugations

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(regions.router)
api_router.include_router(verbs.router)
api_router.include_router(conjugations.router)
