from fastapi import APIRouter

from app.api.routes import configurations, generate, providers, templates, utils

api_router = APIRouter()
api_router.include_router(utils.router, tags=["utils"])
api_router.include_router(providers.router, prefix="/ai", tags=["ai-providers"])
api_router.include_router(configurations.router, prefix="/ai", tags=["ai-configurations"])
api_router.include_router(templates.router, prefix="/ai", tags=["ai-templates"])
api_router.include_router(generate.router, prefix="/ai", tags=["ai-generate"])
