from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from synapse_docs.api.http.admin import router as admin_router
from synapse_docs.api.http.health import router as health_router
from synapse_docs.core.config import get_settings
from synapse_docs.domains.documentation.services import DocumentationService, ServiceState


def create_app(service: Optional[DocumentationService] = None) -> FastAPI:
    """Сборка веб-приложения: служебные маршруты FastAPI и сайт документации.

    Сайт обслуживается диспетчером сервиса, смонтированным в корень, поэтому
    /health и /_admin/* проверяются раньше страниц документации.
    """
    if service is None:
        service = DocumentationService(get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if service.state is ServiceState.UNINITIALIZED:
            await service.initialize()
        yield

    app = FastAPI(
        title="Synapse Docs",
        description="Documentation site for the Synapse TypeScript framework",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/_admin/docs",
        openapi_url="/_admin/openapi.json",
        redoc_url=None
    )
    app.state.docs_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=service.settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(admin_router)
    app.mount("/", service.dispatcher, name="docs")

    return app
