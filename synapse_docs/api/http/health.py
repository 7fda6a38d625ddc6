from fastapi import APIRouter, Depends

from synapse_docs.api.http.deps import get_docs_service
from synapse_docs.domains.documentation.services import DocumentationService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(service: DocumentationService = Depends(get_docs_service)):
    """Проверка состояния сервиса"""
    return {
        "status": "ok",
        "state": service.state.value,
        "routes": len(service.dispatcher.routes()),
    }
