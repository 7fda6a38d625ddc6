from synapse_docs.api.http.health import router as health_router
from synapse_docs.api.http.admin import router as admin_router

__all__ = [
    "health_router",
    "admin_router"
]
