import logging
import time

from starlette.requests import Request
from starlette.responses import Response

from synapse_docs.core.dispatcher import CallNext

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next: CallNext) -> Response:
    """Журналирование запросов и времени обработки"""
    start_time = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"
    logger.debug(
        "%s %s -> %d (%.2fms)", request.method, request.url.path, response.status_code, elapsed_ms
    )
    return response
