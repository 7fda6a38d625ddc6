from typing import TYPE_CHECKING

from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response

from synapse_docs.core.dispatcher import RouteDispatcher
from synapse_docs.domains.documentation.schemas import LikeResponse, SearchResponse

if TYPE_CHECKING:
    from synapse_docs.domains.documentation.services import DocumentationService


def _json(model) -> Response:
    return Response(model.model_dump_json(), media_type="application/json")


def register_page_routes(dispatcher: RouteDispatcher, service: "DocumentationService") -> None:
    """Регистрация маршрутов сайта документации в диспетчере"""

    async def home(request: Request) -> Response:
        """Главная страница"""
        return HTMLResponse(service.render_home())

    async def page(request: Request) -> Response:
        """Страница документации по slug"""
        record = service.get_page(request.path_params["slug"])
        if not record:
            return HTMLResponse(service.render_not_found(request.url.path), status_code=404)

        service.record_view(record)
        return HTMLResponse(service.render_page(record))

    async def like_page(request: Request) -> Response:
        """Отметка страницы"""
        slug = request.path_params["slug"]
        likes = service.like_page(slug)
        if likes is None:
            return JSONResponse({"detail": "Page not found"}, status_code=404)
        return _json(LikeResponse(slug=slug, likes=likes))

    async def package(request: Request) -> Response:
        """Справочник пакета"""
        record = service.get_package(request.path_params["name"])
        if not record:
            return HTMLResponse(service.render_not_found(request.url.path), status_code=404)
        return HTMLResponse(service.render_package(record))

    async def examples(request: Request) -> Response:
        return HTMLResponse(service.render_examples())

    async def tutorials(request: Request) -> Response:
        return HTMLResponse(service.render_tutorials())

    async def patterns(request: Request) -> Response:
        return HTMLResponse(service.render_patterns())

    async def api_reference(request: Request) -> Response:
        return HTMLResponse(service.render_api())

    async def search(request: Request) -> Response:
        """Поиск по страницам и примерам"""
        query = request.query_params.get("q", "")
        return _json(SearchResponse(results=service.search(query), query=query))

    async def wizard(request: Request) -> Response:
        """Текущий шаг мастера первых шагов"""
        return HTMLResponse(service.render_wizard())

    async def wizard_next(request: Request) -> Response:
        service.wizard.next_step()
        return _json(service.wizard_state())

    async def wizard_previous(request: Request) -> Response:
        service.wizard.previous_step()
        return _json(service.wizard_state())

    async def wizard_reset(request: Request) -> Response:
        service.wizard.reset()
        return _json(service.wizard_state())

    async def wizard_go_to(request: Request) -> Response:
        """Переход к шагу мастера по id"""
        if service.wizard.go_to(request.path_params["step_id"]) is None:
            return JSONResponse({"detail": "Wizard step not found"}, status_code=404)
        return _json(service.wizard_state())

    dispatcher.get("/", home)
    dispatcher.get("/examples", examples)
    dispatcher.get("/tutorials", tutorials)
    dispatcher.get("/patterns", patterns)
    dispatcher.get("/api", api_reference)
    dispatcher.get("/api/search", search)
    dispatcher.get("/getting-started", wizard)
    dispatcher.post("/getting-started/next", wizard_next)
    dispatcher.post("/getting-started/previous", wizard_previous)
    dispatcher.post("/getting-started/reset", wizard_reset)
    dispatcher.post("/getting-started/steps/:step_id", wizard_go_to)
    dispatcher.get("/packages/:name", package)
    dispatcher.get("/:slug", page)
    dispatcher.post("/:slug/like", like_page)
