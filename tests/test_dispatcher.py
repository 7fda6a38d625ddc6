import socket

import httpx
import pytest
from fastapi.testclient import TestClient
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse

from synapse_docs.core.dispatcher import RouteDispatcher, compile_path


@pytest.fixture
def dispatcher():
    return RouteDispatcher(host="127.0.0.1", port=0)


async def hello(request):
    return HTMLResponse("<h1>Hello</h1>")


def test_exact_route(dispatcher):
    dispatcher.get("/foo", hello)

    r = TestClient(dispatcher).get("/foo")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert r.text == "<h1>Hello</h1>"


def test_unknown_path_returns_404_page(dispatcher):
    dispatcher.get("/foo", hello)

    r = TestClient(dispatcher).get("/bar")

    assert r.status_code == 404
    assert r.headers["content-type"].startswith("text/html")
    assert "/bar" in r.text
    assert 'href="/"' in r.text


def test_404_page_escapes_path(dispatcher):
    r = TestClient(dispatcher).get("/<script>")
    assert r.status_code == 404
    assert "<script>" not in r.text


def test_method_mismatch_is_not_found(dispatcher):
    dispatcher.get("/foo", hello)
    assert TestClient(dispatcher).post("/foo").status_code == 404


def test_reregistering_replaces_handler(dispatcher):
    async def other(request):
        return PlainTextResponse("other")

    dispatcher.get("/foo", hello)
    dispatcher.get("/foo", other)

    assert TestClient(dispatcher).get("/foo").text == "other"
    assert dispatcher.routes() == [("GET", "/foo")]


def test_param_route_captures_values(dispatcher):
    async def package(request):
        return JSONResponse(dict(request.path_params))

    dispatcher.get("/packages/:name", package)

    r = TestClient(dispatcher).get("/packages/core")

    assert r.json() == {"name": "core"}
    assert TestClient(dispatcher).get("/packages/core/extra").status_code == 404


def test_exact_route_wins_over_pattern(dispatcher):
    async def slug(request):
        return PlainTextResponse("slug " + request.path_params["slug"])

    dispatcher.get("/:slug", slug)
    dispatcher.get("/examples", hello)
    client = TestClient(dispatcher)

    assert client.get("/examples").text == "<h1>Hello</h1>"
    assert client.get("/core").text == "slug core"


def test_compile_path_escapes_literal_parts():
    pattern = compile_path("/files/:name.html")
    assert pattern.match("/files/readme.html").group("name") == "readme"
    assert pattern.match("/files/readmeXhtml") is None


def test_middleware_runs_in_registration_order(dispatcher):
    calls = []

    def marker(name):
        async def middleware(request, call_next):
            calls.append(name)
            return await call_next(request)
        return middleware

    async def handler(request):
        calls.append("handler")
        return PlainTextResponse("ok")

    for name in ("first", "second", "third"):
        dispatcher.use(marker(name))
    dispatcher.get("/", handler)

    TestClient(dispatcher).get("/")

    assert calls == ["first", "second", "third", "handler"]


def test_middleware_sees_response(dispatcher):
    async def add_header(request, call_next):
        response = await call_next(request)
        response.headers["X-Test"] = "yes"
        return response

    dispatcher.use(add_header)
    dispatcher.get("/", hello)

    assert TestClient(dispatcher).get("/").headers["x-test"] == "yes"


def test_middleware_can_short_circuit(dispatcher):
    reached = []

    async def deny(request, call_next):
        return PlainTextResponse("denied", status_code=403)

    async def handler(request):
        reached.append(True)
        return PlainTextResponse("ok")

    dispatcher.use(deny)
    dispatcher.get("/", handler)

    r = TestClient(dispatcher).get("/")

    assert r.status_code == 403
    assert r.text == "denied"
    assert reached == []


def test_middleware_applies_to_unmatched_paths(dispatcher):
    seen = []

    async def record(request, call_next):
        seen.append(request.url.path)
        return await call_next(request)

    dispatcher.use(record)
    TestClient(dispatcher).get("/nowhere")

    assert seen == ["/nowhere"]


def test_routes_lists_static_and_pattern_paths(dispatcher):
    dispatcher.get("/", hello)
    dispatcher.post("/:slug/like", hello)

    assert sorted(dispatcher.routes()) == [("GET", "/"), ("POST", "/:slug/like")]


async def test_stop_without_start_is_noop(dispatcher):
    assert not dispatcher.is_serving
    await dispatcher.stop()
    assert not dispatcher.is_serving


async def test_start_serves_requests_until_stopped(dispatcher):
    dispatcher.get("/foo", hello)

    await dispatcher.start()
    try:
        assert dispatcher.is_serving
        assert dispatcher.port != 0
        async with httpx.AsyncClient(base_url=f"http://127.0.0.1:{dispatcher.port}", trust_env=False) as http:
            r = await http.get("/foo")
        assert r.status_code == 200
        assert r.text == "<h1>Hello</h1>"
    finally:
        await dispatcher.stop()

    assert not dispatcher.is_serving


async def test_start_on_busy_port_raises(dispatcher):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen()
        dispatcher.port = blocker.getsockname()[1]

        with pytest.raises(RuntimeError):
            await dispatcher.start()

    assert not dispatcher.is_serving
