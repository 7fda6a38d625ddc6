"""Minimal HTTP route dispatcher served as an ASGI application.

Routes are keyed by method and path. Static paths match exactly; paths with
``:name`` segments (``/packages/:name``) are tried afterwards in registration
order and expose the captured values as ``request.path_params``. Every request
passes through the middleware chain first::

    async def timing(request, call_next):
        response = await call_next(request)
        response.headers["X-Elapsed"] = "..."
        return response

A middleware that returns without calling ``call_next`` short-circuits the
request with its own response.
"""
import asyncio
import html
import logging
import re
import socket
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

import uvicorn
from starlette.requests import Request
from starlette.responses import HTMLResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocketClose

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Awaitable[Response]]
CallNext = Callable[[Request], Awaitable[Response]]
Middleware = Callable[[Request, CallNext], Awaitable[Response]]

PARAM_RE = re.compile(r":(\w+)")

NOT_FOUND_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>404 - Page Not Found</title></head>
<body>
  <h1>404 - Page Not Found</h1>
  <p>The requested page "{path}" was not found.</p>
  <a href="/">&larr; Back to Documentation</a>
</body>
</html>
"""


def compile_path(path: str) -> re.Pattern:
    """Регулярное выражение для пути с сегментами :name"""
    pattern = PARAM_RE.sub(lambda m: f"(?P<{m.group(1)}>[^/]+)", re.escape(path))
    return re.compile(f"^{pattern}$")


class RouteDispatcher:
    """Маршрутизация запросов по методу и пути с цепочкой middleware"""

    def __init__(self, host: str = "127.0.0.1", port: int = 3001):
        self.host = host
        self.port = port
        self._routes: Dict[str, Dict[str, Handler]] = {}
        self._patterns: Dict[str, List[Tuple[str, re.Pattern, Handler]]] = {}
        self._middleware: List[Middleware] = []
        self._server: Optional[uvicorn.Server] = None
        self._serve_task: Optional[asyncio.Task] = None

    def get(self, path: str, handler: Handler) -> None:
        self.add_route("GET", path, handler)

    def post(self, path: str, handler: Handler) -> None:
        self.add_route("POST", path, handler)

    def add_route(self, method: str, path: str, handler: Handler) -> None:
        """Регистрация обработчика; повторная регистрация пути заменяет его"""
        method = method.upper()
        if PARAM_RE.search(path):
            patterns = self._patterns.setdefault(method, [])
            for index, (existing, _, _) in enumerate(patterns):
                if existing == path:
                    patterns[index] = (path, compile_path(path), handler)
                    return
            patterns.append((path, compile_path(path), handler))
        else:
            self._routes.setdefault(method, {})[path] = handler

    def use(self, middleware: Middleware) -> None:
        """Добавление middleware в конец цепочки"""
        self._middleware.append(middleware)

    def routes(self) -> List[Tuple[str, str]]:
        """Зарегистрированные пары (метод, путь)"""
        result = [(method, path) for method, paths in self._routes.items() for path in paths]
        result.extend(
            (method, path) for method, patterns in self._patterns.items() for path, _, _ in patterns
        )
        return result

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return
        if scope["type"] != "http":
            await WebSocketClose()(scope, receive, send)
            return

        request = Request(scope, receive)
        response = await self.dispatch(request)
        await response(scope, receive, send)

    async def dispatch(self, request: Request) -> Response:
        """Прогон запроса через middleware и обработчик маршрута"""
        index = 0

        async def call_next(req: Request) -> Response:
            nonlocal index
            if index < len(self._middleware):
                middleware = self._middleware[index]
                index += 1
                return await middleware(req, call_next)
            return await self._route(req)

        response = await call_next(request)
        if response is None:
            raise RuntimeError(f"No response produced for {request.method} {request.url.path}")
        return response

    async def _route(self, request: Request) -> Response:
        method = request.method
        path = self._route_path(request.scope)

        handler = self._routes.get(method, {}).get(path)
        if handler is not None:
            return await handler(request)

        for _, pattern, pattern_handler in self._patterns.get(method, []):
            match = pattern.match(path)
            if match:
                request.scope["path_params"] = match.groupdict()
                return await pattern_handler(request)

        logger.debug("No route for %s %s", method, path)
        return HTMLResponse(NOT_FOUND_TEMPLATE.format(path=html.escape(path)), status_code=404)

    @staticmethod
    def _route_path(scope: Scope) -> str:
        path = scope["path"]
        root_path = scope.get("root_path", "")
        if root_path and path.startswith(root_path):
            path = path[len(root_path):] or "/"
        return path

    @staticmethod
    async def _lifespan(receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    @property
    def is_serving(self) -> bool:
        return self._serve_task is not None and not self._serve_task.done()

    def _bind_socket(self) -> socket.socket:
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
            sock.listen()
        except OSError as exc:
            sock.close()
            raise RuntimeError(f"Could not listen on {self.host}:{self.port}: {exc}") from exc
        return sock

    async def _serve(self, sock: socket.socket) -> None:
        # uvicorn завершает процесс через sys.exit при ошибке запуска
        try:
            await self._server.serve(sockets=[sock])
        except SystemExit as exc:
            raise RuntimeError(f"Server on {self.host}:{self.port} failed to start") from exc
        finally:
            sock.close()

    async def start(self, app: Optional[ASGIApp] = None) -> None:
        """Запуск TCP-сервера; возвращается, когда сокет слушает.

        app - ASGI-приложение для обслуживания, по умолчанию сам диспетчер.
        При port=0 порт выбирает система, итоговое значение в self.port.
        """
        if self.is_serving:
            raise RuntimeError("Server is already running")

        sock = self._bind_socket()
        self.port = sock.getsockname()[1]

        config = uvicorn.Config(app or self, host=self.host, port=self.port, log_config=None)
        self._server = uvicorn.Server(config)
        self._serve_task = asyncio.create_task(self._serve(sock))

        logger.info("Documentation server running on http://%s:%s", self.host, self.port)

    async def wait_closed(self) -> None:
        """Ожидание завершения сервера"""
        if self._serve_task is not None:
            await self._serve_task

    async def stop(self) -> None:
        """Остановка сервера"""
        if self._server is None:
            return
        self._server.should_exit = True
        await self.wait_closed()
        self._server = None
        self._serve_task = None
        logger.info("Documentation server stopped")
