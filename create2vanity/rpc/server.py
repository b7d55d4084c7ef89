"""
JSON-RPC 2.0 server on FastAPI.

Every HTTP request gets its own cancel event. A watcher task sets it when
the client disconnects or the server begins shutting down; long-running
handlers read it through :meth:`RPCServer.cancel_event` and stop early.
"""

from __future__ import annotations

import asyncio
import contextvars
import inspect
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)


PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

DISCONNECT_POLL_INTERVAL = 0.1

_request_cancel: contextvars.ContextVar[Optional[asyncio.Event]] = contextvars.ContextVar(
    "request_cancel", default=None
)


def _success_response(id: Any, result: Any) -> dict:
    return {"jsonrpc": "2.0", "id": id, "result": result}


def _error_response(id: Any, code: int, message: str, data: Any = None) -> dict:
    error = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": id, "error": error}


async def watch_cancellation(
    request: Any,
    cancel: asyncio.Event,
    shutdown: asyncio.Event,
    interval: float = DISCONNECT_POLL_INTERVAL,
) -> None:
    """Set ``cancel`` once the client is gone or shutdown has started.

    Both flags are polled rather than awaited so a shutdown signal raised
    outside the request's event loop is still observed.
    """
    while not cancel.is_set():
        if shutdown.is_set():
            logger.info("Shutdown requested, cancelling in-flight request")
            cancel.set()
            return
        if await request.is_disconnected():
            logger.info("Client disconnected, cancelling in-flight request")
            cancel.set()
            return
        await asyncio.sleep(interval)


class RPCServer:
    """JSON-RPC 2.0 server with method registration and dispatch."""

    def __init__(self, title: str = "py-create2-vanity JSON-RPC") -> None:
        self.shutdown_event = asyncio.Event()
        self._methods: dict[str, Callable] = {}

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            yield
            self.request_shutdown()

        self.app = FastAPI(title=title, docs_url=None, redoc_url=None, lifespan=lifespan)
        self._setup_routes()

    def request_shutdown(self) -> None:
        """Ask every in-flight request to stop at its next checkpoint."""
        self.shutdown_event.set()

    def cancel_event(self) -> asyncio.Event:
        """Cancel event of the request being served, or the shutdown event."""
        event = _request_cancel.get()
        return event if event is not None else self.shutdown_event

    def _setup_routes(self) -> None:
        @self.app.get("/health")
        async def handle_health() -> JSONResponse:
            return JSONResponse({
                "status": "OK",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            })

        @self.app.post("/")
        async def handle_rpc(request: Request) -> Response:
            try:
                body = await request.json()
            except Exception:
                return JSONResponse(_error_response(None, PARSE_ERROR, "Parse error"))

            cancel = asyncio.Event()
            token = _request_cancel.set(cancel)
            watcher = asyncio.create_task(
                watch_cancellation(request, cancel, self.shutdown_event)
            )
            try:
                return await self._dispatch(body)
            finally:
                watcher.cancel()
                _request_cancel.reset(token)

    async def _dispatch(self, body: Any) -> Response:
        if isinstance(body, list):
            if not body:
                return JSONResponse(_error_response(None, INVALID_REQUEST, "Empty batch"))
            results = []
            for item in body:
                result = await self._handle_single(item)
                if result is not None:
                    results.append(result)
            if not results:
                return Response(status_code=204)
            return JSONResponse(results)

        result = await self._handle_single(body)
        if result is None:
            return Response(status_code=204)
        return JSONResponse(result)

    async def _handle_single(self, request: Any) -> Optional[dict]:
        if not isinstance(request, dict):
            return _error_response(None, INVALID_REQUEST, "Invalid request")

        jsonrpc = request.get("jsonrpc")
        method = request.get("method")
        params = request.get("params", [])
        req_id = request.get("id")

        if jsonrpc != "2.0":
            return _error_response(req_id, INVALID_REQUEST, "Invalid JSON-RPC version")

        if not isinstance(method, str):
            return _error_response(req_id, INVALID_REQUEST, "Invalid method")

        is_notification = "id" not in request

        handler = self._methods.get(method)
        if handler is None:
            if is_notification:
                return None
            return _error_response(req_id, METHOD_NOT_FOUND, f"Method not found: {method}")

        try:
            if isinstance(params, list):
                result = await handler(*params) if _is_async(handler) else handler(*params)
            elif isinstance(params, dict):
                result = await handler(**params) if _is_async(handler) else handler(**params)
            else:
                return _error_response(req_id, INVALID_PARAMS, "Invalid params")
        except TypeError as e:
            logger.warning("RPC TypeError in %s: %s", method, e)
            return _error_response(req_id, INVALID_PARAMS, str(e))
        except RPCError as e:
            return _error_response(req_id, e.code, e.message, e.data)
        except Exception as e:
            logger.exception("RPC internal error in %s", method)
            return _error_response(req_id, INTERNAL_ERROR, str(e))

        if is_notification:
            return None
        return _success_response(req_id, result)

    def register(self, name: str, handler: Callable) -> None:
        self._methods[name] = handler

    def method(self, name: str) -> Callable:
        def decorator(func: Callable) -> Callable:
            self._methods[name] = func
            return func

        return decorator

    @property
    def method_names(self) -> list[str]:
        return sorted(self._methods)


class RPCError(Exception):
    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


def _is_async(func: Callable) -> bool:
    return inspect.iscoroutinefunction(func)
