"""
Webhook relay for events sent by Discourse.

Discourse posts one JSON object per delivery whose top-level keys name the
event (``post``, ``chat_message``, ``ping``, ...). WebhookDispatcher routes
each key to a handler; WebhookReceptor serves the dispatcher over HTTP.

Example::

    receptor = client.webhook
    receptor.on("post", lambda post, res: res.json({"text": "200 ok"}))
    receptor.register_webhook_path("/webhook")
    receptor.start_webhook(8080)

Handlers may be plain functions or ``async def`` coroutines. Plain handlers
run in a worker thread so a blocking reply through the client does not
stall the server.

Handlers registered under ``default`` receive the whole payload of any
event without a handler of its own. A handler under ``all`` receives the
whole payload once per top-level key, before the key's own handler.
"""

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from .client import DiscourseClient

logger = logging.getLogger(__name__)

DEFAULT_EVENT = "default"
ALL_EVENT = "all"


class WebhookResponse:
    """Response handle given to webhook handlers.

    A handler is expected to call ``json`` exactly once per delivery.
    """

    def __init__(self) -> None:
        self.status_code = 200
        self.body: Optional[Any] = None
        self.sent = False

    def json(self, body: Any, status_code: int = 200) -> "WebhookResponse":
        """Write a JSON reply."""
        if self.sent:
            logger.warning("Webhook response written twice; keeping the last one")
        self.status_code = status_code
        self.body = body
        self.sent = True
        return self


WebhookHandler = Callable[[Any, WebhookResponse], Union[None, Awaitable[None]]]


def _acknowledge(body: Any, res: WebhookResponse) -> None:
    logger.info("Webhook received: %s", body)
    res.json({"text": "200 ok", "ec": 200})


class WebhookDispatcher:
    """Routes webhook deliveries to handlers registered by event name."""

    def __init__(self) -> None:
        self._handlers: Dict[str, WebhookHandler] = {
            "ping": _acknowledge,
            DEFAULT_EVENT: _acknowledge,
        }

    def on(self, event_name: str, handler: WebhookHandler) -> None:
        """Register a handler, replacing any previous one for the same name."""
        self._handlers[event_name] = handler

    async def dispatch(self, payload: Mapping[str, Any], res: WebhookResponse) -> None:
        """Dispatch one delivery.

        For each top-level key, in order: the ``all`` handler gets the whole
        payload, then the key's handler gets ``payload[key]``, or the
        ``default`` handler gets the whole payload. Each handler finishes,
        awaited if it is a coroutine, before the next one starts. The first
        exception stops the delivery and is answered with a 500 reply; it is
        not re-raised.
        """
        try:
            for event_name in list(payload.keys()):
                all_handler = self._handlers.get(ALL_EVENT)
                if all_handler is not None:
                    await _call_handler(all_handler, payload, res)

                handler = self._handlers.get(event_name)
                if handler is not None:
                    await _call_handler(handler, payload[event_name], res)
                else:
                    await _call_handler(self._handlers[DEFAULT_EVENT], payload, res)
        except Exception as exc:
            logger.exception("Error in webhook handler")
            res.json({"text": "500 error", "details": str(exc)}, status_code=500)

    def deliver(self, payload: Mapping[str, Any], res: WebhookResponse) -> None:
        """Blocking form of dispatch, for callers outside an event loop."""
        asyncio.run(self.dispatch(payload, res))


async def _call_handler(handler: WebhookHandler, body: Any, res: WebhookResponse) -> None:
    if inspect.iscoroutinefunction(handler):
        result = handler(body, res)
    else:
        result = await run_in_threadpool(handler, body, res)
    # Callable objects with an async __call__ only show up as awaitables
    if inspect.isawaitable(result):
        await result


async def parse_webhook_body(request: Request) -> Any:
    """Parse a JSON or urlencoded request body."""
    raw = await request.body()
    content_type = request.headers.get("content-type", "")
    if "application/x-www-form-urlencoded" in content_type:
        return dict(parse_qsl(raw.decode("utf-8"), keep_blank_values=True))
    if not raw:
        return {}
    return await request.json()


class WebhookReceptor:
    """A small FastAPI app relaying Discourse webhooks to a dispatcher."""

    def __init__(
        self,
        dispatcher: Optional[WebhookDispatcher] = None,
        app: Optional[FastAPI] = None,
        api: Optional["DiscourseClient"] = None,
    ):
        """Initialize the receptor.

        Args:
            dispatcher: Handler registry; a new one by default
            app: FastAPI app to add routes to; a new one by default
            api: Client handlers can reply through, as ``receptor.api``
        """
        self.dispatcher = dispatcher or WebhookDispatcher()
        self.app = app or FastAPI()
        self.api = api

    def on(self, event_name: str, handler: WebhookHandler) -> None:
        """Register a handler on the dispatcher. See WebhookDispatcher.on."""
        self.dispatcher.on(event_name, handler)

    def register_webhook_path(self, path: str) -> None:
        """Accept webhook deliveries as POST requests on ``path``."""

        async def receive_webhook(request: Request) -> JSONResponse:
            try:
                payload = await parse_webhook_body(request)
            except ValueError as exc:
                logger.warning("Invalid webhook body: %s", exc)
                return JSONResponse({"text": "400 error", "details": "invalid JSON body"}, status_code=400)

            res = WebhookResponse()
            await self.dispatcher.dispatch(payload, res)
            if not res.sent:
                return JSONResponse({}, status_code=200)
            return JSONResponse(res.body, status_code=res.status_code)

        self.app.add_api_route(path, receive_webhook, methods=["POST"])

    def start_webhook(self, port: int = 80, host: str = "0.0.0.0") -> None:
        """Serve the app with uvicorn. Blocks until the server stops."""
        logger.info("Starting webhook receptor on %s:%s", host, port)
        uvicorn.run(self.app, host=host, port=port)
