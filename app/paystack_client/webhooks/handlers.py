"""
Table-driven dispatch of webhook events to handlers.

A WebhookDispatcher maps event type strings to handler functions. Events
with no registered handler go to the default handler, which logs and
succeeds, so new Paystack event types never break the endpoint.

Paystack may deliver the same event more than once. The dispatcher keeps
no record of what it has seen; handlers must be idempotent (for example
by keying on ``data["reference"]``).

Usage:
    from paystack_client.webhooks.handlers import register_handler

    @register_handler("charge.success")
    def handle_charge_success(payload: WebhookPayload) -> ServiceResult:
        order = Order.objects.get(reference=payload.data["reference"])
        order.mark_paid(amount_minor=payload.data["amount"])
        return ServiceResult.success(order.id)

    # In the view
    result = dispatcher.dispatch(payload)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from core.services import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paystack_client.webhooks.verifier import WebhookPayload


logger = logging.getLogger(__name__)


WebhookHandler = Callable[["WebhookPayload"], Optional[ServiceResult]]


def handle_unknown_event(payload: WebhookPayload) -> ServiceResult:
    """Default handler: log the event and report success."""
    logger.info(
        f"No handler registered for event type: {payload.event}",
        extra={"event_type": payload.event},
    )
    return ServiceResult.success(None)


class WebhookDispatcher:
    """
    Routes webhook payloads to handlers by event type.

    Attributes:
        handlers: Event type -> handler
        default: Handler for unmatched event types
    """

    def __init__(
        self,
        handlers: Mapping[str, WebhookHandler] | None = None,
        default: WebhookHandler | None = None,
    ) -> None:
        self.handlers: dict[str, WebhookHandler] = dict(handlers or {})
        self.default: WebhookHandler = default or handle_unknown_event

    def register(self, event_type: str) -> Callable[[WebhookHandler], WebhookHandler]:
        """
        Decorator to register a handler for ``event_type``.

        A later registration for the same event type replaces the earlier one.
        The handler must return a ServiceResult or None; anything else makes
        dispatch() raise TypeError.
        """

        def decorator(func: WebhookHandler) -> WebhookHandler:
            self.handlers[event_type] = func
            logger.debug(f"Registered webhook handler for {event_type}")
            return func

        return decorator

    def handler_for(self, event_type: str | None) -> WebhookHandler:
        if event_type is None:
            return self.default
        return self.handlers.get(event_type, self.default)

    def dispatch(self, payload: WebhookPayload) -> ServiceResult:
        """
        Call the handler for ``payload.event``.

        Handler exceptions propagate to the caller. A handler that returns
        None is treated as a success with no data.

        Raises:
            TypeError: If the handler returns anything other than a
                ServiceResult or None
        """
        handler = self.handler_for(payload.event)
        if handler is not self.default:
            logger.info(
                f"Dispatching {payload.event} to handler",
                extra={"event_type": payload.event},
            )

        result = handler(payload)
        if result is None:
            return ServiceResult.success(None)
        if not isinstance(result, ServiceResult):
            logger.error(
                f"Webhook handler for {payload.event} returned {type(result).__name__}",
                extra={"event_type": payload.event, "result_type": type(result).__name__},
            )
            raise TypeError(
                f"Webhook handler for {payload.event!r} must return ServiceResult or None, "
                f"not {type(result).__name__}"
            )
        return result


# Registry used by the webhook endpoint
dispatcher = WebhookDispatcher()


def register_handler(event_type: str) -> Callable[[WebhookHandler], WebhookHandler]:
    """
    Register a handler on the module-level dispatcher.

    Handlers take a WebhookPayload and return a ServiceResult, or None
    for a plain success. A failed result makes the endpoint answer 400 so
    Paystack redelivers the event.
    """
    return dispatcher.register(event_type)


def dispatch_webhook(payload: WebhookPayload) -> ServiceResult:
    """Dispatch through the module-level dispatcher."""
    return dispatcher.dispatch(payload)
