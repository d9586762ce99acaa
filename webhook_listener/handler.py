# webhook_listener/handler.py
"""
Core webhook ingestion: validate the body, build a WebhookRecord, persist it
and answer with a JSON acknowledgment. Framework adapters (Flask, Lambda)
translate their native request/response types to the ones defined here.
"""
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Optional, Union

from .models import WebhookRecord, utcnow

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST",
}

MISSING_BODY = "Missing request body"
INVALID_JSON = "Invalid JSON in request body"
INTERNAL_ERROR = "Internal server error"
RECEIVED = "Webhook received successfully"

@dataclass
class WebhookRequest:
    method: str
    body: Optional[Union[str, bytes]] = None

@dataclass
class WebhookResponse:
    status_code: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    @property
    def json(self):
        return json.loads(self.body) if self.body else None

def json_response(status_code: int, data: dict) -> WebhookResponse:
    headers = {**CORS_HEADERS, "Content-Type": "application/json"}
    return WebhookResponse(status_code, json.dumps(data, separators=(",", ":")), headers)

def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")

def parse_json(body: Union[str, bytes]):
    # strict decode; UnicodeDecodeError is a ValueError
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return json.loads(body, parse_constant=_reject_constant)

def handle_webhook(
    request: WebhookRequest,
    *,
    store,
    request_id: str,
    clock: Callable[[], datetime] = utcnow,
) -> WebhookResponse:
    if (request.method or "").upper() == "OPTIONS":
        return WebhookResponse(200)

    try:
        if not request.body:
            logger.warning("Rejected webhook %s: missing body", request_id)
            return json_response(400, {"error": MISSING_BODY})

        try:
            payload = parse_json(request.body)
        except (ValueError, RecursionError):
            logger.warning("Rejected webhook %s: invalid JSON", request_id)
            return json_response(400, {"error": INVALID_JSON})

        record = WebhookRecord.build(request_id, payload, clock())
        store.put(record)
        logger.info("Stored webhook %s at %s", record.id, record.timestamp)

        return json_response(200, {
            "message": RECEIVED,
            "id": record.id,
            "timestamp": record.timestamp,
        })

    except Exception:
        logger.exception("Error processing webhook %s", request_id)
        return json_response(500, {"error": INTERNAL_ERROR, "requestId": request_id})
