# webhook_listener/lambda_function.py
"""
AWS Lambda entry point for API Gateway proxy integrations.

Handler setting: ``webhook_listener.lambda_function.lambda_handler``.
Both REST (payload 1.0) and HTTP API (payload 2.0) events are accepted.
"""
import base64
import json
import logging
import uuid

from . import config
from .handler import WebhookRequest, WebhookResponse, handle_webhook, json_response, INTERNAL_ERROR
from .models import utcnow
from .utils.dynamodb import DynamoDBRecordStore

logger = logging.getLogger(__name__)
logging.getLogger().setLevel(config.get_log_level())

_store = None

def get_store():
    # one client per container, reused across warm invocations
    global _store
    if _store is None:
        _store = DynamoDBRecordStore(config.get_table_name(), region_name=config.get_aws_region())
    return _store

def request_from_event(event: dict) -> WebhookRequest:
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method") or ""

    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        # raw bytes; the handler decodes them strictly
        body = base64.b64decode(body)
    return WebhookRequest(method=method, body=body)

def to_proxy_result(response: WebhookResponse) -> dict:
    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body,
    }

def lambda_handler(event, context, store=None, clock=utcnow):
    request_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    logger.debug("Event: %s", json.dumps(event, default=str))

    try:
        request = request_from_event(event)
    except Exception:
        logger.exception("Malformed proxy event %s", request_id)
        return to_proxy_result(json_response(500, {"error": INTERNAL_ERROR, "requestId": request_id}))

    response = handle_webhook(
        request,
        store=store if store is not None else get_store(),
        request_id=request_id,
        clock=clock,
    )
    return to_proxy_result(response)
