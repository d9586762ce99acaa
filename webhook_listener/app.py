# webhook_listener/app.py
import logging
from flask import Blueprint, Response, current_app, jsonify, request

from .handler import WebhookRequest, handle_webhook

logger = logging.getLogger(__name__)

bp = Blueprint("main", __name__)

@bp.route("/", methods=["GET"])
def health():
    return jsonify({"status": "ok"}), 200

# the handler only special-cases OPTIONS; every other method runs the full path
WEBHOOK_METHODS = ["POST", "OPTIONS", "GET", "PUT", "PATCH", "DELETE"]

@bp.route("/webhook", methods=WEBHOOK_METHODS)
def webhook():
    ext = current_app.extensions["webhook_listener"]
    request_id = ext["id_factory"]()

    incoming = WebhookRequest(
        method=request.method,
        body=request.get_data(),
    )
    logger.debug("Received %s /webhook (%s)", request.method, request_id)

    result = handle_webhook(
        incoming,
        store=ext["store"],
        request_id=request_id,
        clock=ext["clock"],
    )
    resp = Response(result.body, status=result.status_code, headers=result.headers)
    if not result.body:
        resp.headers.remove("Content-Type")
    return resp
