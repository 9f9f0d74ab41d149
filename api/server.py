import logging
import threading
from typing import Optional

from flask import Flask, request, jsonify, Response
from flask_cors import CORS
from pydantic import ValidationError

from chat.client import ChatClient
from chat.errors import ChatCompletionError, ModelConfigurationError
from config.env import (
    ServerSettings,
    get_env,
    API_KEY_VARS,
    DEPLOYMENT_VARS,
    ENDPOINT_VARS,
    NOT_SET,
)
from models.request import ChatRequest, SimpleChatRequest
from models.response import ErrorResponse, HealthResponse
from utils.masking import mask_api_key

logger = logging.getLogger("chatdemo.api")

app = Flask(__name__)
frontend_origin = ServerSettings.from_env().frontend_origin
CORS(app, resources={r"/api/*": {"origins": frontend_origin}, r"/health": {"origins": frontend_origin}})

_chat_client: Optional[ChatClient] = None
_chat_client_lock = threading.Lock()


def get_chat_client() -> ChatClient:
    """Return the process-wide chat client, creating it on first use."""
    global _chat_client
    with _chat_client_lock:
        if _chat_client is None:
            _chat_client = ChatClient()
        return _chat_client


def reset_chat_client() -> None:
    """Drop the cached client so the next request rereads the settings."""
    global _chat_client
    with _chat_client_lock:
        _chat_client = None


def _format_validation_error(err: ValidationError) -> str:
    try:
        details = err.errors() or []
    except Exception:
        details = []
    if not details:
        return "Invalid request data"
    first = details[0]
    loc = ".".join(str(item) for item in first.get("loc", []) if item != "__root__")
    msg = first.get("msg", "Invalid request data")
    return f"{loc}: {msg}" if loc else msg


def _error(message: str, code: str, status: int):
    error_resp = ErrorResponse(error=message, code=code)
    return jsonify(error_resp.model_dump()), status


def _text(reply: str) -> Response:
    return Response(reply, status=200, mimetype="text/plain")


def _complete(call):
    """Run a chat call and map failures to error responses."""
    try:
        client = get_chat_client()
        return _text(call(client))
    except ModelConfigurationError as e:
        logger.error(f"Chat client setup error: {e}")
        return _error(f"Azure client setup error: {str(e)}", e.code, 500)
    except ChatCompletionError as e:
        return _error(f"Processing error: {str(e)}", e.code, 502)


@app.get("/health")
def health():
    response = HealthResponse(
        endpoint=get_env(*ENDPOINT_VARS, default=NOT_SET),
        deployment_name=get_env(*DEPLOYMENT_VARS, default=NOT_SET),
        api_key_status=mask_api_key(get_env(*API_KEY_VARS)),
    )
    return jsonify(response.model_dump(by_alias=True))


@app.post("/api/chat/simple")
def simple_chat():
    """Send the raw request body to the model as a single user message."""
    try:
        req = SimpleChatRequest(message=request.get_data(as_text=True))
    except ValidationError as e:
        return _error(_format_validation_error(e), "VALIDATION_ERROR", 400)

    return _complete(lambda client: client.simple(req.message))


@app.post("/api/chat/detailed")
def detailed_chat():
    """Send optional system instructions and a user message with an optional temperature."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error("Request body must be a JSON object", "VALIDATION_ERROR", 400)

    try:
        req = ChatRequest(**data)
    except ValidationError as e:
        return _error(_format_validation_error(e), "VALIDATION_ERROR", 400)

    return _complete(lambda client: client.detailed(req))
