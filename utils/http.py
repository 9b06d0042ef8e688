"""
utils/http.py
-------------
Request parsing and response shaping shared by the blueprints.
Successful responses are JSON; every error is a plain-text message.
"""

from typing import Optional, Type, TypeVar

from flask import Response, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from pydantic_schemas.base import Entity

E = TypeVar('E', bound=Entity)


def text_response(message: str, status: int = 200) -> Response:
    return Response(message, status=status, mimetype='text/plain')


def json_response(payload, status: int = 200) -> Response:
    """Serialize an entity, a list of entities, or plain JSON data."""
    if isinstance(payload, Entity):
        payload = payload.to_json()
    elif isinstance(payload, list):
        payload = [item.to_json() if isinstance(item, Entity) else item for item in payload]
    response = jsonify(payload)
    response.status_code = status
    return response


def parse_body(model: Type[E]) -> Optional[E]:
    """
    Parse the JSON request body into `model`.

    Returns None when there is no usable body (empty, malformed JSON, or
    JSON null). Raises BadRequest when the body is not an object or a
    field has the wrong type. Unknown fields are ignored.
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise BadRequest('Request body must be a JSON object')
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise BadRequest(f'Invalid request body: {_describe(e)}') from e


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = '.'.join(str(part) for part in err['loc'])
        parts.append(f"{field}: {err['msg']}")
    return '; '.join(parts)
