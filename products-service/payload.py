"""
Lecture bornée du body des requêtes.

Le body est consommé chunk par chunk et rejeté dès que la taille cumulée
dépasse la limite, sans jamais bufferiser au-delà.
"""
from typing import Type, TypeVar
from pydantic import BaseModel, ValidationError
from starlette.requests import Request

from config import MAX_PAYLOAD_SIZE
from errors import InvalidPayloadError, PayloadTooLargeError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def read_bounded_body(request: Request, limit: int = MAX_PAYLOAD_SIZE) -> bytes:
    body = bytearray()
    async for chunk in request.stream():
        if len(body) + len(chunk) > limit:
            raise PayloadTooLargeError(limit)
        body.extend(chunk)
    return bytes(body)


def parse_product(body: bytes, schema: Type[SchemaT]) -> SchemaT:
    """Parse le body en un seul produit (JSON invalide ou mauvais schéma -> InvalidPayloadError)"""
    try:
        # Strict: pas de conversion implicite ("12.5" ou true ne sont pas des prix)
        return schema.model_validate_json(body, strict=True)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        reason = errors[0]["msg"] if errors else "invalid JSON"
        raise InvalidPayloadError(reason, details=errors) from e
