"""Exceptions métier du Products Service."""
from typing import Optional


class ProductServiceError(Exception):
    """Base de toutes les erreurs du service"""

    error_type = "error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProductValidationError(ProductServiceError):
    """Body rejeté avant toute mutation du store"""

    error_type = "invalid_payload"


class PayloadTooLargeError(ProductValidationError):
    error_type = "overflow"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__("overflow")


class InvalidPayloadError(ProductValidationError):
    def __init__(self, reason: str, details: Optional[list] = None):
        self.reason = reason
        self.details = details or []
        super().__init__(f"Invalid product payload: {reason}")


class ProductNotFoundError(ProductServiceError):
    error_type = "not_found"

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__("Product not found")
