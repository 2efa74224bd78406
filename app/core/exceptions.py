"""
Error kinds raised by the service layer.

These are plain exceptions so the services stay independent of FastAPI;
app.main maps them to HTTP status codes.
"""


class TechMarketError(Exception):
    """Base class for every domain error"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(TechMarketError):
    """Malformed or out-of-range id, quantity, rating or field value"""


class NotFound(TechMarketError):
    """Referenced user, product, category, review or cart item does not exist"""


class Unavailable(TechMarketError):
    """Product exists but is marked unavailable"""

    def __init__(self, product_id: int):
        super().__init__(f"Product with id {product_id} is not available")
        self.product_id = product_id


class InsufficientStock(TechMarketError):
    """Requested total quantity exceeds current stock"""

    def __init__(self, product_id: int, available: int, requested: int):
        super().__init__(
            f"Not enough stock available for product {product_id}. "
            f"Requested: {requested}, current stock: {available}"
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested
