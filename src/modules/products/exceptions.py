"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.  They
propagate untouched to ``inventory_exception_handler``.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class ProductNotFound(NotFound):
    """The requested (or referenced) product does not exist."""

    entity = "Product"
