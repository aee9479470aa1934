"""
Orders services package.

- OrderService: order lifecycle (create, update, status transitions, table side effects)
- OrderNumberService: sequential order numbers from a locked counter row
"""

from .order_service import OrderService
from .numbering_service import OrderNumberService, next_order_number

__all__ = [
    'OrderService',
    'OrderNumberService',
    'next_order_number',
]
