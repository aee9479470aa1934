import logging

from django.db import transaction

from core_backend.exceptions import NotFoundError, ValidationError
from .models import Table

logger = logging.getLogger(__name__)


class TableService:
    """
    Table occupancy side effects of the order lifecycle.

    Both operations lock the table row and must run inside the caller's
    transaction so the order write and the table write commit together.
    """

    @staticmethod
    def get_table_for_update(table_id) -> Table:
        try:
            return Table.objects.select_for_update().get(pk=table_id)
        except (Table.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Table {table_id} not found.")

    @staticmethod
    def ensure_available(table: Table) -> None:
        if not table.is_available or table.current_order_id is not None:
            raise ValidationError(
                f"Table '{table.name}' is not available (status: {table.status})."
            )

    @staticmethod
    @transaction.atomic
    def occupy(table: Table, order) -> Table:
        table.status = Table.Status.OCCUPIED
        table.current_order = order
        table.save(update_fields=["status", "current_order"])
        logger.info(f"Table '{table.name}' occupied by order #{order.order_number}")
        return table

    @staticmethod
    @transaction.atomic
    def release(table_id, order=None):
        """
        Set the table back to available and clear its current order.

        When ``order`` is given the table is only released if that order is
        the one holding it; a table already reassigned to a newer order is
        left alone. Returns the table, or None if it no longer exists.
        """
        table = Table.objects.select_for_update().filter(pk=table_id).first()
        if table is None:
            logger.warning(f"Cannot release table {table_id}: it no longer exists")
            return None

        if order is not None and table.current_order_id not in (None, order.pk):
            logger.warning(
                f"Table '{table.name}' is held by another order; not releasing for order #{order.order_number}"
            )
            return table

        table.status = Table.Status.AVAILABLE
        table.current_order = None
        table.save(update_fields=["status", "current_order"])
        logger.info(f"Table '{table.name}' released")
        return table
