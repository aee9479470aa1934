import logging

from django.db import transaction
from django.db.models import F

from orders.models import OrderNumberCounter

logger = logging.getLogger(__name__)

ORDER_NUMBER_COUNTER = "orderNumber"


class OrderNumberService:
    """
    Issues order numbers from a single shared counter row.

    The counter row is locked (SELECT ... FOR UPDATE) and incremented in the
    database with an F() expression, so two concurrent callers can never read
    the same value. Call it inside the transaction that persists the order:
    if that transaction rolls back, the increment rolls back with it.
    """

    @staticmethod
    @transaction.atomic
    def next_order_number(counter_name: str = ORDER_NUMBER_COUNTER) -> int:
        counter, _ = OrderNumberCounter.objects.select_for_update().get_or_create(
            name=counter_name, defaults={"value": 0}
        )
        OrderNumberCounter.objects.filter(pk=counter.pk).update(value=F("value") + 1)
        counter.refresh_from_db(fields=["value"])
        logger.debug(f"Issued order number {counter.value} from counter '{counter_name}'")
        return counter.value

    @staticmethod
    def peek(counter_name: str = ORDER_NUMBER_COUNTER) -> int:
        """Last issued number, 0 before first use. Does not allocate."""
        return (
            OrderNumberCounter.objects.filter(name=counter_name)
            .values_list("value", flat=True)
            .first()
            or 0
        )


def next_order_number(counter_name: str = ORDER_NUMBER_COUNTER) -> int:
    return OrderNumberService.next_order_number(counter_name)
