import logging
from decimal import Decimal
from typing import Iterable, List, Mapping, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction

from core_backend.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from orders.calculators import OrderCalculator
from orders.models import Order, OrderItem
from payments.money import quantize, to_decimal
from payments.services import PaymentService
from products.services import ProductService
from settings.services import SettingsService
from tables.services import TableService

from .numbering_service import OrderNumberService

logger = logging.getLogger(__name__)

# Largest accepted gap between a client's total and subtotal + tax_amount.
TOTALS_TOLERANCE = Decimal("0.01")


def _display_name(user) -> str:
    return user.get_full_name() or user.get_username()


class OrderService:
    """Core service for the order lifecycle: creating, updating and transitioning orders."""

    # Valid status transitions for the order state machine
    VALID_STATUS_TRANSITIONS = {
        Order.OrderStatus.PREPARING: [
            Order.OrderStatus.SERVED,
            Order.OrderStatus.BILLED,
            Order.OrderStatus.CANCELLED,
        ],
        Order.OrderStatus.SERVED: [
            Order.OrderStatus.PREPARING,  # Revert, e.g. an item sent back
            Order.OrderStatus.BILLED,
            Order.OrderStatus.CANCELLED,
        ],
        Order.OrderStatus.BILLED: [],
        Order.OrderStatus.CANCELLED: [],
    }

    # Fields PATCH /orders/:id may change directly
    UPDATABLE_FIELDS = ("notes", "customer_name", "customer_phone", "waiter_name")

    @staticmethod
    def strict_transitions() -> bool:
        return getattr(settings, "ORDER_STRICT_STATUS_TRANSITIONS", True)

    @staticmethod
    def can_transition(current_status: str, new_status: str, strict: Optional[bool] = None) -> bool:
        """
        Whether ``current_status -> new_status`` is allowed.

        In lenient mode (``ORDER_STRICT_STATUS_TRANSITIONS = False``) any
        known status is accepted from any state.
        """
        if strict is None:
            strict = OrderService.strict_transitions()
        if new_status not in Order.OrderStatus.values:
            return False
        if not strict:
            return True
        return new_status in OrderService.VALID_STATUS_TRANSITIONS.get(current_status, [])

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @staticmethod
    def get_order(order_id, for_update: bool = False) -> Order:
        queryset = Order.objects.select_for_update() if for_update else Order.objects.all()
        try:
            return queryset.get(pk=order_id)
        except (Order.DoesNotExist, DjangoValidationError, ValueError, TypeError):
            raise NotFoundError(f"Order {order_id} not found.")

    @staticmethod
    def get_kitchen_orders():
        """Active orders for the kitchen display, oldest first."""
        return (
            Order.objects.filter(status__in=Order.ACTIVE_STATUSES)
            .select_related("table")
            .prefetch_related("items")
            .order_by("created_at")
        )

    @staticmethod
    def _get_user(user_id):
        User = get_user_model()
        try:
            return User.objects.get(pk=user_id)
        except (User.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"User {user_id} not found.")

    # ------------------------------------------------------------------
    # Lines and totals
    # ------------------------------------------------------------------

    @staticmethod
    def build_lines(items_data: Iterable[Mapping]) -> List[OrderItem]:
        """
        Unsaved OrderItem rows with the product snapshot applied: name,
        price and taxability default to the product's current values.
        """
        lines = []
        for data in items_data:
            quantity = int(data.get("quantity", 1))
            if quantity < 1:
                raise ValidationError("Item quantity must be at least 1.")

            variant = data.get("variant") or ""
            snapshot = ProductService.snapshot(data.get("product_id"), variant or None)

            price = data.get("price")
            price = snapshot.price if price is None else to_decimal(price)
            if price < 0:
                raise ValidationError("Item price must not be negative.")

            is_taxable = data.get("is_taxable")
            lines.append(
                OrderItem(
                    product=snapshot.product,
                    product_name=data.get("product_name") or snapshot.name,
                    variant=variant,
                    quantity=quantity,
                    price_at_sale=price,
                    notes=data.get("notes") or "",
                    is_taxable=snapshot.is_taxable if is_taxable is None else bool(is_taxable),
                )
            )
        return lines

    @staticmethod
    def resolve_totals(lines, draft: Mapping, global_settings) -> dict:
        """
        Totals to persist. Client-supplied totals are kept when all three are
        present and consistent; otherwise the calculator computes them.
        """
        currency = global_settings.currency
        supplied = [draft.get(key) for key in ("subtotal", "tax_amount", "total")]
        calculator = OrderCalculator(lines, global_settings.tax_percentage, currency)

        if all(value is not None for value in supplied):
            subtotal, tax_amount, total = (quantize(currency, value) for value in supplied)
            if min(subtotal, tax_amount, total) < 0:
                raise ValidationError("Order totals must not be negative.")
            if abs(total - (subtotal + tax_amount)) > TOTALS_TOLERANCE:
                raise ValidationError(
                    "Order total must equal subtotal + taxAmount.",
                    details={"total": [f"Expected {subtotal + tax_amount}, got {total}."]},
                )
            line_subtotal = quantize(currency, calculator.calculate_subtotal())
            if subtotal != line_subtotal:
                logger.warning(
                    f"Client subtotal {subtotal} differs from line subtotal {line_subtotal}; "
                    f"keeping client totals"
                )
            # Keep total = subtotal + tax_amount exact once inside tolerance
            return {"subtotal": subtotal, "tax_amount": tax_amount, "total": subtotal + tax_amount}

        totals = calculator.calculate_totals()
        return {"subtotal": totals.subtotal, "tax_amount": totals.tax_amount, "total": totals.total}

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @staticmethod
    def create_order(draft: Mapping, user=None) -> Order:
        """
        Create an order from a validated draft.

        Everything (number allocation, order, lines, tenders and the table
        flip to occupied) commits in one transaction. Validation happens
        before the number is allocated, so a rejected draft never consumes
        an order number.
        """
        try:
            return OrderService._create_order(draft, user)
        except DatabaseError as e:
            logger.error(f"Failed to persist order: {e}", exc_info=True)
            raise PersistenceError("The order could not be saved.") from e

    @staticmethod
    @transaction.atomic
    def _create_order(draft: Mapping, user=None) -> Order:
        items_data = draft.get("items") or []
        if not items_data:
            raise ValidationError("Order must have at least one item")

        order_type = draft.get("order_type") or Order.OrderType.DINE_IN
        if order_type not in Order.OrderType.values:
            raise ValidationError(f"'{order_type}' is not a valid order type.")

        table = None
        table_id = draft.get("table_id")
        if table_id is not None:
            if order_type != Order.OrderType.DINE_IN:
                raise ValidationError("Only dine-in orders can be assigned a table.")
            table = TableService.get_table_for_update(table_id)
            TableService.ensure_available(table)

        global_settings = SettingsService.get_global_settings()
        lines = OrderService.build_lines(items_data)
        totals = OrderService.resolve_totals(lines, draft, global_settings)

        cashier = None
        cashier_name = draft.get("cashier_name") or ""
        if draft.get("cashier_id") is not None:
            cashier = OrderService._get_user(draft["cashier_id"])
        elif user is not None and user.is_authenticated:
            cashier = user
        if cashier is not None and not cashier_name:
            cashier_name = _display_name(cashier)

        waiter = None
        waiter_name = draft.get("waiter_name") or ""
        if draft.get("waiter_id") is not None:
            waiter = OrderService._get_user(draft["waiter_id"])
            waiter_name = waiter_name or _display_name(waiter)

        order = Order.objects.create(
            order_number=OrderNumberService.next_order_number(),
            order_type=order_type,
            status=Order.OrderStatus.PREPARING,
            table=table,
            table_name=draft.get("table_name") or (table.name if table else ""),
            cashier=cashier,
            cashier_name=cashier_name,
            waiter=waiter,
            waiter_name=waiter_name,
            customer_name=draft.get("customer_name") or "",
            customer_phone=draft.get("customer_phone") or "",
            notes=draft.get("notes") or "",
            **totals,
        )

        for line in lines:
            line.order = order
        OrderItem.objects.bulk_create(lines)

        PaymentService.record_tenders(order, draft.get("payments") or [], global_settings.currency)

        if table is not None:
            TableService.occupy(table, order)

        logger.info(
            f"Order #{order.order_number} created ({order.order_type}, {len(lines)} item(s), "
            f"total {order.total}, paid={order.is_paid})"
        )
        return order

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    @staticmethod
    def transition_status(order_id, new_status: str) -> Order:
        """
        Move an order to ``new_status``.

        Raises NotFoundError for an unknown order, ValidationError for an
        unknown status and InvalidTransitionError for an edge the state
        machine does not allow. Reaching billed or cancelled releases the
        order's table in the same transaction.
        """
        try:
            return OrderService._transition_status(order_id, new_status)
        except DatabaseError as e:
            logger.error(f"Failed to persist status change for order {order_id}: {e}", exc_info=True)
            raise PersistenceError("The order status could not be saved.") from e

    @staticmethod
    @transaction.atomic
    def _transition_status(order_id, new_status: str) -> Order:
        if new_status not in Order.OrderStatus.values:
            raise ValidationError(
                f"'{new_status}' is not a valid order status.",
                details={"status": [f"Must be one of: {', '.join(Order.OrderStatus.values)}."]},
            )
        order = OrderService.get_order(order_id, for_update=True)
        return OrderService._apply_transition(order, new_status)

    @staticmethod
    def _apply_transition(order: Order, new_status: str) -> Order:
        previous_status = order.status
        if not OrderService.can_transition(previous_status, new_status):
            raise InvalidTransitionError(
                f"Cannot transition order #{order.order_number} from {previous_status} to {new_status}."
            )

        order.status = new_status
        order.save(update_fields=["status", "updated_at"])

        if new_status in Order.TERMINAL_STATUSES and order.table_id is not None:
            TableService.release(order.table_id, order)

        logger.info(f"Order #{order.order_number} status {previous_status} -> {new_status}")
        return order

    # ------------------------------------------------------------------
    # Generic update
    # ------------------------------------------------------------------

    @staticmethod
    def update_order(order_id, data: Mapping) -> Order:
        """
        Partial update of an open order: notes, customer and waiter details,
        replacement items (totals recomputed) and replacement payments
        (re-reconciled). A ``status`` key goes through the transition guard
        after the other changes are applied.
        """
        try:
            return OrderService._update_order(order_id, data)
        except DatabaseError as e:
            logger.error(f"Failed to persist update for order {order_id}: {e}", exc_info=True)
            raise PersistenceError("The order could not be updated.") from e

    @staticmethod
    @transaction.atomic
    def _update_order(order_id, data: Mapping) -> Order:
        new_status = data.get("status")
        if new_status is not None and new_status not in Order.OrderStatus.values:
            raise ValidationError(f"'{new_status}' is not a valid order status.")

        order = OrderService.get_order(order_id, for_update=True)
        if order.is_terminal and OrderService.strict_transitions():
            raise InvalidTransitionError(
                f"Order #{order.order_number} is {order.status} and can no longer be modified."
            )

        global_settings = SettingsService.get_global_settings()
        changed = []

        for field in OrderService.UPDATABLE_FIELDS:
            if field in data:
                setattr(order, field, data[field] or "")
                changed.append(field)

        if "waiter_id" in data:
            waiter_id = data["waiter_id"]
            order.waiter = OrderService._get_user(waiter_id) if waiter_id is not None else None
            if order.waiter is not None and not data.get("waiter_name"):
                order.waiter_name = _display_name(order.waiter)
                changed.append("waiter_name")
            changed.append("waiter")

        if "items" in data:
            if not data["items"]:
                raise ValidationError("Order must have at least one item")
            lines = OrderService.build_lines(data["items"])
            totals = OrderService.resolve_totals(lines, {}, global_settings)
            order.items.all().delete()
            for line in lines:
                line.order = order
            OrderItem.objects.bulk_create(lines)
            for field, value in totals.items():
                setattr(order, field, value)
            changed.extend(totals.keys())

        if changed:
            if "payments" not in data and "total" in changed:
                PaymentService.refresh_summary(order, global_settings.currency)
                changed.extend(["paid_amount", "remaining_amount", "is_paid"])
            order.save(update_fields=sorted(set(changed)) + ["updated_at"])

        if "payments" in data:
            PaymentService.record_tenders(order, data["payments"] or [], global_settings.currency)

        logger.info(f"Order #{order.order_number} updated: {', '.join(sorted(set(changed))) or 'no field changes'}")

        if new_status is not None and new_status != order.status:
            OrderService._apply_transition(order, new_status)

        return order
