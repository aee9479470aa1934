import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, List, Mapping

from django.db import transaction

from core_backend.exceptions import ValidationError
from .models import Tender
from .money import DEFAULT_CURRENCY, ZERO, from_minor, sum_amounts, to_decimal, to_minor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TenderSummary:
    paid_amount: Decimal
    remaining_amount: Decimal
    is_paid: bool


def _tender_values(tender: Any):
    if isinstance(tender, Mapping):
        return to_decimal(tender.get("amount", ZERO)), to_decimal(tender.get("tip") or ZERO)
    return to_decimal(tender.amount), to_decimal(tender.tip or ZERO)


class TenderReconciler:
    """
    Reconciles a list of tenders against an order total.

    - paid_amount counts amount + tip of every tender.
    - remaining_amount only counts the base amounts and floors at zero, so an
      over-payment is change handed back, not a credit.
    - is_paid compares base amounts against the total in minor units.
    """

    def __init__(self, total: Decimal, currency: str = DEFAULT_CURRENCY):
        self.total = to_decimal(total)
        self.currency = currency

    def reconcile(self, tenders: Iterable[Any]) -> TenderSummary:
        values = [_tender_values(tender) for tender in tenders]
        for amount, tip in values:
            if amount < 0 or tip < 0:
                raise ValidationError("Tender amount and tip must not be negative.")

        base_minor = to_minor(self.currency, sum_amounts(amount for amount, _ in values))
        paid_minor = to_minor(
            self.currency, sum_amounts(amount + tip for amount, tip in values)
        )
        total_minor = to_minor(self.currency, self.total)

        return TenderSummary(
            paid_amount=from_minor(self.currency, paid_minor),
            remaining_amount=from_minor(self.currency, max(0, total_minor - base_minor)),
            is_paid=base_minor >= total_minor,
        )


def reconcile_tenders(total, tenders, currency: str = DEFAULT_CURRENCY) -> TenderSummary:
    return TenderReconciler(total, currency).reconcile(tenders)


class PaymentService:
    """
    Records the tender list of an order and keeps its payment bookkeeping
    (paid_amount, remaining_amount, is_paid) consistent.
    """

    @staticmethod
    def build_tenders(order, tenders_data: Iterable[Mapping]) -> List[Tender]:
        """
        Unsaved Tender rows for ``order``. A tender submitted without an
        amount covers whatever is still due after the tenders before it, so
        a single-tender checkout only needs to name the method.
        """
        tenders = []
        due = to_decimal(order.total)
        for data in tenders_data:
            method = data.get("method") or Tender.Method.CASH
            if method not in Tender.Method.values:
                raise ValidationError(f"Unknown payment method '{method}'.")
            amount = data.get("amount")
            amount = max(due, ZERO) if amount is None else to_decimal(amount)
            due -= amount
            tenders.append(
                Tender(
                    order=order,
                    method=method,
                    amount=amount,
                    tip=to_decimal(data.get("tip") or ZERO),
                    reference=data.get("reference") or "",
                )
            )
        return tenders

    @staticmethod
    def apply_summary(order, summary: TenderSummary) -> None:
        order.paid_amount = summary.paid_amount
        order.remaining_amount = summary.remaining_amount
        order.is_paid = summary.is_paid

    @staticmethod
    @transaction.atomic
    def record_tenders(order, tenders_data: Iterable[Mapping], currency: str = DEFAULT_CURRENCY):
        """
        Replace the order's tenders with ``tenders_data`` and re-derive its
        payment fields. The whole list is written at once or not at all.
        """
        tenders = PaymentService.build_tenders(order, tenders_data)
        summary = reconcile_tenders(order.total, tenders, currency)

        order.payments.all().delete()
        Tender.objects.bulk_create(tenders)

        PaymentService.apply_summary(order, summary)
        order.save(update_fields=["paid_amount", "remaining_amount", "is_paid", "updated_at"])

        logger.info(
            f"Recorded {len(tenders)} tender(s) for order #{order.order_number}: "
            f"paid={summary.paid_amount} remaining={summary.remaining_amount} is_paid={summary.is_paid}"
        )
        return summary

    @staticmethod
    def refresh_summary(order, currency: str = DEFAULT_CURRENCY) -> TenderSummary:
        """Re-derive payment fields from the tenders already stored (e.g. after the total changed)."""
        summary = reconcile_tenders(order.total, order.payments.all(), currency)
        PaymentService.apply_summary(order, summary)
        return summary
