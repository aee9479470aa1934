import logging

from core_backend.base import BaseViewSet, IsAdminOrReadOnly
from core_backend.exceptions import ValidationError
from .filters import TableFilter
from .models import Table
from .serializers import TableSerializer

logger = logging.getLogger(__name__)


class TableViewSet(BaseViewSet):
    """
    CRUD for tables. Everyone signed in can see the floor; only admins may
    add, edit or remove tables.
    """

    queryset = Table.objects.all()
    serializer_class = TableSerializer
    permission_classes = [IsAdminOrReadOnly]
    filterset_class = TableFilter
    ordering = ["number"]
    ordering_fields = ["number", "name", "capacity", "status"]

    def perform_destroy(self, instance):
        if instance.current_order_id is not None:
            raise ValidationError(
                f"Table '{instance.name}' is holding an order and cannot be deleted."
            )
        logger.info(f"Deleting table '{instance.name}' (#{instance.number})")
        instance.delete()
