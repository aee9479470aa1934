from rest_framework import viewsets, filters
from django_filters.rest_framework import DjangoFilterBackend
from .mixins import OptimizedQuerysetMixin


class BaseViewSet(OptimizedQuerysetMixin, viewsets.ModelViewSet):
    """
    Base ViewSet that provides standard configuration for all ModelViewSets.

    Features:
    - Automatic query optimization via OptimizedQuerysetMixin
    - Standard filtering and ordering backends
    - Errors rendered by core_backend.exceptions.api_exception_handler

    Usage:
        class TableViewSet(BaseViewSet):
            queryset = Table.objects.all()
            serializer_class = TableSerializer
    """

    filter_backends = [
        DjangoFilterBackend,
        filters.OrderingFilter,
    ]

    # Default ordering (can be overridden)
    ordering = ['-id']


class ReadOnlyBaseViewSet(OptimizedQuerysetMixin, viewsets.ReadOnlyModelViewSet):
    """Base ViewSet for read-only endpoints."""

    filter_backends = [
        DjangoFilterBackend,
        filters.OrderingFilter,
    ]
    ordering = ['-id']
