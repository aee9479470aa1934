"""
Core backend base components.

This package provides foundational classes that the apps build their
viewsets, serializers and permissions on, so every endpoint shares the
same query optimisation, error shape and access rules.
"""

from .viewsets import BaseViewSet, ReadOnlyBaseViewSet
from .serializers import BaseModelSerializer, TimestampedSerializer
from .mixins import OptimizedQuerysetMixin
from .permissions import IsAdminOrReadOnly

__all__ = [
    # ViewSets
    'BaseViewSet',
    'ReadOnlyBaseViewSet',

    # Serializers
    'BaseModelSerializer',
    'TimestampedSerializer',

    # Mixins
    'OptimizedQuerysetMixin',

    # Permissions
    'IsAdminOrReadOnly',
]
