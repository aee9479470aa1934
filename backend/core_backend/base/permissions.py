from rest_framework import permissions


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Authenticated staff may read; only admins (``is_staff``) may write.
    Used by the catalogue, table and settings endpoints.
    """

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        return bool(request.user.is_staff)
