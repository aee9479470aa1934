from rest_framework.response import Response
from rest_framework.views import APIView

from core_backend.base import IsAdminOrReadOnly
from .serializers import GlobalSettingsSerializer
from .services import SettingsService


class GlobalSettingsView(APIView):
    """
    API endpoint for viewing and editing the single GlobalSettings object.
    """

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        instance = SettingsService.get_global_settings()
        return Response(GlobalSettingsSerializer(instance).data)

    def patch(self, request):
        instance = SettingsService.get_global_settings()
        serializer = GlobalSettingsSerializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated = SettingsService.update_global_settings(serializer.validated_data)
        return Response(GlobalSettingsSerializer(updated).data)
