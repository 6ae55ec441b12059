from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..service.plan_service import get_planner
from ..utils.planner_config import ConfigurationError


@api_view(['GET'])
@permission_classes([AllowAny])
def alive_check(request) -> Response:
    """
    Simple health check endpoint.
    Also confirms the irrigation planner can be built from the current settings.
    Returns:
        200 OK with {"status": "alive"} if successful.
        500 Internal Server Error with {"status": "error", "message": <error_message>} if failed.
    """
    try:
        get_planner()
        return Response({"status": "alive"}, status=status.HTTP_200_OK)
    except ConfigurationError as e:
        return Response({"status": "error", "message": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
