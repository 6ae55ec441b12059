import logging

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers.plan_serializer import PlanRequestSerializer, PlanResponseSerializer
from ..service.plan_service import compute_irrigation_plan, get_planner, soil_status, summarize_plan
from ..utils.planner_config import ConfigurationError
from ..utils.response_wrapper import response_wrapper

logger = logging.getLogger(__name__)

PLAN_ACTIONS = [{"name": "watering", "type": "float"}]

PLAN_FORECASTS = [{"name": "soil-moisture"}]

PLAN_PARAM_DEFS = [
    {"name": "initial_moisture", "type": "sensor", "input_type": "int", "required": True},
    {"name": "forecasts", "type": "static", "input_type": "list", "required": True,
     "fields": ["date", "temp_max", "temp_min", "precip_mm"]},
]


@api_view(['POST'])
@permission_classes([AllowAny])
def compute_plan(request) -> Response:
    """
    Compute the irrigation plan for one device and send it to the Dashboard
    :param initial_moisture: latest raw soil moisture reading
    :param forecasts: chronological list of {date, temp_max, temp_min, precip_mm}
    """
    request_serializer = PlanRequestSerializer(data=request.data)
    if not request_serializer.is_valid():
        return Response(request_serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    initial_moisture = request_serializer.validated_data["initial_moisture"]
    forecasts = request_serializer.forecast_days()

    try:
        planner = get_planner()
        plan, soil_series = compute_irrigation_plan(initial_moisture, forecasts, planner=planner)
    except ConfigurationError as e:
        logger.error("Planner configuration invalid: %s", e)
        return Response({"error": f"Planner configuration invalid: {e}"},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response_data = {
        "initial_moisture": initial_moisture,
        "plan": [
            {"date": entry.date, "planned_volume_l": entry.planned_volume_l, "soil_moisture": moisture}
            for entry, moisture in zip(plan, soil_series)
        ],
        "summary": summarize_plan(plan, soil_series, planner.config),
        "dashboard": response_wrapper(plan, soil_series, timezone=settings.TIME_ZONE),
    }

    result_serializer = PlanResponseSerializer(data=response_data)
    result_serializer.is_valid(raise_exception=True)

    return Response(result_serializer.data, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([AllowAny])
def get_plan_params(request) -> Response:
    try:
        config = get_planner().config
    except ConfigurationError as e:
        return Response({"error": f"Planner configuration invalid: {e}"},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(
        {
            "input_parameters": PLAN_PARAM_DEFS,
            "actions": PLAN_ACTIONS,
            "forecasts": PLAN_FORECASTS,
            "planner": config.to_dict(),
        }, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([AllowAny])
def get_soil_status(request) -> Response:
    value = request.query_params.get("moisture")
    if value is None:
        return Response({"error": "Missing parameter: moisture"}, status=status.HTTP_400_BAD_REQUEST)
    try:
        moisture = int(value)
    except ValueError:
        return Response({"error": f"Invalid moisture: {value}"}, status=status.HTTP_400_BAD_REQUEST)

    try:
        config = get_planner().config
    except ConfigurationError as e:
        return Response({"error": f"Planner configuration invalid: {e}"},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({"moisture": moisture, "status": soil_status(moisture, config)},
                    status=status.HTTP_200_OK)
