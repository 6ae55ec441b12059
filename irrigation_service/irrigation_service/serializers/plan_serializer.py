from rest_framework import serializers

from ..utils.plan_types import ForecastDay


class ForecastDaySerializer(serializers.Serializer):
    date = serializers.CharField(max_length=32)
    temp_max = serializers.FloatField()
    temp_min = serializers.FloatField()
    precip_mm = serializers.FloatField(min_value=0.0)


class PlanRequestSerializer(serializers.Serializer):
    initial_moisture = serializers.IntegerField()
    forecasts = ForecastDaySerializer(many=True, allow_empty=True)

    def forecast_days(self):
        return [ForecastDay(**day) for day in self.validated_data["forecasts"]]


class DailyPlanEntrySerializer(serializers.Serializer):
    date = serializers.CharField()
    planned_volume_l = serializers.FloatField()
    soil_moisture = serializers.FloatField(required=False)


class PlanSummarySerializer(serializers.Serializer):
    total_irrigation_l = serializers.FloatField()
    irrigation_days = serializers.IntegerField()
    days_below_optimal = serializers.IntegerField()
    days_above_optimal = serializers.IntegerField()
    optimal_min = serializers.IntegerField()
    optimal_max = serializers.IntegerField()


# for wrapped response:
class TimeValueSerializer(serializers.Serializer):
    timestamp = serializers.CharField()
    value = serializers.FloatField()


class CaseSeriesSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = TimeValueSerializer(many=True)


class ForecastMetricSerializer(serializers.Serializer):
    name = serializers.CharField()  # soil-moisture
    values = CaseSeriesSerializer(many=True)


class ActionPointSerializer(serializers.Serializer):
    timestamp = serializers.CharField()
    value = serializers.FloatField()  # liters
    action = serializers.ChoiceField(choices=["watering"], required=False)


class ActionsByCaseSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = ActionPointSerializer(many=True)


class PlanWrappedResponseSerializer(serializers.Serializer):
    forecasts = ForecastMetricSerializer(many=True)
    actions = ActionsByCaseSerializer(many=True)


class PlanResponseSerializer(serializers.Serializer):
    initial_moisture = serializers.IntegerField()
    plan = DailyPlanEntrySerializer(many=True)
    summary = PlanSummarySerializer()
    dashboard = PlanWrappedResponseSerializer()
