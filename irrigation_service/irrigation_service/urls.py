from django.urls import path
from .views.health_views import alive_check
from .views.plan_views import compute_plan, get_plan_params, get_soil_status

urlpatterns = [
    path('health', alive_check, name='alive_check'),
    path('irrigation/plan', compute_plan, name='compute_plan'),
    path('irrigation/params', get_plan_params, name='get_plan_params'),
    path('irrigation/soil-status', get_soil_status, name='get_soil_status'),
]
