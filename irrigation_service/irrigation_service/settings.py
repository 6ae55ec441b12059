import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "irrigation_service.irrigation_service.urls"

TIME_ZONE = os.environ.get("TIME_ZONE", "UTC")
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# Planner parameters, overridable per deployment via environment variables.
# Unset variables fall back to the defaults in utils/config.py.
IRRIGATION_PLANNER = {
    "soil_optimal_min": os.environ.get("PLANNER_SOIL_OPTIMAL_MIN"),
    "soil_optimal_max": os.environ.get("PLANNER_SOIL_OPTIMAL_MAX"),
    "max_irrigation_per_day": os.environ.get("PLANNER_MAX_IRRIGATION_PER_DAY"),
    "base_et": os.environ.get("PLANNER_BASE_ET"),
    "temp_factor": os.environ.get("PLANNER_TEMP_FACTOR"),
    "rain_conversion": os.environ.get("PLANNER_RAIN_CONVERSION"),
    "adc_to_moisture": os.environ.get("PLANNER_ADC_TO_MOISTURE"),
    "cost_w1": os.environ.get("PLANNER_COST_W1"),
    "cost_w2": os.environ.get("PLANNER_COST_W2"),
    "cost_w3": os.environ.get("PLANNER_COST_W3"),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "irrigation_service": {
            "handlers": ["console"],
            "level": os.environ.get("LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
