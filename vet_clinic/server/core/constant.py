"""Server-wide constants."""

PROJECT_NAME = "Vet Clinic Records API"
API_V1_STR = "/api/v1"
