"""Static values shared by the server modules."""

PROJECT_NAME = "Visitor Log"
API_PREFIX = "/api"
API_VERSION = "0.1.0"
SCHEMA_VERSION = "v1"
