"""Server-wide constants."""

PROJECT_NAME = "Film Query Service"
API_V1_STR = "/api/v1"

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"
PROBLEM_TYPE_INVALID_PARAMETER = "https://example.com/problems/invalid-parameter"
PROBLEM_TYPE_INTERNAL_ERROR = "https://example.com/problems/internal-error"

SLOW_REQUEST_THRESHOLD_MS = 1000
