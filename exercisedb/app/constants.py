"""Header values shared by the HTTP routes."""

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "*",
}

# Resolved media never changes, so clients may cache it indefinitely.
IMMUTABLE_CACHE_CONTROL = "public, max-age=31536000, immutable"

INVALID_FILENAME_MESSAGE = "Invalid filename"
MEDIA_NOT_FOUND_MESSAGE = "Media not found"
ROUTE_NOT_FOUND_MESSAGE = (
    "route not found!!. check docs at https://v1.exercisedb.dev/docs"
)
