# Constants
LOCAL_BACKEND_ID = "Local"
BROWZINE_BACKEND_ID = "BrowZine"

BROWZINE_BASE_URL = "https://public-api.thirdiron.com/public/v1/"
BROWZINE_TIMEOUT_SECONDS: float = 30.0

DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 100

MATCH_ALL_QUERIES = ("", "*", "*:*")

LOCAL_BACKEND_TYPE = "memory"
