"""Application constants."""

USER_AGENT = "bristol-greenspace/0.3 (+open data catalogue)"

DEFAULT_DELIMITER = ","
MAX_RECORDS = 50
PAGE_SIZE = 10

ALL_FACET = "all"
MAJOR_SITES_FACET = "major"
TYPE_FACET_PREFIX = "type:"
ALL_FACET_LABEL = "All Parks"
MAJOR_SITES_FACET_LABEL = "Major Sites"

DEFAULT_ASSET_ID = "Unknown"
DEFAULT_SITE_CODE = "Unknown"
DEFAULT_FEATURE_GROUP = "Green Space"
DEFAULT_LOCATION = "Bristol"
DEFAULT_TYPE = "General Green Space"
DEFAULT_UNIT = "hectares"
DEFAULT_MAJOR_SITE = "No"
DEFAULT_VALIDATED = "Yes"
DEFAULT_LAST_UPDATED = "August 2025"

# Bristol city centre.
FALLBACK_LAT = 51.4545
FALLBACK_LNG = -2.5879

SQ_METRES_PER_HECTARE = 10_000

EXPORT_HEADERS = ("Park Name", "Type", "Area", "Location", "Rating")

EXIT_SUCCESS = 0
EXIT_FALLBACK = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
