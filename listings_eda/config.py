"""
Listings EDA — Configuration: paths, source schema, cleaning constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths (override with the LISTINGS_EDA_DATA_DIR env var)
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("LISTINGS_EDA_DATA_DIR", "data"))
DATA_FOLDER = _data_dir
LISTINGS_CSV = _data_dir / "listings.csv"
REPORTS_FOLDER = _data_dir / "reports"

# ---------------------------------------------------------------------------
# Source columns (Inside Airbnb listings export) → cleaned names
# Order here is the column order of the projected table.
# ---------------------------------------------------------------------------
SOURCE_COLUMNS = [
    "id",
    "last_scraped",
    "host_since",
    "host_response_time",
    "host_response_rate",
    "host_is_superhost",
    "host_listings_count",
    "neighbourhood_cleansed",
    "property_type",
    "room_type",
    "accommodates",
    "bathrooms_text",
    "bedrooms",
    "beds",
    "amenities",
    "price",
    "minimum_nights",
    "maximum_nights",
    "review_scores_rating",
]

COLUMN_MAP = {
    "neighbourhood_cleansed": "zipcode",
}

# Read as text so zipcodes and ids are never coerced to numbers
STRING_SOURCE_COLUMNS = ["id", "neighbourhood_cleansed"]

# ---------------------------------------------------------------------------
# Column groups for the field normalizer
# ---------------------------------------------------------------------------
DATE_COLS = ["host_since", "last_scraped"]
DATE_FORMAT = "%Y-%m-%d"

PERCENT_COLS = ["host_response_rate"]
CURRENCY_COLS = ["price"]
BOOLEAN_COLS = ["host_is_superhost"]
TRUTHY_MARKER = "t"

INTEGER_COLS = [
    "host_listings_count",
    "accommodates",
    "bedrooms",
    "beds",
    "minimum_nights",
    "maximum_nights",
]
FLOAT_COLS = ["review_scores_rating"]

# ---------------------------------------------------------------------------
# Categorical levels
# closed = unseen values become null; open = unseen values are appended
# ---------------------------------------------------------------------------
RESPONSE_TIME_LEVELS = [
    "within an hour",
    "within a few hours",
    "within a day",
    "a few days or more",
]

ROOM_TYPE_LEVELS = [
    "Entire home/apt",
    "Private room",
    "Hotel room",
    "Shared room",
]

SUPERHOST_LEVELS = [False, True]

ZIPCODE_LEVELS = [
    "28704",
    "28715",
    "28732",
    "28801",
    "28803",
    "28804",
    "28805",
    "28806",
]

CATEGORICAL_COLS = {
    # column: (levels, closed)
    "host_is_superhost": (SUPERHOST_LEVELS, True),
    "host_response_time": (RESPONSE_TIME_LEVELS, True),
    "zipcode": (ZIPCODE_LEVELS, False),
    "room_type": (ROOM_TYPE_LEVELS, True),
}

# ---------------------------------------------------------------------------
# Derived fields
# ---------------------------------------------------------------------------
DAYS_PER_YEAR = 365.25

HALF_BATH_LITERAL = "Half-bath"
HALF_BATH_VALUE = 0.5

CBD_ZIPCODE = "28801"

REVIEW_GOOD_THRESHOLD = 4.8
# Index into the five-number summary (min, lower hinge, median, upper hinge, max).
# The analysis notes call this cutoff the 1st quartile; index 2 is the median.
REVIEW_BAD_CUTOFF_POSITION = 2
REVIEW_LEVELS = ["good", "bad", "missing"]

# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------
SUMMARY_EXCLUDED_COLS = ["id", "amenities", "bathrooms_text"]

CORRELATION_SETS = {
    "host": [
        "price",
        "years_hosting",
        "host_response_rate",
        "host_listings_count",
        "review_scores_rating",
    ],
    "property": [
        "price",
        "accommodates",
        "bathrooms",
        "bedrooms",
        "beds",
        "amenities_count",
    ],
    "pricing": [
        "price",
        "years_hosting",
        "host_response_rate",
        "host_listings_count",
        "accommodates",
        "bathrooms",
        "bedrooms",
        "beds",
        "amenities_count",
        "minimum_nights",
        "maximum_nights",
        "review_scores_rating",
    ],
}
DEFAULT_CORRELATION_SET = "pricing"

PAIRPLOT_SETS = {
    "host": ["price", "years_hosting", "host_response_rate", "host_listings_count"],
    "capacity": ["price", "accommodates", "bathrooms", "bedrooms", "beds"],
    "listing": ["price", "amenities_count", "minimum_nights", "review_scores_rating"],
}
PAIRPLOT_HUE = "room_type"

OUTLIER_COLS = ["host_listings_count", "price", "minimum_nights", "maximum_nights"]
HIGH_CARDINALITY_THRESHOLD = 20
