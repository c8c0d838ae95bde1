"""Application-wide constants."""

# Mean Earth radius used by the Haversine formula
EARTH_RADIUS_KM = 6371.0

# Database
DEFAULT_EVENTS_DB_PATH = "./data/events.sqlite"

# Search defaults
DEFAULT_SORT_STRATEGY = "distance"
DEFAULT_DESCENDING = False
