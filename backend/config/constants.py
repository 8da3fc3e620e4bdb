"""
Application constants
"""

# WHO guideline values (mg/L) for common heavy metals in drinking water
WHO_STANDARDS = {
    "As": 0.01,
    "Cd": 0.003,
    "Cr": 0.05,
    "Cu": 2.0,
    "Fe": 0.3,
    "Pb": 0.01,
    "Mn": 0.4,
    "Ni": 0.07,
    "Zn": 3.0,
    "Hg": 0.006,
}

# Used for metals missing from the standards table
FALLBACK_STANDARD = 1.0

# Columns that never hold metal concentrations (compared lowercase)
NON_METAL_COLUMNS = {"id", "latitude", "longitude", "lat", "lon", "lng"}

# Coordinate aliases, in lookup priority order
LATITUDE_KEYS = ("latitude", "lat")
LONGITUDE_KEYS = ("longitude", "lon", "lng")

ID_KEY = "id"

# Decimal places reported for HPI/HEI/Cd
INDEX_PRECISION = 2


# Water quality categories
class WaterQualityCategory:
    SAFE = "Safe"
    SLIGHTLY_POLLUTED = "Slightly Polluted"
    HAZARDOUS = "Hazardous"


# Lower HPI bound (inclusive) of each non-safe category
HPI_THRESHOLDS = {
    WaterQualityCategory.SLIGHTLY_POLLUTED: 100.0,
    WaterQualityCategory.HAZARDOUS: 200.0,
}
