"""Constants for the OSRM routing API.

API Documentation: https://project-osrm.org/docs/v5.24.0/api/#route-service
"""

OSRM_PUBLIC_BASE_URL = "https://router.project-osrm.org"
OSRM_DEFAULT_PROFILE = "driving"
OSRM_PROFILES = ("driving", "car", "bike", "foot")

# Full-resolution geometry as GeoJSON [lon, lat] pairs
OSRM_ROUTE_PARAMS = {"overview": "full", "geometries": "geojson"}

# Shared public demo server: keep at least this much time between requests
OSRM_MIN_DELAY_SECONDS = 0.3
