"""Default archive endpoint and location (Berlin)."""

ERA5_ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/era5"
DEFAULT_LATITUDE = 52.52
DEFAULT_LONGITUDE = 13.41
DEFAULT_HOURLY_VARIABLE = "temperature_2m"
DEFAULT_TIMEOUT_SECONDS = 5.0  # httpx default
DEFAULT_USER_AGENT = "dayweather/0.1.0"
