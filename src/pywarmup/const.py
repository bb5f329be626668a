"""Constants for pywarmup library."""

from __future__ import annotations


# API Configuration
APP_ENDPOINT = "https://api.warmup.com/apps/app/v1"
QUERY_ENDPOINT = "https://apil.warmup.com/graphql"
DEFAULT_TIMEOUT = 10  # seconds

# Authentication
AUTH_METHOD = "userLogin"
AUTH_APP_ID = "WARMUP-APP-V001"
MAX_AUTH_FAILURES = 2  # soft failures tolerated before AuthenticationError

# Request Headers
USER_AGENT = "WARMUP_APP"
APP_TOKEN = 'M=;He<Xtg"$}4N%5k{$:PD+WA"]D<;#PriteY|VTuA>_iyhs+vA"4lic{6-LqNM:'  # noqa: S105
HEADER_APP_TOKEN = "App-Token"
HEADER_AUTHORIZATION = "Warmup-Authorization"
CONTENT_TYPE_JSON = "application/json"

# Response Status
STATUS_SUCCESS = "success"

# Temperature Encoding (vendor uses tenths of a degree)
TEMPERATURE_SCALE = 10

# Parameter Validation
OVERRIDE_TEMPERATURE_MIN = 5.0
OVERRIDE_TEMPERATURE_MAX = 30.0
OVERRIDE_DURATION_MIN = 1
OVERRIDE_DURATION_MAX = 1440  # one day, in minutes
