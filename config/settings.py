"""
Configuration for the Growth Standards Interpretation Engine.
"""
import os

# ── Server ────────────────────────────────────────────────────
PORT = int(os.environ.get("PORT", 8000))
HOST = os.environ.get("HOST", "0.0.0.0")
DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
CORS_ORIGINS = [
    o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()
]
API_VERSION = "1.0.0"

# ── Reference standards ───────────────────────────────────────
# WHO applies up to and including this age; CDC strictly above it.
STANDARD_SWITCH_AGE_MONTHS = 60.0
# Ideal body weight comes from the weight-for-length table up to this length.
WFL_MAX_LENGTH_CM = 110.0
# |L| below this is treated as the log-normal case.
L_ZERO_THRESHOLD = 0.01
# Chart-safe inverse gives up on the power form above this multiple of M.
CURVE_MAX_MEDIAN_MULTIPLE = 10.0

CURVE_Z_SCORES = (-3, -2, -1, 0, 1, 2, 3)
DEFAULT_PERCENTILES = (3, 15, 50, 85, 97)
# Largest |z| served by /measurement. The bundled tables keep 1 + L*S*z > 0
# (max |L*S| is about 0.225) inside this range, so the inverse stays monotone.
MEASUREMENT_Z_LIMIT = 4.0

# ── Ages ──────────────────────────────────────────────────────
DAYS_PER_MONTH = 30.44

# ── Trend analysis ────────────────────────────────────────────
TREND_FALTERING_DROP = -0.67
TREND_RAPID_GAIN = 1.0
TREND_STABLE_BAND = 0.2
TREND_CATCH_UP_BELOW = -2.0
