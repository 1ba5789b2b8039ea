from typing import Final

# Live graph: 1 sample / second, keep last 60 seconds
LIVE_SAMPLE_INTERVAL_MS: Final = 1_000
LIVE_WINDOW_SECONDS: Final = 60

# Snapshot collection: every minute for long-term storage
SNAPSHOT_SAMPLE_INTERVAL_MS: Final = 60_000

# Max number of snapshot points stored (3 days at 1-minute resolution)
MAX_SNAPSHOT_POINTS: Final = 4320

# Snapshot axis extends to at least this horizon even when sparse
SNAPSHOT_DEFAULT_HORIZON_SECONDS: Final = 20 * 60

# Battery considered "full" at / above this %
BATTERY_FULL_THRESHOLD: Final = 99.9

# Sensor sentinel for "temperature not reported"
TEMPERATURE_UNSET: Final = -1
