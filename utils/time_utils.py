from datetime import datetime, timezone


def utc_now_iso_z() -> str:
    """Return current UTC time in ISO8601 format with trailing 'Z'.
    Example: '2025-11-14T17:59:30.123456Z'
    """
    # Keep microseconds; normalize +00:00 suffix to 'Z'
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
