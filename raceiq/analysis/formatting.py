# Display formatting helpers


def format_lap_time(seconds: float) -> str:
    """Format seconds as m:ss.sss, e.g. 83.456 -> '1:23.456'."""
    minutes = int(seconds // 60)
    remaining = seconds - minutes * 60
    return f"{minutes}:{remaining:06.3f}"


def format_race_time(seconds: float) -> str:
    """Format seconds as h:mm:ss, or m:ss under an hour."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
