def hhmmss_to_seconds(hhmmss: str) -> int:
    """
    Convert 'HH:MM:SS' -> total seconds (int).
    Example: '01:30:00' -> 5400
    """
    parts = hhmmss.split(":")
    if len(parts) != 3:
        raise ValueError("Duration must be in HH:MM:SS format")

    hours, minutes, seconds = map(int, parts)
    if minutes >= 60 or seconds >= 60 or min(hours, minutes, seconds) < 0:
        raise ValueError("Duration must be in HH:MM:SS format")
    return hours * 3600 + minutes * 60 + seconds


def hhmmss_to_hours(hhmmss: str) -> float:
    """
    Convert 'HH:MM:SS' -> hours (float), the unit the calculators expect.
    Example: '01:30:00' -> 1.5
    """
    return hhmmss_to_seconds(hhmmss) / 3600


def hours_to_hhmmss(hours: float) -> str:
    """
    Convert hours (float) -> 'HH:MM:SS', rounded to the nearest second.
    Example: 1.5 -> '01:30:00'
    """
    total_seconds = int(round(hours * 3600))
    h = total_seconds // 3600
    m = (total_seconds % 3600) // 60
    s = total_seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"
