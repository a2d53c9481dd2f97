# Wake-up and departure arithmetic plus duration formatting for alarm copy.

from datetime import datetime, timedelta, timezone


def subtract_duration(instant: datetime, seconds: float) -> datetime:
    """
    Moves an instant `seconds` earlier in elapsed time.
    Aware datetimes are shifted in UTC so DST changes never stretch or shrink the gap.
    """
    if instant.tzinfo is None:
        return instant - timedelta(seconds=seconds)
    shifted = instant.astimezone(timezone.utc) - timedelta(seconds=seconds)
    return shifted.astimezone(instant.tzinfo)


def wake_up_time(arrival: datetime, prep: float, travel: float) -> datetime:
    """Calculates when to wake up so that prep and travel both fit before arrival."""
    return subtract_duration(arrival, prep + travel)


def departure_time(arrival: datetime, travel: float) -> datetime:
    """Calculates when to leave the house to arrive on time."""
    return subtract_duration(arrival, travel)


def format_duration(seconds: float) -> str:
    """Converts seconds into a compact '1h 30m' format."""
    minutes = int(seconds / 60)
    if minutes < 60:
        return f"{minutes}m"
    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"


def format_duration_readable(seconds: float) -> str:
    """
    Converts seconds into conversational text, e.g. '30 min' or '1 hour 30 min'.
    Only 'hour' is pluralized; 'min' is the same for every count.
    """
    hours, minutes = divmod(int(seconds / 60), 60)
    if hours == 0:
        return f"{minutes} min"
    hour_text = "1 hour" if hours == 1 else f"{hours} hours"
    if minutes == 0:
        return hour_text
    return f"{hour_text} {minutes} min"


def format_clock_time(instant: datetime) -> str:
    return instant.strftime('%I:%M %p')
