"""
Notification sounds available for alarms.

The catalog is a fixed table: each sound has an identifier (stored with the
alarm), a display name, and the system sound id used for previews. Unknown
identifiers always resolve to the default sound.
"""

from enum import Enum
from typing import assert_never

DEFAULT_HANDLE = "default"
CRITICAL_HANDLE = "default-critical"


class NotificationSound(Enum):
    DEFAULT = "default"
    TRI_TONE = "tri-tone"
    ALERT = "alert"
    BEACON = "beacon"
    BULLETIN = "bulletin"
    CHORD = "chord"
    COMPLETE = "complete"
    ANTICIPATE = "anticipate"

    @property
    def display_name(self) -> str:
        match self:
            case NotificationSound.DEFAULT:
                return "Default"
            case NotificationSound.TRI_TONE:
                return "Tri-Tone"
            case NotificationSound.ALERT:
                return "Alert"
            case NotificationSound.BEACON:
                return "Beacon"
            case NotificationSound.BULLETIN:
                return "Bulletin"
            case NotificationSound.CHORD:
                return "Chord"
            case NotificationSound.COMPLETE:
                return "Complete"
            case NotificationSound.ANTICIPATE:
                return "Anticipate"
            case _:
                assert_never(self)

    @property
    def system_sound_id(self) -> int:
        match self:
            case NotificationSound.DEFAULT | NotificationSound.TRI_TONE:
                return 1007
            case NotificationSound.ALERT:
                return 1005
            case NotificationSound.BEACON:
                return 1023
            case NotificationSound.BULLETIN:
                return 1028
            case NotificationSound.CHORD:
                return 1025
            case NotificationSound.COMPLETE:
                return 1022
            case NotificationSound.ANTICIPATE:
                return 1020
            case _:
                assert_never(self)


def lookup(identifier: str | None) -> NotificationSound:
    try:
        return NotificationSound(identifier)
    except ValueError:
        return NotificationSound.DEFAULT


def available_sounds() -> list[NotificationSound]:
    return list(NotificationSound)


def display_name(identifier: str | None) -> str:
    return lookup(identifier).display_name


def preview_sound_id(identifier: str | None) -> int:
    return lookup(identifier).system_sound_id


def notification_sound(identifier: str | None, is_critical: bool) -> str:
    """
    Returns the platform sound handle used when scheduling a notification.
    Custom sounds are not bundled yet, so every known sound plays the default handle.
    """
    if is_critical:
        return CRITICAL_HANDLE
    sound = lookup(identifier)
    match sound:
        case NotificationSound.DEFAULT:
            return DEFAULT_HANDLE
        case (NotificationSound.TRI_TONE | NotificationSound.ALERT | NotificationSound.BEACON
              | NotificationSound.BULLETIN | NotificationSound.CHORD | NotificationSound.COMPLETE
              | NotificationSound.ANTICIPATE):
            # TODO: ship .caf files for these so they stop falling back to the default handle.
            return DEFAULT_HANDLE
        case _:
            assert_never(sound)
