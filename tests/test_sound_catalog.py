"""Tests for sound_catalog lookups and fallbacks."""

import pytest

import sound_catalog
from sound_catalog import NotificationSound


class TestLookup:
    @pytest.mark.parametrize("identifier,name", [
        ("default", "Default"),
        ("tri-tone", "Tri-Tone"),
        ("beacon", "Beacon"),
        ("anticipate", "Anticipate"),
    ])
    def test_display_name(self, identifier, name):
        assert sound_catalog.display_name(identifier) == name

    @pytest.mark.parametrize("identifier", ["klaxon", "", None, "Tri-Tone"])
    def test_unknown_falls_back_to_default(self, identifier):
        assert sound_catalog.lookup(identifier) is NotificationSound.DEFAULT
        assert sound_catalog.display_name(identifier) == "Default"
        assert sound_catalog.preview_sound_id(identifier) == 1007

    def test_preview_ids(self):
        assert sound_catalog.preview_sound_id("alert") == 1005
        assert sound_catalog.preview_sound_id("bulletin") == 1028
        assert sound_catalog.preview_sound_id("chord") == 1025
        assert sound_catalog.preview_sound_id("complete") == 1022


class TestNotificationSound:
    def test_critical_overrides_choice(self):
        assert sound_catalog.notification_sound("beacon", is_critical=True) == "default-critical"

    @pytest.mark.parametrize("sound", list(NotificationSound))
    def test_every_sound_uses_default_handle(self, sound):
        assert sound_catalog.notification_sound(sound.value, is_critical=False) == "default"


def test_available_sounds_keeps_declaration_order():
    sounds = sound_catalog.available_sounds()
    assert len(sounds) == 8
    assert sounds[0] is NotificationSound.DEFAULT
    assert sounds[-1] is NotificationSound.ANTICIPATE
    assert all(sound.display_name for sound in sounds)
