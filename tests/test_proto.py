"""
Unit tests for message schemas.
"""

import uuid

import pytest

from surface_helper.proto import (
    JOURNAL_EVENT_TYPES,
    SURFACE_EXIT_EVENTS,
    Disembark,
    Location,
    NotificationArgs,
    NotificationRendering,
    StatusSample,
    Touchdown,
    TIMEOUT_PERSISTENT,
    speak_ssml,
)


class TestJournalEvents:

    def test_event_names_unique(self):
        names = [cls.event for cls in JOURNAL_EVENT_TYPES]
        assert len(set(names)) == len(names) == 15
        assert all(names)

    def test_surface_exit_events_known(self):
        assert set(SURFACE_EXIT_EVENTS) <= set(JOURNAL_EVENT_TYPES)

    @pytest.mark.parametrize("kwargs,expected", [
        (dict(on_planet=True), True),
        (dict(on_planet=True, on_station=True), False),
        (dict(on_planet=True, taxi=True), False),
        (dict(on_planet=False), False),
    ])
    def test_on_planet_surface(self, kwargs, expected):
        assert Disembark(**kwargs).on_planet_surface is expected

    def test_touchdown_position(self):
        assert Touchdown(latitude=-5.5, longitude=120.25).position == (-5.5, 120.25)

    def test_location_position_optional(self):
        assert not Location().has_position
        assert Location(latitude=0.0, longitude=0.0).has_position


class TestStatusSample:

    def test_no_position(self):
        sample = StatusSample(planet_radius=1000.0)
        assert not sample.has_position
        assert sample.position is None

    def test_position(self):
        sample = StatusSample(latitude=1.0, longitude=2.0)
        assert sample.position == (1.0, 2.0)
        assert sample.to_dict()['latitude'] == 1.0


class TestNotificationArgs:

    def test_new_guid_per_request(self):
        a = NotificationArgs(title="t", detail="d")
        b = NotificationArgs(title="t", detail="d")
        assert isinstance(a.guid, uuid.UUID)
        assert a.guid != b.guid

    def test_persistent(self):
        args = NotificationArgs(title="t", detail="d", timeout=TIMEOUT_PERSISTENT)
        assert args.is_persistent
        assert not NotificationArgs(title="t", detail="d").is_persistent

    def test_to_dict(self):
        args = NotificationArgs(title="t", detail="d",
                                rendering=NotificationRendering.NATIVE_VISUAL)
        d = args.to_dict()
        assert d['rendering'] == 1
        assert d['guid'] == str(args.guid)

    def test_rendering_all(self):
        assert NotificationRendering.ALL & NotificationRendering.NATIVE_VOCAL

    def test_speak_ssml(self):
        ssml = speak_ssml("Hello")
        assert ssml.startswith("<speak")
        assert ">Hello</voice></speak>" in ssml
