"""Unit tests for reel validation.

WHY: Validation is the last gate before a reel joins a playlist. Each
rule must fire in its documented order, and duration reconciliation must
trim to the shortest track without touching reels that already agree.

RULES:
- Short-circuit order: picture → namespace → duration
- Reel numbers in messages are 1-based
"""

import logging

import pytest

from dcp_packager.core.constants import XmlNamespace
from dcp_packager.core.errors import ErrorCode, NoPictureTrackError, SpecificationMismatchError
from dcp_packager.core.ir import Reel
from dcp_packager.core.validator import validate_reel


class TestPicturePresence:

    def test_sound_and_subtitle_without_picture(self, sound, subtitle):
        reel = Reel(main_sound=sound(), main_subtitle=subtitle())
        with pytest.raises(NoPictureTrackError) as exc_info:
            validate_reel(reel, 0)
        assert exc_info.value.code == ErrorCode.NO_PICTURE_TRACK

    def test_empty_reel(self):
        with pytest.raises(NoPictureTrackError):
            validate_reel(Reel(), 0)

    def test_message_uses_one_based_number(self, sound):
        with pytest.raises(NoPictureTrackError, match="Reel 3 "):
            validate_reel(Reel(main_sound=sound()), 2)

    def test_picture_check_runs_before_namespace_check(self, sound, subtitle):
        reel = Reel(
            main_sound=sound(namespace=XmlNamespace.SMPTE),
            main_subtitle=subtitle(namespace=XmlNamespace.INTEROP),
        )
        with pytest.raises(NoPictureTrackError):
            validate_reel(reel, 0)


class TestNamespaceAgreement:

    def test_sound_namespace_mismatch(self, picture, sound):
        reel = Reel(
            main_picture=picture(namespace=XmlNamespace.SMPTE),
            main_sound=sound(namespace=XmlNamespace.INTEROP),
        )
        with pytest.raises(SpecificationMismatchError) as exc_info:
            validate_reel(reel, 0)
        assert exc_info.value.code == ErrorCode.SPECIFICATION_MISMATCH

    def test_subtitle_namespace_mismatch(self, picture, subtitle):
        reel = Reel(
            main_picture=picture(namespace=XmlNamespace.INTEROP),
            main_subtitle=subtitle(namespace=XmlNamespace.SMPTE),
        )
        with pytest.raises(SpecificationMismatchError):
            validate_reel(reel, 0)

    def test_mismatch_leaves_durations_untouched(self, picture, sound):
        reel = Reel(
            main_picture=picture(duration=100),
            main_sound=sound(duration=90, namespace=XmlNamespace.INTEROP),
        )
        with pytest.raises(SpecificationMismatchError):
            validate_reel(reel, 0)
        assert reel.main_picture.duration == 100
        assert reel.main_sound.duration == 90


class TestDurationReconciliation:

    def test_picture_only_is_unchanged(self, picture, caplog):
        reel = Reel(main_picture=picture(duration=100))
        with caplog.at_level(logging.WARNING):
            assert validate_reel(reel, 0) == 100
        assert reel.main_picture.duration == 100
        assert "duration mismatch" not in caplog.text

    def test_all_tracks_trimmed_to_shortest(self, picture, sound, subtitle, caplog):
        reel = Reel(
            main_picture=picture(duration=100),
            main_sound=sound(duration=90),
            main_subtitle=subtitle(duration=95),
        )
        with caplog.at_level(logging.WARNING):
            assert validate_reel(reel, 0) == 90
        assert reel.main_picture.duration == 90
        assert reel.main_sound.duration == 90
        assert reel.main_subtitle.duration == 90
        assert "90 frames" in caplog.text

    def test_shorter_picture_trims_sound(self, picture, sound):
        reel = Reel(main_picture=picture(duration=80), main_sound=sound(duration=100))
        assert validate_reel(reel, 0) == 80
        assert reel.main_sound.duration == 80

    def test_subtitle_shortest(self, picture, sound, subtitle):
        reel = Reel(
            main_picture=picture(duration=100),
            main_sound=sound(duration=100),
            main_subtitle=subtitle(duration=60),
        )
        assert validate_reel(reel, 0) == 60
        assert reel.main_picture.duration == 60
        assert reel.main_sound.duration == 60

    def test_absent_tracks_stay_absent(self, picture, subtitle):
        reel = Reel(main_picture=picture(duration=100), main_subtitle=subtitle(duration=70))
        validate_reel(reel, 0)
        assert reel.main_sound is None
        assert reel.main_picture.duration == 70

    def test_matching_durations_do_not_warn(self, picture, sound, subtitle, caplog):
        reel = Reel(
            main_picture=picture(duration=100),
            main_sound=sound(duration=100),
            main_subtitle=subtitle(duration=100),
        )
        with caplog.at_level(logging.WARNING):
            validate_reel(reel, 0)
        assert caplog.records == []

    def test_intrinsic_duration_is_preserved(self, picture, sound):
        reel = Reel(main_picture=picture(duration=100), main_sound=sound(duration=90))
        validate_reel(reel, 0)
        assert reel.main_picture.intrinsic_duration == 100

    def test_zero_frame_sound_does_not_shorten_reel(self, picture, sound, caplog):
        reel = Reel(main_picture=picture(duration=100), main_sound=sound(duration=0))
        with caplog.at_level(logging.WARNING):
            assert validate_reel(reel, 0) == 100
        assert reel.main_picture.duration == 100
        assert caplog.records == []
