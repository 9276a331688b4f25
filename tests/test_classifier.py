"""Unit tests for the asset classifier.

WHY: Classification decides which reel slot an asset lands in. A wrong
class puts sound in the picture slot or lets data tracks through.

RULES:
- Every picture, sound, and timed-text essence type has a fixed class
- Anything else, including non-enum values, is UNKNOWN
"""

import pytest

from dcp_packager.core.classifier import classify
from dcp_packager.core.constants import AssetClass, EssenceType


class TestRecognizedEssenceTypes:

    @pytest.mark.parametrize("essence_type", [
        EssenceType.MPEG2_VES,
        EssenceType.JPEG_2000,
        EssenceType.JPEG_2000_S,
    ])
    def test_picture_types(self, essence_type):
        assert classify(essence_type) == AssetClass.PICTURE

    @pytest.mark.parametrize("essence_type", [
        EssenceType.PCM_24B_48K,
        EssenceType.PCM_24B_96K,
    ])
    def test_sound_types(self, essence_type):
        assert classify(essence_type) == AssetClass.SOUND

    def test_timed_text(self):
        assert classify(EssenceType.TIMED_TEXT) == AssetClass.TIMED_TEXT

    def test_stable_across_calls(self):
        for essence_type in EssenceType:
            assert classify(essence_type) == classify(essence_type)

    def test_accepts_raw_integer(self):
        assert classify(int(EssenceType.PCM_24B_96K)) == AssetClass.SOUND


class TestUnknownEssenceTypes:

    @pytest.mark.parametrize("essence_type", [
        EssenceType.UNKNOWN,
        EssenceType.DCDATA_UNKNOWN,
        EssenceType.DCDATA_DOLBY_ATMOS,
    ])
    def test_unclassified_members(self, essence_type):
        assert classify(essence_type) == AssetClass.UNKNOWN

    @pytest.mark.parametrize("value", [99, -1, "JPEG_2000", None])
    def test_values_outside_enum(self, value):
        assert classify(value) == AssetClass.UNKNOWN
