"""Tests for sdtools.paths module."""

import pytest


class TestFilenameFromString:
    """Test fake-path stripping and percent-decoding."""

    def test_strips_fakepath(self):
        from sdtools.paths import filename_from_string

        assert filename_from_string("C:\\fakepath\\My Song.mp3") == "My Song.mp3"

    def test_percent_decodes(self):
        from sdtools.paths import filename_from_string

        assert filename_from_string("C:\\fakepath\\My%20Song.mp3") == "My Song.mp3"
        assert filename_from_string("C:\\fakepath\\caf%C3%A9.png") == "caf\u00e9.png"

    def test_plus_is_not_space(self):
        from sdtools.paths import filename_from_string

        assert filename_from_string("a+b.wav") == "a+b.wav"

    def test_plain_path_unchanged(self):
        from sdtools.paths import filename_from_string

        assert filename_from_string("D:\\Music\\track.mp3") == "D:\\Music\\track.mp3"
        assert filename_from_string("") == ""


class TestFilenameFromPayload:
    """Test filename_from_payload."""

    def test_string_value(self):
        from sdtools.paths import filename_from_payload

        assert filename_from_payload("C:\\fakepath\\icon.png") == "icon.png"

    def test_number_value_stringified(self):
        from sdtools.paths import filename_from_payload

        assert filename_from_payload(42) == "42"

    @pytest.mark.parametrize("value", [None, True, ["a"], {"path": "a"}])
    def test_non_string_raises(self, value):
        from sdtools.paths import filename_from_payload

        with pytest.raises(TypeError):
            filename_from_payload(value)
