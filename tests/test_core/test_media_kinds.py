"""Tests for media kinds and their profiles."""

import pytest
from media_reply.core.base import MediaKind, MEDIA_PROFILES, get_profile
from media_reply import prompts


class TestMediaKind:
    """Tests for MediaKind enum."""

    def test_values(self):
        """Test enum values."""
        assert MediaKind.IMAGE.value == "image"
        assert MediaKind.AUDIO.value == "audio"
        assert MediaKind.VIDEO.value == "video"
        assert MediaKind.STICKER.value == "sticker"
        assert MediaKind.DOCUMENT.value == "document"

    def test_declaration_order(self):
        """Test kinds iterate in dispatch order."""
        assert list(MediaKind) == [
            MediaKind.IMAGE,
            MediaKind.AUDIO,
            MediaKind.VIDEO,
            MediaKind.STICKER,
            MediaKind.DOCUMENT,
        ]

    def test_display_name(self):
        """Test the capitalized name used in prompts."""
        assert MediaKind.IMAGE.display_name == "Image"
        assert MediaKind.DOCUMENT.display_name == "Document"

    def test_str_comparison(self):
        """Test enum is comparable to strings."""
        assert MediaKind.STICKER == "sticker"


class TestMediaProfiles:
    """Tests for the per-kind configuration table."""

    def test_every_kind_has_profile(self):
        """Test each kind is registered."""
        assert set(MEDIA_PROFILES) == set(MediaKind)
        for kind in MediaKind:
            assert get_profile(kind).kind == kind

    @pytest.mark.parametrize("kind,mime_type,temperature", [
        (MediaKind.IMAGE, "image/jpeg", 0.85),
        (MediaKind.AUDIO, "audio/mp3", 0.85),
        (MediaKind.VIDEO, "video/mp4", 0.85),
        (MediaKind.STICKER, "image/jpeg", 1.0),
        (MediaKind.DOCUMENT, "application/pdf", 0.45),
    ])
    def test_mime_type_and_temperature(self, kind, mime_type, temperature):
        """Test MIME types and sampling temperatures."""
        profile = get_profile(kind)
        assert profile.mime_type == mime_type
        assert profile.temperature == temperature

    def test_part_order(self):
        """Test which kinds send the file before the instruction."""
        assert get_profile(MediaKind.IMAGE).media_first is True
        assert get_profile(MediaKind.VIDEO).media_first is True
        assert get_profile(MediaKind.STICKER).media_first is True
        assert get_profile(MediaKind.AUDIO).media_first is False
        assert get_profile(MediaKind.DOCUMENT).media_first is False

    def test_labels(self):
        """Test result labels."""
        assert get_profile(MediaKind.AUDIO).label == "transcription"
        assert get_profile(MediaKind.DOCUMENT).label == "summary"
        assert get_profile(MediaKind.IMAGE).label == "description"
        assert get_profile(MediaKind.VIDEO).label == "description"
        assert get_profile(MediaKind.STICKER).label == "description"

    def test_instructions(self):
        """Test each kind uses its own instruction."""
        assert get_profile(MediaKind.IMAGE).instruction == prompts.IMAGE_PROMPT
        assert get_profile(MediaKind.AUDIO).instruction == prompts.AUDIO_PROMPT
        assert get_profile(MediaKind.DOCUMENT).instruction == prompts.DOCUMENT_PROMPT

    def test_error_messages_are_distinct(self):
        """Test each kind reports its own failure message."""
        messages = {profile.error_message for profile in MEDIA_PROFILES.values()}
        assert len(messages) == len(MediaKind)
        assert get_profile(MediaKind.IMAGE).error_message == "Error al procesar imagen"

    def test_profile_is_frozen(self):
        """Test profiles cannot be modified."""
        with pytest.raises(Exception):
            get_profile(MediaKind.IMAGE).temperature = 0.1
