# =============================================================================
# tests/test_video_reference.py - Video Source Normalization Tests
# =============================================================================
# Covers the precedence rules (hosted file > video ID > URL extraction),
# the strict hero variant, and partial-update normalization.
#
# Run with: pytest tests/test_video_reference.py -v
# =============================================================================

import pytest

from lib.video_reference import (
    MISSING_SOURCE_MESSAGE,
    VideoReference,
    VideoReferenceError,
    extract_video_id,
    is_valid_video_id,
    merge_video_patch,
    normalize_video_reference,
)


# =============================================================================
# extract_video_id
# =============================================================================

class TestExtractVideoId:
    """Tests for pulling an ID out of a YouTube URL."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://youtube.com/watch?v=ABC12345678", "ABC12345678"),
            ("https://www.youtube.com/watch?v=8ufRrmc6Bj4&list=PL123", "8ufRrmc6Bj4"),
            ("https://youtu.be/XYZ98765432?t=5", "XYZ98765432"),
            ("https://youtu.be/XYZ98765432#comments", "XYZ98765432"),
            ("https://www.youtube.com/embed/EMB_ed-1234", "EMB_ed-1234"),
            ("https://youtu.be/short", "short"),
        ],
    )
    def test_known_url_shapes(self, url, expected):
        assert extract_video_id(url) == expected

    def test_capture_stops_at_newline(self):
        assert extract_video_id("https://youtu.be/ABC12345678\nmore") == "ABC12345678"

    @pytest.mark.parametrize(
        "url",
        [
            "https://vimeo.com/123456",
            "not a url at all",
            "https://youtube.com/watch?list=PL123",
            "",
            None,
        ],
    )
    def test_unmatched_url_returns_none(self, url):
        assert extract_video_id(url) is None

    def test_watch_pattern_takes_precedence(self):
        """The first pattern in the ordered list wins."""
        url = "https://youtu.be/FIRSTFIRST1?next=https://youtube.com/watch?v=SECONDSECO2"
        assert extract_video_id(url) == "SECONDSECO2"


class TestIsValidVideoId:
    """Tests for the 11-character ID format check."""

    def test_valid_ids(self):
        assert is_valid_video_id("8ufRrmc6Bj4")
        assert is_valid_video_id("a-b_c-d_e-f")

    def test_invalid_ids(self):
        assert not is_valid_video_id("short")
        assert not is_valid_video_id("toolongvideoid")
        assert not is_valid_video_id("has space!!")
        assert not is_valid_video_id("")
        assert not is_valid_video_id(None)


# =============================================================================
# normalize_video_reference
# =============================================================================

class TestNormalizeVideoReference:
    """Tests for the create-path normalization."""

    def test_hosted_url_clears_youtube_fields(self):
        """A hosted file always wins, whatever else is sent."""
        ref = normalize_video_reference(
            video_id="ABC12345678",
            youtube_url="https://youtube.com/watch?v=ABC12345678",
            video_url="https://cdn/x.mp4",
        )

        assert ref.video_url == "https://cdn/x.mp4"
        assert ref.video_id is None
        assert ref.youtube_url is None
        assert ref.is_hosted

    def test_video_id_synthesizes_watch_url(self):
        ref = normalize_video_reference(video_id="8ufRrmc6Bj4")

        assert ref.video_id == "8ufRrmc6Bj4"
        assert ref.youtube_url == "https://www.youtube.com/watch?v=8ufRrmc6Bj4"
        assert ref.video_url is None

    def test_video_id_keeps_supplied_url(self):
        ref = normalize_video_reference(
            video_id="ABC12345678",
            youtube_url="https://youtu.be/ABC12345678",
        )
        assert ref.youtube_url == "https://youtu.be/ABC12345678"

    def test_video_id_kept_as_is_outside_strict_mode(self):
        ref = normalize_video_reference(
            video_id="short",
            youtube_url="https://youtube.com/watch?v=ABC12345678",
        )
        assert ref.video_id == "short"

    def test_id_derived_from_watch_url(self):
        ref = normalize_video_reference(youtube_url="https://youtube.com/watch?v=ABC12345678")

        assert ref.video_id == "ABC12345678"
        assert ref.youtube_url == "https://youtube.com/watch?v=ABC12345678"

    def test_id_derived_from_short_url_stops_at_query(self):
        ref = normalize_video_reference(youtube_url="https://youtu.be/XYZ98765432?t=5")
        assert ref.video_id == "XYZ98765432"

    def test_unmatched_url_is_validation_error(self):
        with pytest.raises(VideoReferenceError) as exc_info:
            normalize_video_reference(youtube_url="https://vimeo.com/123")
        assert exc_info.value.message == MISSING_SOURCE_MESSAGE

    def test_no_fields_is_validation_error(self):
        with pytest.raises(VideoReferenceError) as exc_info:
            normalize_video_reference()
        assert "required" in str(exc_info.value)

    def test_empty_strings_count_as_absent(self):
        with pytest.raises(VideoReferenceError):
            normalize_video_reference(video_id="", youtube_url="", video_url="")

    def test_to_dict_has_all_three_fields(self):
        ref = VideoReference(video_url="https://cdn/x.mp4")
        assert ref.to_dict() == {
            "video_id": None,
            "youtube_url": None,
            "video_url": "https://cdn/x.mp4",
        }


class TestStrictNormalization:
    """Tests for the hero variant, which distrusts malformed IDs."""

    def test_invalid_id_replaced_by_id_from_url(self):
        ref = normalize_video_reference(
            video_id="short",
            youtube_url="https://youtube.com/watch?v=ABC12345678",
            strict=True,
        )
        assert ref.video_id == "ABC12345678"

    def test_valid_id_not_overridden(self):
        ref = normalize_video_reference(
            video_id="8ufRrmc6Bj4",
            youtube_url="https://youtube.com/watch?v=ABC12345678",
            strict=True,
        )
        assert ref.video_id == "8ufRrmc6Bj4"

    def test_embed_url_supported(self):
        ref = normalize_video_reference(
            youtube_url="https://www.youtube.com/embed/ABC12345678",
            strict=True,
        )
        assert ref.video_id == "ABC12345678"

    def test_invalid_id_kept_when_url_does_not_match(self):
        ref = normalize_video_reference(
            video_id="short",
            youtube_url="https://vimeo.com/1",
            strict=True,
        )
        assert ref.video_id == "short"

    def test_hosted_url_still_wins(self):
        ref = normalize_video_reference(video_id="short", video_url="https://cdn/x.mp4", strict=True)
        assert ref.video_url == "https://cdn/x.mp4"
        assert ref.video_id is None


# =============================================================================
# merge_video_patch
# =============================================================================

HOSTED = {"video_id": None, "youtube_url": None, "video_url": "https://cdn/x.mp4"}
YOUTUBE = {
    "video_id": "ABC12345678",
    "youtube_url": "https://www.youtube.com/watch?v=ABC12345678",
    "video_url": None,
}


class TestMergeVideoPatch:
    """Tests for combining a stored source with a partial update."""

    def test_url_without_id_rederives_id(self):
        merged = merge_video_patch(YOUTUBE, {"youtube_url": "https://youtu.be/XYZ98765432"})

        assert merged["video_id"] == "XYZ98765432"
        assert merged["youtube_url"] == "https://youtu.be/XYZ98765432"

    def test_unmatched_url_keeps_stored_id(self):
        merged = merge_video_patch(YOUTUBE, {"youtube_url": "https://vimeo.com/1"})

        assert merged["video_id"] == "ABC12345678"
        assert merged["youtube_url"] == "https://vimeo.com/1"

    def test_unrelated_fields_keep_stored_source(self):
        assert merge_video_patch(HOSTED, {"title": "New title"}) == HOSTED

    def test_supplied_id_not_rederived(self):
        merged = merge_video_patch(YOUTUBE, {
            "video_id": "DEF12345678",
            "youtube_url": "https://youtu.be/XYZ98765432",
        })
        assert merged["video_id"] == "DEF12345678"

    def test_youtube_patch_drops_hosted_url(self):
        merged = merge_video_patch(HOSTED, {"youtube_url": "https://youtu.be/XYZ98765432"})

        assert merged == {
            "video_id": "XYZ98765432",
            "youtube_url": "https://youtu.be/XYZ98765432",
            "video_url": None,
        }

    def test_unmatched_url_on_hosted_video_leaves_no_source(self):
        merged = merge_video_patch(HOSTED, {"youtube_url": "https://vimeo.com/123"})

        with pytest.raises(VideoReferenceError):
            normalize_video_reference(**merged)

    def test_clearing_hosted_url_leaves_no_source(self):
        merged = merge_video_patch(HOSTED, {"video_url": None})

        with pytest.raises(VideoReferenceError):
            normalize_video_reference(**merged)

    def test_hosted_patch_wins_after_normalization(self):
        merged = merge_video_patch(YOUTUBE, {"video_url": "https://cdn/y.mp4"})
        ref = normalize_video_reference(**merged)

        assert ref.to_dict() == {"video_id": None, "youtube_url": None, "video_url": "https://cdn/y.mp4"}

    def test_inputs_not_mutated(self):
        stored = dict(HOSTED)
        patch = {"youtube_url": "https://youtu.be/XYZ98765432"}
        merge_video_patch(stored, patch)

        assert stored == HOSTED
        assert patch == {"youtube_url": "https://youtu.be/XYZ98765432"}
