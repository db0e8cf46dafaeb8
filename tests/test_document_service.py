# =============================================================================
# tests/test_document_service.py - Collection CRUD Tests
# =============================================================================
# Covers identifier validation, not-found handling, ordering, partial
# updates, error mapping and the video source rules on create/update.
# =============================================================================

from uuid import uuid4

import pytest

from app.exceptions import (
    DocumentNotFoundError,
    InvalidIdentifierError,
    OperationFailedError,
    VideoSourceRequiredError,
)
from core.services.document_service import AlbumService, TourService
from core.services.video_service import VideoService


ALBUM = {"title": "Ni Forever", "description": "2021", "image": "/cover.jpg"}


class TestIdentifierValidation:
    """Malformed ids are rejected before touching the database."""

    @pytest.mark.parametrize("bad_id", ["123", "not-a-uuid", "507f1f77bcf86cd799439011", ""])
    def test_get_rejects_malformed_id(self, fake_db, bad_id):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            AlbumService.get(bad_id)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid album ID"
        assert fake_db.calls == []

    def test_update_and_delete_reject_malformed_id(self, fake_db):
        with pytest.raises(InvalidIdentifierError):
            TourService.update("abc", {"title": "x"})
        with pytest.raises(InvalidIdentifierError) as exc_info:
            VideoService.delete("abc")

        assert exc_info.value.message == "Invalid video ID"

    def test_unknown_id_is_not_found(self, fake_db):
        with pytest.raises(DocumentNotFoundError) as exc_info:
            AlbumService.get(str(uuid4()))

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Album not found"


class TestCrud:
    """Tests for create/get/list/update/delete."""

    def test_create_then_get(self, fake_db):
        created = AlbumService.create(ALBUM)
        fetched = AlbumService.get(created["id"])

        assert fetched["title"] == "Ni Forever"
        assert fetched["created_at"] is not None

    def test_albums_listed_newest_first(self, fake_db):
        AlbumService.create({**ALBUM, "title": "First"})
        AlbumService.create({**ALBUM, "title": "Second"})

        titles = [album["title"] for album in AlbumService.list()]
        assert titles == ["Second", "First"]

    def test_tours_listed_by_date(self, fake_db):
        TourService.create({"title": "Later", "location": "Nairobi", "date": "2026-03-01"})
        TourService.create({"title": "Sooner", "location": "Kigali", "date": "2026-01-01"})

        titles = [tour["title"] for tour in TourService.list()]
        assert titles == ["Sooner", "Later"]

    def test_update_is_partial(self, fake_db):
        created = AlbumService.create(ALBUM)
        updated = AlbumService.update(created["id"], {"title": "Renamed"})

        assert updated["title"] == "Renamed"
        assert updated["image"] == "/cover.jpg"
        assert updated["description"] == "2021"

    def test_empty_update_returns_document(self, fake_db):
        created = AlbumService.create(ALBUM)
        assert AlbumService.update(created["id"], {})["title"] == "Ni Forever"

    def test_update_unknown_id_is_not_found(self, fake_db):
        with pytest.raises(DocumentNotFoundError):
            AlbumService.update(str(uuid4()), {"title": "Renamed"})

    def test_delete(self, fake_db):
        created = AlbumService.create(ALBUM)
        AlbumService.delete(created["id"])

        assert fake_db.rows("albums") == []
        with pytest.raises(DocumentNotFoundError):
            AlbumService.delete(created["id"])


class TestFailures:
    """Database errors surface as generic operation failures."""

    def test_list_failure(self, fake_db):
        fake_db.failures.add("albums")

        with pytest.raises(OperationFailedError) as exc_info:
            AlbumService.list()

        assert exc_info.value.message == "Failed to fetch albums"

    def test_create_failure(self, fake_db):
        fake_db.failures.add(("tours", "insert"))

        with pytest.raises(OperationFailedError) as exc_info:
            TourService.create({"title": "x", "location": "y", "date": "2026-01-01"})

        assert exc_info.value.message == "Failed to create tour"
        assert "connection refused" in exc_info.value.details["error"]


class TestVideoService:
    """Video source rules applied on create and update."""

    def test_create_from_url(self, fake_db):
        video = VideoService.create({
            "title": "Naremeye",
            "youtube_url": "https://youtube.com/watch?v=ABC12345678",
        })

        assert video["video_id"] == "ABC12345678"
        assert video["video_url"] is None

    def test_create_from_id_builds_url(self, fake_db):
        video = VideoService.create({"title": "Ndaje", "video_id": "ABC12345678"})
        assert video["youtube_url"] == "https://www.youtube.com/watch?v=ABC12345678"

    def test_create_hosted(self, fake_db):
        video = VideoService.create({
            "title": "Studio session",
            "video_id": "ABC12345678",
            "video_url": "https://cdn/x.mp4",
        })

        assert video["video_url"] == "https://cdn/x.mp4"
        assert video["video_id"] is None
        assert video["youtube_url"] is None

    def test_create_without_source_rejected(self, fake_db):
        with pytest.raises(VideoSourceRequiredError) as exc_info:
            VideoService.create({"title": "Nothing", "youtube_url": "https://vimeo.com/1"})

        assert exc_info.value.message == "Video ID or video file is required"
        assert fake_db.rows("videos") == []

    def test_update_rederives_id_and_keeps_title(self, fake_db):
        video = VideoService.create({"title": "Ndaje", "video_id": "ABC12345678"})
        updated = VideoService.update(video["id"], {"youtube_url": "https://youtu.be/XYZ98765432"})

        assert updated["video_id"] == "XYZ98765432"
        assert updated["title"] == "Ndaje"

    def test_update_title_leaves_source(self, fake_db):
        video = VideoService.create({"title": "Ndaje", "video_id": "ABC12345678"})
        updated = VideoService.update(video["id"], {"title": "Ndaje (Live)"})

        assert updated["video_id"] == "ABC12345678"
        assert updated["youtube_url"] == "https://www.youtube.com/watch?v=ABC12345678"

    def test_clearing_hosted_url_rejected(self, fake_db):
        video = VideoService.create({"title": "Studio session", "video_url": "https://cdn/x.mp4"})

        with pytest.raises(VideoSourceRequiredError):
            VideoService.update(video["id"], {"video_url": None})

        assert VideoService.get(video["id"])["video_url"] == "https://cdn/x.mp4"

    def test_unmatched_url_on_hosted_video_rejected(self, fake_db):
        video = VideoService.create({"title": "Studio session", "video_url": "https://cdn/x.mp4"})

        with pytest.raises(VideoSourceRequiredError):
            VideoService.update(video["id"], {"youtube_url": "https://vimeo.com/123"})

        stored = VideoService.get(video["id"])
        assert stored["youtube_url"] is None
        assert stored["video_url"] == "https://cdn/x.mp4"

    def test_switch_from_hosted_to_youtube(self, fake_db):
        video = VideoService.create({"title": "Studio session", "video_url": "https://cdn/x.mp4"})
        updated = VideoService.update(video["id"], {"youtube_url": "https://youtu.be/XYZ98765432"})

        assert updated["video_id"] == "XYZ98765432"
        assert updated["video_url"] is None

    def test_switch_from_youtube_to_hosted(self, fake_db):
        video = VideoService.create({"title": "Ndaje", "video_id": "ABC12345678"})
        updated = VideoService.update(video["id"], {"video_url": "https://cdn/x.mp4"})

        assert updated["video_url"] == "https://cdn/x.mp4"
        assert updated["video_id"] is None
        assert updated["youtube_url"] is None

    def test_source_update_on_unknown_id_is_not_found(self, fake_db):
        with pytest.raises(DocumentNotFoundError):
            VideoService.update(str(uuid4()), {"video_url": "https://cdn/x.mp4"})
