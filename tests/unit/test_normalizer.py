"""Unit tests for tikwm payload normalization."""

import pytest

from clipdeck.collectors.tiktok.normalizer import (
    transform_tikwm_search_data,
    transform_tikwm_video,
)


class TestTransformTikwmVideo:
    """Tests for transform_tikwm_video."""

    def test_maps_all_fields(self, raw_tikwm_video):
        """Raw provider names map to the VideoRecord shape."""
        video = transform_tikwm_video(raw_tikwm_video)

        assert video.id == "7301234567890123456"
        assert video.title == "  Perfect V60 pour over ☕️  "
        assert video.region == "SA"
        assert video.cover_url.endswith(".jpeg")
        assert video.play_url.endswith(".mp4")
        assert video.duration_seconds == 42
        assert video.stats.plays == 120500
        assert video.stats.likes == 9800
        assert video.stats.comments == 210
        assert video.stats.shares == 77
        assert video.author.id == "6800000000000000001"
        assert video.author.handle == "beanlab"
        assert video.author.display_name == "Bean Lab"
        assert video.author.avatar_url == "https://p16.tikwm.com/avatar/beanlab.jpeg"
        assert video.music.title == "original sound"
        assert video.music.artist == "Bean Lab"

    def test_camel_case_json_shape(self, raw_tikwm_video):
        """The JSON form uses the camelCase field names."""
        data = transform_tikwm_video(raw_tikwm_video).to_json_dict()

        assert set(data) == {
            "id", "title", "region", "coverUrl", "playUrl", "durationSeconds",
            "stats", "author", "music", "createdAtMillis",
        }
        assert set(data["author"]) == {"id", "handle", "displayName", "avatarUrl"}
        assert set(data["stats"]) == {"plays", "likes", "comments", "shares"}
        assert set(data["music"]) == {"title", "artist"}

    @pytest.mark.parametrize("missing", ["author", "music_info"])
    def test_missing_sub_objects_normalize_to_empty_strings(self, raw_tikwm_video, missing):
        """Absent author or music_info never raises and yields empty leaves."""
        del raw_tikwm_video[missing]

        data = transform_tikwm_video(raw_tikwm_video).to_json_dict()

        sub = data["author"] if missing == "author" else data["music"]
        assert sub
        assert all(value == "" for value in sub.values())

    def test_null_sub_objects_normalize_to_empty_strings(self, raw_tikwm_video):
        raw_tikwm_video["author"] = None
        raw_tikwm_video["music_info"] = {"title": None}

        video = transform_tikwm_video(raw_tikwm_video)

        assert video.author.handle == ""
        assert video.author.display_name == ""
        assert video.music.title == ""
        assert video.music.artist == ""

    def test_minimal_entry_gets_every_default(self):
        """An entry with only an id has no None leaves anywhere."""
        data = transform_tikwm_video({"video_id": "1"}).to_json_dict()

        def leaves(value):
            if isinstance(value, dict):
                for inner in value.values():
                    yield from leaves(inner)
            else:
                yield value

        assert None not in list(leaves(data))
        assert data["stats"] == {"plays": 0, "likes": 0, "comments": 0, "shares": 0}
        assert data["durationSeconds"] == 0
        assert data["createdAtMillis"] == 0

    @pytest.mark.parametrize(
        "create_time,expected",
        [
            (0, 0),
            (1, 1000),
            (1700000000, 1700000000000),
            (2147483647, 2147483647000),
            (1700000000.5, 1700000000500),
            (1700000000.123, 1700000000123),
            ("1700000000", 1700000000000),
        ],
    )
    def test_created_at_is_seconds_times_1000(self, raw_tikwm_video, create_time, expected):
        raw_tikwm_video["create_time"] = create_time

        video = transform_tikwm_video(raw_tikwm_video)

        assert video.created_at_millis == expected

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan"), "soon"])
    def test_unrepresentable_create_time_becomes_zero(self, raw_tikwm_video, bad):
        raw_tikwm_video["create_time"] = bad

        assert transform_tikwm_video(raw_tikwm_video).created_at_millis == 0

    def test_numeric_video_id_becomes_string(self, raw_tikwm_video):
        raw_tikwm_video["video_id"] = 7301234567890123456

        assert transform_tikwm_video(raw_tikwm_video).id == "7301234567890123456"

    def test_negative_and_garbage_counters_become_zero(self, raw_tikwm_video):
        raw_tikwm_video["play_count"] = -5
        raw_tikwm_video["digg_count"] = "lots"
        raw_tikwm_video["share_count"] = None

        stats = transform_tikwm_video(raw_tikwm_video).stats

        assert stats.plays == 0
        assert stats.likes == 0
        assert stats.shares == 0
        assert stats.comments == 210

    def test_infinite_counters_become_zero(self, raw_tikwm_video):
        raw_tikwm_video["play_count"] = float("inf")
        raw_tikwm_video["digg_count"] = float("nan")

        stats = transform_tikwm_video(raw_tikwm_video).stats

        assert stats.plays == 0
        assert stats.likes == 0

    def test_non_object_entry_raises(self):
        with pytest.raises(TypeError):
            transform_tikwm_video(["not", "a", "video"])


class TestTransformTikwmSearchData:
    """Tests for transform_tikwm_search_data."""

    def test_page_fields(self, tikwm_payload):
        page = transform_tikwm_search_data(tikwm_payload(cursor="20", has_more=True)["data"])

        assert len(page.videos) == 1
        assert page.has_more is True
        assert page.next_cursor == "20"

    @pytest.mark.parametrize("cursor", ["abc==", 36, 0])
    def test_cursor_forwarded_verbatim(self, tikwm_payload, cursor):
        """Cursor type and value pass through untouched."""
        page = transform_tikwm_search_data(tikwm_payload(cursor=cursor)["data"])

        assert page.next_cursor == cursor
        assert type(page.next_cursor) is type(cursor)

    def test_absent_fields_default(self):
        page = transform_tikwm_search_data({})

        assert page.videos == []
        assert page.has_more is False
        assert page.next_cursor is None
        assert page.to_json_dict() == {"videos": [], "hasMore": False, "nextCursor": None}

    def test_video_order_preserved(self, raw_tikwm_video):
        videos = [dict(raw_tikwm_video, video_id=str(n)) for n in range(5)]

        page = transform_tikwm_search_data({"videos": videos})

        assert [v.id for v in page.videos] == ["0", "1", "2", "3", "4"]

    def test_non_list_videos_raises(self):
        with pytest.raises(TypeError):
            transform_tikwm_search_data({"videos": {"0": {}}})
