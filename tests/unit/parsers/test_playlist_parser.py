"""
Unit tests for the playlist response parser.

Covers both parse rules (search/lookup documents and playlist items),
the fail-fast list fold, and page info construction.
"""

from __future__ import annotations

import pytest

from tests.factories.youtube_response_factory import (
    PlaylistItemFactory,
    SearchItemFactory,
    make_list_response,
)
from tubelist.exceptions import ShapeMismatchError
from tubelist.models.playlist import Playlist
from tubelist.parsers.playlist_parser import (
    ParseRule,
    build_page_info,
    parse,
    parse_all,
    parse_playlist,
    parse_playlist_item,
)


class TestParsePlaylist:
    """Tests for the search/lookup document rule."""

    def test_copies_snippet_fields(self) -> None:
        """All snippet fields land on the record, playlist_id from id.playlistId."""
        document = SearchItemFactory(id__playlistId="PL_search_1")
        snippet = document["snippet"]

        playlist = parse_playlist(document)

        assert playlist.etag == document["etag"]
        assert playlist.playlist_id == "PL_search_1"
        assert playlist.title == snippet["title"]
        assert playlist.description == snippet["description"]
        assert playlist.channel_id == snippet["channelId"]
        assert playlist.channel_title == snippet["channelTitle"]
        assert playlist.published_at == snippet["publishedAt"]
        assert playlist.thumbnails == snippet["thumbnails"]

    def test_leaves_item_fields_unset(self) -> None:
        """id, kind and resource_id are not populated by this rule."""
        playlist = parse_playlist(SearchItemFactory())

        assert playlist.id is None
        assert playlist.kind is None
        assert playlist.resource_id is None

    def test_missing_snippet_fields_are_none(self) -> None:
        """A sparse snippet yields None fields and empty thumbnails."""
        document = {"etag": "e1", "id": {"playlistId": "PL1"}, "snippet": {}}

        playlist = parse_playlist(document)

        assert playlist.title is None
        assert playlist.description is None
        assert playlist.thumbnails == {}

    @pytest.mark.parametrize("missing", ["etag", "id", "snippet"])
    def test_missing_required_key(self, missing: str) -> None:
        """Dropping a required key raises with the document attached."""
        document = SearchItemFactory()
        del document[missing]

        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_playlist(document)

        assert exc_info.value.payload is document
        assert exc_info.value.rule == "playlist"

    def test_id_without_playlist_id(self) -> None:
        """A search result for a video has no id.playlistId."""
        document = SearchItemFactory(id={"kind": "youtube#video", "videoId": "abc"})

        with pytest.raises(ShapeMismatchError, match="id.playlistId"):
            parse_playlist(document)

    def test_id_not_an_object(self) -> None:
        """A string id does not match the search shape."""
        with pytest.raises(ShapeMismatchError):
            parse_playlist(PlaylistItemFactory())

    def test_snippet_not_an_object(self) -> None:
        """A non-object snippet is a mismatch, not a crash."""
        document = SearchItemFactory(snippet="nope")

        with pytest.raises(ShapeMismatchError, match="snippet"):
            parse_playlist(document)

    @pytest.mark.parametrize("document", [None, "text", 42, ["etag", "id"]])
    def test_non_object_document(self, document: object) -> None:
        """Anything that is not a JSON object is rejected."""
        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_playlist(document)

        assert exc_info.value.payload == document

    def test_wrong_field_type(self) -> None:
        """A non-string title is reported as a shape mismatch."""
        document = SearchItemFactory(snippet__title=["not", "a", "string"])

        with pytest.raises(ShapeMismatchError, match="invalid field"):
            parse_playlist(document)


class TestParsePlaylistItem:
    """Tests for the playlist item rule."""

    def test_playlist_id_comes_from_snippet(self) -> None:
        """playlist_id is snippet.playlistId, never the top-level id."""
        document = PlaylistItemFactory(
            id="ITEM_123", snippet__playlistId="PL_parent"
        )

        playlist = parse_playlist_item(document)

        assert playlist.playlist_id == "PL_parent"
        assert playlist.id == "ITEM_123"

    def test_copies_item_fields(self) -> None:
        """Top-level and snippet fields are all copied."""
        document = PlaylistItemFactory()
        snippet = document["snippet"]

        playlist = parse_playlist_item(document)

        assert playlist.etag == document["etag"]
        assert playlist.kind == "youtube#playlistItem"
        assert playlist.resource_id == {"kind": "youtube#video", "videoId": "dQw4w9WgXcQ"}
        assert playlist.title == snippet["title"]
        assert playlist.channel_id == snippet["channelId"]
        assert playlist.channel_title == snippet["channelTitle"]
        assert playlist.description == snippet["description"]
        assert playlist.published_at == snippet["publishedAt"]
        assert playlist.thumbnails == snippet["thumbnails"]

    def test_video_id_property(self) -> None:
        """The video behind an item is reachable through video_id."""
        document = PlaylistItemFactory(snippet__resourceId={"kind": "youtube#video", "videoId": "xyz"})

        assert parse_playlist_item(document).video_id == "xyz"

    @pytest.mark.parametrize("missing", ["etag", "id", "kind", "snippet"])
    def test_missing_required_key(self, missing: str) -> None:
        """Each of etag, id, kind and snippet is required."""
        document = PlaylistItemFactory()
        del document[missing]

        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_playlist_item(document)

        assert exc_info.value.rule == "songs"
        assert missing in exc_info.value.message


class TestParseDispatch:
    """Tests for rule dispatch."""

    def test_dispatches_by_rule(self) -> None:
        assert parse(SearchItemFactory(), ParseRule.PLAYLIST).kind is None
        assert parse(PlaylistItemFactory(), ParseRule.SONGS).kind == "youtube#playlistItem"

    def test_accepts_rule_name(self) -> None:
        """Rules can be given by their string value."""
        assert isinstance(parse(SearchItemFactory(), "playlist"), Playlist)

    def test_unknown_rule(self) -> None:
        with pytest.raises(ValueError):
            parse(SearchItemFactory(), "videos")


class TestParseAll:
    """Tests for the fail-fast list fold."""

    def test_preserves_order(self) -> None:
        items = [
            SearchItemFactory(id__playlistId="PL_a"),
            SearchItemFactory(id__playlistId="PL_b"),
            SearchItemFactory(id__playlistId="PL_c"),
        ]

        playlists = parse_all(items, ParseRule.PLAYLIST)

        assert [p.playlist_id for p in playlists] == ["PL_a", "PL_b", "PL_c"]

    def test_empty_list(self) -> None:
        assert parse_all([], ParseRule.SONGS) == []

    def test_one_bad_item_fails_everything(self) -> None:
        """No partial list is produced when one item is malformed."""
        bad = {"etag": "e", "snippet": {}}
        items = [SearchItemFactory(), bad, SearchItemFactory()]

        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_all(items, ParseRule.PLAYLIST)

        assert exc_info.value.payload is bad

    def test_first_bad_item_is_reported(self) -> None:
        first_bad = {"etag": "first"}
        second_bad = {"etag": "second"}

        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_all([first_bad, second_bad], ParseRule.SONGS)

        assert exc_info.value.payload is first_bad


class TestBuildPageInfo:
    """Tests for page info construction."""

    def test_injects_tokens(self) -> None:
        response = make_list_response(
            next_page_token="CAUQAA", prev_page_token="CAUQAQ", total_results=42
        )

        page_info = build_page_info(response)

        assert page_info == {
            "totalResults": 42,
            "resultsPerPage": 20,
            "nextPageToken": "CAUQAA",
            "prevPageToken": "CAUQAQ",
        }

    def test_absent_tokens_are_none(self) -> None:
        page_info = build_page_info(make_list_response())

        assert page_info["nextPageToken"] is None
        assert page_info["prevPageToken"] is None

    def test_does_not_mutate_response(self) -> None:
        response = make_list_response(next_page_token="T")

        build_page_info(response)

        assert "nextPageToken" not in response["pageInfo"]

    def test_missing_page_info(self) -> None:
        """A response without pageInfo still yields both token keys."""
        page_info = build_page_info({"items": [], "nextPageToken": "T"})

        assert page_info == {"nextPageToken": "T", "prevPageToken": None}
