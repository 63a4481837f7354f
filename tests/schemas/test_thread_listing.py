"""Thread listing schema tests — partial, tagged parsing.

Tests cover:
    - Full Reddit-shaped payload parses into posts, comments and continuation markers
    - Missing optional fields decode as None instead of failing
    - Unknown fields dropped and None fields omitted on serialization
    - Unknown `kind` tags fail validation
"""

import json

import pytest
from pydantic import ValidationError

from disaster_sms.schemas.thread import (
    RedditComment, RedditMore, RedditPost,
    count_things, parse_listings, serialize_listings,
)

from tests.fakes import thread_payload


def test_full_payload_parses():
    listings = parse_listings(thread_payload(comments=["Shelter open", "Power back"]))

    post = listings[0].data.children[0]
    assert isinstance(post, RedditPost)
    assert post.data.selftext == "I-40 closed at exit 50"
    comments = listings[1].data.children
    assert isinstance(comments[0], RedditComment)
    assert comments[1].data.body == "Power back"
    assert isinstance(comments[-1], RedditMore)
    assert count_things(listings) == {"posts": 1, "comments": 2, "more": 1}


@pytest.mark.parametrize("payload", [
    [],
    [{}],
    [{"data": {}}],
    [{"data": {"children": []}}],
    [{"data": {"children": [{"kind": "t3"}]}}],
    [{"data": {"children": [{"kind": "t1", "data": {}}]}}],
    [{"data": {"children": [{"kind": "more"}]}}],
])
def test_partial_payloads_parse(payload):
    parse_listings(payload)


def test_missing_fields_decode_as_none():
    listings = parse_listings([
        {"data": {"children": [{"kind": "t1", "data": {"body": "Roads icy"}}]}},
    ])
    comment = listings[0].data.children[0]
    assert comment.data.author is None
    assert comment.data.created is None


def test_serialization_drops_unknown_and_none_fields():
    listings = parse_listings([
        {
            "kind": "Listing",
            "data": {
                "after": None,
                "children": [
                    {"kind": "t3", "data": {"selftext": "Update", "ups": 9}},
                ],
            },
        },
    ])
    assert json.loads(serialize_listings(listings)) == [
        {"data": {"children": [{"kind": "t3", "data": {"selftext": "Update"}}]}},
    ]


def test_more_marker_keeps_opaque_data():
    listings = parse_listings(thread_payload())
    data = json.loads(serialize_listings(listings))
    assert data[1]["data"]["children"][-1] == {
        "kind": "more", "data": {"count": 12, "children": ["x1"]},
    }


def test_unknown_kind_rejected():
    with pytest.raises(ValidationError):
        parse_listings([{"data": {"children": [{"kind": "t5", "data": {}}]}}])


def test_non_list_payload_rejected():
    with pytest.raises(ValidationError):
        parse_listings({"error": 429, "message": "Too Many Requests"})
