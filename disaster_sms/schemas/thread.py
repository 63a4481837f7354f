"""Thread Listing Schemas — partial, defensive parsing of Reddit thread JSON.

Invariants:
    - Every child is tagged t3 (post), t1 (comment) or more (continuation marker);
      any other tag fails validation
    - Every data field is optional: absent fields decode as None, never fail the parse
    - Unknown fields are dropped; serialize_listings() omits None fields

Design Decisions:
    - Discriminated union on `kind`: pydantic picks the variant without trial parsing
    - Only top-level comments are modeled; nested `replies` are dropped with other extras
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from disaster_sms.core.domain_types import ThingKind


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


class PostData(_Lenient):
    id: str | None = None
    author: str | None = None
    selftext: str | None = None
    created: Any = None
    edited: Any = None


class CommentData(_Lenient):
    id: str | None = None
    author: str | None = None
    body: str | None = None
    created: Any = None
    edited: Any = None


class RedditPost(_Lenient):
    kind: Literal["t3"]
    data: PostData | None = None


class RedditComment(_Lenient):
    kind: Literal["t1"]
    data: CommentData | None = None


class RedditMore(_Lenient):
    kind: Literal["more"]
    data: Any = None


RedditThing = Annotated[
    Union[RedditPost, RedditComment, RedditMore],
    Field(discriminator="kind"),
]


class ListingData(_Lenient):
    children: list[RedditThing] | None = None


class Listing(_Lenient):
    data: ListingData | None = None


THREAD_ADAPTER: TypeAdapter[list[Listing]] = TypeAdapter(list[Listing])


def parse_listings(payload: Any) -> list[Listing]:
    """Validate decoded JSON as a thread response. Raises pydantic.ValidationError."""
    return THREAD_ADAPTER.validate_python(payload)


def serialize_listings(listings: list[Listing]) -> str:
    """Compact JSON text of the parsed thread, None fields omitted."""
    return THREAD_ADAPTER.dump_json(listings, exclude_none=True).decode()


def count_things(listings: list[Listing]) -> dict[str, int]:
    """Count posts, comments and continuation markers across all listings."""
    keys = {
        ThingKind.POST: "posts", ThingKind.COMMENT: "comments", ThingKind.MORE: "more",
    }
    counts = dict.fromkeys(keys.values(), 0)
    for listing in listings:
        children = (listing.data.children if listing.data else None) or []
        for thing in children:
            counts[keys[ThingKind(thing.kind)]] += 1
    return counts
