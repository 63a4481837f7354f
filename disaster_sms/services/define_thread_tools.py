"""Thread Tool Schema — Anthropic Tool Use format for thread retrieval.

Invariants:
    - get_reddit_post takes exactly one required string parameter: url
"""

GET_REDDIT_POST_TOOL = {
    "name": "get_reddit_post",
    "description": (
        "Get the contents of a reddit post as JSON: the post body and its "
        "newest top-level comments."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "description": (
                    "Full URL of the reddit post: "
                    "https://www.reddit.com/r/(subreddit)/comments/(post_id)/[post_slug]/. "
                    "Query parameters or additional path segments not accepted."
                ),
            },
        },
        "required": ["url"],
    },
}
