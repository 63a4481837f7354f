"""Thread Handlers — get_reddit_post."""

from disaster_sms.infrastructure.thread_fetcher import ThreadFetcher
from disaster_sms.schemas.tool_inputs import GetRedditPostInput


class ThreadHandlers:
    """Thread retrieval tool handler."""

    def __init__(self, fetcher: ThreadFetcher):
        self.fetcher = fetcher

    async def get_reddit_post(self, params: GetRedditPostInput) -> dict:
        """Fetch thread content. FetchError propagates to ToolDispatch."""
        content = await self.fetcher.fetch(params.url)
        return {"status": "ok", "content": content}
