"""Thread URL normalization — pure helper for the thread fetcher.

Invariants:
    - A URL whose path ends in the JSON suffix, with no query or only the sort
      directive, is returned unchanged
    - Otherwise the path gains the JSON suffix and the query becomes exactly sort=new
    - normalize_thread_url(normalize_thread_url(u)) == normalize_thread_url(u)

Design Decisions:
    - Share-link tracking params (utm_source, ...) are dropped with the rest of the query
"""

import httpx

JSON_SUFFIX = ".json"
SORT_NEWEST = "sort=new"


def is_canonical(url: str) -> bool:
    """True if the URL already points at the newest-first JSON listing."""
    parsed = httpx.URL(url)
    if not parsed.path.endswith(JSON_SUFFIX):
        return False
    return str(parsed.params) in ("", SORT_NEWEST)


def normalize_thread_url(url: str) -> str:
    """Point url at the JSON listing sorted newest first."""
    url = url.strip()
    if is_canonical(url):
        return url
    parsed = httpx.URL(url)
    path = parsed.path
    if not path.endswith(JSON_SUFFIX):
        path = f"{path.rstrip('/')}/{JSON_SUFFIX}"
    return str(parsed.copy_with(path=path, params={"sort": "new"}))
