"""Decide what to purge for a Ghost webhook event."""
from __future__ import annotations

from ghost_purge.models.content_event import ContentEvent, Page, Post
from ghost_purge.models.event_category import EventCategory
from ghost_purge.models.purge_request import (
    DEFAULT_PATHS,
    PurgeEverything,
    PurgeFiles,
    PurgePaths,
    PurgeRequest,
)

__all__ = ["select_purge_strategy"]


def select_purge_strategy(
    event: ContentEvent, paths: PurgePaths = DEFAULT_PATHS
) -> PurgeRequest:
    """
    Map an event to a purge request.
    Never raises; missing data falls back to a broader purge.
    """
    category = EventCategory.parse(event.event)

    if category is EventCategory.POST:
        return post_purge(event.post, paths)
    elif category is EventCategory.PAGE:
        return page_purge(event.page, paths)
    elif category is EventCategory.SITE:
        return PurgeEverything()

    # EventCategory.UNKNOWN
    return conservative_purge(paths)


def post_purge(post: Post | None, paths: PurgePaths = DEFAULT_PATHS) -> PurgeRequest:
    # Without the post we can't tell which pages changed, so purge it all.
    # This can over-purge when Ghost omits the post body.
    if post is None:
        return PurgeEverything()

    urls = [paths.home, paths.rss, paths.sitemap]

    if post.url:
        urls.append(post.url)

    for tag in post.tags:
        if tag.slug:
            urls.append(paths.tag_path(tag.slug))

    if post.primary_author is not None and post.primary_author.slug:
        urls.append(paths.author_path(post.primary_author.slug))

    return PurgeFiles(urls=tuple(urls))


def page_purge(page: Page | None, paths: PurgePaths = DEFAULT_PATHS) -> PurgeRequest:
    if page is None:
        return PurgeEverything()

    urls = [paths.home, paths.sitemap]

    if page.url:
        urls.append(page.url)

    return PurgeFiles(urls=tuple(urls))


def conservative_purge(paths: PurgePaths = DEFAULT_PATHS) -> PurgeFiles:
    """Common dynamic pages, for events we can't attribute."""
    return PurgeFiles(urls=(paths.home, paths.rss, paths.sitemap, paths.robots))
