from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PurgePaths(BaseModel):
    """Site paths purged alongside the changed content."""

    model_config = ConfigDict(frozen=True)

    home: str = "/"
    rss: str = "/rss/"
    sitemap: str = "/sitemap.xml"
    robots: str = "/robots.txt"
    tag: str = "/tag/{slug}/"
    author: str = "/author/{slug}/"

    def tag_path(self, slug: str) -> str:
        return self.tag.format(slug=slug)

    def author_path(self, slug: str) -> str:
        return self.author.format(slug=slug)


DEFAULT_PATHS = PurgePaths()


class PurgeEverything(BaseModel):
    """Purge the whole zone."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["everything"] = "everything"

    def to_api_payload(self) -> dict[str, Any]:
        return {"purge_everything": True}


class PurgeFiles(BaseModel):
    """Purge exactly these paths or urls, in order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["files"] = "files"
    urls: tuple[str, ...]

    def to_api_payload(self) -> dict[str, Any]:
        return {"files": list(self.urls)}


PurgeRequest = Annotated[Union[PurgeEverything, PurgeFiles], Field(discriminator="kind")]
