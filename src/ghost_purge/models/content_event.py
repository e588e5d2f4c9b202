"""Ghost webhook payloads.

Payloads are untrusted and arbitrarily shaped, so every field is optional and
values of the wrong type are read as absent instead of failing validation.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, BeforeValidator, Field
from typing_extensions import Annotated


def _text_or_none(value: Any) -> str | None:
    # empty strings count as missing
    if isinstance(value, str) and value:
        return value
    return None


def _object_or_none(value: Any) -> dict | None:
    if isinstance(value, dict):
        return value
    # present but not an object (arrays included): read as an object without fields
    return {} if isinstance(value, list) or value else None


def _objects_only(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


Text = Annotated[Optional[str], BeforeValidator(_text_or_none)]


class Tag(BaseModel):
    slug: Text = None


class Author(BaseModel):
    slug: Text = None


class Post(BaseModel):
    url: Text = None
    title: Text = None
    tags: Annotated[list[Tag], BeforeValidator(_objects_only)] = Field(
        default_factory=list
    )
    primary_author: Annotated[
        Optional[Author], BeforeValidator(lambda v: v if isinstance(v, dict) else None)
    ] = None


class Page(BaseModel):
    url: Text = None
    title: Text = None


class ContentEvent(BaseModel):
    event: Text = None
    post: Annotated[Optional[Post], BeforeValidator(_object_or_none)] = None
    page: Annotated[Optional[Page], BeforeValidator(_object_or_none)] = None

    @classmethod
    def from_payload(cls, payload: Any) -> ContentEvent:
        """Read a decoded webhook body. Non-object bodies carry no fields."""
        if not isinstance(payload, dict):
            payload = {}
        return cls.model_validate(payload)


class ContentSummary(BaseModel):
    type: str
    title: str
    url: str | None = None


def describe_event(event: ContentEvent) -> ContentSummary:
    """Summarize which piece of content an event is about."""
    name = event.event or ""

    if "post" in name:
        post = event.post or Post()
        return ContentSummary(
            type="Post", title=post.title or "Untitled Post", url=post.url
        )
    elif "page" in name:
        page = event.page or Page()
        return ContentSummary(
            type="Page", title=page.title or "Untitled Page", url=page.url
        )
    else:
        return ContentSummary(type="Settings", title="Site-wide change")
