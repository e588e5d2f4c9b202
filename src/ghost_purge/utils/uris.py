"""Uri helpers"""
from urllib import parse

__all__ = ["join", "resolve"]


def join(*parts: str, quote: bool = False) -> str:
    """Join uri parts."""
    if not parts:
        return ""

    return parse.urljoin(
        parts[0],
        "/".join(
            (parse.quote_plus(part.strip("/"), safe="/") if quote else part.strip("/"))
            for part in parts[1:]
        ),
    )


def resolve(base: str | None, path: str) -> str:
    """
    Resolve a site path against a base url.
    Keeps trailing slashes, absolute urls are returned unchanged.
    """
    if not base or parse.urlsplit(path).scheme:
        return path

    return parse.urljoin(base.rstrip("/") + "/", path.lstrip("/"))
