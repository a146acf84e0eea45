"""
Guidance helpers (pure string work, no matching).

- split_example_url(url): (before, slug, after) around the last path segment,
  so the slug can be highlighted inside the example URL.
- guidance_for(platform_key): everything a help dialog needs for one platform.
"""

from typing import Mapping, Optional, Tuple
from urllib.parse import urlsplit

from reviewslugs.models.schemas import SlugGuidance
from reviewslugs.services.registry import load_registry


def last_path_segment(url: str) -> str:
    path = urlsplit(url).path if "://" in url else url
    parts = [p for p in path.split("/") if p]
    return parts[-1] if parts else ""


def split_example_url(url: str) -> Tuple[str, str, str]:
    """
    Split a URL around its last non-empty path segment.

    "https://www.yelp.com/biz/some-place" -> ("https://www.yelp.com/biz/", "some-place", "")
    A URL without a path comes back as (url, "", "").
    """
    slug = last_path_segment(url)
    if not slug:
        return url, "", ""
    at = url.rfind(slug)
    return url[:at], slug, url[at + len(slug):]


def guidance_for(platform_key: str, registry: Optional[Mapping] = None) -> Optional[SlugGuidance]:
    """Help for one platform, or None if the key isn't registered."""
    registry = registry if registry is not None else load_registry()
    entry = registry.get(platform_key)
    if entry is None:
        return None
    fmt = entry.format
    return SlugGuidance(
        platform_key=fmt.platform_key,
        example_url=fmt.example_url,
        example_parts=split_example_url(fmt.example_url),
        acceptable_formats=fmt.acceptable_formats,
    )
