"""
Extraction rules:
- Look the platform up by exact, case-sensitive key. Unknown key -> status
  "unknown_platform" (logged as a warning: the caller's platform list is stale).

- Clean the pasted text: trim whitespace at both ends, including the
  non-breaking and zero-width characters browsers and email clients leave behind.
  Nothing inside the string is touched.

- Try the platform's patterns in registry order:
    * a pattern must consume the whole cleaned input, and "matches" only if it
      yields a non-empty slug (trailing prose after an id is a miss)
    * first match wins, no scoring between patterns
    * the slug is the pattern's capture group (whole match if it has none)
    * lower-case it when the platform says so; otherwise keep it verbatim
      (opaque ids like "ChIJx0JMBTFV2YARbgnOgjJujwY" are case-significant)

- Nothing matched -> status "no_match", with the raw input kept as typed and the
  platform's guidance attached so the UI can explain the expected formats.

- Never raises for bad input. Callers who want an exception use
  `ExtractionResult.raise_for_status()`.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

import regex

from reviewslugs.models.schemas import ExtractionResult, SlugRequest
from reviewslugs.services.registry import CompiledPlatform, load_registry
from reviewslugs.util.guidance import guidance_for
from reviewslugs.util.logger import get_logger
from reviewslugs.util.settings import get_settings

logger = get_logger(__name__)

# Whitespace plus the invisible characters that ride along with copy/paste
_EDGE_JUNK = r"[\s\u00A0\u2007\u202F\u200B\u200C\u200D\u2060\uFEFF]+"
_EDGE_PAT = regex.compile(rf"^{_EDGE_JUNK}|{_EDGE_JUNK}$")


def clean_input(raw_input: str) -> str:
    """'  https://yelp.com/biz/x\\u200b ' -> 'https://yelp.com/biz/x'"""
    if not raw_input:
        return ""
    return _EDGE_PAT.sub("", raw_input)


def match_platform(entry: CompiledPlatform, text: str, trace: bool = False):
    """
    Run one platform's patterns over already-cleaned text.

    Returns:
        (slug, pattern_index) for the first pattern that yields a slug,
        or (None, None).
    """
    for idx, matcher in enumerate(entry.matchers):
        m = matcher.pattern.fullmatch(text)
        slug = m.group(matcher.group) if m else None
        if trace:
            logger.debug(f"{entry.platform_key}[{idx}] {'hit' if slug else 'miss'}: {matcher.source}")
        if not slug:
            continue
        if entry.lower_cased:
            slug = slug.lower()
        return slug, idx
    return None, None


def extract_slug(
    platform_key: str,
    raw_input: str,
    registry: Optional[Mapping[str, CompiledPlatform]] = None,
) -> ExtractionResult:
    """
    Canonical slug for `raw_input` on `platform_key`.

    Args:
        platform_key: registry key, e.g. "google" (exact match)
        raw_input: whatever the user typed or pasted
        registry: compiled registry; defaults to the process-wide one

    Returns:
        ExtractionResult with status "ok", "unknown_platform" or "no_match".
    """
    registry = registry if registry is not None else load_registry()
    entry = registry.get(platform_key)
    if entry is None:
        logger.warning(f"Slug extraction requested for unknown platform {platform_key!r}")
        return ExtractionResult(
            platform_key=platform_key,
            raw_input=raw_input,
            status="unknown_platform",
        )

    text = clean_input(raw_input)
    slug, idx = match_platform(entry, text, trace=get_settings().trace_patterns)
    if slug is not None:
        logger.debug(f"{platform_key}: {text!r} -> {slug!r} (pattern {idx})")
        return ExtractionResult(
            platform_key=platform_key,
            raw_input=raw_input,
            status="ok",
            slug=slug,
            pattern_index=idx,
            patterns_tried=idx + 1,
        )

    logger.info(f"{platform_key}: no pattern matched {raw_input!r} ({len(entry.matchers)} tried)")
    return ExtractionResult(
        platform_key=platform_key,
        raw_input=raw_input,
        status="no_match",
        patterns_tried=len(entry.matchers),
        guidance=guidance_for(platform_key, registry),
    )


def extract_many(
    requests: Iterable[SlugRequest],
    registry: Optional[Mapping[str, CompiledPlatform]] = None,
) -> List[ExtractionResult]:
    """`extract_slug()` over a batch, results in input order."""
    registry = registry if registry is not None else load_registry()
    results = [extract_slug(r.platform_key, r.raw_input, registry) for r in requests]
    failed = sum(1 for r in results if not r.ok)
    logger.info(f"Extracted {len(results) - failed}/{len(results)} slugs")
    return results
