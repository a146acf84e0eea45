"""
Post-processing for extraction results, and a consistency check for the registry.

- De-dupe: one connection per (platform, canonical slug); the first occurrence wins.
- Keep failures out of the connection list but available via `rejected()`.
- Audit: every documented acceptable format must extract with its own patterns.

This runs after `extract_many()` and before we show/export results so the
tables list each business once.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from reviewslugs.models.schemas import ExtractionResult
from reviewslugs.services.extract import extract_slug
from reviewslugs.services.registry import CompiledPlatform, load_registry


def _dedupe_key(result: ExtractionResult) -> Tuple[str, str]:
    """
    Uniqueness for a platform connection.

    Slugs are compared verbatim: lower-cased platforms already folded case
    during extraction, and the others carry case-significant ids.
    """
    return (result.platform_key, result.slug or "")


def tighten(results: List[ExtractionResult]) -> List[ExtractionResult]:
    """
    - Drop anything that didn't extract.
    - Keep the first result for each (platform, slug).
    - Sort for a stable table (platform, then slug).
    """
    best: Dict[Tuple[str, str], ExtractionResult] = {}
    for result in results:
        if not result.ok:
            continue
        best.setdefault(_dedupe_key(result), result)

    out = list(best.values())
    out.sort(key=lambda r: (r.platform_key, r.slug or ""))
    return out


def rejected(results: List[ExtractionResult]) -> List[ExtractionResult]:
    """Failed extractions, in input order."""
    return [r for r in results if not r.ok]


def audit_registry(registry: Optional[Mapping[str, CompiledPlatform]] = None) -> List[str]:
    """
    Run every platform's acceptable formats through its own patterns.

    Returns:
        One message per format that doesn't extract; empty when consistent.
    """
    registry = registry if registry is not None else load_registry()
    issues: List[str] = []
    for platform_key, entry in registry.items():
        for sample in entry.format.acceptable_formats:
            result = extract_slug(platform_key, sample, registry)
            if not result.ok:
                issues.append(f"{platform_key}: acceptable format {sample!r} does not extract")
    return issues
