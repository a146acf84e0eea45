"""
Tests for de-duplication and the registry audit.
"""

from reviewslugs.models.schemas import ExtractionResult
from reviewslugs.services.extract import extract_slug
from reviewslugs.services.registry import build_registry
from reviewslugs.services.validate import audit_registry, rejected, tighten


def _ok(platform_key, slug, raw=None):
    return ExtractionResult(
        platform_key=platform_key,
        raw_input=raw or slug,
        status="ok",
        slug=slug,
        pattern_index=0,
        patterns_tried=1,
    )


def _fail(platform_key, raw):
    return ExtractionResult(platform_key=platform_key, raw_input=raw, status="no_match", patterns_tried=1)


class TestTighten:
    """Test the tighten function."""

    def test_collapses_duplicates_first_wins(self):
        first = _ok("yelp", "a-place", raw="https://www.yelp.com/biz/a-place")
        second = _ok("yelp", "a-place", raw="a-place")
        out = tighten([first, second])
        assert out == [first]
        assert out[0].raw_input == "https://www.yelp.com/biz/a-place"

    def test_same_slug_on_different_platforms_kept(self):
        out = tighten([_ok("yelp", "shop"), _ok("zillow", "shop")])
        assert [(r.platform_key, r.slug) for r in out] == [("yelp", "shop"), ("zillow", "shop")]

    def test_case_significant_slugs_kept_apart(self):
        out = tighten([_ok("google", "ChIJabc"), _ok("google", "chijabc")])
        assert len(out) == 2

    def test_drops_failures(self):
        out = tighten([_fail("yelp", "nope"), _ok("yelp", "a-place")])
        assert [r.slug for r in out] == ["a-place"]

    def test_sorted_by_platform_then_slug(self):
        out = tighten([_ok("yelp", "b"), _ok("facebook", "z"), _ok("yelp", "a")])
        assert [(r.platform_key, r.slug) for r in out] == [("facebook", "z"), ("yelp", "a"), ("yelp", "b")]

    def test_real_extractions(self):
        results = [
            extract_slug("steam", "3016090"),
            extract_slug("steam", "https://store.steampowered.com/app/3016090/Eternal_Escape_castle_of_shadows/"),
            extract_slug("facebook", "PremiatoFornoCantoni"),
            extract_slug("facebook", "https://www.facebook.com/premiatofornocantoni"),
        ]
        out = tighten(results)
        assert [(r.platform_key, r.slug) for r in out] == [
            ("facebook", "premiatofornocantoni"),
            ("steam", "3016090"),
        ]

    def test_empty(self):
        assert tighten([]) == []


class TestRejected:
    def test_keeps_input_order(self):
        a, b = _fail("yelp", "x"), _fail("google", "y")
        assert rejected([a, _ok("yelp", "ok"), b]) == [a, b]


class TestAuditRegistry:
    def test_shipped_registry_is_consistent(self):
        assert audit_registry() == []

    def test_reports_undocumented_format(self):
        registry = build_registry({
            "demo": {
                "example_url": "https://demo.example/biz/shop",
                "acceptable_formats": ["https://demo.example/biz/shop", "https://other.example/shop"],
                "patterns": [r"^https://demo\.example/biz/(\w+)$"],
            }
        })
        issues = audit_registry(registry)
        assert len(issues) == 1
        assert "demo" in issues[0]
        assert "other.example" in issues[0]
