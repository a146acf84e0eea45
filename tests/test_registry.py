"""
Tests for registry loading and pattern compilation.
"""

import pytest
import regex

from extraction.patterns import SLUG_FORMATS
from reviewslugs.services.registry import (
    BASE_FLAGS,
    build_registry,
    compile_pattern,
    load_registry,
    platform_keys,
)
from reviewslugs.util.errors import RegistryError


def _entry(**overrides):
    raw = {
        "example_url": "https://demo.example/biz/some-shop",
        "acceptable_formats": ["https://demo.example/biz/some-shop"],
        "patterns": [r"^https?://demo\.example/biz/([\w-]+)$"],
        "lower_cased": False,
    }
    raw.update(overrides)
    return raw


class TestCompilePattern:
    """Test the compile_pattern function."""

    def test_single_group(self):
        m = compile_pattern(r"^id:(\d+)$")
        assert m.group == 1
        assert m.pattern.match("id:42").group(m.group) == "42"

    def test_no_group_uses_whole_match(self):
        m = compile_pattern(r"^\d{5}$")
        assert m.group == 0
        assert m.pattern.match("12345").group(m.group) == "12345"

    def test_case_insensitive_by_default(self):
        m = compile_pattern(r"^https://demo\.example/([a-z]+)$")
        assert m.pattern.flags & BASE_FLAGS
        assert m.pattern.match("HTTPS://DEMO.EXAMPLE/Shop").group(1) == "Shop"

    def test_unicode_classes(self):
        m = compile_pattern(r"^([\p{L}\p{N}-]+)$")
        assert m.pattern.match("café-zürich-2").group(1) == "café-zürich-2"

    def test_delimited_pattern(self):
        m = compile_pattern(r"@^[A-Z\d]{5,13}$@i")
        assert m.source == r"@^[A-Z\d]{5,13}$@i"
        assert m.group == 0
        assert m.pattern.match("p9e4iwxpns")

    def test_delimited_extra_flags(self):
        m = compile_pattern(r"@^a.b$@s")
        assert m.pattern.flags & regex.DOTALL
        assert m.pattern.match("a\nb")

    def test_unsupported_flag(self):
        with pytest.raises(RegistryError):
            compile_pattern(r"@^abc$@q")

    def test_must_be_anchored(self):
        with pytest.raises(RegistryError) as exc:
            compile_pattern(r"demo/(\w+)")
        assert exc.value.details["pattern"] == r"demo/(\w+)"

    @pytest.mark.parametrize("source", [r"^(\d+)", r"^(\d+)/?(?:[?#].*)?", r"^price\$", r"@^[A-Z\d]{5,13}@i"])
    def test_must_be_end_anchored(self, source):
        """A pattern has to describe the whole input, not just its start."""
        with pytest.raises(RegistryError) as exc:
            compile_pattern(source)
        assert "'$'" in exc.value.message

    def test_two_groups_rejected(self):
        with pytest.raises(RegistryError):
            compile_pattern(r"^(a)|(b)$")

    def test_non_capturing_groups_allowed(self):
        assert compile_pattern(r"^(?:www\.)?(a+)(?:/b)?$").group == 1

    def test_bad_syntax(self):
        with pytest.raises(RegistryError):
            compile_pattern(r"^(unclosed$")


class TestBuildRegistry:
    def test_builds_entries_in_order(self):
        registry = build_registry({"b-site": _entry(), "a-site": _entry(lower_cased=True)})
        assert list(registry) == ["b-site", "a-site"]
        assert registry["a-site"].lower_cased is True
        assert registry["b-site"].platform_key == "b-site"
        assert len(registry["b-site"].matchers) == 1

    def test_registry_is_read_only(self):
        registry = build_registry({"demo": _entry()})
        with pytest.raises(TypeError):
            registry["other"] = registry["demo"]

    def test_missing_lower_cased_defaults_false(self):
        raw = _entry()
        del raw["lower_cased"]
        assert build_registry({"demo": raw})["demo"].lower_cased is False

    def test_missing_example_url(self):
        raw = _entry()
        del raw["example_url"]
        with pytest.raises(RegistryError) as exc:
            build_registry({"demo": raw})
        assert exc.value.details["platform_key"] == "demo"

    @pytest.mark.parametrize("field", ["patterns", "acceptable_formats"])
    def test_empty_lists_rejected(self, field):
        with pytest.raises(RegistryError):
            build_registry({"demo": _entry(**{field: []})})

    def test_bad_pattern_names_platform(self):
        with pytest.raises(RegistryError) as exc:
            build_registry({"demo": _entry(patterns=["no-anchor"])})
        assert exc.value.details["platform_key"] == "demo"

    @pytest.mark.parametrize("key", ["Demo", "demo site", "-demo", ""])
    def test_bad_platform_key(self, key):
        with pytest.raises(RegistryError):
            build_registry({key: _entry()})


class TestDefaultRegistry:
    """Checks over the shipped registry data."""

    def test_loaded_once(self):
        assert load_registry() is load_registry()

    def test_all_platforms_present(self):
        keys = platform_keys()
        assert keys == list(SLUG_FORMATS)
        assert len(keys) == 124
        for key in ("google", "yelp", "facebook", "tripadvisor", "trustpilot"):
            assert key in keys

    def test_patterns_are_fully_anchored_with_at_most_one_group(self):
        for entry in load_registry().values():
            for matcher in entry.matchers:
                assert matcher.pattern.pattern.startswith("^"), matcher.source
                assert matcher.pattern.pattern.endswith("$"), matcher.source
                assert matcher.pattern.groups <= 1, matcher.source

    def test_every_entry_documented(self):
        for entry in load_registry().values():
            assert entry.format.example_url
            assert entry.format.acceptable_formats
