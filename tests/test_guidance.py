"""
Tests for the guidance helpers.
"""

from extraction.patterns import SLUG_FORMATS
from reviewslugs.util.guidance import guidance_for, last_path_segment, split_example_url


class TestSplitExampleUrl:
    """Test the split_example_url function."""

    def test_slug_at_end(self):
        assert split_example_url("https://www.yelp.com/biz/the-cheesecake-factory-san-diego") == (
            "https://www.yelp.com/biz/",
            "the-cheesecake-factory-san-diego",
            "",
        )

    def test_trailing_slash(self):
        assert split_example_url("https://www.zillow.com/profile/oakandocean/") == (
            "https://www.zillow.com/profile/",
            "oakandocean",
            "/",
        )

    def test_no_path(self):
        assert split_example_url("https://www.trustpilot.com") == ("https://www.trustpilot.com", "", "")

    def test_bare_value(self):
        assert split_example_url("3016090") == ("", "3016090", "")

    def test_parts_rebuild_url(self):
        for entry in SLUG_FORMATS.values():
            url = entry["example_url"]
            assert "".join(split_example_url(url)) == url


class TestLastPathSegment:
    def test_ignores_query(self):
        assert last_path_segment("https://www.google.com/maps?cid=472717649119152494") == "maps"

    def test_empty(self):
        assert last_path_segment("") == ""


class TestGuidanceFor:
    def test_known_platform(self):
        guide = guidance_for("yelp")
        assert guide.platform_key == "yelp"
        assert guide.example_url == SLUG_FORMATS["yelp"]["example_url"]
        assert guide.example_parts[1] == "the-cheesecake-factory-san-diego"
        assert list(guide.acceptable_formats) == SLUG_FORMATS["yelp"]["acceptable_formats"]

    def test_unknown_platform(self):
        assert guidance_for("myspace") is None
