"""
Unit tests for slug extraction.

These tests run real registry data through `extract_slug()` and pin the
behaviour integrations rely on: precedence, case handling and failure reporting.
"""

import logging

import pytest

from extraction.patterns import SLUG_FORMATS
from reviewslugs.models.schemas import ExtractionResult, SlugRequest
from reviewslugs.services.extract import clean_input, extract_many, extract_slug, match_platform
from reviewslugs.services.registry import build_registry, load_registry
from reviewslugs.util.errors import NoMatchError, ReviewSlugsError, UnknownPlatformError

ALL_FORMATS = [
    (platform_key, sample)
    for platform_key, entry in SLUG_FORMATS.items()
    for sample in entry["acceptable_formats"]
]

# Formats naming the same business, with the slug they must all collapse to
SAME_INTENT_GROUPS = [
    ("facebook", [
        "premiatofornocantoni",
        "https://www.facebook.com/premiatofornocantoni",
        "https://www.facebook.com/pg/premiatofornocantoni",
    ], "premiatofornocantoni"),
    ("facebook", ["830214057037039", "https://www.facebook.com/830214057037039"], "830214057037039"),
    ("google", [
        "472717649119152494",
        "https://www.google.com/maps?cid=472717649119152494",
        "https://maps.google.com/maps?cid=472717649119152494",
    ], "472717649119152494"),
    ("google", [
        "0x68f6e3282ce096e",
        "https://www.google.com/maps/place/The+Cheesecake+Factory/@32.76918,-117.1677887,17z/data=!3m1!4b1!4m5!3m4!1s0x0:0x68f6e3282ce096e!8m2!3d32.76918!4d-117.1656",
    ], "0x68f6e3282ce096e"),
    ("google", [
        "ChoIzsbB-eTP8MqzARoNL2cvMTFiNXZfMWdoZhAB",
        "https://www.google.com/travel/hotels/entity/ChoIzsbB-eTP8MqzARoNL2cvMTFiNXZfMWdoZhAB",
    ], "ChoIzsbB-eTP8MqzARoNL2cvMTFiNXZfMWdoZhAB"),
    ("make-my-trip", [
        "201904300047376568",
        "hotelId=201904300047376568",
        "hotel-details/?hotelId=201904300047376568",
        "hotels/hotel-details/?hotelId=201904300047376568",
        "https://www.makemytrip.com/hotels/hotel-details/?hotelId=201904300047376568",
    ], "201904300047376568"),
    ("make-my-trip", [
        "truliv_villa_macarena_best_villa_in_ecr-details-chennai",
        "truliv_villa_macarena_best_villa_in_ecr-details-chennai.html",
        "hotels/truliv_villa_macarena_best_villa_in_ecr-details-chennai.html",
        "https://www.makemytrip.com/hotels/truliv_villa_macarena_best_villa_in_ecr-details-chennai.html",
    ], "truliv_villa_macarena_best_villa_in_ecr-details-chennai"),
    ("bilbayt", [
        "fusion",
        "vendors/fusion",
        "en/vendors/fusion",
        "kw/ar/vendors/fusion",
        "https://bilbayt.com/kw/en/vendors/fusion",
    ], "fusion"),
    ("deliveroo", [
        "sandinista-2-old-bank-street",
        "manchester-central/sandinista-2-old-bank-street",
        "Manchester/manchester-central/sandinista-2-old-bank-street",
        "menu/Manchester/manchester-central/sandinista-2-old-bank-street",
        "https://deliveroo.co.uk/menu/Manchester/manchester-central/sandinista-2-old-bank-street",
    ], "sandinista-2-old-bank-street"),
    ("class-pass", [
        "bodi-scottsdale",
        "studios/bodi-scottsdale",
        "https://classpass.com/studios/bodi-scottsdale",
    ], "bodi-scottsdale"),
    ("class-pass", ["25110", "https://classpass.com/studios/25110"], "25110"),
    ("priceline", [
        "52129904",
        "H52129904",
        "relax/at/52129904",
        "https://www.priceline.com/relax/at/52129904",
    ], "52129904"),
    ("apple-maps", [
        "2404254127207869658",
        "https://maps.apple.com/place?auid=2404254127207869658",
    ], "2404254127207869658"),
    ("apple-maps", [
        "ID4C29E6DBFA72090",
        "https://maps.apple.com/place?placeid=ID4C29E6DBFA72090",
    ], "ID4C29E6DBFA72090"),
    ("abritel", ["pdp/lo/1217263", "https://www.abritel.fr/pdp/lo/1217263"], "pdp/lo/1217263"),
    ("abritel", [
        "location-vacances/p2320528vb",
        "https://www.abritel.fr/location-vacances/p2320528vb",
    ], "location-vacances/p2320528vb"),
    ("bookabach", ["pdp/lo/1217263", "https://www.bookabach.co.nz/pdp/lo/1217263"], "pdp/lo/1217263"),
    ("bookabach", [
        "holiday-accommodation/p2320528vb",
        "https://www.bookabach.co.nz/holiday-accommodation/p2320528vb",
    ], "holiday-accommodation/p2320528vb"),
    ("fewo-direkt", ["pdp/lo/1217263", "https://www.fewo-direkt.de/pdp/lo/1217263"], "pdp/lo/1217263"),
    ("fewo-direkt", [
        "ferienwohnung-ferienhaus/p2320528vb",
        "https://www.fewo-direkt.de/ferienwohnung-ferienhaus/p2320528vb",
    ], "ferienwohnung-ferienhaus/p2320528vb"),
    ("aliexpress", [
        "1005008932789738",
        "1005008932789738.html",
        "item/1005008932789738.html",
        "https://www.aliexpress.com/item/1005008932789738.html",
    ], "1005008932789738"),
    ("airbnb", [
        "1100739390072754079",
        "rooms/1100739390072754079",
        "https://www.airbnb.co.in/rooms/1100739390072754079",
    ], "1100739390072754079"),
    ("booking", [
        "hotel/it/largo-argentina-apartment-daplace-apartments",
        "https://www.booking.com/hotel/it/largo-argentina-apartment-daplace-apartments.it.html",
    ], "hotel/it/largo-argentina-apartment-daplace-apartments"),
    ("tripadvisor", [
        "g53957-d4838236",
        "https://www.tripadvisor.com/Restaurant_Review-g53957-d4838236-Reviews-Top_of_the_80_s-West_Hazleton_Luzerne_County_Pocono_Mountains_Region_Pennsylvania.html",
        "Restaurant_Review-g53957-d4838236-Reviews-Top_of_the_80_s-West_Hazleton_Luzerne_County_Pocono_Mountains_Region_Pennsylvania.html",
    ], "g53957-d4838236"),
    ("tripadvisor", ["d4838236", "4838236"], "4838236"),
    ("trustpilot", [
        "trustpilot.com",
        "https://www.trustpilot.fr/review/trustpilot.com",
        "https://fr.trustpilot.com/review/trustpilot.com",
    ], "trustpilot.com"),
    ("ubereats", [
        "YexrviO9V_GNGHXnEojF2A",
        "kfc-2400-louis-xiv/YexrviO9V_GNGHXnEojF2A",
        "https://www.ubereats.com/store/kfc-2400-louis-xiv/YexrviO9V_GNGHXnEojF2A",
    ], "YexrviO9V_GNGHXnEojF2A"),
    ("wedding-wire", [
        "weddingwire.com/28b3e0f05b36bce3",
        "weddingwire.com/biz/north-shore-house/28b3e0f05b36bce3.html",
        "https://www.weddingwire.com/biz/north-shore-house/28b3e0f05b36bce3.html",
    ], "28b3e0f05b36bce3"),
    ("pages-jaunes", [
        "57672837",
        "https://www.pagesjaunes.fr/pros/57672837",
        "https://www.pagesjaunes.fr/pros/detail?bloc_id=FCP57672837CLIENTDCESS000003C0001%26no_sequence=1%26code_rubrique=54053000",
    ], "57672837"),
    ("yellowpages", [
        "the-auto-doc-8519899",
        "houston-tx/mip/the-auto-doc-8519899",
        "https://www.yellowpages.com/houston-tx/mip/the-auto-doc-8519899",
    ], "the-auto-doc-8519899"),
    ("yellowpages", ["8519899", "https://www.yellowpages.com/houston-tx/l/8519899"], "8519899"),
    ("software-advice", [
        "quickmeasure",
        "quickmeasure-profile",
        "construction/quickmeasure-profile",
        "softwareadvice.com/construction/quickmeasure-profile",
        "https://www.softwareadvice.com/construction/quickmeasure-profile",
    ], "quickmeasure"),
    ("zillow", ["oakandocean", "https://www.zillow.com/profile/oakandocean"], "oakandocean"),
]


class TestCleanInput:
    """Test the clean_input function."""

    def test_trims_whitespace(self):
        assert clean_input("  abc \n") == "abc"
        assert clean_input("\tabc") == "abc"

    def test_trims_invisible_characters(self):
        """Non-breaking and zero-width characters left behind by copy/paste."""
        assert clean_input("\u00a0abc\u200b") == "abc"
        assert clean_input("\ufeffabc\u2060 ") == "abc"

    def test_keeps_inner_text(self):
        assert clean_input(" a b ") == "a b"

    def test_empty(self):
        assert clean_input("") == ""
        assert clean_input("   ") == ""


class TestDocumentedFormats:
    """Every documented format of every platform must extract."""

    @pytest.mark.parametrize("platform_key,sample", ALL_FORMATS)
    def test_acceptable_format_extracts(self, platform_key, sample):
        result = extract_slug(platform_key, sample)
        assert result.status == "ok", f"{platform_key}: {sample!r}"
        assert result.slug

    @pytest.mark.parametrize(
        "platform_key,expected",
        [
            ("steam", "3016090"),
            ("trust-radius", "clari"),
            ("walmart", "5112777712"),
            ("alternative-to", "typeform"),
            ("just-dial", "011PXX11-XX11-240211180543-H1S7"),
        ],
    )
    def test_same_intent_formats_agree(self, platform_key, expected):
        """Bare id, partial path and full URL all name the same business."""
        for sample in SLUG_FORMATS[platform_key]["acceptable_formats"]:
            assert extract_slug(platform_key, sample).slug == expected, sample

    @pytest.mark.parametrize(
        "platform_key,samples,expected",
        SAME_INTENT_GROUPS,
        ids=[f"{key}-{expected}" for key, _, expected in SAME_INTENT_GROUPS],
    )
    def test_same_intent_group_agrees(self, platform_key, samples, expected):
        slugs = {sample: extract_slug(platform_key, sample).slug for sample in samples}
        assert set(slugs.values()) == {expected}, slugs


class TestPrecedence:
    """First matching pattern wins, in registry order."""

    def test_google_place_id_rule_first(self):
        result = extract_slug("google", "ChIJx0JMBTFV2YARbgnOgjJujwY")
        assert result.slug == "ChIJx0JMBTFV2YARbgnOgjJujwY"
        assert result.pattern_index == 0
        assert result.patterns_tried == 1

    def test_google_cid_url(self):
        result = extract_slug("google", "https://www.google.com/maps?cid=472717649119152494")
        assert result.slug == "472717649119152494"
        assert result.pattern_index == 1
        assert result.patterns_tried == 2

    def test_google_bare_cid(self):
        assert extract_slug("google", "472717649119152494").slug == "472717649119152494"

    def test_google_hex_feature_id(self):
        result = extract_slug("google", "0x68f6e3282ce096e")
        assert result.slug == "0x68f6e3282ce096e"
        assert result.pattern_index == 2

    def test_make_my_trip_hotel_id_before_page_name(self):
        url = "https://www.makemytrip.com/hotels/hotel-details/?hotelId=201904300047376568"
        result = extract_slug("make-my-trip", url)
        assert result.slug == "201904300047376568"
        assert result.pattern_index == 0


class TestCaseHandling:
    """lower_cased platforms fold case; everything else is kept verbatim."""

    def test_facebook_folds_case(self):
        assert extract_slug("facebook", "PremiatoFornoCantoni").slug == "premiatofornocantoni"

    def test_facebook_numeric_page(self):
        assert extract_slug("facebook", "https://www.facebook.com/830214057037039").slug == "830214057037039"

    def test_trustpilot_folds_case(self):
        assert extract_slug("trustpilot", "WWW.TRUSTPILOT.COM").slug == "www.trustpilot.com"

    def test_tripadvisor_folds_case(self):
        assert extract_slug("tripadvisor", "G53957-D4838236").slug == "g53957-d4838236"

    def test_yelp_preserves_case(self):
        result = extract_slug("yelp", "https://www.yelp.com/biz/The-Cheesecake-Factory")
        assert result.slug == "The-Cheesecake-Factory"

    def test_carfax_preserves_case(self):
        """Delimited "@...@i" pattern: case-insensitive match, slug kept as typed."""
        assert extract_slug("carfax", "P9E4IWXPNS").slug == "P9E4IWXPNS"

    def test_lower_cased_output_is_lowercase(self):
        for platform_key, entry in load_registry().items():
            if not entry.lower_cased:
                continue
            for sample in entry.format.acceptable_formats:
                slug = extract_slug(platform_key, sample).slug
                assert slug == slug.lower(), f"{platform_key}: {sample!r}"


class TestYelp:
    def test_full_url(self):
        result = extract_slug("yelp", "https://www.yelp.com/biz/the-cheesecake-factory-san-diego")
        assert result.ok
        assert result.slug == "the-cheesecake-factory-san-diego"

    def test_surrounding_whitespace(self):
        result = extract_slug("yelp", "  https://www.yelp.com/biz/the-cheesecake-factory-san-diego  ")
        assert result.slug == "the-cheesecake-factory-san-diego"
        assert result.raw_input == "  https://www.yelp.com/biz/the-cheesecake-factory-san-diego  "


class TestFailures:
    """Failures are reported on the result, never raised."""

    def test_unknown_platform(self):
        result = extract_slug("myspace", "https://myspace.com/someone")
        assert result.status == "unknown_platform"
        assert result.slug is None
        assert result.guidance is None
        assert result.patterns_tried == 0

    def test_platform_key_is_exact(self):
        assert extract_slug("Google", "472717649119152494").status == "unknown_platform"

    def test_unknown_platform_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            extract_slug("myspace", "x")
        assert any("myspace" in rec.getMessage() for rec in caplog.records)

    @pytest.mark.parametrize("platform_key", list(SLUG_FORMATS))
    def test_prose_matches_nothing(self, platform_key):
        result = extract_slug(platform_key, "hello world, this is not a url")
        assert result.status == "no_match"

    @pytest.mark.parametrize(
        "platform_key,raw",
        [
            ("travelocity", "99 bottles of beer"),
            ("expedia", "14833039 is the hotel I stayed at"),
            ("hotels", "ho141243 -- great stay, 5 stars"),
            ("orbitz", "h123 random trailing text here"),
            ("aliexpress", "1005008932789738 some notes"),
            ("steam", "3016090 is a great game"),
            ("yelp", "https://www.yelp.com/biz/a-place and more"),
        ],
    )
    def test_trailing_prose_is_not_a_slug(self, platform_key, raw):
        """An id followed by free text must not become a slug."""
        result = extract_slug(platform_key, raw)
        assert result.status == "no_match"
        assert result.slug is None

    @pytest.mark.parametrize("raw", ["", "   ", "\u200b"])
    def test_blank_input(self, raw):
        result = extract_slug("google", raw)
        assert result.status == "no_match"
        assert result.raw_input == raw

    def test_no_match_carries_guidance(self):
        result = extract_slug("yelp", "hello world, this is not a url")
        assert result.guidance is not None
        assert result.guidance.example_url == SLUG_FORMATS["yelp"]["example_url"]
        assert result.patterns_tried == len(SLUG_FORMATS["yelp"]["patterns"])


class TestRaiseForStatus:
    def test_ok_returns_self(self):
        result = extract_slug("steam", "3016090")
        assert result.raise_for_status() is result

    def test_unknown_platform_raises(self):
        with pytest.raises(UnknownPlatformError) as exc:
            extract_slug("myspace", "x").raise_for_status()
        assert exc.value.details["platform_key"] == "myspace"

    def test_no_match_raises(self):
        with pytest.raises(NoMatchError) as exc:
            extract_slug("yelp", "hello world, this is not a url").raise_for_status()
        assert isinstance(exc.value, ReviewSlugsError)
        assert exc.value.details["patterns_tried"] == 1
        assert "Details:" in str(exc.value)


class TestInjectedRegistry:
    """The extractor only knows what it's given."""

    @pytest.fixture
    def registry(self):
        return build_registry({
            "demo": {
                "example_url": "https://demo.example/biz/some-shop",
                "acceptable_formats": ["https://demo.example/biz/some-shop", "id:42"],
                "patterns": [
                    r"^id:(\d+)$",
                    r"^https?://demo\.example/biz/([\w-]+)/?$",
                ],
                "lower_cased": True,
            }
        })

    def test_uses_given_registry(self, registry):
        result = extract_slug("demo", "https://demo.example/biz/Some-Shop", registry)
        assert result.slug == "some-shop"
        assert result.pattern_index == 1

    def test_default_platforms_not_visible(self, registry):
        assert extract_slug("google", "472717649119152494", registry).status == "unknown_platform"

    def test_match_platform_traces(self, registry, caplog):
        caplog.set_level(logging.DEBUG, logger="reviewslugs.services.extract")
        slug, idx = match_platform(registry["demo"], "id:42", trace=True)
        assert (slug, idx) == ("42", 0)
        assert any("demo[0] hit" in rec.getMessage() for rec in caplog.records)

    def test_match_platform_miss(self, registry):
        assert match_platform(registry["demo"], "nothing") == (None, None)


class TestExtractMany:
    def test_keeps_input_order(self):
        requests = [
            SlugRequest(platform_key="yelp", raw_input="https://www.yelp.com/biz/a-place"),
            SlugRequest(platform_key="myspace", raw_input="x"),
            SlugRequest(platform_key="steam", raw_input="3016090"),
        ]
        results = extract_many(requests)
        assert [r.status for r in results] == ["ok", "unknown_platform", "ok"]
        assert [r.slug for r in results] == ["a-place", None, "3016090"]
        assert all(isinstance(r, ExtractionResult) for r in results)

    def test_empty(self):
        assert extract_many([]) == []
