"""
Tests for the CSV/Excel batch importer.
"""

import io

import pytest

from reviewslugs.services.parse_csv import read_requests


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestReadRequests:
    """Test the read_requests function."""

    def test_basic_csv(self, tmp_path):
        path = _write(
            tmp_path,
            "links.csv",
            "platform,url\n"
            "yelp,https://www.yelp.com/biz/a-place\n"
            "steam,3016090\n",
        )
        requests = read_requests(path)
        assert [(r.platform_key, r.raw_input, r.row) for r in requests] == [
            ("yelp", "https://www.yelp.com/biz/a-place", 1),
            ("steam", "3016090", 2),
        ]

    def test_header_aliases(self, tmp_path):
        path = _write(tmp_path, "links.csv", " Network , Review Link \nfacebook,PremiatoFornoCantoni\n")
        requests = read_requests(path)
        assert requests[0].platform_key == "facebook"
        assert requests[0].raw_input == "PremiatoFornoCantoni"

    def test_skips_blank_rows(self, tmp_path):
        path = _write(
            tmp_path,
            "links.csv",
            "platform,link,notes\n"
            "yelp,a-place,first\n"
            ",,\n"
            "yelp,,missing link\n"
            "steam,3016090,\n",
        )
        requests = read_requests(path)
        assert [r.raw_input for r in requests] == ["a-place", "3016090"]
        assert [r.row for r in requests] == [1, 4]

    def test_keeps_ids_as_text(self, tmp_path):
        """Leading zeros and long numeric ids must not be turned into numbers."""
        path = _write(tmp_path, "links.csv", "platform,url\ngoogle,0472717649119152494\n")
        assert read_requests(path)[0].raw_input == "0472717649119152494"

    def test_buffer_with_suffix(self):
        buf = io.StringIO("site,input\nyelp,a-place\n")
        requests = read_requests(buf, suffix="csv")
        assert requests[0].platform_key == "yelp"

    def test_missing_link_column(self, tmp_path):
        path = _write(tmp_path, "links.csv", "platform,notes\nyelp,hello\n")
        with pytest.raises(ValueError, match="link column"):
            read_requests(path)

    def test_missing_platform_column(self, tmp_path):
        path = _write(tmp_path, "links.csv", "url\na-place\n")
        with pytest.raises(ValueError, match="platform column"):
            read_requests(path)

    def test_unsupported_suffix(self, tmp_path):
        path = _write(tmp_path, "links.txt", "platform,url\nyelp,a\n")
        with pytest.raises(ValueError, match="Unsupported"):
            read_requests(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_requests(tmp_path / "nope.csv")
