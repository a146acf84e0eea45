"""
Data shapes for slug extraction.

- PlatformSlugFormat: one registry entry (example URL, acceptable formats,
  ordered patterns, lower-casing flag). Frozen once loaded.
- SlugGuidance: what to show a user when their link wasn't recognized.
- ExtractionResult: outcome of one extraction (slug, or which failure).
- SlugRequest: one (platform, raw input) pair read from a batch file.

If a new output column is needed, it goes on `ExtractionResult` first and then
gets populated in `extract.py`.
"""

from typing import Optional, Tuple, Literal

from pydantic import BaseModel, ConfigDict, Field

from reviewslugs.util.errors import NoMatchError, UnknownPlatformError

Status = Literal["ok", "unknown_platform", "no_match"]


class PlatformSlugFormat(BaseModel):
    """
    URL grammar for one review platform.

    - platform_key: registry key, lowercase ("google", "place-for-mom")
    - example_url: representative URL, display only
    - acceptable_formats: example inputs, most canonical first
    - patterns: raw pattern strings, tried in order
    - lower_cased: fold the extracted slug to lowercase
    """

    model_config = ConfigDict(frozen=True)

    platform_key: str
    example_url: str
    acceptable_formats: Tuple[str, ...] = Field(min_length=1)
    patterns: Tuple[str, ...] = Field(min_length=1)
    lower_cased: bool = False


class SlugGuidance(BaseModel):
    """Help text inputs: example URL split around its slug, plus the accepted shapes."""

    model_config = ConfigDict(frozen=True)

    platform_key: str
    example_url: str
    example_parts: Tuple[str, str, str]
    acceptable_formats: Tuple[str, ...]


class ExtractionResult(BaseModel):
    """
    Outcome of `extract_slug()`.

    - status "ok": `slug` is set, `pattern_index` says which pattern matched
    - status "unknown_platform": the key isn't in the registry (caller bug)
    - status "no_match": nothing matched; `guidance` explains what would
    - raw_input is always what the caller passed, untouched
    """

    model_config = ConfigDict(frozen=True)

    platform_key: str
    raw_input: str
    status: Status
    slug: Optional[str] = None
    pattern_index: Optional[int] = None
    patterns_tried: int = 0
    guidance: Optional[SlugGuidance] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def raise_for_status(self) -> "ExtractionResult":
        """Raise the matching error for a failed extraction; return self otherwise."""
        details = {"platform_key": self.platform_key, "raw_input": self.raw_input}
        if self.status == "unknown_platform":
            raise UnknownPlatformError(f"Unknown platform: {self.platform_key!r}", details)
        if self.status == "no_match":
            details["patterns_tried"] = self.patterns_tried
            raise NoMatchError(
                f"Input does not match any {self.platform_key} format: {self.raw_input!r}",
                details,
            )
        return self


class SlugRequest(BaseModel):
    """One row of a batch import. `row` is the 1-based data row in the source file."""

    platform_key: str
    raw_input: str
    row: Optional[int] = None
