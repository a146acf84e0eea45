"""
Registry loading: raw SLUG_FORMATS data -> immutable, compiled lookup.

- build_registry(data): validate every entry, compile its patterns, return a
  read-only mapping of platform key -> CompiledPlatform.
- load_registry(): the default registry from `extraction.patterns`, built once.
- compile_pattern(source): one pattern string -> SlugMatcher.

Bad data raises RegistryError at load time; nothing here runs per extraction.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

import regex
from pydantic import ValidationError

from extraction.patterns import SLUG_FORMATS
from reviewslugs.models.schemas import PlatformSlugFormat
from reviewslugs.util.errors import RegistryError
from reviewslugs.util.logger import get_logger

logger = get_logger(__name__)

# Every grammar is written for case-insensitive evaluation; lower_cased only
# decides what the returned slug looks like.
BASE_FLAGS = regex.IGNORECASE

# "@body@flags": a pattern carrying its own modifiers.
DELIMITED_PAT = regex.compile(r"^@(?P<body>.*)@(?P<flags>[a-z]*)$", flags=regex.DOTALL)

FLAG_LETTERS = {
    "i": regex.IGNORECASE,
    "m": regex.MULTILINE,
    "s": regex.DOTALL,
    "x": regex.VERBOSE,
}

PLATFORM_KEY_PAT = regex.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(frozen=True)
class SlugMatcher:
    """A compiled pattern plus the group holding the slug (0 = whole match)."""

    source: str
    pattern: Any
    group: int


@dataclass(frozen=True)
class CompiledPlatform:
    format: PlatformSlugFormat
    matchers: Tuple[SlugMatcher, ...]

    @property
    def platform_key(self) -> str:
        return self.format.platform_key

    @property
    def lower_cased(self) -> bool:
        return self.format.lower_cased


def _split_delimited(source: str) -> Tuple[str, int]:
    """'@^[A-Z\\d]{5,13}$@i' -> ('^[A-Z\\d]{5,13}$', IGNORECASE). Plain strings pass through."""
    m = DELIMITED_PAT.match(source)
    if not m:
        return source, 0
    flags = 0
    for letter in m.group("flags"):
        if letter not in FLAG_LETTERS:
            raise RegistryError(f"Unsupported pattern flag {letter!r}", {"pattern": source})
        flags |= FLAG_LETTERS[letter]
    return m.group("body"), flags


def compile_pattern(source: str) -> SlugMatcher:
    """
    Compile one registry pattern.

    Rules:
    - body must start with "^" and end with "$": a pattern describes the whole input
    - at most one capturing group; with none, the whole match is the slug
    """
    body, extra_flags = _split_delimited(source)
    if not body.startswith("^"):
        raise RegistryError("Pattern is not anchored with '^'", {"pattern": source})
    if not body.endswith("$") or body.endswith("\\$"):
        raise RegistryError("Pattern is not anchored with '$'", {"pattern": source})
    try:
        compiled = regex.compile(body, flags=BASE_FLAGS | extra_flags)
    except regex.error as e:
        raise RegistryError(f"Pattern does not compile: {e}", {"pattern": source}) from e
    if compiled.groups > 1:
        raise RegistryError(
            f"Pattern has {compiled.groups} capturing groups, expected at most one",
            {"pattern": source},
        )
    return SlugMatcher(source=source, pattern=compiled, group=1 if compiled.groups else 0)


def _compile_entry(platform_key: str, raw: Dict[str, Any]) -> CompiledPlatform:
    if not PLATFORM_KEY_PAT.match(platform_key):
        raise RegistryError("Platform key must be lowercase words joined by '-'", {"platform_key": platform_key})
    try:
        fmt = PlatformSlugFormat(
            platform_key=platform_key,
            example_url=raw["example_url"],
            acceptable_formats=tuple(raw.get("acceptable_formats") or ()),
            patterns=tuple(raw.get("patterns") or ()),
            lower_cased=bool(raw.get("lower_cased", False)),
        )
    except (KeyError, ValidationError) as e:
        raise RegistryError(f"Invalid registry entry: {e}", {"platform_key": platform_key}) from e

    matchers: List[SlugMatcher] = []
    for source in fmt.patterns:
        try:
            matchers.append(compile_pattern(source))
        except RegistryError as e:
            e.details.setdefault("platform_key", platform_key)
            raise
    return CompiledPlatform(format=fmt, matchers=tuple(matchers))


def build_registry(data: Mapping[str, Dict[str, Any]]) -> Mapping[str, CompiledPlatform]:
    """
    Validate and compile raw registry data.

    Returns:
        Read-only mapping platform_key -> CompiledPlatform, in data order.

    Raises:
        RegistryError: on the first malformed entry.
    """
    compiled: Dict[str, CompiledPlatform] = {}
    for platform_key, raw in data.items():
        compiled[platform_key] = _compile_entry(platform_key, raw)
    logger.debug(f"Compiled slug registry: {len(compiled)} platforms")
    return MappingProxyType(compiled)


@lru_cache(maxsize=1)
def load_registry() -> Mapping[str, CompiledPlatform]:
    """The default registry, compiled once per process."""
    registry = build_registry(SLUG_FORMATS)
    logger.info(f"Loaded slug registry with {len(registry)} platforms")
    return registry


def platform_keys(registry: Optional[Mapping[str, CompiledPlatform]] = None) -> List[str]:
    """Supported platform keys, in registry order."""
    registry = registry if registry is not None else load_registry()
    return list(registry.keys())
