"""
CSV/Excel -> SlugRequest list (batch importer).

- Reads .csv, .xlsx and .xls with pandas.
- Auto-detects the platform and link columns from common header names
  ("platform", "network", "url", "link", ...). Header case and spacing don't matter.
- Skips rows where either cell is blank.
- Emits one `SlugRequest` per kept row, numbered by its 1-based data row so
  errors can point back at the spreadsheet.

Nothing here validates links; that's the extractor's job.
"""

from pathlib import Path
from typing import IO, List, Optional, Sequence, Union

import pandas as pd

from reviewslugs.models.schemas import SlugRequest
from reviewslugs.util.logger import get_logger

logger = get_logger(__name__)

PLATFORM_HEADERS = ["platform", "platform_key", "network", "site"]
LINK_HEADERS = ["url", "link", "slug", "input", "review_url", "review_link"]

SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".xls")

PathOrBuffer = Union[str, Path, IO]


def _norm_header(name) -> str:
    return "_".join(str(name).strip().lower().split())


def _find_column(columns: Sequence[str], candidates: List[str]) -> Optional[str]:
    """First column whose normalized header is one of `candidates`."""
    for col in columns:
        if _norm_header(col) in candidates:
            return col
    return None


def _cell(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    text = str(value).strip()
    return "" if text.lower() == "nan" else text


def _resolve_suffix(path_or_buffer: PathOrBuffer, suffix: Optional[str]) -> str:
    if suffix:
        return suffix.lower() if suffix.startswith(".") else f".{suffix.lower()}"
    if isinstance(path_or_buffer, (str, Path)):
        return Path(path_or_buffer).suffix.lower()
    # Uploaded files (Streamlit, open() handles) usually carry a name
    name = getattr(path_or_buffer, "name", "")
    return Path(str(name)).suffix.lower()


def read_requests(path_or_buffer: PathOrBuffer, suffix: Optional[str] = None) -> List[SlugRequest]:
    """
    Read (platform, link) rows from a spreadsheet.

    Args:
        path_or_buffer: file path, or a file-like object (e.g. an upload)
        suffix: ".csv", ".xlsx" or ".xls"; inferred from the path/name when omitted

    Returns:
        List[SlugRequest] in file order, blank rows skipped.

    Raises:
        FileNotFoundError: path doesn't exist
        ValueError: unsupported file type, or platform/link column not found
    """
    if isinstance(path_or_buffer, (str, Path)) and not Path(path_or_buffer).exists():
        raise FileNotFoundError(f"File not found: {path_or_buffer}")

    ext = _resolve_suffix(path_or_buffer, suffix)
    if ext not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file format: {ext or '(none)'}. Use .csv, .xlsx or .xls")

    try:
        if ext == ".csv":
            df = pd.read_csv(path_or_buffer, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(path_or_buffer, dtype=str)
    except Exception as e:
        logger.error(f"Failed to read {ext} file: {e}")
        raise

    platform_col = _find_column(list(df.columns), PLATFORM_HEADERS)
    link_col = _find_column(list(df.columns), LINK_HEADERS)
    logger.info(f"Detected columns: platform={platform_col!r}, link={link_col!r}")

    if platform_col is None:
        raise ValueError(f"Could not detect a platform column (expected one of {PLATFORM_HEADERS})")
    if link_col is None:
        raise ValueError(f"Could not detect a link column (expected one of {LINK_HEADERS})")

    requests: List[SlugRequest] = []
    for row_no, (platform, link) in enumerate(zip(df[platform_col], df[link_col]), start=1):
        platform_key = _cell(platform)
        raw_input = _cell(link)
        if not platform_key or not raw_input:
            continue
        requests.append(SlugRequest(platform_key=platform_key, raw_input=raw_input, row=row_no))

    logger.info(f"Read {len(requests)} link rows ({len(df) - len(requests)} blank rows skipped)")
    return requests
