"""
ExtractionResult -> table rows, CSV and JSON.

Shared by the Streamlit page and the scripts so every download has the same
columns in the same order.
"""

import json
from typing import Any, Dict, List

import pandas as pd

from reviewslugs.models.schemas import ExtractionResult

COLUMNS = [
    "platform_key",
    "raw_input",
    "status",
    "slug",
    "pattern_index",
    "patterns_tried",
    "example_url",
]


def result_to_row(result: ExtractionResult) -> Dict[str, Any]:
    """Flatten one result; failures carry the platform's example URL as a hint."""
    return {
        "platform_key": result.platform_key,
        "raw_input": result.raw_input,
        "status": result.status,
        "slug": result.slug,
        "pattern_index": result.pattern_index,
        "patterns_tried": result.patterns_tried,
        "example_url": result.guidance.example_url if result.guidance else None,
    }


def rows_to_dataframe(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame(rows)
    for c in COLUMNS:
        if c not in df.columns:
            df[c] = None
    return df[COLUMNS]


def results_to_csv(results: List[ExtractionResult]) -> str:
    return rows_to_dataframe([result_to_row(r) for r in results]).to_csv(index=False)


def results_to_json(results: List[ExtractionResult]) -> str:
    """Full results, guidance included, as a JSON array."""
    return json.dumps([r.model_dump() for r in results], indent=2, ensure_ascii=False)
