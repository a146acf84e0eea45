"""
Streamlit front-end for review link -> slug extraction.

- Pick a platform and paste links (one per line), or upload a CSV/Excel file
  with platform + link columns.
- Uploads are written to the configured upload dir using a short content hash
  for stable names.
- Runs `extract_many()` -> `validate.tighten()`.
- Shows every link's result, guidance for the ones that didn't match, and a
  combined de-duped table of connections.
- Exposes CSV/JSON downloads.

All processing happens locally.
"""

from __future__ import annotations

# --- ensure package imports work when launched directly ---
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import hashlib
from pathlib import Path
from typing import List

import streamlit as st

# --- Internal modules ---
from reviewslugs.models.schemas import ExtractionResult, SlugRequest
from reviewslugs.services.export import result_to_row, rows_to_dataframe, results_to_csv, results_to_json
from reviewslugs.services.extract import extract_many
from reviewslugs.services.parse_csv import read_requests
from reviewslugs.services.registry import platform_keys
from reviewslugs.services.validate import rejected, tighten
from reviewslugs.util.guidance import guidance_for
from reviewslugs.util.settings import get_settings

# ---------------------------- Page setup ----------------------------

st.set_page_config(page_title="Review Link Slugs (Local)", layout="wide")
st.title("Review Link Slugs (Local)")
st.caption("Paste review-page links → get the canonical slug each platform integration needs.")

keys = platform_keys()

# ---------------------------- Sidebar help ----------------------------

with st.sidebar:
    st.header("Platform")
    platform = st.selectbox("Review platform", keys, index=keys.index("google") if "google" in keys else 0)
    guide = guidance_for(platform)
    if guide:
        before, slug, after = guide.example_parts
        st.markdown(f"**Example:** `{before}`**`{slug}`**`{after}`")
        st.markdown("**Accepted formats:**")
        st.markdown("\n".join(f"- `{f}`" for f in guide.acceptable_formats))
    st.divider()
    st.markdown(
        "- Links are matched against the platform's formats in order; first match wins.\n"
        "- Uploaded files need a platform column and a link column.\n"
        "- Uniqueness: de-dup on (platform + slug)."
    )

# ---------------------------- Inputs & Controls ----------------------------

pasted = st.text_area(
    f"Links for {platform} (one per line)",
    height=160,
    help="Full URLs, bare ids or slugs all work when the platform accepts them.",
)

uploaded = st.file_uploader(
    "…or upload a CSV/Excel file with platform + link columns",
    type=["csv", "xlsx", "xls"],
    accept_multiple_files=False,
)

run_btn = st.button("Extract Slugs", type="primary")


# ---------------------------- Helpers ----------------------------

def file_hash(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()[:16]


def ensure_upload_dir() -> Path:
    upload_dir = get_settings().upload_dir
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def pasted_requests(text: str, platform_key: str) -> List[SlugRequest]:
    lines = [ln for ln in text.splitlines() if ln.strip()]
    return [SlugRequest(platform_key=platform_key, raw_input=ln, row=i) for i, ln in enumerate(lines, start=1)]


# ---------------------------- Main run ----------------------------

results: List[ExtractionResult] = []

if run_btn:
    requests = pasted_requests(pasted or "", platform)
    if uploaded is not None:
        data = uploaded.read()
        tmp_path = ensure_upload_dir() / f"{file_hash(data)}{Path(uploaded.name).suffix.lower()}"
        with open(tmp_path, "wb") as f:
            f.write(data)
        try:
            requests.extend(read_requests(tmp_path))
        except ValueError as e:
            st.error(f"{uploaded.name}: {e}")
    results = extract_many(requests)

# ---------------------------- Display results ----------------------------

if not results:
    st.info("Paste links or upload a file and click **Extract Slugs** to see results.")
else:
    st.subheader("All Links")
    st.dataframe(rows_to_dataframe([result_to_row(r) for r in results]), use_container_width=True)

    failed = rejected(results)
    if failed:
        with st.expander(f"Not recognized ({len(failed)})", expanded=True):
            for r in failed:
                if r.status == "unknown_platform":
                    st.markdown(f"- `{r.raw_input}`: unknown platform `{r.platform_key}`")
                    continue
                st.markdown(f"- `{r.raw_input}` doesn't match any **{r.platform_key}** format.")
                if r.guidance:
                    st.markdown("  Try one of: " + ", ".join(f"`{f}`" for f in r.guidance.acceptable_formats[:3]))

    st.markdown("## Connections (De-Duplicated)")
    unique = tighten(results)
    st.dataframe(rows_to_dataframe([result_to_row(r) for r in unique]), use_container_width=True)

    col_dl1, col_dl2 = st.columns(2)
    with col_dl1:
        st.download_button(
            "Download CSV (unique)",
            data=results_to_csv(unique),
            file_name="review_slugs_unique.csv",
            mime="text/csv",
            use_container_width=True
        )
    with col_dl2:
        st.download_button(
            "Download JSON (all results)",
            data=results_to_json(results),
            file_name="review_slugs_all.json",
            mime="application/json",
            use_container_width=True
        )
