#!/usr/bin/env python3
"""
Dump the slug registry as JSON, or check it.

Usage:
    python scripts/export_registry.py                  # JSON to stdout
    python scripts/export_registry.py registry.json    # JSON to a file
    python scripts/export_registry.py --check          # audit; exit 1 on issues
"""

import sys
sys.path.append('.')

import json
from pathlib import Path
from typing import List, Optional

from reviewslugs.services.registry import load_registry
from reviewslugs.services.validate import audit_registry
from reviewslugs.util.guidance import guidance_for


def registry_as_dict() -> dict:
    """Platform key -> registry record plus the split example URL."""
    out = {}
    for platform_key, entry in load_registry().items():
        record = entry.format.model_dump()
        record.pop("platform_key")
        record["example_parts"] = list(guidance_for(platform_key).example_parts)
        out[platform_key] = record
    return out


def check() -> int:
    issues = audit_registry()
    for issue in issues:
        print(issue)
    total = sum(len(e.format.acceptable_formats) for e in load_registry().values())
    print(f"Checked {total} documented formats: {len(issues)} issue(s)")
    return 1 if issues else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if "--check" in args:
        return check()

    blob = json.dumps(registry_as_dict(), indent=2, ensure_ascii=False)
    if args:
        Path(args[0]).write_text(blob + "\n", encoding="utf-8")
        print(f"Wrote {len(load_registry())} platforms to {args[0]}")
    else:
        print(blob)
    return 0


if __name__ == "__main__":
    sys.exit(main())
