"""Scaffold empty override files for a fresh checkout."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

HAZARD_TEMPLATE = {
    "avoid": [],
    "caution": [],
    "notes": {
        "en:partially-hydrogenated-oils": "",
    },
}

REGULATORY_TEMPLATE = {
    "items": [
        {
            "tag": "en:example-additive",
            "aliases": ["example additive"],
            "enumbers": [],
            "regions": {"EU": {"status": "permitted", "detail": ""}},
        }
    ],
}

TEMPLATES = {
    "hazards.overrides.json": HAZARD_TEMPLATE,
    "regulatory.overrides.json": REGULATORY_TEMPLATE,
}


def scaffold(dest_root: Path, force: bool) -> list[Path]:
    written: list[Path] = []
    dest_root.mkdir(parents=True, exist_ok=True)
    for name, template in TEMPLATES.items():
        path = dest_root / name
        if path.exists() and not force:
            continue
        path.write_text(json.dumps(template, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        written.append(path)
    return written


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--overrides-dir", default="overrides", help="Override directory (default: overrides)")
    ap.add_argument("--force", action="store_true", help="Overwrite existing override files")
    args = ap.parse_args()

    written = scaffold(Path(args.overrides_dir), args.force)
    if not written:
        raise SystemExit(f"Override files already exist in {args.overrides_dir} (use --force)")
    for path in written:
        print(f"Scaffolded {path}")


if __name__ == "__main__":
    main()
