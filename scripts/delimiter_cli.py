from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path


# Ensure project root is on sys.path so 'delimkit' resolves when running this script directly
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]


_ROOT = project_root()
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from pydantic import ValidationError

from delimkit.delimiters.errors import DelimiterConfigError
from delimkit.delimiters.registry import load_registry
from delimkit.delimiters.reporting import write_markdown


def default_config() -> str:
    return os.getenv("DELIMKIT_CONFIG", str(project_root() / "config" / "delimiters.json"))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Delimiter CLI – config validation and dispatch docs")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_val = sub.add_parser("validate", help="Build the registry from config and report collisions")
    p_val.add_argument("--config", default=default_config())

    p_docs = sub.add_parser("docs", help="Write the Markdown dispatch table")
    p_docs.add_argument("--config", default=default_config())
    p_docs.add_argument(
        "--out",
        default=str(project_root() / "docs" / "DELIMITERS.md"),
    )

    args = ap.parse_args(argv)

    try:
        registry = load_registry(Path(args.config))
    except (FileNotFoundError, json.JSONDecodeError, DelimiterConfigError, ValidationError) as e:
        print(f"Invalid delimiter config {args.config}: {e}", file=sys.stderr)
        return 1

    if args.cmd == "validate":
        print(f"OK: {len(registry)} characters ({', '.join(registry.characters)})")
        return 0

    if args.cmd == "docs":
        out = Path(args.out)
        write_markdown(registry, out)
        print(f"Wrote {out}")
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
