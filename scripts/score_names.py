from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Allow running this file directly (so `import namenumber...` works on Windows).
PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from namenumber.numerology import InvalidCharacterError, evaluate_name, format_reply


def _read_names(args: argparse.Namespace) -> list[str]:
    names = list(args.names)
    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise SystemExit(f"Names file not found: {path}")
        for line in path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line:
                names.append(line)
    return names


def main() -> int:
    parser = argparse.ArgumentParser(description="Score Thai names with the name-number table.")
    parser.add_argument("names", nargs="*", help="Names to score")
    parser.add_argument("--file", default=None, help="UTF-8 file with one name per line")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per name")
    args = parser.parse_args()

    names = _read_names(args)
    if not names:
        parser.error("no names given")

    failed = 0
    for name in names:
        try:
            result = evaluate_name(name)
        except InvalidCharacterError as e:
            failed += 1
            print(f"ERROR for '{name}': {e}", file=sys.stderr)
            continue

        if args.json:
            print(json.dumps({"name": name, "total": result.total, "breakdown": result.breakdown}, ensure_ascii=False))
        else:
            print(format_reply(result))
            print()

    return 0 if failed == 0 else 2


if __name__ == "__main__":
    raise SystemExit(main())
