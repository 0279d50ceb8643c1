from __future__ import annotations

import argparse
import json
import os
import sys
import urllib.error
import urllib.request
import uuid
from pathlib import Path

# Allow running this file directly (so `import namenumber...` works on Windows).
PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from namenumber.signature import sign_body


def _build_event(text: str) -> dict:
    """
    Minimal LINE "message" event; the reply token is random so LINE itself
    would reject the reply (watch the server log instead).
    """
    return {
        "type": "message",
        "replyToken": uuid.uuid4().hex,
        "source": {"type": "user", "userId": "U" + uuid.uuid4().hex},
        "message": {"id": uuid.uuid4().hex[:16], "type": "text", "text": text},
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Post a signed LINE-style webhook to a running bot.")
    parser.add_argument("names", nargs="+", help="Text of each message event")
    parser.add_argument("--base-url", default="http://127.0.0.1:5000", help="Bot base URL")
    parser.add_argument(
        "--secret",
        default=os.getenv("LINE_CHANNEL_SECRET", ""),
        help="Channel secret used to sign the body (default: $LINE_CHANNEL_SECRET)",
    )
    parser.add_argument("--timeout", type=int, default=30, help="Request timeout (seconds)")
    args = parser.parse_args()

    if not args.secret:
        raise SystemExit("No channel secret: pass --secret or set LINE_CHANNEL_SECRET")

    body = json.dumps(
        {"destination": "local-test", "events": [_build_event(n) for n in args.names]},
        ensure_ascii=False,
    ).encode("utf-8")
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "X-Line-Signature": sign_body(body, args.secret),
    }

    url = f"{args.base_url.rstrip('/')}/webhook"
    req = urllib.request.Request(url, data=body, headers=headers, method="POST")
    try:
        with urllib.request.urlopen(req, timeout=args.timeout) as resp:
            print(resp.read().decode("utf-8"))
    except urllib.error.HTTPError as e:
        print(f"ERROR {e.code}: {e.read().decode('utf-8', errors='replace')}")
        return 2
    except urllib.error.URLError as e:
        print(f"ERROR: {e.reason}")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
