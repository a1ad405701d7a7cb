#!/usr/bin/env python3
"""Interactive demo for the speaker client: queries a few views and shows each reply two ways."""

import argparse
import json

from lgspkctl import MalformedResponseError, ResponseRenderer, SpeakerClient
from lgspkctl.const import DEFAULT_PORT


def _pp(label: str, data: dict) -> None:
    print(f"\n→ {label}")
    print(json.dumps(data, indent=2))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Speaker client demo")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    renderer = ResponseRenderer()

    with SpeakerClient(host=args.host, port=args.port) as client:
        print(f"Connected to {args.host}:{args.port}")

        # ── 1. Raw envelope ─────────────────────────────────────
        _pp("PRODUCT_INFO (raw)", client.send_raw({"cmd": "get", "msg": "PRODUCT_INFO"}))

        # ── 2. Validated views, rendered with labels ────────────
        for kind in ("EQ_VIEW_INFO", "FUNC_VIEW_INFO", "SPK_LIST_VIEW_INFO"):
            try:
                data = client.get(kind)
            except MalformedResponseError as exc:
                print(f"\n→ {kind}: rejected ({exc})")
                continue
            print(f"\n→ {kind}")
            renderer.dump(kind, data)

    print("\nDone.")


if __name__ == "__main__":
    main()
