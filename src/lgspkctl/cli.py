"""Command-line entry point: query the speaker and print each view."""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, Tuple

from .client import SpeakerClient
from .const import DEFAULT_MAX_PAYLOAD_SIZE, DEFAULT_PORT, MESSAGE_KINDS, QUERY_KINDS
from .errors import MalformedResponseError, SpeakerError
from .render import ResponseRenderer

logger = logging.getLogger("lgspkctl")


def split_address(address: str, default_port: int) -> Tuple[str, int]:
    """Split ``host[:port]``; IPv6 literals go in brackets."""
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        if rest.startswith(":"):
            return host, int(rest[1:])
        return host, default_port
    if address.count(":") == 1:
        host, port = address.split(":")
        return host, int(port)
    return address, default_port


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lgspkctl", description="LG speaker control client")
    parser.add_argument("--host", default=os.environ.get("LGSPK_HOST", "127.0.0.1"),
                        help="speaker address, optionally host:port")
    parser.add_argument("--port", type=int, default=None,
                        help=f"TCP port (default: $LGSPK_PORT or {DEFAULT_PORT})")
    parser.add_argument("-k", "--kind", action="append", choices=MESSAGE_KINDS, metavar="KIND",
                        help="message kind to query (repeatable); default: all views")
    parser.add_argument("-R", "--raw", action="append", metavar="JSON",
                        help="send a raw JSON request and print the reply")
    parser.add_argument("--max-size", type=int, default=DEFAULT_MAX_PAYLOAD_SIZE,
                        help="largest accepted response payload in bytes")
    parser.add_argument("--timeout", type=float, default=None, help="socket timeout in seconds")
    parser.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    args = parser.parse_args(argv)

    try:
        port = args.port if args.port is not None else int(os.environ.get("LGSPK_PORT", DEFAULT_PORT))
        args.host, args.port = split_address(args.host, port)
    except ValueError as exc:
        parser.error(f"invalid port: {exc}")
    if not 0 < args.port < 65536:
        parser.error(f"port out of range: {args.port}")
    return args


def _setup_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        level = logging.ERROR
    elif args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _send_raw(client: SpeakerClient, raw: List[str]) -> None:
    for text in raw:
        try:
            message = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error("Invalid JSON request %r: %s", text, exc)
            continue
        reply = client.send_raw(message)
        print(json.dumps(reply, indent=2))
        print()


def _query(client: SpeakerClient, kinds: List[str]) -> int:
    renderer = ResponseRenderer()
    rejected = 0
    for kind in kinds:
        try:
            data = client.get(kind)
        except MalformedResponseError as exc:
            logger.error("Rejected response: %s", exc)
            rejected += 1
            continue
        print(kind)
        renderer.dump(kind, data)
        print()
    return rejected


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    _setup_logging(args)
    kinds = args.kind or ([] if args.raw else list(QUERY_KINDS))

    try:
        with SpeakerClient(args.host, args.port, max_payload_size=args.max_size, timeout=args.timeout) as client:
            if args.raw:
                _send_raw(client, args.raw)
            rejected = _query(client, kinds)
    except SpeakerError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    except ValueError as exc:
        # reply to a raw request was not JSON
        logger.error("Invalid reply: %s", exc)
        return 1
    if rejected:
        logger.warning("%d of %d responses rejected", rejected, len(kinds))
    return 0


if __name__ == "__main__":
    sys.exit(main())
