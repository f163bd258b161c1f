"""
Command line front end for the Base45 codec

    pybase45 encode [--url-safe] [-i FILE] [-o FILE]
    pybase45 decode [--url-safe] [-i FILE] [-o FILE]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .base45 import encode, decode
from .errors import Base45Error
from .urlsafe import encode_url_safe, decode_url_safe

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pybase45",
        description="Encode binary data to Base45 text and back.")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="Log debug output to stderr.")
    parser.add_argument("-q", "--quiet", action="store_true",
        help="Only log errors.")

    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (("encode", "Encode raw bytes to Base45."),
                            ("decode", "Decode Base45 text to raw bytes.")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--url-safe", action="store_true",
            help="Use the %%-escaped URL-safe form.")
        sub.add_argument("-i", "--input", dest="input_file",
            help="Read from this file instead of stdin.")
        sub.add_argument("-o", "--output", dest="output_file",
            help="Write to this file instead of stdout.")

    return parser


def _setup_logging(args) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write_output(path: Optional[str], data: bytes) -> None:
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as f:
        f.write(data)


def run_encode(args) -> bytes:
    data = _read_input(args.input_file)
    log.debug("Encoding %d bytes (url_safe=%s).", len(data), args.url_safe)

    if args.url_safe:
        text = encode_url_safe(data)
    else:
        text = encode(data)

    return (text + "\n").encode("ascii")


def run_decode(args) -> bytes:
    raw = _read_input(args.input_file)
    # Encoded text may legitimately end in a space, so only drop the newline
    text = raw.decode("latin-1").rstrip("\r\n")
    log.debug("Decoding %d characters (url_safe=%s).", len(text), args.url_safe)

    if args.url_safe:
        return decode_url_safe(text)
    return decode(text)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args)

    try:
        if args.command == "encode":
            out = run_encode(args)
        else:
            out = run_decode(args)
        _write_output(args.output_file, out)
    except (Base45Error, OSError) as e:
        log.error("Failed to %s input: %s", args.command, e)
        return 1

    log.debug("Wrote %d bytes.", len(out))
    return 0
