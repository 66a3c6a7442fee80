import argparse
import logging
import sys
from typing import List, Optional

import mac_gen
from mac_addr import MacAddr, MacAddrParseError
from mac_compare import mac_addr_compare


def make_logger(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(__name__)
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        # stdout carries command output only
        stderr_handler = logging.StreamHandler(sys.stderr)
        logger.addHandler(stderr_handler)
    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def cmd_parse(args: argparse.Namespace, log: logging.Logger) -> int:
    mac = MacAddr.parse(args.addr)
    log.debug(f"Parsed {args.addr!r} as {mac}")
    print(mac)
    return 0


def cmd_compare(args: argparse.Namespace, log: logging.Logger) -> int:
    if args.exact:
        a = MacAddr.parse(args.a)
        b = MacAddr.parse(args.b)
        result = a.cmp(b)
    else:
        result = mac_addr_compare(args.a, args.b)
    log.debug(f"{'Exact' if args.exact else 'Lenient'} compare of {args.a!r} and {args.b!r}: {result}")
    print(result)
    return 0


def cmd_generate(args: argparse.Namespace, log: logging.Logger) -> int:
    prefix = mac_gen.parse_prefix(args.prefix)
    for _ in range(args.count):
        mac = mac_gen.generate(prefix)
        if mac.is_multicast:
            log.warning(f"Generated address {mac} is multicast, check prefix {args.prefix}")
        print(mac)
    return 0


def cmd_classify(args: argparse.Namespace, log: logging.Logger) -> int:
    mac = MacAddr.parse(args.addr)
    print("multicast" if mac.is_multicast else "unicast")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="macutil", description="Parse, compare and generate MAC addresses")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    parse = sub.add_parser("parse", help="Print the canonical form of an address")
    parse.add_argument("addr")
    parse.set_defaults(func=cmd_parse)

    compare = sub.add_parser("compare", help="Compare two addresses, printing -1, 0 or 1")
    compare.add_argument("a")
    compare.add_argument("b")
    compare.add_argument("--exact", action="store_true",
                         help="Parse both addresses and compare octets instead of text")
    compare.set_defaults(func=cmd_compare)

    generate = sub.add_parser("generate", help="Generate random addresses under a vendor prefix")
    generate.add_argument("--prefix", default="52:54:00", help="Vendor prefix, e.g. 52:54:00")
    generate.add_argument("--count", type=int, default=1, help="Number of addresses to generate")
    generate.set_defaults(func=cmd_generate)

    classify = sub.add_parser("classify", help="Print whether an address is multicast or unicast")
    classify.add_argument("addr")
    classify.set_defaults(func=cmd_classify)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = make_logger(args.verbose)
    try:
        return args.func(args, log)
    except MacAddrParseError as e:
        log.error(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
