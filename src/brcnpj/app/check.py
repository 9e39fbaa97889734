"""
Command-line script to check a CNPJ number
"""

import sys
import logging
import argparse

from typing import List

from brcnpj import VERSION
from brcnpj.cnpj import is_valid, normalize
from brcnpj.helper.exception import CnpjException


DEFAULT_CNPJ = "04.252.011/0001-10"


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Validate a Brazilian CNPJ number (version {VERSION})"
    )
    parser.add_argument(
        "cnpj",
        nargs="?",
        default=DEFAULT_CNPJ,
        help="CNPJ to check, punctuation allowed (default: %(default)s)",
    )

    g1 = parser.add_argument_group("Other")
    g1.add_argument(
        "--normalize", action="store_true", help="also show the normalized value"
    )
    g1.add_argument("--debug", action="store_true", help="debug mode")

    return parser.parse_args(args)


def main(args: List[str] = None):
    if args is None:
        args = sys.argv[1:]
    args = parse_args(args)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    print(f"{args.cnpj} -> {is_valid(args.cnpj)}")
    if args.normalize:
        try:
            print(f"normalized: {normalize(args.cnpj)}")
        except CnpjException as e:
            print(f"normalized: cannot normalize ({e})")


if __name__ == "__main__":
    main()
