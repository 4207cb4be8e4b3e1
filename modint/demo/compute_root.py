#!/usr/bin/env python3
"""Report whether a modulus is prime and, if so, its primitive root.

Usage:
    python -m modint.demo.compute_root [MODULUS] [--remote URL]

Without ``--remote`` everything is computed in-process.  With it, the
answer comes from a running query service (``modint.service.app``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

import httpx

from modint.config import DEMO_MODULUS, FIXED_WIDTH_BITS, LOG_LEVEL, SERVICE_URL
from modint.modulus import StaticModulus64

logger = logging.getLogger(__name__)


def query_local(m: int) -> Tuple[bool, Optional[int]]:
    modulus = StaticModulus64[m]
    if not modulus().is_prime():
        return False, None
    return True, modulus.primitive_root()


def query_remote(
    m: int,
    base_url: str,
    client: Optional[httpx.Client] = None,
) -> Tuple[bool, Optional[int]]:
    """Ask the query service at *base_url* about modulus *m*."""
    owned = client is None
    if client is None:
        client = httpx.Client(timeout=15.0)
    try:
        resp = client.get(f"{base_url}/modulus/{m}")
        resp.raise_for_status()
        info = resp.json()
    finally:
        if owned:
            client.close()
    return info["is_prime"], info.get("primitive_root")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("modulus", nargs="?", type=int, default=DEMO_MODULUS)
    parser.add_argument(
        "--remote",
        nargs="?",
        const=SERVICE_URL,
        default=None,
        metavar="URL",
        help=f"ask the query service instead (default URL {SERVICE_URL})",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    m = args.modulus
    if not 0 < m < 1 << FIXED_WIDTH_BITS:
        parser.error(f"modulus must satisfy 0 < M < 2**{FIXED_WIDTH_BITS}, got {m}")
    if args.remote:
        logger.info("querying %s for modulus %d", args.remote, m)
        prime, root = query_remote(m, args.remote)
    else:
        prime, root = query_local(m)

    if prime:
        print(f"{m} is a prime")
        print(f"having a primitive root {root}")
    else:
        print(f"{m} is not a prime")
    return 0


if __name__ == "__main__":
    sys.exit(main())
