"""Global configuration for modint."""

import os

# ---------- Well-known moduli ----------
MOD998244353 = 998244353        # 119 * 2^23 + 1, NTT-friendly
MOD1000000007 = 1_000_000_007

# ---------- Fixed-width representation ----------
# Fixed moduli must satisfy 0 < M < 2**FIXED_WIDTH_BITS.
FIXED_WIDTH_BITS = 64

# ---------- Primitive roots of common NTT primes ----------
KNOWN_PRIMITIVE_ROOTS = {
    2: 1,
    65537: 3,
    167772161: 3,
    469762049: 3,
    754974721: 11,
    998244353: 3,
}
PRIMITIVE_ROOT_CACHE_SIZE = 128

# ---------- Deterministic Miller-Rabin ----------
# {2, 7, 61} is exact below 4_759_123_141; the seven-base set covers the
# rest of the 64-bit range.
MILLER_RABIN_SMALL_WITNESSES = (2, 7, 61)
MILLER_RABIN_SMALL_LIMIT = 4_759_123_141
MILLER_RABIN_WITNESSES_64 = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)

# ---------- Demo / service ----------
DEMO_MODULUS = int(os.environ.get("MODINT_DEMO_MODULUS", "65537"))
SERVICE_URL = os.environ.get("MODINT_SERVICE_URL", "http://localhost:8000")
# Primitive-root search factors m-1 by trial division up to sqrt(m); the
# service refuses the search for primes above this bound.
SERVICE_MAX_ROOT_MODULUS = int(os.environ.get("MODINT_SERVICE_MAX_ROOT_MODULUS", str(1 << 40)))
LOG_LEVEL = os.environ.get("MODINT_LOG_LEVEL", "WARNING")
