# -*- coding: utf-8 -*-
"""Number theory helpers: modular inverse and Fermat factorization."""

import logging
from typing import Optional, Tuple

import gmpy2

from .errors import NoModularInverse, NonConvergence

log = logging.getLogger(__name__)


def mod_inverse(e: int, phi: int) -> int:
    """Return d in [0, phi) with e*d = 1 (mod phi).

    Raises NoModularInverse when gcd(e, phi) != 1 or phi <= 1 (a
    perfect-square n gives p = n, q = 1 and so phi = 0).
    """
    g, x, _ = gmpy2.gcdext(e, phi)
    if g != 1 or phi <= 1:
        raise NoModularInverse(e, phi, int(g))
    # gcdext may hand back a negative coefficient
    return int((x % phi + phi) % phi)


def fermat_factor(n: int, max_iterations: Optional[int] = None) -> Tuple[int, int]:
    """
    Factor n = p*q by searching a, b with a^2 - n = b^2.

    Converges fast only when p and q are close; the scan is unbounded
    unless max_iterations is given. Returns (p, q) with p >= q.
    """
    n = gmpy2.mpz(n)
    a = gmpy2.isqrt(n) + 1
    steps = 0
    while True:
        if max_iterations is not None and steps >= max_iterations:
            raise NonConvergence("fermat", max_iterations)
        steps += 1
        w = a * a - n
        b = gmpy2.isqrt(w)
        if b * b == w:
            p, q = int(a + b), int(a - b)
            log.debug(f"[fermat] n factored after {steps} step(s): p={p} q={q}")
            return p, q
        a += 1
