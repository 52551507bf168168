# -*- coding: utf-8 -*-
"""Cycling attack: re-encrypt the ciphertext until it comes back around."""

import logging
from typing import Optional

import gmpy2

from .errors import NonConvergence

log = logging.getLogger(__name__)


def cycle_block(n: int, e: int, c: int, max_iterations: Optional[int] = None) -> int:
    """
    Recover m with m^e mod n == c without factoring n.

    Encrypting c over and over walks a cycle that contains c; the value
    right before c reappears is the plaintext. Unbounded when the order
    is large, unless max_iterations caps the walk.
    """
    n = gmpy2.mpz(n)
    e = gmpy2.mpz(e)
    c = gmpy2.mpz(c)
    prev = c
    steps = 0
    while True:
        if max_iterations is not None and steps >= max_iterations:
            raise NonConvergence("cycling", max_iterations)
        nxt = gmpy2.powmod(prev, e, n)
        steps += 1
        if nxt == c:
            log.debug(f"[cycling] cycle closed after {steps} step(s)")
            return int(prev)
        prev = nxt
