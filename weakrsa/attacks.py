# -*- coding: utf-8 -*-
"""
Plaintext recovery for weak RSA instances.

Two orchestrators are exposed as plain functions:

  factorization_attack(n, e, blocks)  Fermat -> phi -> d -> decrypt -> decode
  cycling_attack(n, e, blocks)        per-block cycling -> decode

Both return the decoded text or raise a RecoveryError subclass; there is
no partial output. The Attack classes wrap them for the command line and
turn failures into AttackResult records.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import gmpy2

from .codec import decode_blocks
from .config import AttackOptions
from .cycling import cycle_block
from .errors import BlockOutOfRange, RecoveryError
from .numtheory import fermat_factor, mod_inverse

logger = logging.getLogger(__name__)


# ========= Data =========
@dataclass
class PubKey:
    n: int
    e: int
    label: str = ""


@dataclass
class RecoveredKey:
    p: int
    q: int
    phi: int
    d: int


@dataclass
class AttackResult:
    name: str
    success: bool
    plaintext: Optional[str] = None
    info: str = ""
    error: Optional[RecoveryError] = None
    recovered_d: Optional[int] = None
    recovered_pq: Optional[Tuple[int, int]] = None


# ========= Orchestrators =========
def check_blocks(n: int, blocks: Sequence[int]) -> None:
    for i, c in enumerate(blocks):
        if not 0 <= c < n:
            raise BlockOutOfRange(i, c, n)


def recover_key(n: int, e: int, max_iterations: Optional[int] = None) -> RecoveredKey:
    p, q = fermat_factor(n, max_iterations=max_iterations)
    phi = (p - 1) * (q - 1)
    d = mod_inverse(e, phi)
    logger.debug(f"[fermat] phi={phi} d={d}")
    return RecoveredKey(p=p, q=q, phi=phi, d=d)


def decrypt_blocks(key: RecoveredKey, n: int, blocks: Sequence[int]) -> List[int]:
    return [int(gmpy2.powmod(c, key.d, n)) for c in blocks]


def factorization_attack(n: int, e: int, blocks: Sequence[int], max_iterations: Optional[int] = None) -> str:
    check_blocks(n, blocks)
    key = recover_key(n, e, max_iterations=max_iterations)
    return decode_blocks(decrypt_blocks(key, n, blocks))


def cycling_attack(n: int, e: int, blocks: Sequence[int], max_iterations: Optional[int] = None) -> str:
    check_blocks(n, blocks)
    values = [cycle_block(n, e, c, max_iterations=max_iterations) for c in blocks]
    return decode_blocks(values)


# ========= Attack Base =========
class Attack:
    name = "base"
    priority = 999

    def can_run(self, key: PubKey, c_list: List[int]) -> bool:
        return len(c_list) >= 1

    def run(self, key: PubKey, c_list: List[int], options: AttackOptions, log) -> AttackResult:
        raise NotImplementedError

    def _failed(self, err: RecoveryError, log) -> AttackResult:
        log.debug(f"[{self.name}] {err}")
        return AttackResult(self.name, False, info=err.kind, error=err)


class FermatAttack(Attack):
    name = "fermat"; priority = 10

    def can_run(self, key, c_list):
        # Fermat needs an odd modulus
        return len(c_list) >= 1 and key.n % 2 == 1

    def run(self, key, c_list, options, log):
        try:
            check_blocks(key.n, c_list)
            rk = recover_key(key.n, key.e, max_iterations=options.max_iterations)
            text = decode_blocks(decrypt_blocks(rk, key.n, c_list))
        except RecoveryError as ex:
            return self._failed(ex, log)
        return AttackResult(self.name, True, text, info="close p,q", recovered_d=rk.d, recovered_pq=(rk.p, rk.q))


class CyclingAttack(Attack):
    name = "cycling"; priority = 20

    def run(self, key, c_list, options, log):
        try:
            text = cycling_attack(key.n, key.e, c_list, max_iterations=options.max_iterations)
        except RecoveryError as ex:
            return self._failed(ex, log)
        return AttackResult(self.name, True, text, info="short cycle")


ALL_ATTACKS: List[Attack] = [FermatAttack(), CyclingAttack()]


def pick_attacks(only: Optional[str]) -> List[Attack]:
    if not only:
        return sorted(ALL_ATTACKS, key=lambda a: a.priority)
    wanted = [x.strip().lower() for x in only.split(",")]
    table = {a.name.lower(): a for a in ALL_ATTACKS}
    unknown = [w for w in wanted if w and w not in table]
    if unknown:
        raise ValueError(f"unknown attack(s): {', '.join(unknown)}")
    return sorted({table[w] for w in wanted if w}, key=lambda a: a.priority)
