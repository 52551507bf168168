# -*- coding: utf-8 -*-
"""weakrsa: recover RSA plaintext from close-prime or short-cycle instances."""

from .attacks import (
    AttackResult,
    PubKey,
    RecoveredKey,
    cycling_attack,
    decrypt_blocks,
    factorization_attack,
    recover_key,
)
from .codec import LEGACY_ENCODING, decode_block, decode_blocks
from .cycling import cycle_block
from .errors import BlockOutOfRange, InvalidEncoding, NoModularInverse, NonConvergence, RecoveryError
from .numtheory import fermat_factor, mod_inverse

__version__ = "1.0.0"
