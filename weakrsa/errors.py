# -*- coding: utf-8 -*-
"""Failure kinds raised by the recovery core."""


class RecoveryError(Exception):
    """Base class: the whole message recovery failed."""
    kind = "recovery"


class NoModularInverse(RecoveryError):
    kind = "no-inverse"

    def __init__(self, e: int, phi: int, gcd: int):
        self.e = e
        self.phi = phi
        self.gcd = gcd
        if phi <= 1:
            msg = f"phi(n)={phi} leaves no residue to invert; cannot compute d"
        else:
            msg = f"e and phi(n) are not coprime (gcd={gcd}); cannot compute d"
        super().__init__(msg)


class InvalidEncoding(RecoveryError):
    kind = "bad-encoding"

    def __init__(self, value: int, index=None, reason: str = ""):
        self.value = value
        self.index = index
        where = f"block #{index}" if index is not None else "block"
        msg = f"{where} is not valid cp1251 text"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class NonConvergence(RecoveryError):
    kind = "no-convergence"

    def __init__(self, attack: str, iterations: int):
        self.attack = attack
        self.iterations = iterations
        super().__init__(f"{attack} did not converge within {iterations} iterations")


class BlockOutOfRange(RecoveryError, ValueError):
    kind = "bad-block"

    def __init__(self, index: int, value: int, n: int):
        self.index = index
        self.value = value
        self.n = n
        super().__init__(f"ciphertext block #{index} is outside [0, n)")
