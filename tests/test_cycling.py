"""
Tests for the cycling attack engine on small synthetic instances.
"""

import pytest

from weakrsa.cycling import cycle_block
from weakrsa.errors import NonConvergence

N, E = 3233, 17  # 61 * 53


def test_cycle_textbook_block():
    assert cycle_block(N, E, 2790) == 65


@pytest.mark.parametrize("m", list(range(0, 256, 7)) + [255])
def test_cycle_recovers_plaintext(m):
    c = pow(m, E, N)
    assert cycle_block(N, E, c) == m


def test_cycle_fixed_point_returns_itself():
    # 1^e == 1, so the cycle closes on the very first step
    assert cycle_block(N, E, 1, max_iterations=1) == 1


def test_cycle_cap_raises_non_convergence():
    with pytest.raises(NonConvergence) as info:
        cycle_block(N, E, 2790, max_iterations=1)
    assert info.value.attack == "cycling"

