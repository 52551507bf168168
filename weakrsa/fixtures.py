# -*- coding: utf-8 -*-
"""Known ciphertexts of two weak RSA instances."""

# close primes: falls to Fermat
FERMAT_N = 59046883376179
FERMAT_E = 4044583
FERMAT_BLOCKS = [
    32279109612093,
    17838629182964,
    4165776716262,
    13093284635895,
    20048651313008,
    54626454832531,
    12801053743903,
    54675332003643,
    4544911979279,
    31928373564570,
    798945495513,
    19569174668782,
]
FERMAT_FACTORS = (7692977, 7675427)
FERMAT_PLAINTEXT = "уровне. Перечислим признаки неэффективного испол"

# short cycles under e: falls to the cycling attack
CYCLING_N = 84032429242009
CYCLING_E = 2581907
CYCLING_BLOCKS = [
    54879925681459,
    72167008182929,
    17828219756166,
    17814399744948,
    37136636080011,
    77223434260215,
    4272415279426,
    73759271926435,
    74021335775875,
    16903113250201,
    77520052156956,
    41247980943013,
]
CYCLING_PLAINTEXT = "параллельными мостами, а всемаршрутные пакеты -_"

DEMOS = {
    "fermat": (FERMAT_N, FERMAT_E, FERMAT_BLOCKS),
    "cycling": (CYCLING_N, CYCLING_E, CYCLING_BLOCKS),
}
