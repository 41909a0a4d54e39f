"""Hurwitz and Riemann zeta functions.

Domain errors are reported with IEEE sentinels (``inf`` / ``nan``), never
with exceptions: the discrete log-likelihood is written to carry these
values through, and callers that care must test for them explicitly.

The Hurwitz zeta follows the Cephes algorithm (direct summation plus an
Euler-Maclaurin correction); the Riemann zeta uses the rational
approximations from mpmath. The coefficient tables below are fixed
constants and must not be edited.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Sequence

EPSILON = 1e-12

# Euler-Maclaurin denominators, (2k)! / B_2k
_EULER_MACLAURIN = (
    12.0,
    -720.0,
    30240.0,
    -1209600.0,
    47900160.0,
    -1.8924375803183791606e9,  # 1.307674368e12/691
    7.47242496e10,
    -2.950130727918164224e12,  # 1.067062284288e16/3617
    1.1646782814350067249e14,  # 5.109094217170944e18/43867
    -4.5979787224074726105e15,  # 8.028576626982912e20/174611
    1.8152105401943546773e17,  # 1.5511210043330985984e23/854513
    -7.1661652561756670113e18,  # 1.6938241367317436694528e27/236364091
)

# zeta(n) for n = 0..26
_ZETA_INT = (
    -0.5,
    0.0,
    1.6449340668482264365, 1.2020569031595942854, 1.0823232337111381915,
    1.0369277551433699263, 1.0173430619844491397, 1.0083492773819228268,
    1.0040773561979443394, 1.0020083928260822144, 1.0009945751278180853,
    1.0004941886041194646, 1.0002460865533080483, 1.0001227133475784891,
    1.0000612481350587048, 1.0000305882363070205, 1.0000152822594086519,
    1.0000076371976378998, 1.0000038172932649998, 1.0000019082127165539,
    1.0000009539620338728, 1.0000004769329867878, 1.0000002384505027277,
    1.0000001192199259653, 1.0000000596081890513, 1.0000000298035035147,
    1.0000000149015548284,
)

# Highest-degree coefficient first.
_ZETA_P = (
    -1.85231868742346722e-11,
    -1.68030037095896287e-9,
    -1.02078104417700585e-7,
    -4.67633010038383371e-6,
    -0.000160948723019303141,
    -0.00398731457954257841,
    -0.0672313458590012612,
    -0.701274355654678147,
    -3.50000000087575873,
)

_ZETA_Q = (
    -1.83527919681474132e-11,
    -1.72963791443181972e-9,
    -9.58813053268913799e-8,
    -5.10691659585090782e-6,
    -0.000143416758067432622,
    -0.00441498861482948666,
    -0.0588835413263763741,
    -0.936552848762465319,
    1.00000000000000000,
)

_ZETA_1 = (
    3.03768838606128127e-10,
    -1.21924525236601262e-8,
    2.01201845887608893e-7,
    -1.53917240683468381e-6,
    -5.09890411005967954e-7,
    0.000122464707271619326,
    -0.000905721539353130232,
    -0.00239315326074843037,
    0.084239750013159168,
    0.418938517907442414,
    0.500000001921884009,
)

_ZETA_0 = (
    -3.46092485016748794e-10,
    -6.42610089468292485e-9,
    1.76409071536679773e-7,
    -1.47141263991560698e-6,
    -6.38880222546167613e-7,
    0.000122641099800668209,
    -0.000905894913516772796,
    -0.00239303348507992713,
    0.0842396947501199816,
    0.418938533204660256,
    0.500000000000000052,
)


def _pow(base: float, exponent: float) -> float:
    try:
        return base ** exponent
    except OverflowError:
        return math.inf


def _relative(term: float, total: float) -> float:
    return abs(term / total) if total != 0.0 else math.nan


def polynomial(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate a polynomial by Horner's rule, highest-degree coefficient first."""
    p = coefficients[0]
    for c in coefficients[1:]:
        p = c + x * p
    return p


def hurwitz_zeta(x: float, q: float) -> float:
    """Hurwitz zeta ``sum_{i>=0} (q + i)^-x``.

    Returns ``inf`` for ``x == 1`` and ``nan`` for ``q < 1``.
    """
    x = float(x)
    q = float(q)
    if x == 1.0:
        return math.inf
    if q < 1.0:
        return math.nan
    if q <= 0.0:
        return math.inf if q == math.floor(q) else math.nan

    s = _pow(q, -x)
    a = q
    b = 0.0
    i = 0
    done = False
    while (i < 9 or a <= 9.0) and not done:
        i += 1
        a += 1.0
        b = _pow(a, -x)
        s += b
        if _relative(b, s) < EPSILON:
            done = True

    w = a
    s += b * w / (x - 1.0)
    s -= 0.5 * b
    a = 1.0
    k = 0.0
    for m in _EULER_MACLAURIN:
        if done:
            break
        a *= x + k
        b /= w
        t = a * b / m
        s += t
        if _relative(t, s) < EPSILON:
            done = True
        k += 1.0
        a *= x + k
        b /= w
        k += 1.0

    return s


@lru_cache(maxsize=65536)
def cached_hurwitz_zeta(x: float, q: float) -> float:
    """Memoised :func:`hurwitz_zeta` for the repeated grid-search evaluations."""
    return hurwitz_zeta(x, q)


def riemann_zeta(s: float) -> float:
    """Riemann zeta ``zeta(s)`` for real ``s``.

    ``s == 1`` gives ``inf``. Values for ``s <= 0`` other than the table entries
    are reported as ``0.0``.
    """
    s = float(s)
    if math.isnan(s):
        return math.nan
    if s == 1.0:
        return math.inf
    if s == -math.inf:
        return 0.0
    if s >= 27.0:
        return 1.0 + 2.0 ** -s + 3.0 ** -s

    if math.floor(s) == s:
        n = int(s)
        if n >= 0:
            return _ZETA_INT[n]
        if n % 2 == 0:
            return 0.0

    if s <= 0.0:
        return 0.0
    if s <= 1.0:
        return polynomial(s, _ZETA_0) / (s - 1.0)
    if s <= 2.0:
        return polynomial(s, _ZETA_1) / (s - 1.0)

    z = polynomial(s, _ZETA_P) / polynomial(s, _ZETA_Q)
    return 1.0 + 2.0 ** -s + 3.0 ** -s + 4.0 ** -s * z


__all__ = ["EPSILON", "cached_hurwitz_zeta", "hurwitz_zeta", "polynomial", "riemann_zeta"]
