import functools
import operator


def _MillerRabin(n, a):
    d = n - 1
    while (d & 1) == 0:
        d >>= 1
    t = pow(a, d, n)
    while d != n - 1 and t != n - 1 and t != 1:
        t = (t * t) % n
        d <<= 1
    return t == n - 1 or (d & 1) == 1


# (exclusive upper limit, witnesses), deterministic below each limit
_BASES = [
    (1373653, (2, 3)),
    (9080191, (31, 73)),
    (4759123141, (2, 7, 61)),
    (2152302898747, (2, 3, 5, 7, 11)),
    (3474749660383, (2, 3, 5, 7, 11, 13)),
    (341550071728321, (2, 3, 5, 7, 11, 13, 17)),
    (3825123056546413051, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
    (318665857834031151167461, (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)),
    (3317044064679887385961981,
     (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)),
]


@functools.lru_cache()
def millerRabinTest(q):
    for limit, bases in _BASES:
        if q < limit:
            return all(_MillerRabin(q, a) for a in bases if a % q != 0)
    raise ValueError(f'{q} is beyond the deterministic Miller-Rabin range')


def is_prime(q):
    """
    Deterministic primality test for q < 3317044064679887385961981.
    """
    q = operator.index(q)
    if q < 2:
        return False
    if q in (2, 3):
        return True
    if q % 2 == 0 or q % 3 == 0:
        return False
    return millerRabinTest(q)
