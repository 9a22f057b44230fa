"""
Bit-packed sieve on the mod-6 wheel.

Only integers >= 5 that are prime to 6 are stored, one bit each, 32 to a
``uint32`` word; wheel index k stands for ``3k + 5 - (k & 1)``. A set bit
means composite. Candidates are counted a word at a time with a SWAR
population count, so the n-th prime is found without building the list of
primes. For n = 10**8 the buffer is about 90 MB.
"""
import logging
from math import isqrt

import numpy as np

from nthprime import bound
from nthprime._config import config
from nthprime.sieve.base import Sieve, check_rank

log = logging.getLogger(__name__)

WORD_BITS = 32
SCAN_WORDS = 1 << 16

_M1 = np.uint32(0x55555555)
_M2 = np.uint32(0x33333333)
_M4 = np.uint32(0x0F0F0F0F)
_H01 = np.uint32(0x01010101)


def popcount(words):
    """Number of set bits in each uint32 word."""
    x = np.array(words, dtype=np.uint32, ndmin=1)
    x = x - ((x >> 1) & _M1)
    x = ((x >> 2) & _M2) + (x & _M2)
    x = ((x >> 4) & _M4) + (x & _M4)
    return (x * _H01) >> 24


def strides(i):
    """
    Wheel index of p*p and the two alternating strides between the wheel
    indices of the following multiples of p, where p is the prime at wheel
    index i.
    """
    if i & 1:
        return i * (3 * i + 8) + 4, 4 * i + 5, 2 * i + 3
    else:
        return i * (3 * i + 10) + 7, 2 * i + 3, 4 * i + 7


def mark(block, lo, start, s1, s2):
    """Mark start, start+s1, start+s1+s2, ... inside block, which holds
    wheel indices [lo, lo + len(block))."""
    hi = lo + len(block)
    step = s1 + s2
    for first in (start, start + s1):
        if first < lo:
            first += -(-(lo - first) // step) * step
        if first < hi:
            block[first - lo::step] = True


def scan_value(k, p):
    """Integer for bit position p of word k as left by the descending scan.

    The scan stops one position below the bit of the n-th prime, hence
    ``scan_value(k, p) == wheel_value(32k + p + 1)``.
    """
    return 3 * (p + (k << 5)) + 7 + (p & 1)


class WheelSieve(Sieve):
    """
    Bit-packed, wheel-factorised sieve of Eratosthenes.

    The fastest and most frugal strategy, and the default of
    :func:`nthprime.nth_prime`. Marking is done on a boolean block of
    ``block_bits`` entries which is then packed into the bit buffer.
    """

    name = 'wheel'

    def __init__(self, memory_limit=None, growth=None, block_bits=None):
        super().__init__(memory_limit, growth)
        if block_bits is None:
            block_bits = config.get('sieve', dict()).get('block_bits', 1 << 23)
        self.block_bits = max(WORD_BITS, (block_bits + 31) & ~31)

    def nth_prime(self, n):
        n = check_rank(n)
        if n < len(bound.SMALL_PRIMES):
            return bound.SMALL_PRIMES[n]

        b = self.estimate(n)
        while True:
            limit = bound.wheel_index(b.limit)
            root = bound.wheel_index(isqrt(b.limit))
            log.debug('%s: n=%d limit=%d wheel limit=%d root=%d', self.name,
                      n, b.limit, limit, root)
            words = self.sieve(n, limit, root)
            value, count = self.scan(words, n)
            if value is not None:
                return value
            b = self.grow(n, b, count)

    def sieve(self, n, limit, root):
        """Sieve wheel indices [0, limit) using the primes below root.

        Returns:
            uint32 array of (limit + 31) // 32 words; bits at or above
            limit are set.
        """
        dim = (limit + 31) >> 5
        words = self.allocate(n, dim, dtype=np.uint32, fill=0)
        size = min(max(self.block_bits, (root + 31) & ~31), dim << 5)
        block = self.allocate(n, size)

        primes = []
        for lo in range(0, dim << 5, size):
            hi = min(lo + size, dim << 5)
            view = block[:hi - lo]
            view[:] = False
            if lo == 0:
                for i in range(root):
                    if not view[i]:
                        s = strides(i)
                        primes.append(s)
                        mark(view, lo, *s)
            else:
                for s in primes:
                    mark(view, lo, *s)
            if hi > limit:
                view[limit - lo:] = True
            words[lo >> 5:hi >> 5] = np.packbits(
                view, bitorder='little').view('<u4')
        return words

    def scan(self, words, n):
        """Locate the n-th prime in a sieved buffer.

        Returns:
            (value, count): value is None when the buffer holds fewer than
            n+1 primes, count is the number of primes it holds.
        """
        # 2 and 3 are not in the buffer
        count = 2
        for lo in range(0, len(words), SCAN_WORDS):
            counts = popcount(~words[lo:lo + SCAN_WORDS])
            total = int(counts.sum(dtype=np.int64))
            if count + total < n + 1:
                count += total
                continue
            running = np.cumsum(counts, dtype=np.int64) + count
            k = lo + int(np.searchsorted(running, n + 1))
            count = int(running[k - lo])
            break
        else:
            return None, count

        mask = int(~words[k])
        p = WORD_BITS - 1
        while count >= n + 1:
            count -= (mask >> p) & 1
            p -= 1
        return scan_value(k, p), n + 1
