"""Sieve strategy abstract base classes - the contract shared by all sieves."""

import logging
import numbers
import operator
from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from nthprime import bound
from nthprime._config import config
from nthprime.exceptions import InvalidArgument, ResourceExhausted

log = logging.getLogger(__name__)

cfg = config.get('sieve', dict())


def check_rank(n) -> int:
    """Validate a 0-indexed rank and return it as an int.

    Raises:
        InvalidArgument: n is negative, a bool or not an integer
    """
    if isinstance(n, bool) or not isinstance(n,
                                             (numbers.Integral, np.integer)):
        raise InvalidArgument(
            f'rank must be a non-negative integer, got {n!r}')
    n = operator.index(n)
    if n < 0:
        raise InvalidArgument(f'rank must be a non-negative integer, got {n}')
    return n


class Sieve(ABC):
    """Abstract base class for n-th prime strategies.

    Every call is independent: buffers are allocated inside the call and
    dropped on return, so one instance may be shared between threads.
    """

    name = None

    def __init__(self,
                 memory_limit: Optional[int] = None,
                 growth: Optional[float] = None):
        """
        Args:
            memory_limit: largest buffer in bytes one call may allocate
            growth: factor applied to the bound when it proves too small
        """
        if memory_limit is None:
            memory_limit = cfg.get('memory_limit', 1 << 30)
        if growth is None:
            growth = cfg.get('growth', 1.5)
        if growth <= 1:
            raise InvalidArgument(
                f'growth must be greater than 1, got {growth}')
        self.memory_limit = memory_limit
        self.growth = growth

    def __repr__(self):
        return (f'{self.__class__.__name__}(memory_limit={self.memory_limit}, '
                f'growth={self.growth})')

    @abstractmethod
    def nth_prime(self, n: int) -> int:
        """Return the 0-indexed n-th prime."""
        pass

    def estimate(self, n: int) -> bound.Bound:
        return bound.estimate(n)

    def grow(self, n: int, b: bound.Bound, found: int) -> bound.Bound:
        """Bound for the next attempt after b yielded only `found` primes."""
        new = bound.grow(b, self.growth)
        log.warning('%s: bound %d holds %d primes, %d needed, retry with %d',
                    self.name, b.limit, found, n + 1, new.limit)
        return new

    def allocate(self, n: int, shape, dtype=bool, fill=False) -> np.ndarray:
        """Allocate a sieve buffer, honouring memory_limit.

        Raises:
            ResourceExhausted: the buffer is larger than memory_limit or
                the allocation itself fails
        """
        nbytes = int(np.prod(shape, dtype=np.int64)) * np.dtype(dtype).itemsize
        if self.memory_limit is not None and nbytes > self.memory_limit:
            raise ResourceExhausted.make(self.name, n, nbytes,
                                         self.memory_limit)
        try:
            return np.full(shape, fill, dtype=dtype)
        except MemoryError as e:
            raise ResourceExhausted.make(self.name, n, nbytes) from e


class SequenceSieve(Sieve):
    """A strategy that also produces every prime up to the n-th."""

    @abstractmethod
    def primes(self, n: int) -> List[int]:
        """Return the n+1 smallest primes in ascending order."""
        pass

    def nth_prime(self, n: int) -> int:
        return self.primes(n)[-1]
