from nthprime.exceptions import InvalidArgument
from nthprime.sieve.base import SequenceSieve, Sieve, check_rank
from nthprime.sieve.eratosthenes import EratosthenesSieve, primes_upto
from nthprime.sieve.odd import OddSieve
from nthprime.sieve.segmented import SegmentedSieve
from nthprime.sieve.wheel import WheelSieve, popcount

__sieves = {
    cls.name: cls
    for cls in [EratosthenesSieve, SegmentedSieve, OddSieve, WheelSieve]
}


def available_sieves():
    return sorted(__sieves)


def get_sieve(name, **kwargs):
    """
    Create a sieve strategy by name.

    Args:
        name: one of available_sieves()
        kwargs: passed to the strategy, e.g. memory_limit, growth

    Raises:
        InvalidArgument: unknown name
    """
    try:
        cls = __sieves[name]
    except KeyError:
        raise InvalidArgument(f'unknown sieve {name!r}, '
                              f'choose from {available_sieves()}') from None
    return cls(**kwargs)


__all__ = [
    'Sieve', 'SequenceSieve', 'EratosthenesSieve', 'SegmentedSieve',
    'OddSieve', 'WheelSieve', 'available_sieves', 'check_rank', 'get_sieve',
    'popcount', 'primes_upto'
]
