import logging

from nthprime.bound import Bound, estimate
from nthprime.check import is_prime
from nthprime.exceptions import (InvalidArgument, NthPrimeException,
                                 ResourceExhausted)
from nthprime.log import level
from nthprime.primes import nth_prime, primes_up_to_nth
from nthprime.sieve import (EratosthenesSieve, OddSieve, SegmentedSieve,
                            WheelSieve, available_sieves, get_sieve)
from nthprime.version import __version__

logging.getLogger(__name__).setLevel(level())
