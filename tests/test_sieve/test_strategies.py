import numpy as np
import pytest
from nthprime import (EratosthenesSieve, InvalidArgument, OddSieve,
                      ResourceExhausted, SegmentedSieve, WheelSieve,
                      available_sieves, get_sieve, is_prime)
from nthprime.sieve import SequenceSieve, Sieve, check_rank

strategies = [EratosthenesSieve, SegmentedSieve, OddSieve, WheelSieve]

known = {
    0: 2,
    1: 3,
    2: 5,
    3: 7,
    4: 11,
    8: 23,
    10: 31,
    99: 541,
    500: 3581,
    1000: 7927,
    10000: 104743,
    100000: 1299721,
}


@pytest.fixture(scope='module')
def reference():
    return EratosthenesSieve().primes(100000)


@pytest.mark.parametrize('cls', strategies)
def test_known_values(cls):
    sieve = cls()
    for n, p in known.items():
        assert sieve.nth_prime(n) == p


@pytest.mark.parametrize('cls', strategies)
def test_agrees_with_reference(cls, reference):
    sieve = cls()
    ranks = list(range(300)) + list(range(300, 100001, 9973)) + [100000]
    for n in ranks:
        assert sieve.nth_prime(n) == reference[n]


@pytest.mark.parametrize('cls', strategies)
def test_prime_and_increasing(cls):
    sieve = cls()
    values = [sieve.nth_prime(n) for n in range(200)]
    assert all(is_prime(p) for p in values)
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize('cls', strategies)
def test_idempotent(cls):
    sieve = cls()
    assert sieve.nth_prime(12345) == sieve.nth_prime(12345)


@pytest.mark.parametrize('cls', strategies)
def test_bound_shortfall(cls, caplog):
    # the estimate for n = 4 is 10, below the answer 11
    with caplog.at_level('WARNING', logger='nthprime'):
        assert cls().nth_prime(4) == 11
    assert any('retry' in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize('cls', strategies)
def test_invalid_argument(cls):
    sieve = cls()
    for n in [-1, 1.5, True, '3', None]:
        with pytest.raises(InvalidArgument):
            sieve.nth_prime(n)
    assert sieve.nth_prime(np.int64(10)) == 31


@pytest.mark.parametrize('cls', strategies)
def test_resource_exhausted(cls):
    sieve = cls(memory_limit=16)
    with pytest.raises(ResourceExhausted):
        sieve.nth_prime(1000)
    with pytest.raises(MemoryError):
        sieve.nth_prime(1000)
    assert sieve.nth_prime(2) == 5


@pytest.mark.parametrize('cls', [EratosthenesSieve, SegmentedSieve])
def test_sequence(cls, reference):
    sieve = cls()
    assert isinstance(sieve, SequenceSieve)
    assert sieve.primes(0) == [2]
    assert sieve.primes(1) == [2, 3]
    assert sieve.primes(2) == [2, 3, 5]
    for n in [3, 4, 10, 1000, 54321]:
        primes = sieve.primes(n)
        assert len(primes) == n + 1
        assert primes == reference[:n + 1]
        assert all(type(p) is int for p in primes[:10])


def test_get_sieve():
    assert available_sieves() == ['eratosthenes', 'odd', 'segmented', 'wheel']
    for name in available_sieves():
        sieve = get_sieve(name, memory_limit=1 << 20)
        assert isinstance(sieve, Sieve)
        assert sieve.name == name
        assert sieve.memory_limit == 1 << 20
    with pytest.raises(InvalidArgument):
        get_sieve('atkin')
    with pytest.raises(InvalidArgument):
        get_sieve('wheel', growth=1)


def test_check_rank():
    assert check_rank(0) == 0
    assert type(check_rank(np.uint32(7))) is int
    with pytest.raises(ValueError):
        check_rank(-3)
