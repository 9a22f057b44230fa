import numpy as np
from nthprime.bound import wheel_index, wheel_value
from nthprime.sieve import WheelSieve, popcount, primes_upto
from nthprime.sieve.wheel import scan_value, strides


def test_popcount():
    words = np.array(
        [0, 1, 2, 3, 0xFF, 0x80000000, 0xFFFFFFFF, 0x55555555, 0x12345678],
        dtype=np.uint32)
    assert popcount(words).tolist() == [bin(int(w)).count('1') for w in words]
    rng = np.random.default_rng(1234)
    words = rng.integers(0, 1 << 32, size=1000, dtype=np.uint64)
    words = words.astype(np.uint32)
    assert popcount(words).tolist() == [bin(int(w)).count('1') for w in words]


def test_strides():
    for i in range(200):
        p = wheel_value(i)
        start, s1, s2 = strides(i)
        assert wheel_value(start) == p * p
        assert wheel_value(start + s1) % p == 0
        assert wheel_value(start + s1 + s2) % p == 0
        multiples = [
            m for m in range(p * p, p * p + 12 * p, p) if m % 2 and m % 3
        ]
        assert [
            wheel_value(start),
            wheel_value(start + s1),
            wheel_value(start + s1 + s2),
            wheel_value(start + 2 * s1 + s2),
        ] == multiples[:4]


def test_scan_value():
    for k in range(5):
        for p in range(-1, 32):
            assert scan_value(k, p) == wheel_value(32 * k + p + 1)


def test_sieve_buffer():
    limit = 10000
    sieve = WheelSieve(block_bits=64)
    words = sieve.sieve(0, wheel_index(limit), wheel_index(100))
    assert len(words) == (wheel_index(limit) + 31) // 32
    bits = np.unpackbits(words.view(np.uint8), bitorder='little')
    candidates = np.flatnonzero(bits == 0)
    assert [wheel_value(int(k)) for k in candidates] == primes_upto(
        limit).tolist()[2:]


def test_block_sizes_agree():
    expected = WheelSieve().nth_prime(50000)
    for block_bits in [32, 100, 4096, 1 << 16]:
        assert WheelSieve(block_bits=block_bits).nth_prime(50000) == expected


def test_scan_shortfall():
    sieve = WheelSieve()
    words = sieve.sieve(5, wheel_index(10), wheel_index(3))
    assert sieve.scan(words, 5) == (None, 4)
    assert sieve.scan(words, 3) == (7, 4)
