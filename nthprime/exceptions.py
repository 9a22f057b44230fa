class NthPrimeException(Exception):
    """
    Base exception.
    """


class InvalidArgument(NthPrimeException, ValueError):
    """
    The rank is negative or not an integer, or a strategy name is unknown.
    """


class ResourceExhausted(NthPrimeException, MemoryError):
    """
    A sieve buffer does not fit in the memory allowed for one call.
    """

    @classmethod
    def make(cls, strategy, n, nbytes, limit=None):
        if limit is None:
            msg = f'{strategy}: could not allocate {nbytes} bytes for n={n}'
        else:
            msg = (f'{strategy}: n={n} needs {nbytes} bytes, '
                   f'memory limit is {limit} bytes')
        return cls(msg)
