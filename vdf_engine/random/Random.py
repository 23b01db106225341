import secrets
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IRandom import IRandom


class Random(IRandom):
    """Implementation of secure random number generation.

    Every call draws from the operating system's CSPRNG through ``secrets``,
    so no generator state is shared between calls or threads.
    """

    @staticmethod
    def get_random_bits(bit_size: int) -> MPZ:
        if bit_size < 1:
            raise ValueError(f"bit_size must be positive: {bit_size}")
        return MPC.mpz(secrets.randbits(bit_size))

    @staticmethod
    def get_random_range(low: MPZ, high: MPZ) -> MPZ:
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        span = int(high - low) + 1
        return MPC.mpz(int(low) + secrets.randbelow(span))
