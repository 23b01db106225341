from ..mpc import MPC
from ..mpc.types import MPZ
from ..random import Random
from .abstract.IPrimalityTester import IPrimalityTester


class PrimalityTester(IPrimalityTester):
    """Miller-Rabin probable prime test."""

    @staticmethod
    def is_probable_prime(n: MPZ, rounds: int) -> bool:
        if rounds < 1:
            raise ValueError(f"rounds must be at least 1: {rounds}")

        n = MPC.mpz(n)
        if n <= 1:
            return False
        if n == 2 or n == 3:
            return True
        if MPC.is_even(n):
            return False

        n_minus_1 = n - 1
        r, d = PrimalityTester._decompose(n_minus_1)

        for _ in range(rounds):
            a = Random.get_random_range(MPC.mpz(2), n - 2)
            if not PrimalityTester._passes_witness(a, d, r, n):
                return False  # a proves n composite

        return True

    # Private Methods
    # --------------

    @staticmethod
    def _decompose(value: MPZ) -> tuple:
        """Write an even value as 2^r * d with d odd."""
        r = 0
        d = value
        while MPC.is_even(d):
            d >>= 1
            r += 1
        return r, d

    @staticmethod
    def _passes_witness(a: MPZ, d: MPZ, r: int, n: MPZ) -> bool:
        n_minus_1 = n - 1
        x = MPC.powmod(a, d, n)
        if x == 1 or x == n_minus_1:
            return True
        for _ in range(r - 1):
            x = MPC.square_mod(x, n)
            if x == n_minus_1:
                return True
        return False
