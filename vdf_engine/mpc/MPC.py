import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def square_mod(value: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.f_mod(value * value, mod)

    @staticmethod
    def mul_mod(a: MPZ, b: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.f_mod(a * b, mod)

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return gmpy2.mpz(base) ** exp

    @staticmethod
    def is_even(value: MPZ) -> bool:
        return gmpy2.is_even(value)

    @staticmethod
    def bit_length(value: MPZ) -> int:
        return int(gmpy2.mpz(value).bit_length())

    @staticmethod
    def from_bytes(data: bytes) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, byteorder="big"))

    @staticmethod
    def to_bytes(value: MPZ) -> bytes:
        if value < 0:
            raise ValueError(f"Cannot encode negative value: {value}")
        length = max(1, (MPC.bit_length(value) + 7) // 8)
        return int(value).to_bytes(length, byteorder="big")
