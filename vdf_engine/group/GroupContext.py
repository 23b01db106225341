import logging

from ..errors import GroupConfigurationError
from ..hashing import DIGEST_BITS
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IGroupContext import IGroupContext

logger = logging.getLogger(__name__)


class GroupContext(IGroupContext):
    """Arithmetic under a fixed, validated modulus.

    Instances are read-only after construction and can be shared by any
    number of concurrent build and verify calls.
    """

    def __init__(self, N: MPZ, digest_bits: int = DIGEST_BITS) -> None:
        """Validate and hold the modulus.

        Args:
            N (MPZ): The group modulus
            digest_bits (int): Width of the challenge digest. N must be wider
                so that hashed inputs are already reduced.

        Raises:
            GroupConfigurationError: If N is not an odd integer wider than digest_bits
        """
        N = MPC.mpz(N)
        if N <= 1:
            raise GroupConfigurationError(f"Modulus must be greater than 1, got {N}")
        if MPC.is_even(N):
            raise GroupConfigurationError("Modulus must be odd")
        if MPC.bit_length(N) <= digest_bits:
            raise GroupConfigurationError(
                f"Modulus is {MPC.bit_length(N)} bits; it must exceed the "
                f"{digest_bits}-bit challenge digest"
            )
        object.__setattr__(self, "_N", N)
        logger.debug("Group context ready (%d-bit modulus)", MPC.bit_length(N))

    @classmethod
    def from_hex(cls, modulus_hex: str, digest_bits: int = DIGEST_BITS) -> "GroupContext":
        """Parse a distributed hex modulus.

        Args:
            modulus_hex (str): Hex string, optionally prefixed with 0x
            digest_bits (int): Width of the challenge digest

        Returns:
            GroupContext: The validated context

        Raises:
            GroupConfigurationError: If the string does not parse or the modulus is invalid
        """
        try:
            N = MPC.mpz(int(modulus_hex, 16))
        except (TypeError, ValueError) as e:
            raise GroupConfigurationError(f"Failed to parse modulus: {e}") from e
        return cls(N, digest_bits)

    def __setattr__(self, name, value):
        raise AttributeError("GroupContext is immutable")

    def __repr__(self):
        return f"<GroupContext(bits={MPC.bit_length(self._N)})>"

    def get_N(self) -> MPZ:
        return self._N

    def powmod(self, base: MPZ, exp: MPZ) -> MPZ:
        return MPC.powmod(base, exp, self._N)

    def mul(self, a: MPZ, b: MPZ) -> MPZ:
        return MPC.mul_mod(a, b, self._N)

    def square(self, value: MPZ) -> MPZ:
        return MPC.square_mod(value, self._N)
