import logging
from typing import Union

from ..converters.big_int_converter import BigIntConverter
from ..errors import InvalidProofPrime
from ..group.abstract.IGroupContext import IGroupContext
from ..hashing import InputHasher
from ..mpc import MPC
from ..primes.PrimalityTester import PrimalityTester
from ..primes.abstract.IPrimalityTester import IPrimalityTester
from ..protocol_constants import MIN_PROOF_PRIME_BITS, VERIFICATION_ROUNDS
from .Proof import Proof
from .abstract.IProofVerifier import IProofVerifier
from .validation import validate_iterations

logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class ProofVerifier(IProofVerifier):
    """Checks y == pi^l * x^r (mod N) without running the delay computation."""

    def __init__(self, group: IGroupContext, tester: IPrimalityTester = PrimalityTester) -> None:
        """Initialize the verifier.

        Args:
            group (IGroupContext): The shared group
            tester (IPrimalityTester): Primality test applied to l on every call
        """
        self._group = group
        self._tester = tester

    def verify(self, input_value: Union[bytes, str], proof: Proof) -> bool:
        x = InputHasher.hash_to_int(input_value)
        t = validate_iterations(proof.get_iterations())

        y = BigIntConverter.decode(proof.get_y())
        pi = BigIntConverter.decode(proof.get_pi())
        l = BigIntConverter.decode(proof.get_l())
        r = BigIntConverter.decode(proof.get_r())

        if MPC.bit_length(l) < MIN_PROOF_PRIME_BITS or not self._tester.is_probable_prime(l, VERIFICATION_ROUNDS):
            raise InvalidProofPrime("Invalid proof prime l")

        if r != MPC.powmod(TWO, t, l):
            logger.warning("Proof rejected: r does not match 2^t mod l")
            return False

        right_side = self._group.mul(self._group.powmod(pi, l), self._group.powmod(x, r))
        if y != right_side:
            logger.warning("Proof rejected: verification equation does not hold")
            return False
        return True
