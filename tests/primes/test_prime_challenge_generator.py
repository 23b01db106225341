from unittest.mock import MagicMock, patch

import pytest
from gmpy2 import mpz

from vdf_engine.errors import PrimeGenerationExhausted
from vdf_engine.primes import PrimalityTester, PrimeChallengeGenerator
from vdf_engine.protocol_constants import CHALLENGE_PRIME_BITS, GENERATION_ROUNDS
from vdf_engine.random import Random


def test_generates_prime_of_exact_bit_length():
    """Test that the generated prime has exactly the requested bit length."""
    prime = PrimeChallengeGenerator().generate_prime(CHALLENGE_PRIME_BITS)
    assert prime.bit_length() == CHALLENGE_PRIME_BITS
    assert prime % 2 == 1
    assert PrimalityTester.is_probable_prime(prime, 20)


def test_candidates_have_top_and_bottom_bits_set():
    """Test that a zero sample is forced to 2^(bits-1) + 1."""
    tester = MagicMock()
    tester.is_probable_prime.return_value = True
    with patch.object(Random, "get_random_bits", return_value=mpz(0)):
        prime = PrimeChallengeGenerator(tester=tester).generate_prime(16)
    assert prime == 2 ** 15 + 1
    tester.is_probable_prime.assert_called_once_with(prime, GENERATION_ROUNDS)


def test_retries_until_prime_found():
    tester = MagicMock()
    tester.is_probable_prime.side_effect = [False, False, True]
    PrimeChallengeGenerator(tester=tester).generate_prime(32)
    assert tester.is_probable_prime.call_count == 3


def test_exhaustion_raises():
    """Test that the attempt budget is enforced."""
    tester = MagicMock()
    tester.is_probable_prime.return_value = False
    generator = PrimeChallengeGenerator(tester=tester, max_attempts=5)

    with pytest.raises(PrimeGenerationExhausted) as excinfo:
        generator.generate_prime(64)

    assert tester.is_probable_prime.call_count == 5
    assert excinfo.value.attempts == 5
    assert excinfo.value.bits == 64


def test_independent_calls_differ():
    generator = PrimeChallengeGenerator()
    assert generator.generate_prime(128) != generator.generate_prime(128)


def test_bits_must_be_at_least_two():
    with pytest.raises(ValueError):
        PrimeChallengeGenerator().generate_prime(1)
