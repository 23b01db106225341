"""
Main script to run the Verifiable Delay Function (VDF).

Computes a Wesolowski proof for a sample input over the protocol modulus,
verifies it, and stores the proof in the database.

Functions:
    main(): Runs the VDF demonstration, generating, verifying and saving a proof.
"""

import argparse
import logging
import time

from vdf_engine import DEFAULT_GROUP, VerifiableDelayFunction
from vdf_engine.database import initialize_database
from vdf_engine.database.DatabaseService import DatabaseService
from vdf_engine.protocol_constants import MIN_ITERATIONS
from vdf_engine.utils import EnvironmentManager, EnvironmentVariables, IterationEstimator


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Compute, verify and save a VDF proof.")
    parser.add_argument("input", nargs="?", default="test", help="Public input to prove a delay for")
    parser.add_argument(
        "--seconds",
        type=float,
        default=None,
        help="Target delay; calibrates this machine and derives the iteration count",
    )
    parser.add_argument("--request-id", default=None, help="Request the saved proof answers")
    return parser.parse_args()


def configure_logging() -> None:
    """Configure the root logger from LOG_LEVEL, falling back to INFO for unknown names."""
    name = EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    unknown = not isinstance(level, int)
    logging.basicConfig(level=logging.INFO if unknown else level)
    if unknown:
        logging.getLogger(__name__).warning("Unknown LOG_LEVEL %r, using INFO", name)


def main() -> None:
    """
    Runs the VDF demonstration.

    Prints:
        The chosen iteration count.
        Progress while squaring.
        The proof fields and timings for generation and verification.
    """
    configure_logging()
    args = parse_args()

    vdf = VerifiableDelayFunction(DEFAULT_GROUP)

    iterations = MIN_ITERATIONS
    if args.seconds is not None:
        rate = IterationEstimator.calibrate(vdf.get_group())
        iterations = IterationEstimator.estimate_iterations(args.seconds, rate)
    print(f"Iterations: {iterations}")

    # Time the proof generation
    start_time = time.time()
    proof = vdf.compute(args.input, iterations, lambda percent: print(f"\rProgress: {percent}%", end=""))
    generation_time = time.time() - start_time
    print()
    print("VDF output (y):", proof.get_y())
    print("Challenge prime (l):", proof.get_l())
    print(f"Proof generation time: {generation_time:.4f} seconds")

    # Time the verification
    start_time = time.time()
    is_valid = vdf.verify(args.input, proof)
    verification_time = time.time() - start_time
    print("Verification:", "Valid" if is_valid else "Invalid")
    print(f"Verification time: {verification_time:.4f} seconds")

    if not is_valid:
        print("Verification failed. Aborting save.")
        return

    initialize_database()
    (entity,) = DatabaseService.save_proofs([proof], args.input, args.request_id)
    print(f"Saved proof {entity.id}")


if __name__ == "__main__":
    main()
