# protocol_constants.py
#
# These values must match bit-for-bit between provers and verifiers.

MIN_ITERATIONS = 1_000          # Smallest accepted t (inclusive)
MAX_ITERATIONS = 10_000_000     # Largest accepted t (inclusive)

CHALLENGE_PRIME_BITS = 128      # Bit length of the generated challenge prime l
MIN_PROOF_PRIME_BITS = 120      # Shortest l a verifier accepts

# Miller-Rabin rounds. A composite passes k rounds with probability at most 4^-k:
# 2^-40 when generating l, 2^-10 per verification call.
GENERATION_ROUNDS = 20
VERIFICATION_ROUNDS = 5

PRIME_GENERATION_ATTEMPTS = 1_000   # Candidate budget before giving up

PROGRESS_CHUNK_SIZE = 1_000     # Squarings between progress reports
ITERATIONS_PER_SECOND = 10_000_000  # Rough squaring rate used by estimate_iterations

# 2048-bit group modulus of unknown factorization (fixed trusted setup)
MODULUS_HEX = (
    "C7970CEEDCC3B0754490201A7AA613CD73911081C790F5F1A8726F463550BB5B"
    "7FF0DB8E1EA1189EC72F93D1650011BD721AEEACC2ACDE32A04107F0648C2813"
    "A31F5B0B7765FF8B44B4B6FFC93384B646EB09C7CF5E8592D40EA33C80039F35"
    "B4F14A04B51F7BFD781BE4D1673164BA8EB991C2C4D730BBBE35F592BDEF524A"
    "F7E8DAEFD26C66FC02C479AF89D64D373F442709439DE66CEB955F3EA37D5159"
    "F6135809F85334B5CB1813ADDC80CD05609F10AC6A95AD65872C909525BDAD32"
    "BC729592642920F24C61DC5B3C3B7923E56B16A4D9D373D8721F24A3FC0F1B31"
    "31F55615172866BCCC30F95054C824E733A5EB6817F7BC16399D48C6361CC7E5"
)
