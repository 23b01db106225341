import uuid
from typing import Optional

from sqlalchemy import BigInteger, Column, String

from ..mixins.saveable import Saveable
from ..database import get_orm_base

# Define the Base class for ORM models
Base = get_orm_base()


class ProofEntity(Base, Saveable):
    """Database entity for storing VDF proofs in transport form."""

    __tablename__ = "vdf_proofs"

    id = Column(
        String, primary_key=True, default=lambda: str(uuid.uuid4())
    )  # Unique generated string ID
    request_id = Column(String, nullable=True)  # Filled by the caller when the proof answers a request
    input_hash = Column(String, nullable=False)  # Hex SHA-256 of the public input
    y = Column(String, nullable=False)  # Base64 of the delay output
    pi = Column(String, nullable=False)  # Base64 of the witness
    l = Column(String, nullable=False)  # Base64 of the challenge prime
    r = Column(String, nullable=False)  # Base64 of 2^t mod l
    iterations = Column(BigInteger, nullable=False)  # Iteration count t

    def __repr__(self):
        return f"<ProofEntity(id={self.id}, request_id={self.request_id}, iterations={self.iterations})>"

    def __init__(
        self, input_hash: str, y: str, pi: str, l: str, r: str, iterations: int, request_id: Optional[str] = None
    ):
        """Initialize a proof entity.

        Args:
            input_hash (str): Hex SHA-256 of the public input
            y (str): Base64 of the delay output
            pi (str): Base64 of the witness
            l (str): Base64 of the challenge prime
            r (str): Base64 of 2^t mod l
            iterations (int): Iteration count t
            request_id (Optional[str]): Request the proof answers, if any
        """
        self.id = str(uuid.uuid4())
        self.input_hash = input_hash
        self.y = y
        self.pi = pi
        self.l = l
        self.r = r
        self.iterations = iterations
        self.request_id = request_id
