"""Converter for proof objects."""

from typing import Any, Dict, Mapping, Optional, Union

from ..database.entity.ProofEntity import ProofEntity
from ..errors import DecodeError
from ..hashing import InputHasher
from ..proof.Proof import Proof

PROOF_FIELDS = ("y", "pi", "l", "r")


class ProofConverter:
    """Converter between Proof and its dict and database forms."""

    @staticmethod
    def to_dict(proof: Proof) -> Dict[str, Any]:
        """Convert a Proof to a JSON-serializable dict.

        Args:
            proof (Proof): The proof to convert

        Returns:
            Dict[str, Any]: Mapping with y, pi, l, r and iterations
        """
        return {
            "y": proof.get_y(),
            "pi": proof.get_pi(),
            "l": proof.get_l(),
            "r": proof.get_r(),
            "iterations": proof.get_iterations(),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Proof:
        """Build a Proof from a dict produced by to_dict or by another implementation.

        iterations may be an int or a decimal string.

        Args:
            data (Mapping[str, Any]): The serialized proof

        Returns:
            Proof: The proof

        Raises:
            DecodeError: If a field is missing or has the wrong type
        """
        missing = [name for name in PROOF_FIELDS + ("iterations",) if name not in data]
        if missing:
            raise DecodeError(f"Missing proof fields: {', '.join(missing)}")

        for name in PROOF_FIELDS:
            if not isinstance(data[name], str):
                raise DecodeError(f"Proof field {name} must be a base64 string")

        return Proof(
            y=data["y"],
            pi=data["pi"],
            l=data["l"],
            r=data["r"],
            iterations=ProofConverter._parse_iterations(data["iterations"]),
        )

    @staticmethod
    def to_entity(
        proof: Proof, input_value: Union[bytes, str], request_id: Optional[str] = None
    ) -> ProofEntity:
        """Convert a Proof to a ProofEntity.

        Args:
            proof (Proof): The proof to convert
            input_value (Union[bytes, str]): The public input the proof was computed for
            request_id (Optional[str]): Request the proof answers, if any

        Returns:
            ProofEntity: The database entity
        """
        return ProofEntity(
            input_hash=InputHasher.digest(input_value).hex(),
            y=proof.get_y(),
            pi=proof.get_pi(),
            l=proof.get_l(),
            r=proof.get_r(),
            iterations=proof.get_iterations(),
            request_id=request_id,
        )

    @staticmethod
    def from_entity(entity: ProofEntity) -> Proof:
        """Convert a stored ProofEntity back to a Proof.

        Args:
            entity (ProofEntity): The database entity

        Returns:
            Proof: The proof
        """
        return Proof(
            y=entity.y,
            pi=entity.pi,
            l=entity.l,
            r=entity.r,
            iterations=int(entity.iterations),
        )

    # Private Methods
    # --------------

    @staticmethod
    def _parse_iterations(value: Any) -> int:
        if isinstance(value, bool):
            raise DecodeError("iterations must be an integer")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.isascii() and value.strip().isdigit():
            return int(value)
        raise DecodeError(f"iterations must be an unsigned integer, got {value!r}")
