import logging
from typing import Iterable, List, Optional, Union

from ..converters.proof_converter import ProofConverter
from ..proof.Proof import Proof
from .entity.ProofEntity import ProofEntity

logger = logging.getLogger(__name__)


class DatabaseService:
    """Service class for storing proofs."""

    @staticmethod
    def save_proofs(
        proofs: Iterable[Proof], input_value: Union[bytes, str], request_id: Optional[str] = None
    ) -> List[ProofEntity]:
        """
        Save proofs computed for one public input, each in its own commit.

        Args:
            proofs: Proofs to save
            input_value: The public input the proofs were computed for
            request_id: Request the proofs answer, if any

        Returns:
            List[ProofEntity]: The saved entities, in input order
        """
        entities = []
        for proof in proofs:
            entity = ProofConverter.to_entity(proof, input_value, request_id)
            entity.save()
            entities.append(entity)
        logger.info("Saved %d proof(s) for request %s", len(entities), request_id)
        return entities
