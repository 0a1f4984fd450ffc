# sealchain/core/services/block_hasher.py

import logging
from typing import Any, Dict, Optional

from sealchain.core.interfaces.hasher_protocols import SealableBlockProtocol
from sealchain.core.services.payload_codec import PayloadCodec
from sealchain.core.utils.crypto_utility import CryptoUtility
from sealchain.core.config.config_manager import ConfigManager
from sealchain.core.exceptions import BlockError

logger = logging.getLogger(__name__)

class BlockHasher:
    """
    Sellado y verificación de la huella de un bloque.

    La huella se define sobre el set completo de campos con 'hash' vacío,
    serializado en un orden fijo. Así cualquier cambio en height, time,
    body o previousBlockHash altera el digest.
    """

    CANONICAL_FIELDS = ("hash", "height", "body", "time", "previousBlockHash")

    @staticmethod
    def canonical_fields(block: SealableBlockProtocol, include_hash: bool = False) -> Dict[str, Any]:
        return {
            "hash": block.hash if include_hash else None,
            "height": block.height,
            "body": block.body,
            "time": block.time,
            "previousBlockHash": block.previous_block_hash
        }

    @staticmethod
    def serialize(block: SealableBlockProtocol) -> str:
        """Texto canónico de todos los campos, con 'hash' en su estado actual."""
        return PayloadCodec.serialize(BlockHasher.canonical_fields(block, include_hash=True))

    @staticmethod
    def calculate(block: SealableBlockProtocol, algorithm: Optional[str] = None) -> str:
        """Digest sobre el set canónico con 'hash' ausente."""
        algorithm = algorithm or ConfigManager().hash_algorithm
        payload = PayloadCodec.serialize(BlockHasher.canonical_fields(block))
        return CryptoUtility.digest(payload, algorithm)

    @staticmethod
    def seal(block: SealableBlockProtocol, algorithm: Optional[str] = None) -> str:
        block_hash = BlockHasher.calculate(block, algorithm)
        block.hash = block_hash
        logger.info(f"Bloque #{block.height} sellado. Hash: {block_hash[:10]}...")
        return block_hash

    @staticmethod
    def verify(block: SealableBlockProtocol, algorithm: Optional[str] = None) -> bool:
        """
        Núcleo síncrono de Block.validate().
        1. Guarda el hash actual.
        2. Vacía el campo y recalcula sobre el estado completo.
        3. Restaura el hash original pase lo que pase.
        4. Compara. Un bloque nunca sellado (hash None) nunca coincide.
        """
        algorithm = algorithm or ConfigManager().hash_algorithm
        current_hash = block.hash
        block.hash = None
        try:
            new_hash = CryptoUtility.digest(BlockHasher.serialize(block), algorithm)
        except BlockError:
            logger.exception(f"No se pudo verificar la integridad del bloque #{block.height}")
            raise
        finally:
            block.hash = current_hash

        if current_hash != new_hash:
            logger.info(f"Fallo Integridad: bloque #{block.height} ({str(current_hash)[:8]} vs {new_hash[:8]})")
            return False

        return True
