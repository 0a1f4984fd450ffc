# sealchain/core/builders/block_builder.py

import time
import logging
from typing import Any, Optional

from sealchain.core.models.block import Block
from sealchain.core.services.block_hasher import BlockHasher

logger = logging.getLogger(__name__)

class BlockBuilder:
    """
    Contrato del dueño de la cadena: asigna los metadatos posteriores a la
    construcción (altura, tiempo, predecesor) y sella el bloque.
    """

    @staticmethod
    def build(
        data: Any,
        height: int,
        previous_block_hash: Optional[str],
        timestamp: Optional[int] = None
    ) -> Block:
        if isinstance(height, bool) or not isinstance(height, int) or height < 0:
            raise ValueError(f"Altura inválida: {height!r}")

        block = Block(data)
        block.height = height
        block.time = int(time.time()) if timestamp is None else int(timestamp)
        block.previous_block_hash = previous_block_hash

        BlockHasher.seal(block)
        logger.info(f"Bloque #{height} construido (prev: {str(previous_block_hash)[:10]})")
        return block
