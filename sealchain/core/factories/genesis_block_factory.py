# sealchain/core/factories/genesis_block_factory.py

import logging

from sealchain.core.models.block import Block
from sealchain.core.services.block_hasher import BlockHasher
from sealchain.core.config.config_manager import ConfigManager

logger = logging.getLogger(__name__)

class GenesisBlockFactory:
    """
    Fábrica determinista del Bloque Génesis.
    Garantiza que todos los nodos inicien con EXACTAMENTE el mismo bloque #0.
    """

    @staticmethod
    def create_genesis_block() -> Block:
        genesis_conf = ConfigManager().genesis
        logger.info("🌌 Generando Bloque Génesis (Modo Determinista)...")

        block = Block({"message": genesis_conf.message})
        block.height = genesis_conf.height
        block.time = genesis_conf.timestamp
        block.previous_block_hash = genesis_conf.previous_block_hash

        BlockHasher.seal(block)
        logger.info(f"✅ Génesis creado. Hash: {block.hash}")
        return block
