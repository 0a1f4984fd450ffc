# sealchain/core/config/block_config.py

import os
from typing import Dict, Any

class BlockConfig:
    """
    Configuración del sellado de bloques.
    Define qué primitiva de hash usa el BlockHasher.
    """

    SUPPORTED_ALGORITHMS = ("sha256", "double_sha256")

    def __init__(self):
        self._hash_algorithm = os.getenv("SEALCHAIN_HASH_ALGORITHM", "sha256").lower()

    @property
    def hash_algorithm(self) -> str: return self._hash_algorithm

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """Actualiza la configuración desde un diccionario externo (JSON)."""
        if not data: return

        if "hash_algorithm" in data:
            algorithm = str(data["hash_algorithm"]).lower()
            if algorithm not in BlockConfig.SUPPORTED_ALGORITHMS:
                raise ValueError(f"Algoritmo de hash no soportado: {algorithm}")
            self._hash_algorithm = algorithm
