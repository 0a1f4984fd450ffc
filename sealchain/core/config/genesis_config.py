# sealchain/core/config/genesis_config.py

import os
from typing import Dict, Any

class GenesisConfig:
    """
    Configuración de Datos del Bloque Génesis.
    Contiene los valores "mágicos" para reconstruir el Bloque #0.
    """

    def __init__(self):
        # Altura del bloque génesis (Siempre 0).
        self._height: int = 0

        # Timestamp de creación.
        self._timestamp: int = int(os.getenv("SEALCHAIN_GENESIS_TIMESTAMP", 1704067200))

        # El génesis no tiene predecesor.
        self._previous_block_hash = None

        self._message: str = os.getenv("SEALCHAIN_GENESIS_MESSAGE", "Genesis Block")

    @property
    def height(self) -> int:
        return self._height

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def previous_block_hash(self):
        return self._previous_block_hash

    @property
    def message(self) -> str:
        return self._message

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        if not data: return

        if "timestamp" in data:
            self._timestamp = int(data["timestamp"])

        if "message" in data:
            self._message = str(data["message"])
