# sealchain/core/config/config_manager.py
'''
class ConfigManager:
    Centraliza el acceso a la configuración (Sellado y Génesis), cargando valores desde el entorno o JSON.

    Methods:
        __new__(cls): Implementa el patrón Singleton para asegurar una única instancia.
        _initialize(self): Inicializa las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Actualiza las sub-configuraciones a partir de un diccionario JSON completo.
'''

from dotenv import load_dotenv
from typing import Dict, Any

# Cargar variables de entorno si existen
load_dotenv()

from sealchain.core.config.block_config import BlockConfig
from sealchain.core.config.genesis_config import GenesisConfig

class ConfigManager:

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._block = BlockConfig()       # Primitiva de sellado
        self._genesis = GenesisConfig()   # Bloque #0

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:

        if "block" in json_data:
            self._block.update_from_dict(json_data["block"])

        if "genesis" in json_data:
            self._genesis.update_from_dict(json_data["genesis"])

    @property
    def block(self) -> BlockConfig:
        return self._block

    @property
    def genesis(self) -> GenesisConfig:
        return self._genesis

    # --- Atajos ---
    @property
    def hash_algorithm(self) -> str: return self._block.hash_algorithm
