# sealchain/core/config/paths.py

import os
from pathlib import Path

class Paths:
    """
    Centraliza las rutas absolutas del proyecto.
    Soporta Inyección de Dependencias vía Variables de Entorno.
    """

    _CODE_ROOT = Path(__file__).resolve().parent.parent.parent.parent

    # Si existe la variable de entorno, la usa. Si no, usa el default (_CODE_ROOT/data).
    DATA_DIR = Path(os.getenv("SEALCHAIN_DATA_DIR", _CODE_ROOT / "data"))
    LOGS_DIR = DATA_DIR / "logs"

    @staticmethod
    def ensure_directories_exist():
        """Crea toda la estructura de carpetas si no existe."""
        os.makedirs(Paths.LOGS_DIR, exist_ok=True)

        return {
            "root": str(Paths.DATA_DIR),
            "logs": str(Paths.LOGS_DIR)
        }
