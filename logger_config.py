# logger_config.py
import logging
import os
import re
import sys
from typing import Optional

from sealchain.core.config.paths import Paths

LOG_PREFIX = "sealchain"
FILE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'
CONSOLE_FORMAT = '\n❌ ERROR EN: %(name)s | Línea: %(lineno)d\nDetalle: %(message)s\n'

def next_log_path(log_dir: str, prefix: str = LOG_PREFIX) -> str:
    """Siguiente archivo de sesión libre: <prefix>_0.log, <prefix>_1.log..."""
    pattern = re.compile(rf"^{re.escape(prefix)}_(\d+)\.log$")
    indices = [
        int(match.group(1))
        for match in (pattern.match(name) for name in os.listdir(log_dir))
        if match
    ]
    return os.path.join(log_dir, f"{prefix}_{max(indices, default=-1) + 1}.log")

def setup_logging(
    log_dir: Optional[str] = None,
    file_level: int = logging.INFO,
    console_level: int = logging.ERROR
) -> str:
    """
    Archivo de sesión con todo el detalle y consola solo para errores.
    Devuelve la ruta del archivo creado.
    """
    if log_dir is None:
        log_dir = Paths.ensure_directories_exist()["logs"]
    os.makedirs(log_dir, exist_ok=True)
    log_path = next_log_path(log_dir)

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    # Reemplaza los handlers previos: llamar dos veces no duplica salida
    root_logger = logging.getLogger()
    root_logger.setLevel(min(file_level, console_level))
    root_logger.handlers = [file_handler, console_handler]

    print(f"📝 Log de sesión guardado en: {log_path}")
    return log_path
