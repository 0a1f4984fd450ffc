# sealchain/core/utils/crypto_utility.py

import hashlib
import logging
from typing import Union

from sealchain.core.exceptions import DigestError

logger = logging.getLogger(__name__)

class CryptoUtility:

    SHA256 = "sha256"
    DOUBLE_SHA256 = "double_sha256"

    @staticmethod
    def sha256(data: Union[str, bytes]) -> str:
        """Retorna el hash SHA-256 hexadecimal."""
        try:
            data_bytes = CryptoUtility._to_bytes(data)
            return hashlib.sha256(data_bytes).hexdigest()
        except DigestError:
            raise
        except Exception as e:
            logger.exception("Error en cálculo SHA256")
            raise DigestError(f"Fallo SHA-256: {e}") from e

    @staticmethod
    def double_sha256(data: Union[str, bytes]) -> str:
        """Aplica Doble SHA-256 (estándar PoW)."""
        try:
            data_bytes = CryptoUtility._to_bytes(data)
            first_hash = hashlib.sha256(data_bytes).digest()
            return hashlib.sha256(first_hash).hexdigest()
        except DigestError:
            raise
        except Exception as e:
            logger.exception("Error en cálculo Double SHA256")
            raise DigestError(f"Fallo Double SHA-256: {e}") from e

    @staticmethod
    def digest(data: Union[str, bytes], algorithm: str = SHA256) -> str:
        """Despacha al algoritmo configurado. Siempre devuelve 64 caracteres hex."""
        if algorithm == CryptoUtility.SHA256:
            return CryptoUtility.sha256(data)
        if algorithm == CryptoUtility.DOUBLE_SHA256:
            return CryptoUtility.double_sha256(data)

        logger.error(f"Algoritmo de hash desconocido: {algorithm}")
        raise DigestError(f"Algoritmo de hash no soportado: {algorithm}")

    @staticmethod
    def _to_bytes(data: Union[str, bytes]) -> bytes:
        """Normaliza entrada a bytes de forma segura."""
        if isinstance(data, str):
            return data.encode('utf-8')
        if isinstance(data, bytes):
            return data
        raise DigestError(f"Tipo no soportado para hashing: {type(data)}")
