# sealchain/core/services/payload_codec.py

import re
import json
import logging
import binascii
from typing import Any

from sealchain.core.exceptions import SerializationError, DecodeError

logger = logging.getLogger(__name__)

# Surrogates sueltos: UTF-8 no los admite, se escapan como \udXXX
_SURROGATES = re.compile('[\ud800-\udfff]')

def _reject_constant(name: str) -> Any:
    raise ValueError(f"Constante no permitida en JSON canónico: {name}")

class PayloadCodec:
    """
    Serialización canónica + codificación hexadecimal del payload.

    El texto canónico usa separadores compactos y respeta el orden de inserción
    de las claves, sin escapar caracteres no ASCII (salvo surrogates sueltos).
    NaN/Infinity no son JSON válido: se rechazan al serializar y al parsear.
    """

    @staticmethod
    def serialize(value: Any) -> str:
        try:
            text = json.dumps(
                value,
                separators=(',', ':'),
                ensure_ascii=False,
                allow_nan=False
            )
        except (TypeError, ValueError, RecursionError) as e:
            # ValueError cubre referencias circulares y NaN
            logger.error(f"Payload no serializable ({type(value).__name__}): {e}")
            raise SerializationError(f"No se puede serializar el valor: {e}") from e

        # Solo pueden aparecer dentro de strings JSON, el escape es seguro
        return _SURROGATES.sub(lambda m: f"\\u{ord(m.group()):04x}", text)

    @staticmethod
    def deserialize(text: str) -> Any:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (TypeError, ValueError) as e:
            logger.error(f"Texto canónico inválido: {e}")
            raise DecodeError(f"El texto no es JSON válido: {e}") from e

    @staticmethod
    def encode(text: str) -> str:
        try:
            return text.encode('utf-8').hex()
        except UnicodeEncodeError as e:
            logger.error(f"Texto no codificable en UTF-8: {e}")
            raise SerializationError(f"No se puede codificar el texto: {e}") from e

    @staticmethod
    def decode(hex_text: str) -> str:
        try:
            return binascii.unhexlify(hex_text).decode('utf-8')
        except (TypeError, ValueError) as e:
            # binascii.Error y UnicodeDecodeError heredan de ValueError
            logger.error(f"Body hexadecimal corrupto: {e}")
            raise DecodeError(f"No se puede decodificar el body: {e}") from e

    @staticmethod
    def encode_payload(value: Any) -> str:
        """Valor JSON -> texto canónico -> hex."""
        return PayloadCodec.encode(PayloadCodec.serialize(value))

    @staticmethod
    def decode_payload(body: str) -> Any:
        """Hex -> texto canónico -> valor JSON."""
        return PayloadCodec.deserialize(PayloadCodec.decode(body))
