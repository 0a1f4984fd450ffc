# sealchain/core/models/block.py

import asyncio
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from sealchain.core.services.payload_codec import PayloadCodec
from sealchain.core.services.block_hasher import BlockHasher
from sealchain.core.schemas.block_record import BlockRecord
from sealchain.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

class Block:
    """
    Unidad atómica del ledger.

    El payload se guarda como hex del JSON canónico para que su representación
    en bytes sea estable al hashear. height, time, previous_block_hash y hash
    los asigna el dueño de la cadena después de construir el bloque.
    """

    def __init__(self, data: Any) -> None:
        self.hash: Optional[str] = None                  # Huella del bloque
        self.height: int = 0                             # Altura (número consecutivo)
        self.body: str = PayloadCodec.encode_payload(data)
        self.time: int = 0                               # Timestamp de creación
        self.previous_block_hash: Optional[str] = None   # Referencia al bloque previo

    async def validate(self) -> bool:
        """
        True si el estado actual de los campos coincide con el hash almacenado.
        Un bloque sin sellar devuelve False. Los errores de cálculo se propagan
        (SerializationError / DigestError), nunca se reportan como False.
        """
        return BlockHasher.verify(self)

    async def get_bdata(self) -> Any:
        """
        Devuelve el payload decodificado.

        Con height == 0 la corrutina no se resuelve nunca: el génesis no entrega
        payload por este accesor. El llamador debe acotarla con su propio timeout.
        """
        data = PayloadCodec.decode_payload(self.body)

        if self.height > 0:
            return data

        # TODO: sustituir la espera indefinida por un resultado explícito "sin payload" para el génesis.
        logger.debug(f"get_bdata() sobre altura {self.height}: sin payload para el llamador.")
        await asyncio.get_running_loop().create_future()

    def to_dict(self) -> Dict[str, Any]:
        """Estructura canónica para el Repositorio (incluye el hash)."""
        return BlockHasher.canonical_fields(self, include_hash=True)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Block':
        """Reconstruye un Block desde el diccionario de la DB sin recodificar el body."""
        try:
            record = BlockRecord.model_validate(data)
        except ValidationError as e:
            logger.error(f"Registro de bloque inválido: {e.error_count()} error(es)")
            raise DecodeError(f"Registro de bloque inválido: {e}") from e

        block = Block.__new__(Block)
        block.hash = record.hash
        block.height = record.height
        block.body = record.body
        block.time = record.time
        block.previous_block_hash = record.previous_block_hash
        return block

    def __repr__(self) -> str:
        return f"Block(height={self.height}, hash={self.hash!r})"
