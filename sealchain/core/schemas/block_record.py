# sealchain/core/schemas/block_record.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

class ImmutableModel(BaseModel):
    """
    Clase base que fuerza la inmutabilidad (frozen=True).
    Garantiza que el estado del objeto no sea modificado después de crearse.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

class BlockRecord(ImmutableModel):
    """Forma serializada de un bloque tal como la entrega/recibe el almacenamiento."""
    hash: Optional[str] = Field(None, description="Huella hex; None si nunca se selló")
    height: int = Field(0, ge=0)
    body: str = Field(..., pattern=r'^(?:[0-9a-fA-F]{2})*$', description="Payload canónico en hex")
    time: int = Field(0, ge=0)
    previous_block_hash: Optional[str] = Field(None, alias="previousBlockHash")
