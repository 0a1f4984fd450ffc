# sealchain/core/interfaces/hasher_protocols.py

from typing import Optional, Protocol

class SealableBlockProtocol(Protocol):
    """
    Define el 'molde' de un bloque sellable.
    Permite que el BlockHasher trabaje sin depender de la clase Block completa.
    """
    hash: Optional[str]
    height: int
    body: str
    time: int
    previous_block_hash: Optional[str]
