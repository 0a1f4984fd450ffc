# sealchain/core/exceptions.py
'''
Jerarquía de errores del bloque.

    BlockError: Base común para que el dueño del bloque capture todo con un solo except.
    SerializationError: El payload o el set de campos no se puede pasar a texto canónico.
    DecodeError: El 'body' almacenado no se puede decodificar ni parsear.
    DigestError: La primitiva de hash falló (fatal, sin reintentos).
'''


class BlockError(Exception):
    """Error base de sealchain."""


class SerializationError(BlockError):
    pass


class DecodeError(BlockError):
    pass


class DigestError(BlockError):
    pass
