import sys
import os
import json
import asyncio
import logging

# Configurar path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

# Imports del proyecto
from sealchain.core.models.block import Block
from sealchain.core.builders.block_builder import BlockBuilder
from sealchain.core.services.block_hasher import BlockHasher

# Configurar logs
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("DEBUGGER")

def print_diff(name, val1, val2):
    match = val1 == val2
    icon = "✅" if match else "❌"
    print(f"{icon} {name}:")
    print(f"   ORIG: {val1}")
    print(f"   DEST: {val2}")

async def main():
    print("🔬 INICIANDO DIAGNÓSTICO DE INTEGRIDAD DE BLOQUE\n")

    # 1. Construir y sellar (rol del dueño de la cadena)
    print("1. Construyendo bloque sellado...")
    block_orig = BlockBuilder.build({"amount": 10}, height=1, previous_block_hash="abc", timestamp=1000)
    print(f"   Hash Original: {block_orig.hash}")

    # 2. Simular Serialización a JSON (almacenamiento)
    print("\n2. Serializando a JSON...")
    block_json_str = json.dumps(block_orig.to_dict(), indent=2)
    print(f"   JSON Payload:\n{block_json_str}")

    # 3. Reconstrucción
    print("\n3. Reconstruyendo bloque...")
    block_reconst = Block.from_dict(json.loads(block_json_str))

    # 4. Comparar Campos
    print("\n4. 🔍 COMPARANDO CAMPOS:")
    print_diff("Height", block_orig.height, block_reconst.height)
    print_diff("Time", block_orig.time, block_reconst.time)
    print_diff("Body", block_orig.body, block_reconst.body)
    print_diff("Previous Hash", block_orig.previous_block_hash, block_reconst.previous_block_hash)

    hash_reconst = BlockHasher.calculate(block_reconst)
    print(f"\n   Hash Recalculado: {hash_reconst}")

    if await block_reconst.validate():
        print("\n🎉 ¡ÉXITO! El bloque reconstruido valida. Payload:", await block_reconst.get_bdata())
    else:
        print("\n💀 FALLO: El bloque reconstruido no valida.")

    # 5. Sabotaje: cambiar el tiempo sin volver a sellar
    print("\n5. Alterando 'time' sin resellar...")
    block_reconst.time += 1
    print(f"   validate() -> {await block_reconst.validate()}")

if __name__ == "__main__":
    asyncio.run(main())
