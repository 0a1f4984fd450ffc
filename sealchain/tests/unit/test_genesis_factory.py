# sealchain/tests/unit/test_genesis_factory.py
'''
Test Suite para GenesisBlockFactory:
    Verifica que el Bloque Génesis se construya fielmente a la configuración.

    Functions::
        test_genesis_block_structure(): Verifica altura, hash previo y timestamp.
        test_genesis_integrity(): El génesis sale sellado y valida.
        test_genesis_payload_hidden(): El payload del génesis no se entrega por get_bdata().
'''

import sys
import os
import asyncio
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sealchain.core.factories.genesis_block_factory import GenesisBlockFactory
from sealchain.core.services.payload_codec import PayloadCodec
from sealchain.core.config.config_manager import ConfigManager

class TestGenesisFactory(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        setattr(ConfigManager, "_instance", None)
        self.gen_config = ConfigManager().genesis
        self.genesis_block = GenesisBlockFactory.create_genesis_block()

    def test_genesis_block_structure(self):
        print("\n>> Ejecutando: test_genesis_block_structure...")
        self.assertEqual(self.genesis_block.height, 0, "La altura debe ser 0")
        self.assertIsNone(self.genesis_block.previous_block_hash, "El génesis no tiene predecesor")
        self.assertEqual(self.genesis_block.time, self.gen_config.timestamp)
        self.assertEqual(
            PayloadCodec.decode_payload(self.genesis_block.body),
            {"message": self.gen_config.message}
        )

    async def test_genesis_integrity(self):
        self.assertIsNotNone(self.genesis_block.hash)
        self.assertTrue(await self.genesis_block.validate())

        again = GenesisBlockFactory.create_genesis_block()
        self.assertEqual(again.hash, self.genesis_block.hash)

    async def test_genesis_payload_hidden(self):
        with self.assertRaises(asyncio.TimeoutError):
            await asyncio.wait_for(self.genesis_block.get_bdata(), timeout=0.05)

    def test_genesis_follows_config_overrides(self):
        ConfigManager().load_from_json_dict({"genesis": {"message": "otra red", "timestamp": 1}})
        block = GenesisBlockFactory.create_genesis_block()

        self.assertEqual(block.time, 1)
        self.assertNotEqual(block.hash, self.genesis_block.hash)

if __name__ == "__main__":
    unittest.main()
