# sealchain/tests/unit/test_block_hasher.py
'''
Test Suite para BlockHasher:
    Verifica la serialización canónica y el sellado determinista.
'''

import sys
import os
import hashlib

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from sealchain.core.models.block import Block
from sealchain.core.services.block_hasher import BlockHasher
from sealchain.core.config.config_manager import ConfigManager
from sealchain.core.exceptions import DigestError

EXPECTED_CANONICAL = (
    '{"hash":null,"height":1,"body":"7b22616d6f756e74223a31307d",'
    '"time":1000,"previousBlockHash":"abc"}'
)

@pytest.fixture(autouse=True)
def fresh_config():
    setattr(ConfigManager, "_instance", None)
    yield
    setattr(ConfigManager, "_instance", None)

def make_block() -> Block:
    block = Block({"amount": 10})
    block.height = 1
    block.time = 1000
    block.previous_block_hash = "abc"
    return block

def test_canonical_serialization_order():
    block = make_block()
    assert BlockHasher.serialize(block) == EXPECTED_CANONICAL

def test_calculate_ignores_current_hash():
    block = make_block()
    expected = hashlib.sha256(EXPECTED_CANONICAL.encode('utf-8')).hexdigest()

    assert BlockHasher.calculate(block) == expected

    block.hash = "deadbeef"
    assert BlockHasher.calculate(block) == expected

def test_seal_assigns_hash_and_verifies():
    block = make_block()
    block_hash = BlockHasher.seal(block)

    assert block.hash == block_hash
    assert len(block_hash) == 64
    assert BlockHasher.verify(block) is True

def test_double_sha256_from_config():
    ConfigManager().load_from_json_dict({"block": {"hash_algorithm": "double_sha256"}})
    block = make_block()

    first = hashlib.sha256(EXPECTED_CANONICAL.encode('utf-8')).digest()
    assert BlockHasher.calculate(block) == hashlib.sha256(first).hexdigest()

def test_verify_rejects_block_sealed_with_other_algorithm():
    block = make_block()
    BlockHasher.seal(block, algorithm="double_sha256")

    assert BlockHasher.verify(block, algorithm="sha256") is False
    assert BlockHasher.verify(block, algorithm="double_sha256") is True

def test_unknown_algorithm_raises_digest_error_and_restores_hash():
    block = make_block()
    BlockHasher.seal(block)
    sealed_hash = block.hash

    with pytest.raises(DigestError):
        BlockHasher.verify(block, algorithm="md5")

    assert block.hash == sealed_hash
