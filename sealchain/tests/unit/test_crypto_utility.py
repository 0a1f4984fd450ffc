# sealchain/tests/unit/test_crypto_utility.py
'''
Test Suite para CryptoUtility:
    Vectores conocidos de SHA-256 y despacho por nombre de algoritmo.
'''

import sys
import os
import hashlib
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sealchain.core.utils.crypto_utility import CryptoUtility
from sealchain.core.exceptions import DigestError

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

class TestCryptoUtility(unittest.TestCase):

    def test_sha256_known_vector(self):
        self.assertEqual(CryptoUtility.sha256("abc"), ABC_SHA256)
        self.assertEqual(CryptoUtility.sha256(b"abc"), ABC_SHA256)

    def test_double_sha256(self):
        expected = hashlib.sha256(hashlib.sha256(b"abc").digest()).hexdigest()
        self.assertEqual(CryptoUtility.double_sha256("abc"), expected)

    def test_digest_dispatch(self):
        self.assertEqual(CryptoUtility.digest("abc"), ABC_SHA256)
        self.assertEqual(CryptoUtility.digest("abc", "double_sha256"), CryptoUtility.double_sha256("abc"))

    def test_unknown_algorithm(self):
        with self.assertRaises(DigestError):
            CryptoUtility.digest("abc", "md5")

    def test_unsupported_input_type(self):
        with self.assertRaises(DigestError):
            CryptoUtility.sha256(12345)  # type: ignore

if __name__ == "__main__":
    unittest.main()
