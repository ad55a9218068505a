import random
import threading
import unittest
from unittest import mock

import skipjack
from skipjack import KeyLengthError, SkipjackCipher, decrypt_block, encrypt_block, known_answer_test
from skipjack.cipher_core import block_cipher
from skipjack.cipher_core.stepping_rules import rule_a, rule_a_inv, rule_b, rule_b_inv

PLAINTEXT = 0x33221100ddccbbaa
CIPHERTEXT = 0x2587cae27a12d300
KEY = [0x00, 0x99, 0x88, 0x77, 0x66, 0x55, 0x44, 0x33, 0x22, 0x11]


class TestKnownAnswer(unittest.TestCase):

    def test_encrypt(self):
        self.assertEqual(encrypt_block(PLAINTEXT, KEY), CIPHERTEXT)

    def test_decrypt(self):
        self.assertEqual(decrypt_block(CIPHERTEXT, KEY), PLAINTEXT)

    def test_key_as_bytes(self):
        self.assertEqual(encrypt_block(PLAINTEXT, bytes(KEY)), CIPHERTEXT)

    def test_self_test(self):
        with self.assertLogs('skipjack.cipher_core.block_cipher', level='INFO'):
            self.assertTrue(known_answer_test())


class TestSchedules(unittest.TestCase):

    def test_encryption_pattern(self):
        schedule = block_cipher.ENCRYPTION_SCHEDULE
        self.assertEqual(len(schedule), 32)
        self.assertEqual(schedule, (rule_a,) * 8 + (rule_b,) * 8 + (rule_a,) * 8 + (rule_b,) * 8)

    def test_decryption_pattern(self):
        schedule = block_cipher.DECRYPTION_SCHEDULE
        self.assertEqual(schedule,
                         (rule_b_inv,) * 8 + (rule_a_inv,) * 8 + (rule_b_inv,) * 8 + (rule_a_inv,) * 8)

    def test_round_trace_logged_at_debug(self):
        with self.assertLogs('skipjack.cipher_core.block_cipher', level='DEBUG') as logs:
            encrypt_block(PLAINTEXT, KEY)
        self.assertEqual(len(logs.output), 32)
        self.assertIn('rule_a', logs.output[0])
        self.assertIn('2587 cae2 7a12 d300', logs.output[-1])


class TestRoundTrip(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(0xC11)

    def test_random_blocks_and_keys(self):
        for _ in range(200):
            key = bytes(self.rng.randrange(256) for _ in range(10))
            block = self.rng.randrange(1 << 64)
            with self.subTest(key=key.hex(), block=hex(block)):
                self.assertEqual(decrypt_block(encrypt_block(block, key), key), block)

    def test_boundary_blocks(self):
        cipher = SkipjackCipher(KEY)
        for block in (0, 1, (1 << 64) - 1, 1 << 63):
            with self.subTest(block=hex(block)):
                ciphertext = cipher.encrypt_block(block)
                self.assertTrue(0 <= ciphertext < (1 << 64))
                self.assertEqual(cipher.decrypt_block(ciphertext), block)

    def test_key_sensitivity(self):
        other = list(KEY)
        other[9] ^= 0x01
        self.assertNotEqual(encrypt_block(PLAINTEXT, other), CIPHERTEXT)

    def test_concurrent_calls(self):
        cipher = SkipjackCipher(KEY)
        results = []

        def worker():
            results.append(cipher.encrypt_block(PLAINTEXT))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(results, [CIPHERTEXT] * 8)


class TestInputValidation(unittest.TestCase):

    def test_key_length_rejected_before_any_round(self):
        with mock.patch.object(block_cipher, '_run_schedule') as run:
            for length in (0, 9, 11, 32):
                with self.subTest(length=length):
                    with self.assertRaises(KeyLengthError):
                        encrypt_block(PLAINTEXT, bytes(length))
                    with self.assertRaises(KeyLengthError):
                        decrypt_block(CIPHERTEXT, bytes(length))
            run.assert_not_called()

    def test_block_out_of_range(self):
        cipher = SkipjackCipher(KEY)
        for block in (-1, 1 << 64):
            with self.subTest(block=block):
                with self.assertRaises(ValueError):
                    cipher.encrypt_block(block)
                with self.assertRaises(ValueError):
                    cipher.decrypt_block(block)

    def test_block_wrong_type(self):
        cipher = SkipjackCipher(KEY)
        for block in (b'\x00' * 8, 1.0, True):
            with self.subTest(block=block):
                with self.assertRaises(TypeError):
                    cipher.encrypt_block(block)


class TestSkipjackCipher(unittest.TestCase):

    def test_parameters(self):
        cipher = SkipjackCipher(KEY)
        self.assertEqual((cipher.block_size, cipher.key_size, cipher.num_rounds), (64, 10, 32))
        self.assertEqual(skipjack.SKIPJACK_PARAMS['num_rounds'], 32)

    def test_key_is_copied(self):
        source = bytearray(KEY)
        cipher = SkipjackCipher(source)
        source[:] = bytes(10)
        self.assertEqual(cipher.encrypt_block(PLAINTEXT), CIPHERTEXT)

    def test_repr_hides_key(self):
        self.assertNotIn('99', repr(SkipjackCipher(KEY)))


if __name__ == '__main__':
    unittest.main()
