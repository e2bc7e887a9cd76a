import unittest
import sys
import os
import io
import tempfile
from contextlib import redirect_stdout

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import bootstrap
from ghostgame.dictionary import load_dictionary


class TestBootstrap(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = os.path.join(self.tmp.name, "words.txt")

    def test_write_word_list(self):
        count = bootstrap.write_word_list(["Zebra\n", "cat\n", "cat\n", "it's\n", "\n"], self.path)
        self.assertEqual(count, 2)
        with open(self.path, encoding='utf-8') as f:
            self.assertEqual(f.read(), "cat\nzebra\n")
        self.assertTrue(load_dictionary(self.path).is_word("zebra"))

    def test_existing_dictionary_left_alone(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write("dog\n")
        with redirect_stdout(io.StringIO()):
            self.assertTrue(bootstrap.download_dictionary(self.path))
        with open(self.path, encoding='utf-8') as f:
            self.assertEqual(f.read(), "dog\n")


if __name__ == '__main__':
    unittest.main()
