import unittest
import sys
import os
import io
import tempfile
from contextlib import redirect_stdout
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ghostgame import cli
from ghostgame.constants import (
    EXIT_ABANDONED,
    EXIT_BAD_CONFIG,
    EXIT_DICTIONARY_LOAD,
    EXIT_DICTIONARY_UNLOAD,
    EXIT_OK,
    EXIT_USAGE,
)
from ghostgame.errors import TeardownError
from ghostgame.game import GhostGame
from ghostgame.trie import Trie


class TestReadLetter(unittest.TestCase):
    def test_skips_non_letters_and_keeps_first_character(self):
        lines = iter(["", "  ", "7", "?x", "  Hello there"])
        prompts = []

        def read(prompt):
            prompts.append(prompt)
            return next(lines)

        self.assertEqual(cli.read_letter(2, read), "h")
        self.assertEqual(len(prompts), 5)
        self.assertEqual(prompts[0], "Player 2 says letter: ")


class TestRunGame(unittest.TestCase):
    def test_plays_to_the_end(self):
        game = GhostGame(Trie.from_words(["dog", "dogs"]), 2)
        letters = iter(["d", "o", "z", "g", "s"])
        out = []
        loser = cli.run_game(game, lambda prompt: next(letters), out.append)

        self.assertEqual(loser, 2)
        self.assertIn("\nCurrent word fragment: do", out)
        self.assertIn('There\'s no word that begins with "doz".', out)
        self.assertIn("Try again.", out)
        self.assertIn("\nPlayer 2 loses!", out)
        self.assertIn('They spelled the word "dogs".', out)


class TestMain(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dict_path = os.path.join(self.tmp.name, "words.txt")
        with open(self.dict_path, 'w', encoding='utf-8') as f:
            f.write("cat\ncats\ncar\n")

    def run_main(self, argv, inputs=()):
        out = io.StringIO()
        with mock.patch("builtins.input", side_effect=list(inputs)), redirect_stdout(out):
            code = cli.main(argv)
        return code, out.getvalue()

    def test_wrong_argument_count(self):
        self.assertEqual(self.run_main([])[0], EXIT_USAGE)
        self.assertEqual(self.run_main(["2", "3"])[0], EXIT_USAGE)
        self.assertEqual(self.run_main(["2", "--bogus"])[0], EXIT_USAGE)

    def test_invalid_player_count(self):
        self.assertEqual(self.run_main(["two"])[0], EXIT_BAD_CONFIG)
        self.assertEqual(self.run_main(["1"])[0], EXIT_BAD_CONFIG)
        self.assertEqual(self.run_main(["-3"])[0], EXIT_BAD_CONFIG)

    def test_invalid_length_options(self):
        code, _ = self.run_main(["2", "--min-length", "-1", "--dict", self.dict_path])
        self.assertEqual(code, EXIT_BAD_CONFIG)
        code, _ = self.run_main(["2", "--max-length", "0", "--dict", self.dict_path])
        self.assertEqual(code, EXIT_BAD_CONFIG)

    def test_missing_dictionary(self):
        missing = os.path.join(self.tmp.name, "missing.txt")
        code, _ = self.run_main(["2", "--dict", missing, "--no-clear"])
        self.assertEqual(code, EXIT_DICTIONARY_LOAD)

    def test_full_game(self):
        inputs = ["c", "a", "  t extra", "1", "s"]
        code, out = self.run_main(["2", "--dict", self.dict_path, "--no-clear"], inputs)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Current word fragment: cat", out)
        self.assertIn("Player 2 loses!", out)
        self.assertIn('They spelled the word "cats".', out)
        self.assertNotIn("_______", out)

    def test_banner_shown_by_default(self):
        code, out = self.run_main(["3", "--dict", self.dict_path], ["c", "a", "t", "s"])
        self.assertEqual(code, EXIT_OK)
        self.assertIn("\033[2J", out)
        self.assertIn("(_______)", out)
        self.assertIn("Player 1 loses!", out)

    def test_input_closed(self):
        code, out = self.run_main(["2", "--dict", self.dict_path, "--no-clear"], ["c", EOFError()])
        self.assertEqual(code, EXIT_ABANDONED)
        self.assertNotIn("loses!", out)

    def test_index_torn_down_after_game(self):
        built = []
        real_load = cli.load_dictionary

        def load(path, max_length):
            trie = real_load(path, max_length)
            built.append(trie)
            return trie

        with mock.patch.object(cli, "load_dictionary", side_effect=load):
            code, _ = self.run_main(["2", "--dict", self.dict_path, "--no-clear"], "cats")
        self.assertEqual(code, EXIT_OK)
        self.assertTrue(built[0].closed)

    def test_teardown_failure(self):
        with mock.patch.object(Trie, "teardown", side_effect=TeardownError("boom")):
            code, _ = self.run_main(["2", "--dict", self.dict_path, "--no-clear"], "cats")
        self.assertEqual(code, EXIT_DICTIONARY_UNLOAD)


if __name__ == '__main__':
    unittest.main()
