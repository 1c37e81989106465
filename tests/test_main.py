import sys
import unittest
from contextlib import redirect_stdout
from io import StringIO
from unittest import mock

import main


class TestMain(unittest.TestCase):
    def test_given_seed_when_playing_games_then_all_won(self):
        attempts, times, wins = main.play_games(3, 10, "minimax", seed=11)
        self.assertEqual(wins, 3)
        self.assertEqual(len(attempts), 3)
        self.assertEqual(len(times), 3)
        self.assertTrue(all(1 <= a <= 10 for a in attempts))

    def test_given_cli_args_when_running_main_then_summary_printed(self):
        out = StringIO()
        argv = ["main.py", "--games", "2", "--strategy", "minimax", "--seed", "5"]
        with mock.patch.object(sys, "argv", argv), redirect_stdout(out):
            main.main()
        self.assertIn("Games won: 2 of 2.", out.getvalue())
        self.assertIn("Average attempts over 2 games", out.getvalue())

    def test_given_zero_games_when_running_main_then_usage_error(self):
        with mock.patch.object(sys, "argv", ["main.py", "--games", "0"]):
            with redirect_stdout(StringIO()), self.assertRaises(SystemExit):
                main.main()


if __name__ == "__main__":
    unittest.main()
