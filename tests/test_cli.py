import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from slide2048_core.cli import main


class TestCli(unittest.TestCase):
    def test_given_scripted_moves_when_running_then_boards_printed_and_exit_zero(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main(['--size', '3', '--seed', '1', '--moves', 'wasd'])
        self.assertEqual(code, 0)
        out = buf.getvalue()
        self.assertIn('Initial board:', out)
        self.assertIn('Score:', out)
        self.assertIn('up:', out)

    def test_given_bad_then_quit_input_when_interactive_then_reprompts_and_exits(self):
        buf = io.StringIO()
        with patch('builtins.input', side_effect=['diagonal', 'q']), redirect_stdout(buf):
            code = main(['--seed', '2'])
        self.assertEqual(code, 0)
        self.assertIn('Could not parse', buf.getvalue())

    def test_given_end_of_input_when_interactive_then_exit_zero(self):
        with patch('builtins.input', side_effect=EOFError), redirect_stdout(io.StringIO()):
            self.assertEqual(main(['--seed', '2']), 0)

    def test_given_spaced_scripted_moves_when_running_then_whitespace_skipped(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main(['--size', '3', '--seed', '1', '--moves', 'w d'])
        self.assertEqual(code, 0)
        self.assertIn('up:', buf.getvalue())
        self.assertIn('right:', buf.getvalue())

    def test_given_bad_scripted_key_when_running_then_usage_error_before_play(self):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main(['--seed', '2', '--moves', 'wx'])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn('unknown direction', err.getvalue())
        self.assertNotIn('Initial board:', out.getvalue())

    def test_given_oversized_board_when_running_then_usage_error(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(['--size', '100'])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
