"""
Tests for the run_server.py launcher.
"""

import io
import unittest
from unittest.mock import patch

import run_server


class TestRunServer(unittest.TestCase):

    @patch.object(run_server.app, 'run')
    def test_defaults(self, run):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            run_server.main([])

        run.assert_called_once_with(host='127.0.0.1', port=5000, debug=False, threaded=True)
        self.assertIn("http://127.0.0.1:5000", stdout.getvalue())

    @patch.object(run_server.app, 'run')
    def test_options(self, run):
        with patch('sys.stdout', new_callable=io.StringIO):
            run_server.main(["--host", "0.0.0.0", "--port", "8080", "--debug"])

        run.assert_called_once_with(host='0.0.0.0', port=8080, debug=True, threaded=True)

    def test_rejects_bad_port(self):
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                run_server.main(["--port", "not-a-number"])


if __name__ == '__main__':
    unittest.main()
