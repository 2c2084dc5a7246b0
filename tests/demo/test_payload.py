import io
import unittest
from contextlib import redirect_stdout

import pydantic_core

from singletons.payload import Announcer, write_line


class TestAnnouncer(unittest.TestCase):
    def test_creation_line(self):
        lines = []
        Announcer(name="BasicSingleton", writer=lines.append)
        self.assertEqual(lines, ["BasicSingleton instance created"])

    def test_log_line(self):
        lines = []
        announcer = Announcer(name="LazySingleton", writer=lines.append)
        announcer.log("Hello from LazySingleton")
        self.assertEqual(
            lines[1:], ["[LazySingleton] Hello from LazySingleton"]
        )

    def test_blank_name(self):
        with self.assertRaises(pydantic_core.ValidationError):
            Announcer(name=" ", writer=print)

    def test_default_writer(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            Announcer(name="Console").log("message")
        self.assertEqual(
            buffer.getvalue(), "Console instance created\n[Console] message\n"
        )

    def test_write_line(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            write_line("one line")
        self.assertEqual(buffer.getvalue(), "one line\n")
