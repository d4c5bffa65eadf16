import unittest
import sys
import os
import io
import json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from bytediff.myers import diff
from bytediff.packing import packed_diff
from formatters import create_formatter, get_available_formatters, format_diff
from formatters.base import (
    FormatterConfig, FormatterFactory, ColorScheme, OutputWriter, OutputTarget, SimpleFormatter
)
from formatters.packed import PackedFormatter
from formatters.structured import JSONFormatter


NO_COLOR = FormatterConfig(use_color=False)


class TestFormatterConfig(unittest.TestCase):
    def test_config(self):
        c = FormatterConfig()
        self.assertTrue(c.use_color)
        self.assertTrue(c.show_chars)
        c2 = c.with_color(False)
        self.assertFalse(c2.use_color)
        self.assertTrue(c.use_color)
        self.assertFalse(c.with_chars(False).show_chars)
        self.assertEqual(c.copy().encoding, c.encoding)


class TestColorSchemeAndWriter(unittest.TestCase):
    def test_colors_writer(self):
        s = ColorScheme()
        self.assertEqual(s.reset, '\033[0m')
        s.disable_colors()
        self.assertEqual(s.reset, '')
        self.assertEqual(ColorScheme.no_color().red, '')
        w = OutputWriter()
        self.assertEqual(w.target, OutputTarget.STRING)
        self.assertEqual(set(OutputTarget), {OutputTarget.FILE, OutputTarget.STRING})
        w.write("a")
        w.writeln("b")
        self.assertEqual(w.get_output(), "ab\n")

    def test_file_writer(self):
        buf = io.StringIO()
        w = OutputWriter(OutputTarget.FILE, buf)
        w.writeln("x")
        w.flush()
        self.assertEqual(buf.getvalue(), "x\n")


class TestFactory(unittest.TestCase):
    def test_registered(self):
        self.assertEqual(set(get_available_formatters()), {"simple", "packed", "json"})
        self.assertIsInstance(create_formatter("simple"), SimpleFormatter)
        self.assertIsInstance(create_formatter("packed"), PackedFormatter)
        self.assertIsInstance(create_formatter("json"), JSONFormatter)
        with self.assertRaises(ValueError):
            FormatterFactory.create("unified")


class TestSimpleFormatter(unittest.TestCase):
    def test_lines(self):
        out = SimpleFormatter(NO_COLOR).format(diff(b"abc", b"abd"), "a", "b")
        self.assertEqual(out, "-2\n+2 'd'\n")

    def test_without_chars(self):
        out = SimpleFormatter(NO_COLOR.with_chars(False)).format(diff(b"", b"x"), "a", "b")
        self.assertEqual(out, "+0\n")

    def test_empty(self):
        self.assertEqual(format_diff(diff(b"a", b"a"), "a", "b", config=NO_COLOR), "")

    def test_colored(self):
        out = SimpleFormatter(FormatterConfig(use_color=True)).format(diff(b"a", b""), "a", "b")
        self.assertIn('\033[31m', out)

    def test_writes_to_stream(self):
        buf = io.StringIO()
        result = SimpleFormatter(NO_COLOR).format(diff(b"a", b""), "a", "b", output=buf)
        self.assertEqual(result, "")
        self.assertEqual(buf.getvalue(), "-0\n")


class TestPackedFormatter(unittest.TestCase):
    def test_runs(self):
        out = PackedFormatter(NO_COLOR).format(packed_diff(b"abc", b"fff"), "old", "new")
        self.assertEqual(out.splitlines(), ["--- old", "+++ new", "-0,3", "+0,3 'fff'"])

    def test_no_changes(self):
        self.assertEqual(PackedFormatter(NO_COLOR).format(packed_diff(b"x", b"x"), "a", "b"), "")


class TestJSONFormatter(unittest.TestCase):
    def test_plain_script(self):
        data = json.loads(JSONFormatter(NO_COLOR).format(diff(b"abc", b"abd"), "a", "b"))
        self.assertFalse(data["packed"])
        self.assertEqual(data["operations"], [
            {"type": "delete", "pos": 2},
            {"type": "insert", "pos": 2, "char": ord("d")},
        ])
        self.assertEqual(data["stats"], {"insertions": 1, "deletions": 1, "distance": 2})

    def test_packed_script(self):
        data = json.loads(format_diff(packed_diff(b"abc", b"fff"), "a", "b", "json"))
        self.assertTrue(data["packed"])
        self.assertEqual(data["operations"][1], {"type": "insert", "start": 0, "length": 3,
                                                 "chars": [102, 102, 102]})
        self.assertEqual(data["stats"]["distance"], 6)

    def test_empty_packed_script_is_packed(self):
        data = json.loads(JSONFormatter(NO_COLOR).format(packed_diff(b"same", b"same"), "a", "b"))
        self.assertTrue(data["packed"])
        self.assertEqual(data["operations"], [])
        plain = json.loads(JSONFormatter(NO_COLOR).format(diff(b"same", b"same"), "a", "b"))
        self.assertFalse(plain["packed"])

    def test_plain_list_of_runs_is_packed(self):
        runs = packed_diff(b"ab", b"").operations
        data = json.loads(JSONFormatter(NO_COLOR).format(runs, "a", "b"))
        self.assertTrue(data["packed"])


if __name__ == '__main__':
    unittest.main()
