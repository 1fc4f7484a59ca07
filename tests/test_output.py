import io
import tempfile
import unittest
from pathlib import Path

from shuf.application.output import open_output, render_line, selected, write_lines
from shuf.domain import LineSequence, RangeSpec, SourceMode


class TrackingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


class RenderTests(unittest.TestCase):
    def test_text_handles_render_as_is(self):
        sequence = LineSequence(mode=SourceMode.FILE, lines=["x"])
        self.assertEqual(render_line(sequence, "x"), "x")

    def test_range_handles_render_offset_from_lo(self):
        sequence = LineSequence(mode=SourceMode.RANGE, lines=[0, 1], range=RangeSpec(lo=10, hi=11))
        self.assertEqual(render_line(sequence, 1), "11")

    def test_selected_is_trailing_slots(self):
        sequence = LineSequence(mode=SourceMode.ARGUMENTS, lines=["a", "b", "c", "d"])
        self.assertEqual(selected(sequence, 2), ["c", "d"])
        self.assertEqual(selected(sequence, 0), [])
        self.assertEqual(selected(sequence, 4), ["a", "b", "c", "d"])


class WriteTests(unittest.TestCase):
    def test_write_lines_terminates_each_line(self):
        stream = io.StringIO()
        self.assertEqual(write_lines(stream, ["a", "b"], eol="\0"), 2)
        self.assertEqual(stream.getvalue(), "a\0b\0")

    def test_stdout_is_not_closed(self):
        stdout = TrackingStream()
        with open_output(None, stdout) as stream:
            stream.write("x")
        self.assertIs(stream, stdout)
        self.assertEqual(stdout.close_calls, 0)

    def test_output_file_is_truncated_and_closed(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out.txt"
            path.write_text("old content that is long\n", encoding="utf-8")
            with open_output(str(path), TrackingStream()) as stream:
                stream.write("new\n")
            self.assertTrue(stream.closed)
            self.assertEqual(path.read_text(encoding="utf-8"), "new\n")
