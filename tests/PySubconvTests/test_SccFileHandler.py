import unittest

from PySubconv.Cue import Cue
from PySubconv.Formats.SccFileHandler import SccFileHandler
from PySubconv.Helpers.Text import WrapLines
from PySubconv.Helpers.Timecode import ParseTimecode
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleError import FormatError
from PySubconv.Helpers.Tests import (
    log_input_expected_error,
    log_input_expected_result,
    log_test_name,
    skip_if_debugger_attached,
)

class TestSccFileHandler(unittest.TestCase):
    """Test cases for the Scenarist SCC file handler."""

    def setUp(self):
        self.handler = SccFileHandler()

        self.sample_scc_content = (
            "Scenarist_SCC V1.0\r\n"
            "\r\n"
            "00:00:01:00\t94ae 94ae 9420 9420 9470 9470 c845 4c4c 4f80 942f 942f\r\n"
            "\r\n"
            "00:00:03:00\t942c 942c\r\n"
            "\r\n"
            "00:00:04:00\t94ae 94ae 9420 9420 94d0 94d0 57c1 ce54 9470 9470 c849 942f 942f\r\n"
            "\r\n"
            "00:00:05:00\t94ae 94ae 9420 9420 9470 9470 c849 942f 942f\r\n"
            "\r\n"
        )

    def _compose(self, cues : list[Cue], handler : SccFileHandler|None = None) -> str:
        handler = handler or self.handler
        return handler.compose(SubtitleData(lines=cues))

    def test_get_file_extensions(self):
        log_test_name("SccFileHandler.get_file_extensions")
        result = self.handler.get_file_extensions()
        log_input_expected_result("", ['.scc'], result)
        self.assertEqual(result, ['.scc'])

    def test_can_parse(self):
        log_test_name("SccFileHandler.can_parse")

        self.assertTrue(self.handler.can_parse(self.sample_scc_content))
        self.assertFalse(self.handler.can_parse("1\n00:00:01,000 --> 00:00:02,000\nHello\n"))
        self.assertFalse(self.handler.can_parse(""))

    def test_parse_string(self):
        log_test_name("SccFileHandler.parse_string")

        data = self.handler.parse_string(self.sample_scc_content)
        cues = data.lines

        expected = [
            (1.0, 3.0, ["HELLO"]),
            (4.0, 5.0, ["WANT", "HI"]),
            (5.0, 6.0, ["HI"]),
        ]

        log_input_expected_result(self.sample_scc_content[:60] + "...", expected, [ str(cue) for cue in cues ])

        self.assertEqual(data.detected_format, '.scc')
        self.assertEqual(len(cues), len(expected))
        for i, (cue, (start, end, lines)) in enumerate(zip(cues, expected)):
            with self.subTest(cue=i + 1):
                self.assertAlmostEqual(cue.start, start)
                self.assertAlmostEqual(cue.end, end)
                self.assertEqual(cue.lines, lines)

    def test_parse_broadcast_sample(self):
        log_test_name("SccFileHandler.parse_string - broadcast sample")

        content = "Scenarist_SCC V1.0\n\n00:01:14:20\t9425 9425 94ad 94ad 9470 9470 d94f d552 20d0 4cc1 4345 2054 4f20 4c45 c152 ce20 c1ce c420 54c1 4ccb\n\n"
        cues = self.handler.parse_string(content).lines

        log_input_expected_result(content, "YOUR PLACE TO LEARN AND TALK", cues[0].lines)

        self.assertEqual(len(cues), 1)
        self.assertAlmostEqual(cues[0].start, 74 + 20 / 29.97)
        self.assertAlmostEqual(cues[0].start, 74.667, places=3)
        self.assertEqual(cues[0].lines, ["YOUR PLACE TO LEARN AND TALK"])

    def test_last_cue_gets_default_duration(self):
        log_test_name("SccFileHandler.parse_string - default duration")

        content = "Scenarist_SCC V1.0\n\n00:00:10:00\t94ae 9420 9470 c849 942f\n\n"
        cues = self.handler.parse_string(content).lines

        log_input_expected_result(content, 11.0, cues[0].end)
        self.assertEqual(len(cues), 1)
        self.assertAlmostEqual(cues[0].end, cues[0].start + 1)

    def test_erase_before_first_cue_is_ignored(self):
        log_test_name("SccFileHandler.parse_string - leading erase")

        content = "Scenarist_SCC V1.0\n\n00:00:00:00\t942c 942c\n\n00:00:02:00\t9470 c849 942f\n\n00:00:04:00\t942c 942c\n\n00:00:05:00\t942c 942c\n\n"
        cues = self.handler.parse_string(content).lines

        log_input_expected_result(content, (2.0, 4.0), (cues[0].start, cues[0].end))
        self.assertEqual(len(cues), 1)
        self.assertAlmostEqual(cues[0].start, 2.0)
        self.assertAlmostEqual(cues[0].end, 4.0)

    def test_parse_empty(self):
        log_test_name("SccFileHandler.parse_string - empty")

        for content in [ "", "Scenarist_SCC V1.0\n\n", "Scenarist_SCC V1.0\r\n\r\nnot a record\r\n" ]:
            with self.subTest(content=content):
                data = self.handler.parse_string(content)
                log_input_expected_result(content, [], data.lines)
                self.assertEqual(data.lines, [])

    def test_unknown_codes_are_replaced(self):
        log_test_name("SccFileHandler.parse_string - unknown codes")

        content = "Scenarist_SCC V1.0\n\n00:00:01:00\t9470 c1ff 942f\n\n"
        with self.assertLogs(level='WARNING'):
            cues = self.handler.parse_string(content).lines

        log_input_expected_result("c1ff", ["A#"], cues[0].lines)
        self.assertEqual(cues[0].lines, ["A#"])

    def test_invalid_timecode(self):
        if skip_if_debugger_attached("SccFileHandler invalid timecode"):
            return

        log_test_name("SccFileHandler.parse_string - invalid timecode")

        content = "Scenarist_SCC V1.0\n\n00:00:01:00\t9470 c849 942f\n\n00:00:01.15\t942c 942c\n\n"
        with self.assertRaises(FormatError) as e:
            self.handler.parse_string(content)

        log_input_expected_error(content, FormatError, e.exception)

    def test_lines_without_timecode_are_ignored(self):
        log_test_name("SccFileHandler.parse_string - lines without timecode")

        content = "Scenarist_SCC V1.0\n\n00:00:01:00\t94ae 9420 9470 c849 942f\n9420 9420 942c\n\n00:00:03:00\t942c 942c\n"
        cues = self.handler.parse_string(content).lines

        expected = [ (1.0, 3.0, ["HI"]) ]
        result = [ (cue.start, cue.end, cue.lines) for cue in cues ]
        log_input_expected_result(content, expected, result)

        self.assertEqual(len(cues), 1)
        self.assertAlmostEqual(cues[0].start, 1.0)
        self.assertAlmostEqual(cues[0].end, 3.0)
        self.assertEqual(cues[0].lines, ["HI"])

    def test_invalid_frame_rate(self):
        if skip_if_debugger_attached("SccFileHandler invalid frame rate"):
            return

        log_test_name("SccFileHandler - invalid frame rate")

        for frame_rate in [ 0, 0.0, -25, '0' ]:
            with self.subTest(frame_rate=frame_rate):
                with self.assertRaises(ValueError) as e:
                    SccFileHandler({'frame_rate': frame_rate})
                log_input_expected_error(frame_rate, ValueError, e.exception)

        self.assertEqual(SccFileHandler({'frame_rate': None}).frame_rate, 29.97)

    def test_special_and_extended_characters(self):
        log_test_name("SccFileHandler.parse_string - special characters")

        content = "Scenarist_SCC V1.0\n\n00:00:01:00\t9470 9137 20c1 c180 923e 942f\n\n"
        cues = self.handler.parse_string(content).lines

        log_input_expected_result(content, ["♪ AA«"], cues[0].lines)
        self.assertEqual(cues[0].lines, ["♪ AA«"])

    def test_italics(self):
        log_test_name("SccFileHandler.parse_string - italics")

        content = "Scenarist_SCC V1.0\n\n00:00:01:00\t94ae 9420 94ce c845 4c4c 4f80 9470 c845 4c4c 4f20 91ae 574f 524c c480 9120 942f\n\n"

        plain = self.handler.parse_string(content).lines
        log_input_expected_result("italic_tags=False", ["HELLO", "HELLO WORLD"], plain[0].lines)
        self.assertEqual(plain[0].lines, ["HELLO", "HELLO WORLD"])

        tagged = SccFileHandler({'italic_tags': True}).parse_string(content).lines
        log_input_expected_result("italic_tags=True", ["<i>HELLO</i>", "HELLO <i>WORLD</i>"], tagged[0].lines)
        self.assertEqual(tagged[0].lines, ["<i>HELLO</i>", "HELLO <i>WORLD</i>"])

    def test_compose_single_cue(self):
        log_test_name("SccFileHandler.compose - single cue")

        result = self._compose([ Cue(start=1.0, end=3.0, lines=["HELLO"]) ])

        expected = (
            "Scenarist_SCC V1.0\r\n\r\n"
            "00:00:01:00\t94ae 94ae 9420 9420 9470 9470 c845 4c4c 4f80 942f 942f\r\n\r\n"
            "00:00:03:00\t942c 942c\r\n\r\n"
        )

        log_input_expected_result("HELLO", expected, result)
        self.assertEqual(result, expected)

    def test_compose_rows_are_bottom_aligned(self):
        log_test_name("SccFileHandler.compose - row positions")

        test_cases = [
            (["HI", "THERE"], "94d0 94d0 c849 9470 9470 54c8 4552 4580"),
            (["A", "B", "C"], "1370 1370 c180 94d0 94d0 c280 9470 9470 4380"),
            (["A", "B", "C", "D"], "13d0 13d0 c180 1370 1370 c280 94d0 94d0 4380 9470 9470 c480"),
        ]

        for lines, expected in test_cases:
            with self.subTest(lines=lines):
                result = self._compose([ Cue(start=0.0, end=1.0, lines=lines) ])
                log_input_expected_result(lines, expected, result)
                self.assertIn(f"\t94ae 94ae 9420 9420 {expected} 942f 942f\r\n", result)

    def test_compose_character_padding(self):
        log_test_name("SccFileHandler.compose - padding")

        test_cases = [
            ("♪ A", "9137 20c1"),
            ("A♪", "c180 9137"),
            ("AB♪", "c1c2 9137"),
            ("«A»", "923e c180 92bf"),
            ("A€", "c123"),
        ]

        for text, expected in test_cases:
            with self.subTest(text=text):
                result = self._compose([ Cue(start=0.0, end=1.0, lines=[text]) ])
                log_input_expected_result(text, expected, result)
                self.assertIn(f"9470 9470 {expected} 942f 942f", result)

    def test_compose_italics(self):
        log_test_name("SccFileHandler.compose - italics")

        handler = SccFileHandler({'italic_tags': True})
        result = self._compose([ Cue(start=0.0, end=1.0, lines=["HELLO <i>WORLD</i>"]) ], handler)

        expected = "9470 9470 c845 4c4c 4f20 91ae 574f 524c c480 9120 942f 942f"
        log_input_expected_result("HELLO <i>WORLD</i>", expected, result)
        self.assertIn(expected, result)

        decoded = handler.parse_string(result).lines
        self.assertEqual(decoded[0].lines, ["HELLO <i>WORLD</i>"])

    def test_compose_wraps_long_lines(self):
        log_test_name("SccFileHandler.compose - wrapping")

        text = "THIS LINE IS MUCH TOO LONG TO FIT ON ONE ROW"
        result = self._compose([ Cue(start=0.0, end=2.0, lines=[text]) ])
        decoded = self.handler.parse_string(result).lines

        expected = ["THIS LINE IS MUCH TOO LONG TO", "FIT ON ONE ROW"]
        log_input_expected_result(text, expected, decoded[0].lines)
        self.assertEqual(decoded[0].lines, expected)
        self.assertIn("94d0 94d0", result)

    def test_compose_too_many_rows(self):
        log_test_name("SccFileHandler.compose - too many rows")

        lines = ["A", "B", "C", "D", "E"]
        with self.assertLogs(level='WARNING'):
            result = self._compose([ Cue(start=0.0, end=1.0, lines=lines) ])

        decoded = self.handler.parse_string(result).lines
        log_input_expected_result(lines, ["B", "C", "D", "E"], decoded[0].lines)
        self.assertEqual(decoded[0].lines, ["B", "C", "D", "E"])

    def test_no_stop_record_between_adjacent_cues(self):
        log_test_name("SccFileHandler.compose - adjacent cues")

        cues = [
            Cue(start=1.0, end=2.0, lines=["ONE"]),
            Cue(start=2.0, end=3.0, lines=["TWO"]),
        ]
        result = self._compose(cues)

        log_input_expected_result("0 frame gap", 1, result.count("942c 942c"))
        self.assertEqual(result.count("942c 942c"), 1)
        self.assertNotIn("00:00:02:00\t942c", result)
        self.assertIn("00:00:03:00\t942c 942c", result)

    def test_stop_record_gap_threshold(self):
        log_test_name("SccFileHandler.compose - gap threshold")

        handler = SccFileHandler({'frame_rate': 4})

        test_cases = [
            (1.25, 1),     # exactly one frame: no stop record
            (1.3, 2),      # just over one frame
            (2.0, 2),
        ]

        for next_start, expected_stops in test_cases:
            with self.subTest(next_start=next_start):
                cues = [
                    Cue(start=0.0, end=1.0, lines=["ONE"]),
                    Cue(start=next_start, end=3.0, lines=["TWO"]),
                ]
                result = self._compose(cues, handler)
                log_input_expected_result(next_start, expected_stops, result.count("942c 942c"))
                self.assertEqual(result.count("942c 942c"), expected_stops)

    def test_stop_record_gap_at_broadcast_rate(self):
        log_test_name("SccFileHandler.compose - gap threshold at 29.97")

        test_cases = [
            ("00:00:02:00", "00:00:02:01", 1),
            ("00:00:02:00", "00:00:02:02", 2),
            ("00:10:00:14", "00:10:00:15", 1),
            ("01:00:00:28", "01:00:00:29", 1),
        ]

        for end, next_start, expected_stops in test_cases:
            with self.subTest(end=end, next_start=next_start):
                cues = [
                    Cue(start=ParseTimecode("00:00:01:00"), end=ParseTimecode(end), lines=["A"]),
                    Cue(start=ParseTimecode(next_start), end=ParseTimecode("01:00:01:00"), lines=["B"]),
                ]
                result = self._compose(cues)
                log_input_expected_result((end, next_start), expected_stops, result.count("942c 942c"))
                self.assertEqual(result.count("942c 942c"), expected_stops)

                if expected_stops == 1:
                    self.assertNotIn(f"{end}\t942c", result)

    def test_compose_requires_end_time(self):
        if skip_if_debugger_attached("SccFileHandler compose without end"):
            return

        log_test_name("SccFileHandler.compose - missing end")

        with self.assertRaises(ValueError) as e:
            self._compose([ Cue(start=1.0, end=None, lines=["HELLO"]) ])

        log_input_expected_error("end=None", ValueError, e.exception)

    def test_round_trip(self):
        log_test_name("SccFileHandler round trip")

        cues = [
            Cue(start=1.0, end=3.0, lines=["Hello world"]),
            Cue(start=3.0, end=5.0, lines=["Second cue", "♪ café ♪"]),
            Cue(start=6.0, end=8.0, lines=["«Ça va?» ¡Sí!"]),
            Cue(start=10.0, end=12.5, lines=["Ölçek: {ß} ~ [ø]"]),
        ]

        decoded = self.handler.parse_string(self._compose(cues)).lines

        log_input_expected_result([ str(cue) for cue in cues ], len(cues), [ str(cue) for cue in decoded ])

        self.assertEqual(len(decoded), len(cues))
        frame = 1 / self.handler.frame_rate
        for original, result in zip(cues, decoded):
            with self.subTest(cue=str(original)):
                self.assertAlmostEqual(result.start, original.start, delta=frame)
                self.assertAlmostEqual(result.end, original.end, delta=frame)
                self.assertEqual(result.lines, WrapLines(original.lines))


if __name__ == '__main__':
    unittest.main()
