import unittest

from PySubconv.Formats import SccCodes
from PySubconv.Helpers.Tests import log_input_expected_result, log_test_name

class TestSccCodes(unittest.TestCase):
    def test_CodeFormat(self):
        log_test_name("SccCodes - code format")

        for name, table, width in [
            ("COMMANDS", SccCodes.COMMANDS, 4),
            ("CHARACTERS", SccCodes.CHARACTERS, 2),
            ("SPECIAL_CHARACTERS", SccCodes.SPECIAL_CHARACTERS, 4),
            ("EXTENDED_CHARACTERS", SccCodes.EXTENDED_CHARACTERS, 4),
        ]:
            with self.subTest(table=name):
                for code in table:
                    self.assertEqual(len(code), width, f"{name}[{code}]")
                    self.assertEqual(code, code.lower())
                    int(code, 16)

    def test_TablesDoNotOverlap(self):
        log_test_name("SccCodes - tables do not overlap")

        commands = set(SccCodes.COMMANDS)
        special = set(SccCodes.SPECIAL_CHARACTERS)
        extended = set(SccCodes.EXTENDED_CHARACTERS)

        self.assertFalse(commands & special)
        self.assertFalse(commands & extended)
        self.assertFalse(special & extended)

    def test_KnownCommands(self):
        log_test_name("SccCodes - known commands")

        test_cases = [
            ('9425', ()),
            ('942c', ()),
            ('94ae', ()),
            ('9420', ()),
            ('942f', ()),
            ('9470', (SccCodes.BREAK,)),
            ('13d0', (SccCodes.BREAK,)),
            ('91ae', (SccCodes.ITALIC_ON,)),
            ('9120', (SccCodes.ITALIC_OFF,)),
            ('94ce', (SccCodes.BREAK, SccCodes.ITALIC_ON)),
        ]

        for code, expected in test_cases:
            with self.subTest(code=code):
                result = SccCodes.COMMANDS[code]
                log_input_expected_result(code, expected, result)
                self.assertEqual(tuple(result), expected)

    def test_BottomRowCodesAreBreaks(self):
        log_test_name("SccCodes - bottom row codes")

        for code in SccCodes.BOTTOM_ROW_CODES:
            with self.subTest(code=code):
                self.assertIn(SccCodes.BREAK, SccCodes.COMMANDS[code])

    def test_ReverseLookup(self):
        log_test_name("SccCodes - reverse lookup")

        test_cases = [
            (SccCodes.CHARACTER_CODES, 'A', 'c1'),
            (SccCodes.CHARACTER_CODES, ' ', '20'),
            (SccCodes.CHARACTER_CODES, '#', '23'),
            (SccCodes.CHARACTER_CODES, 'é', 'dc'),
            (SccCodes.SPECIAL_CHARACTER_CODES, '♪', '9137'),
            (SccCodes.EXTENDED_CHARACTER_CODES, '«', '923e'),
            (SccCodes.EXTENDED_CHARACTER_CODES, 'Ç', '9232'),
        ]

        for table, character, expected in test_cases:
            with self.subTest(character=character):
                result = table.get(character)
                log_input_expected_result(character, expected, result)
                self.assertEqual(result, expected)

        self.assertNotIn('', SccCodes.CHARACTER_CODES)

    def test_TablesAreReadOnly(self):
        log_test_name("SccCodes - tables are read only")

        with self.assertRaises(TypeError):
            SccCodes.CHARACTERS['00'] = 'x'     # type: ignore[index]


if __name__ == '__main__':
    unittest.main()
