import unittest

from PySubconv.SettingsType import SettingsError, SettingsType
from PySubconv.Helpers.Tests import log_input_expected_result, log_test_name

class TestSettingsType(unittest.TestCase):
    def setUp(self):
        log_test_name(self._testMethodName)
        self.settings = SettingsType({
            'frame_rate': '25',
            'max_line_length': 28.0,
            'italic_tags': 'yes',
            'name': 'captions',
            'empty': None,
        })

    def test_get_bool(self):
        test_cases = [
            ('italic_tags', True),
            ('missing', False),
            ('empty', False),
        ]
        for key, expected in test_cases:
            with self.subTest(key=key):
                result = self.settings.get_bool(key)
                log_input_expected_result(key, expected, result)
                self.assertEqual(result, expected)

        with self.assertRaises(SettingsError):
            self.settings.get_bool('name')

    def test_get_float(self):
        self.assertEqual(self.settings.get_float('frame_rate'), 25.0)
        self.assertEqual(self.settings.get_float('missing', 29.97), 29.97)
        self.assertIsNone(self.settings.get_float('empty'))

        with self.assertRaises(SettingsError):
            SettingsType({'frame_rate': True}).get_float('frame_rate')

    def test_get_int(self):
        self.assertEqual(self.settings.get_int('max_line_length'), 28)
        self.assertEqual(self.settings.get_int('frame_rate'), 25)

        with self.assertRaises(SettingsError):
            self.settings.get_int('name')

    def test_get_str(self):
        self.assertEqual(self.settings.get_str('name'), 'captions')
        self.assertEqual(self.settings.get_str('max_line_length'), '28.0')
        self.assertEqual(SettingsType({'list': ['a', 'b']}).get_str('list'), 'a, b')

    def test_update_ignores_none(self):
        self.settings.update({'frame_rate': None, 'italic_tags': False})

        log_input_expected_result("update", ('25', False), (self.settings['frame_rate'], self.settings['italic_tags']))
        self.assertEqual(self.settings['frame_rate'], '25')
        self.assertFalse(self.settings.get_bool('italic_tags'))


if __name__ == '__main__':
    unittest.main()
