#!/usr/bin/env python3
"""
Тест нормализации значений ячеек
"""

import sys
import os
import unittest
from datetime import date, datetime, time, timedelta

# Добавляем путь к корневой директории проекта
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from app.core.exceptions import CellValueError
from parsers.cell_values import (
    combine, parse_date, parse_display_time, parse_text, parse_time
)


class TestParseText(unittest.TestCase):

    def test_strips_and_converts(self):
        test_cases = [
            ("  John ", "John"),
            (None, ""),
            ("", ""),
            (123, "123"),
            (123.0, "123"),
            (12.5, "12.5"),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertEqual(parse_text(value), expected)

    def test_rejects_unexpected_types(self):
        for value in (date(2025, 1, 1), True, [1]):
            with self.subTest(value=value):
                with self.assertRaises(CellValueError):
                    parse_text(value)


class TestParseDate(unittest.TestCase):

    def test_text_formats(self):
        test_cases = [
            ("2025-01-15", date(2025, 1, 15)),
            (" 2025-01-15 ", date(2025, 1, 15)),
            ("2025-01-15 00:00:00", date(2025, 1, 15)),
            ("7/23/2025", date(2025, 7, 23)),
            ("23.07.2025", date(2025, 7, 23)),
            ("23-07-2025", date(2025, 7, 23)),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertEqual(parse_date(value), expected)

    def test_native_values(self):
        self.assertEqual(parse_date(datetime(2025, 1, 15, 9, 30)), date(2025, 1, 15))
        self.assertEqual(parse_date(date(2025, 1, 15)), date(2025, 1, 15))

    def test_excel_serial(self):
        """45672 - серийный номер 15.01.2025 в Excel"""
        self.assertEqual(parse_date(45672), date(2025, 1, 15))
        self.assertEqual(parse_date(45672.75), date(2025, 1, 15))

    def test_invalid_calendar_date(self):
        for value in ("2024-02-30", "2025-13-01", "02/30/2024"):
            with self.subTest(value=value):
                with self.assertRaises(CellValueError):
                    parse_date(value)

    def test_invalid_values(self):
        for value in ("tomorrow", "", 0, -5, True, time(10, 0)):
            with self.subTest(value=value):
                with self.assertRaises(CellValueError):
                    parse_date(value)


class TestParseTime(unittest.TestCase):

    def test_text_formats(self):
        test_cases = [
            ("14:30", time(14, 30)),
            ("9:05", time(9, 5)),
            ("14:30:15", time(14, 30, 15)),
            ("2:45 PM", time(14, 45)),
            ("12:10 am", time(0, 10)),
            ("14.30", time(14, 30)),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertEqual(parse_time(value), expected)

    def test_native_values(self):
        self.assertEqual(parse_time(time(23, 15)), time(23, 15))
        self.assertEqual(parse_time(datetime(2025, 1, 15, 23, 15)), time(23, 15))
        self.assertEqual(parse_time(timedelta(hours=8, minutes=45)), time(8, 45))

    def test_day_fraction(self):
        self.assertEqual(parse_time(0.5), time(12, 0))
        self.assertEqual(parse_time(0.25), time(6, 0))
        self.assertEqual(parse_time(0), time(0, 0))

    def test_invalid_values(self):
        for value in ("25:00", "noon", "", 1.5, -0.1, date(2025, 1, 1), timedelta(days=2)):
            with self.subTest(value=value):
                with self.assertRaises(CellValueError):
                    parse_time(value)


class TestParseDisplayTime(unittest.TestCase):

    def test_times_are_formatted(self):
        self.assertEqual(parse_display_time("8:45"), "08:45")
        self.assertEqual(parse_display_time(time(21, 0)), "21:00")
        self.assertEqual(parse_display_time(0.75), "18:00")

    def test_free_text_is_kept(self):
        self.assertEqual(parse_display_time(" on request "), "on request")

    def test_empty_is_allowed(self):
        self.assertEqual(parse_display_time(None), "")
        self.assertEqual(parse_display_time("   "), "")


class TestCombine(unittest.TestCase):

    def test_combine(self):
        self.assertEqual(
            combine(date(2025, 1, 15), time(14, 30)),
            datetime(2025, 1, 15, 14, 30)
        )


if __name__ == '__main__':
    unittest.main()
