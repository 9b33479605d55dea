#!/usr/bin/env python3
"""
Тест проверки строк расписания
"""

import sys
import os
import unittest
from datetime import datetime, time

# Добавляем путь к корневой директории проекта
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
os.environ["DATABASE_URL"] = "sqlite://"

from app.models.flight_schedule import FlightStatus
from app.schemas.flight_schedule import FlightScheduleCreate, RowError
from parsers.column_mapper import TEMPLATE_HEADERS, map_columns
from parsers.row_validator import validate_row
from workbook_factory import make_row


class TestRowValidator(unittest.TestCase):
    """Тесты для validate_row"""

    def setUp(self):
        self.mapping = map_columns(list(TEMPLATE_HEADERS))

    def validate(self, **overrides):
        return validate_row(2, make_row(**overrides), self.mapping)

    def test_valid_row(self):
        result = self.validate()

        self.assertIsInstance(result, FlightScheduleCreate)
        self.assertEqual(result.first_name, "John")
        self.assertEqual(result.flight_number, "AA123")
        self.assertEqual(result.arrival_time, datetime(2025, 1, 15, 14, 30))
        self.assertEqual(result.departure_time, datetime(2025, 1, 20, 16, 45))
        self.assertEqual(result.vehicle_standby_arrival_time, "15:00")
        self.assertEqual(result.vehicle_standby_departure_time, "17:15")
        self.assertEqual(result.status, FlightStatus.pending)

    def test_text_is_trimmed(self):
        result = self.validate(first_name="  Amina ", property_name=" Hilton Hotel")
        self.assertEqual(result.first_name, "Amina")
        self.assertEqual(result.property_name, "Hilton Hotel")

    def test_empty_first_name_always_rejected(self):
        for value in (None, "", "   "):
            with self.subTest(value=value):
                result = self.validate(first_name=value)
                self.assertIsInstance(result, RowError)
                self.assertEqual(result.row, 2)
                self.assertIn("First Name", result.reason)

    def test_required_text_fields(self):
        for field, label in (("last_name", "Last Name"), ("flight_number", "Flight Number"),
                             ("property_name", "Property Name")):
            with self.subTest(field=field):
                result = self.validate(**{field: ""})
                self.assertIsInstance(result, RowError)
                self.assertEqual(result.reason, f"Missing required field: {label}")

    def test_invalid_calendar_date(self):
        result = self.validate(arrival_date="2024-02-30")
        self.assertIsInstance(result, RowError)
        self.assertIn("Arrival Date", result.reason)
        self.assertIn("2024-02-30", result.reason)

    def test_missing_time(self):
        result = self.validate(departure_time=None)
        self.assertIsInstance(result, RowError)
        self.assertEqual(result.reason, "Missing required field: Departure Time")

    def test_all_problems_in_one_reason(self):
        result = self.validate(first_name="", arrival_time="late")
        self.assertIsInstance(result, RowError)
        self.assertIn("Missing required field: First Name", result.reason)
        self.assertIn("Invalid Arrival Time", result.reason)
        self.assertEqual(len(result.reason.split("; ")), 2)

    def test_spreadsheet_native_values(self):
        result = self.validate(
            arrival_date=datetime(2025, 7, 23),
            arrival_time=time(23, 15),
            departure_date=45864,       # 26.07.2025
            departure_time=0.6145833333333333,  # 14:45
            flight_number=337,
        )
        self.assertIsInstance(result, FlightScheduleCreate)
        self.assertEqual(result.arrival_time, datetime(2025, 7, 23, 23, 15))
        self.assertEqual(result.departure_time, datetime(2025, 7, 26, 14, 45))
        self.assertEqual(result.flight_number, "337")

    def test_us_dates_and_short_times(self):
        result = self.validate(arrival_date="7/23/2025", arrival_time="9:30",
                               vehicle_standby_arrival="8:00")
        self.assertEqual(result.arrival_time, datetime(2025, 7, 23, 9, 30))
        self.assertEqual(result.vehicle_standby_arrival_time, "08:00")

    def test_vehicle_standby_may_be_empty(self):
        result = self.validate(vehicle_standby_arrival=None, vehicle_standby_departure="")
        self.assertIsInstance(result, FlightScheduleCreate)
        self.assertEqual(result.vehicle_standby_arrival_time, "")
        self.assertEqual(result.vehicle_standby_departure_time, "")

    def test_short_row(self):
        """Недостающие ячейки в конце строки считаются пустыми"""
        cells = make_row()[:8]
        result = validate_row(5, cells, self.mapping)
        self.assertIsInstance(result, RowError)
        self.assertEqual(result.row, 5)
        self.assertIn("Departure Time", result.reason)


if __name__ == '__main__':
    unittest.main()
