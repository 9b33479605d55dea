#!/usr/bin/env python3
"""
Запуск всех тестов Event Logistics
"""

import sys
import os
import unittest
import argparse

# Добавляем путь к корневой директории проекта
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

MODULES = {
    "parsers": ["test_cell_values", "test_column_mapper", "test_workbook_decoder", "test_row_validator"],
    "service": ["test_flight_schedule_service"],
    "api": ["test_api_integration"],
}


def discover_and_run_tests(pattern='test_*.py'):
    """Автоматически находит и запускает все тесты"""
    loader = unittest.TestLoader()
    start_dir = os.path.dirname(__file__)
    suite = loader.discover(start_dir, pattern=pattern)

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


def run_group(group):
    """Запускает только тесты указанной группы"""
    sys.path.insert(0, os.path.dirname(__file__))
    suite = unittest.TestLoader().loadTestsFromNames(MODULES[group])
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print(f"\nГруппа '{group}': запущено {result.testsRun}, "
          f"ошибок {len(result.errors)}, провалов {len(result.failures)}")
    return result.wasSuccessful()


def main():
    """Главная функция"""
    parser = argparse.ArgumentParser(description='Запуск тестов Event Logistics')
    parser.add_argument('--group', choices=sorted(MODULES),
                        help='Запустить только одну группу тестов')

    args = parser.parse_args()

    if args.group:
        success = run_group(args.group)
    else:
        success = discover_and_run_tests()

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
