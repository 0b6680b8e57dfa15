# tests/core/test_analyzer.py
import unittest
import os
import json
import time
import tempfile
from datetime import datetime, timedelta, timezone

from foldersleuth.core.analyzer import analyze, analyze_folder_command
from foldersleuth.core.errors import InvalidPathError


class TestAnalyzer(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        for name, size in [("a.txt", 10), ("a.md", 20), ("B_final.TXT", 5), (".hidden", 1)]:
            with open(os.path.join(self.root, name), 'wb') as f:
                f.write(b"x" * size)

    def tearDown(self):
        self._tmp.cleanup()

    def test_small_tree_scenario(self):
        result = analyze_folder_command(self.root)
        self.assertIsInstance(result, dict)
        self.assertEqual(result['total_files'], 4)
        self.assertEqual(result['total_size'], 36)
        self.assertGreaterEqual(result['hidden_file_count'], 1)
        self.assertEqual(result['file_types']['txt'], {'count': 2, 'total_size': 15, 'average_size': 7})
        self.assertEqual(result['file_types']['md'], {'count': 1, 'total_size': 20, 'average_size': 20})
        self.assertEqual(len(result['duplicate_patterns']), 1)
        group = result['duplicate_patterns'][0]
        self.assertEqual(group['pattern'], "a")
        self.assertEqual(group['count'], 2)
        self.assertEqual(sorted(group['files']), ["a.md", "a.txt"])
        self.assertEqual(result['naming_stats'],
                         {'camel_case_count': 0, 'snake_case_count': 1, 'kebab_case_count': 0})
        self.assertEqual(result['max_depth'], 1)
        self.assertEqual(result['total_folders'], 0)

    def test_report_invariants(self):
        os.makedirs(os.path.join(self.root, "nested", "deeper"))
        for i in range(15):
            with open(os.path.join(self.root, "nested", "deeper", f"file-{i}.log"), 'wb') as f:
                f.write(b"y" * i)
        report = analyze(self.root)

        self.assertEqual(sum(b.count for b in report.file_types.values()), report.total_files)
        self.assertEqual(sum(b.total_size for b in report.file_types.values()), report.total_size)
        sizes = [f.size for f in report.largest_files]
        self.assertEqual(sizes, sorted(sizes, reverse=True))
        self.assertEqual(len(report.largest_files), 10)
        self.assertLessEqual(report.naming_stats.total, report.total_files)
        self.assertEqual(report.max_depth, 3)
        self.assertEqual(report.total_folders, 2)
        for group in report.duplicate_patterns:
            self.assertEqual(len(group.files), group.count)
            self.assertGreaterEqual(group.count, 2)

    def test_injected_clock(self):
        stamp = datetime(2023, 1, 1, 0, 0, 0)
        for name in os.listdir(self.root):
            ts = stamp.timestamp()
            os.utime(os.path.join(self.root, name), (ts, ts))
        report = analyze(self.root, now=stamp.astimezone() + timedelta(days=10, hours=12))
        self.assertAlmostEqual(report.avg_file_age_days, 10.5)
        self.assertEqual(report.oldest_file.modified, "2023-01-01 00:00")

    def test_repeat_runs_match_apart_from_ages(self):
        first = analyze(self.root).to_dict()
        second = analyze(self.root).to_dict()
        first_age = first.pop('avg_file_age_days')
        second_age = second.pop('avg_file_age_days')
        self.assertEqual(first, second)
        self.assertGreaterEqual(second_age, first_age)
        self.assertLess(second_age - first_age, 1.0)

    def test_empty_directory(self):
        with tempfile.TemporaryDirectory() as empty:
            report = analyze(empty)
        self.assertEqual(report.total_files, 0)
        self.assertEqual(report.total_size, 0)
        self.assertIsNone(report.oldest_file)
        self.assertIsNone(report.newest_file)
        self.assertEqual(report.avg_file_age_days, 0.0)
        self.assertEqual(report.duplicate_patterns, [])

    def test_invalid_path(self):
        missing = os.path.join(self.root, "missing")
        with self.assertRaises(InvalidPathError):
            analyze(missing)
        self.assertEqual(analyze_folder_command(missing), f"Invalid directory path: {missing}")
        self.assertIsInstance(analyze_folder_command(os.path.join(self.root, "a.txt")), str)

    def test_report_serializes_to_json(self):
        data = json.loads(analyze(self.root).to_json())
        self.assertEqual(data['total_files'], 4)
        self.assertIn('modified', data['largest_files'][0])


JAN_1_UTC = datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp()
JUL_1_UTC = datetime(2024, 7, 1, tzinfo=timezone.utc).timestamp()


@unittest.skipUnless(hasattr(time, "tzset"), "needs time.tzset")
class TestAgesAcrossDaylightSaving(unittest.TestCase):

    def setUp(self):
        self._saved_tz = os.environ.get("TZ")
        os.environ["TZ"] = "America/New_York"
        time.tzset()
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        with open(os.path.join(self.root, "winter.txt"), 'wb') as f:
            f.write(b"x")
        os.utime(os.path.join(self.root, "winter.txt"), (JAN_1_UTC, JAN_1_UTC))

    def tearDown(self):
        self._tmp.cleanup()
        if self._saved_tz is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = self._saved_tz
        time.tzset()

    def test_elapsed_time_ignores_clock_shift(self):
        report = analyze(self.root, now=datetime.fromtimestamp(JUL_1_UTC).astimezone())
        self.assertAlmostEqual(report.avg_file_age_days, 182.0)

    def test_naive_now_is_read_as_local_time(self):
        report = analyze(self.root, now=datetime.fromtimestamp(JUL_1_UTC))
        self.assertAlmostEqual(report.avg_file_age_days, 182.0)

    def test_modified_stays_local_wall_clock(self):
        report = analyze(self.root, now=datetime.fromtimestamp(JUL_1_UTC).astimezone())
        # midnight UTC is 19:00 EST the evening before
        self.assertEqual(report.oldest_file.modified, "2023-12-31 19:00")

if __name__ == '__main__':
    unittest.main()
