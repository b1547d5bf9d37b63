# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta, timezone

from healthguard.trends.formatting import (
    format_date_range,
    format_date_short,
    format_month_day,
    format_month_short,
    format_time,
    get_time_ago_string,
    is_same_day,
)


class TestLabels(unittest.TestCase):
    def test_short_formats(self) -> None:
        d = datetime(2009, 3, 7, 5, 4)
        self.assertEqual(format_date_short(d), "09/03/07")
        self.assertEqual(format_month_short(d), "09/03")
        self.assertEqual(format_time(d), "05:04")
        self.assertEqual(format_month_day(d), "3/7")

    def test_is_same_day(self) -> None:
        self.assertTrue(is_same_day(datetime(2024, 1, 5, 0, 0), datetime(2024, 1, 5, 23, 59)))
        self.assertFalse(is_same_day(datetime(2024, 1, 5, 23, 59), datetime(2024, 1, 6, 0, 0)))


class TestDateRange(unittest.TestCase):
    def test_same_day(self) -> None:
        for d in (date(2024, 1, 5), datetime(2024, 12, 31, 18, 0)):
            self.assertEqual(format_date_range(d, d), f"{d.month}月{d.day}日")

    def test_same_day_different_times(self) -> None:
        self.assertEqual(format_date_range(datetime(2024, 1, 5, 8), datetime(2024, 1, 5, 22)), "1月5日")

    def test_multi_day(self) -> None:
        self.assertEqual(format_date_range(date(2024, 1, 5), date(2024, 1, 11)), "1月5日 - 1月11日")
        self.assertEqual(format_date_range(date(2023, 12, 28), date(2024, 1, 3)), "12月28日 - 1月3日")


class TestTimeAgo(unittest.TestCase):
    def setUp(self) -> None:
        self.now = datetime(2024, 3, 10, 12, 0, 0)

    def ago(self, **kwargs) -> str:
        return get_time_ago_string(self.now - timedelta(**kwargs), now=self.now)

    def test_just_now(self) -> None:
        self.assertEqual(self.ago(seconds=30), "刚刚")
        self.assertEqual(self.ago(seconds=0), "刚刚")
        # future instants also read as "just now"
        self.assertEqual(self.ago(minutes=-5), "刚刚")

    def test_minutes(self) -> None:
        self.assertEqual(self.ago(minutes=1), "1 分钟前")
        self.assertEqual(self.ago(minutes=59, seconds=59), "59 分钟前")

    def test_hours_floor(self) -> None:
        self.assertEqual(self.ago(minutes=90), "1 小时前")
        self.assertEqual(self.ago(hours=23, minutes=59), "23 小时前")

    def test_yesterday(self) -> None:
        self.assertEqual(self.ago(hours=24), "昨天")
        self.assertEqual(self.ago(hours=25), "昨天")
        self.assertEqual(self.ago(hours=47, minutes=59), "昨天")

    def test_days(self) -> None:
        self.assertEqual(self.ago(hours=48), "2 天前")
        self.assertEqual(self.ago(days=10, hours=5), "10 天前")

    def test_defaults_to_current_time(self) -> None:
        recent = datetime.now(timezone.utc) - timedelta(seconds=30)
        self.assertEqual(get_time_ago_string(recent), "刚刚")


if __name__ == "__main__":
    unittest.main()
