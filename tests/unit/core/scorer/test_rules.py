#!/usr/bin/env python3
"""
Unit tests for the individual scoring rules.
"""

import unittest
from datetime import datetime, date, timedelta, timezone

from core.scorer import rules
from core.scorer.constants import SKILL_POINTS_CAP
from core.scorer.models import SubScore

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestSkillScore(unittest.TestCase):

    def test_no_shared_skills(self):
        self.assertEqual(rules.skill_score({'a', 'b'}, {'c'}), SubScore(0, None))

    def test_one_shared_skill_is_singular(self):
        result = rules.skill_score({'a', 'b'}, {'a', 'c'})
        self.assertEqual(result.points, 15)
        self.assertEqual(result.reason, "1 matching skill")

    def test_two_shared_skills_is_plural(self):
        result = rules.skill_score({'a', 'b'}, {'a', 'b', 'c'})
        self.assertEqual(result.points, 30)
        self.assertEqual(result.reason, "2 matching skills")

    def test_three_or_more_capped_at_40(self):
        for count in (3, 4, 10):
            ids = {f"s{i}" for i in range(count)}
            result = rules.skill_score(ids, ids)
            self.assertEqual(result.points, SKILL_POINTS_CAP)
            self.assertEqual(result.reason, f"{count} matching skills")

    def test_monotonic(self):
        previous = 0
        for count in range(0, 8):
            ids = {f"s{i}" for i in range(count)}
            points = rules.skill_score(ids, ids).points
            self.assertGreaterEqual(points, previous)
            self.assertLessEqual(points, 40)
            previous = points

    def test_empty_volunteer_skills(self):
        self.assertEqual(rules.skill_score([], ['a']).points, 0)


class TestInterestScore(unittest.TestCase):

    def test_interest_contained_in_category_name(self):
        result = rules.interest_score(["Education"], "Education & Literacy")
        self.assertEqual(result, SubScore(30, "Matches your interests"))

    def test_category_name_contained_in_interest(self):
        result = rules.interest_score(["Animal Welfare and Rescue"], "Animal Welfare")
        self.assertEqual(result.points, 30)

    def test_case_insensitive(self):
        self.assertEqual(rules.interest_score(["ANIMAL welfare"], "animal Welfare").points, 30)

    def test_awarded_once_for_many_matching_interests(self):
        result = rules.interest_score(["Education", "Literacy", "Education & Literacy"], "Education & Literacy")
        self.assertEqual(result.points, 30)
        self.assertEqual(result.reason, "Matches your interests")

    def test_no_match(self):
        self.assertEqual(rules.interest_score(["Senior Care"], "Arts & Culture").points, 0)

    def test_missing_category(self):
        self.assertEqual(rules.interest_score(["Education"], None), SubScore(0, None))

    def test_no_interests(self):
        self.assertEqual(rules.interest_score([], "Education").points, 0)


class TestLocationScore(unittest.TestCase):

    def test_remote(self):
        self.assertEqual(
            rules.location_score("Austin, TX", "Anywhere", True),
            SubScore(15, "Remote opportunity")
        )

    def test_remote_never_gets_local_bonus(self):
        result = rules.location_score("Austin, TX", "Austin, TX", True)
        self.assertEqual(result.points, 15)
        self.assertEqual(result.reason, "Remote opportunity")

    def test_city_segment_matches(self):
        result = rules.location_score("San Francisco, CA", "Downtown San Francisco office", False)
        self.assertEqual(result, SubScore(20, "In your area"))

    def test_city_mismatch(self):
        self.assertEqual(rules.location_score("Austin, TX", "Dallas, TX", False).points, 0)

    def test_empty_volunteer_location(self):
        self.assertEqual(rules.location_score("", "Austin", False).points, 0)
        self.assertEqual(rules.location_score(None, "Austin", False).points, 0)

    def test_location_without_comma(self):
        self.assertEqual(rules.location_score("austin", "AUSTIN Animal Shelter", False).points, 20)


class TestAvailabilityScore(unittest.TestCase):

    def test_any_availability(self):
        self.assertEqual(
            rules.availability_score(["Weekend Mornings"]),
            SubScore(10, "Fits your availability")
        )

    def test_no_availability(self):
        self.assertEqual(rules.availability_score([]), SubScore(0, None))


class TestRecencyScore(unittest.TestCase):

    def test_window_bounds_inclusive(self):
        self.assertEqual(rules.recency_score(NOW + timedelta(days=7), NOW), SubScore(5, None))
        self.assertEqual(rules.recency_score(NOW + timedelta(days=30), NOW), SubScore(5, None))
        self.assertEqual(rules.recency_score(NOW + timedelta(days=30, hours=23), NOW).points, 5)

    def test_outside_window(self):
        self.assertEqual(rules.recency_score(NOW + timedelta(days=6, hours=23), NOW).points, 0)
        self.assertEqual(rules.recency_score(NOW + timedelta(days=31), NOW).points, 0)
        self.assertEqual(rules.recency_score(NOW - timedelta(days=10), NOW).points, 0)

    def test_days_until_rounds_down(self):
        self.assertEqual(rules.days_until(NOW + timedelta(days=9, hours=23), NOW), 9)
        self.assertEqual(rules.days_until(NOW - timedelta(hours=1), NOW), -1)

    def test_naive_start_date_treated_as_utc(self):
        naive = (NOW + timedelta(days=10)).replace(tzinfo=None)
        self.assertEqual(rules.recency_score(naive, NOW).points, 5)

    def test_plain_date(self):
        self.assertEqual(rules.recency_score(date(2026, 3, 15), NOW).points, 5)

    def test_missing_start_date(self):
        self.assertEqual(rules.recency_score(None, NOW), SubScore(0, None))


if __name__ == '__main__':
    unittest.main(verbosity=2)
