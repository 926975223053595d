import pytest

from services.split.domain.service.cost_calculator import (
    PersonCost,
    calculate_costs,
    calculate_nights,
    get_night_dates,
)


class TestCalculateNights:
    def test_single_night_stay(self):
        assert calculate_nights("2024-01-15", "2024-01-16") == 1

    def test_multi_night_stay(self):
        assert calculate_nights("2024-01-15", "2024-01-18") == 3

    def test_same_date_is_zero_nights(self):
        assert calculate_nights("2024-01-15", "2024-01-15") == 0

    def test_checkout_before_checkin_is_zero_nights(self):
        assert calculate_nights("2024-01-15", "2024-01-14") == 0

    @pytest.mark.parametrize(
        ("check_in", "check_out"),
        [("", "2024-01-16"), ("2024-01-15", ""), (None, "2024-01-16"), ("", "")],
    )
    def test_missing_date_is_zero_nights(self, check_in, check_out):
        assert calculate_nights(check_in, check_out) == 0

    @pytest.mark.parametrize(
        ("check_in", "check_out"),
        [
            ("not-a-date", "2024-01-16"),
            ("2024-01-15", "2024-13-01"),
            ("2024-02-30", "2024-03-02"),
            ("20240115", "20240118"),
            ("2024-W03-1", "2024-W03-4"),
            ("2024-1-15", "2024-1-18"),
        ],
    )
    def test_malformed_date_is_zero_nights(self, check_in, check_out):
        assert calculate_nights(check_in, check_out) == 0

    def test_month_boundary(self):
        assert calculate_nights("2024-01-31", "2024-02-03") == 3

    def test_year_boundary(self):
        assert calculate_nights("2023-12-30", "2024-01-02") == 3

    def test_leap_day(self):
        assert calculate_nights("2024-02-28", "2024-03-01") == 2


class TestGetNightDates:
    def test_zero_nights(self):
        assert get_night_dates("2024-01-15", 0) == []

    def test_empty_check_in(self):
        assert get_night_dates("", 3) == []

    def test_malformed_check_in(self):
        assert get_night_dates("15/01/2024", 3) == []

    def test_compact_check_in_is_malformed(self):
        assert get_night_dates("20240115", 3) == []

    def test_single_night(self):
        assert get_night_dates("2024-01-15", 1) == ["2024-01-15"]

    def test_multiple_nights(self):
        assert get_night_dates("2024-01-15", 3) == [
            "2024-01-15",
            "2024-01-16",
            "2024-01-17",
        ]

    def test_month_boundary(self):
        assert get_night_dates("2024-01-31", 3) == [
            "2024-01-31",
            "2024-02-01",
            "2024-02-02",
        ]

    def test_year_boundary(self):
        assert get_night_dates("2023-12-31", 3) == [
            "2023-12-31",
            "2024-01-01",
            "2024-01-02",
        ]


class TestCalculateCosts:
    def test_zero_nights_returns_empty(self, create_person):
        people = [create_person(nights=[])]
        assert calculate_costs(people, 100, 0) == []

    def test_zero_price_returns_empty(self, create_person):
        people = [create_person(nights=[True])]
        assert calculate_costs(people, 0, 1) == []

    def test_empty_roster_returns_empty(self):
        assert calculate_costs([], 100, 2) == []

    def test_single_person_all_nights(self, create_person):
        people = [create_person(person_id="1", nights=[True, True])]

        costs = calculate_costs(people, 200, 2)

        assert costs == [PersonCost(person_id="1", per_night=(100.0, 100.0), total=200.0)]

    def test_single_person_some_nights(self, create_person):
        people = [create_person(nights=[True, False, True])]

        costs = calculate_costs(people, 300, 3)

        assert costs[0].per_night == (100.0, 0.0, 100.0)
        assert costs[0].total == 200.0

    def test_even_split_for_same_nights(self, create_person):
        people = [
            create_person(person_id="1", name="Alice", nights=[True, True]),
            create_person(person_id="2", name="Bob", nights=[True, True]),
        ]

        costs = calculate_costs(people, 200, 2)

        assert [c.per_night for c in costs] == [(50.0, 50.0), (50.0, 50.0)]
        assert [c.total for c in costs] == [100.0, 100.0]

    def test_split_per_night_by_attendance(self, create_person):
        people = [
            create_person(person_id="1", name="Alice", nights=[True, True, True]),
            create_person(person_id="2", name="Bob", nights=[True, True, False]),
            create_person(person_id="3", name="Charlie", nights=[True, False, False]),
        ]

        alice, bob, charlie = calculate_costs(people, 300, 3)

        # 1泊目: 3人, 2泊目: 2人, 3泊目: 1人
        assert alice.per_night == pytest.approx((100 / 3, 50, 100))
        assert bob.per_night == pytest.approx((100 / 3, 50, 0))
        assert charlie.per_night == pytest.approx((100 / 3, 0, 0))
        assert alice.total == pytest.approx(183.333, abs=1e-3)
        assert bob.total == pytest.approx(83.333, abs=1e-3)
        assert charlie.total == pytest.approx(33.333, abs=1e-3)
        assert alice.total + bob.total + charlie.total == pytest.approx(300)

    def test_decimal_price_is_not_rounded(self, create_person):
        people = [
            create_person(person_id="1", nights=[True]),
            create_person(person_id="2", nights=[True]),
        ]

        costs = calculate_costs(people, 99.99, 1)

        for cost in costs:
            assert cost.per_night[0] == pytest.approx(49.995)
            assert cost.total == pytest.approx(49.995)

    def test_absent_person_pays_nothing(self, create_person):
        people = [
            create_person(person_id="1", name="Alice", nights=[False, False]),
            create_person(person_id="2", name="Bob", nights=[True, True]),
        ]

        alice, bob = calculate_costs(people, 200, 2)

        assert alice.per_night == (0.0, 0.0)
        assert alice.total == 0.0
        assert bob.per_night == (100.0, 100.0)
        assert bob.total == 200.0

    def test_unattended_night_costs_nothing(self, create_person):
        people = [create_person(nights=[True, False])]

        costs = calculate_costs(people, 200, 2)

        assert costs[0].per_night == (100.0, 0.0)
        assert costs[0].total == 100.0

    def test_short_attendance_is_treated_as_absent(self, create_person):
        people = [create_person(nights=[True])]

        costs = calculate_costs(people, 200, 2)

        assert costs[0].per_night == (100.0, 0.0)

    def test_negative_price_is_passed_through(self, create_person):
        people = [create_person(nights=[True, True])]

        costs = calculate_costs(people, -200, 2)

        assert costs[0].per_night == (-100.0, -100.0)
        assert costs[0].total == -200.0

    def test_is_idempotent(self, create_person):
        people = [
            create_person(person_id="1", nights=[True, True, False]),
            create_person(person_id="2", nights=[True, False, True]),
        ]

        assert calculate_costs(people, 450, 3) == calculate_costs(people, 450, 3)
