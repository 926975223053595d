import pytest

from services.split.applications.calculate_split import CalculateSplitService
from services.split.applications.summarize_split import (
    SummarizeSplitService,
    format_night_date,
)


class TestSummarizeSplitService:
    def test_summary_lists_totals_and_nights(self, create_split):
        split = create_split(
            total_price=300,
            people=[
                ("Alice", [True, True, True]),
                ("Bob", [True, True, False]),
                ("", [True, False, False]),
            ],
        )

        summary = SummarizeSplitService().summarize(split)

        assert summary == "\n".join(
            [
                "Total: $300.00 (3 nights @ $100.00/night)",
                "2024-01-15 to 2024-01-18",
                "",
                "Alice: $183.33",
                "- Mon, Jan 15: $33.33",
                "- Tue, Jan 16: $50.00",
                "- Wed, Jan 17: $100.00",
                "",
                "Bob: $83.33",
                "- Mon, Jan 15: $33.33",
                "- Tue, Jan 16: $50.00",
                "",
                "Unnamed: $33.33",
                "- Mon, Jan 15: $33.33",
                "",
            ]
        )

    def test_people_with_zero_total_are_skipped(self, create_split):
        split = create_split(
            total_price=300,
            people=[("Alice", [True, True, True]), ("Bob", [False, False, False])],
        )

        summary = SummarizeSplitService().summarize(split)

        assert "Alice: $300.00" in summary
        assert "Bob" not in summary

    def test_currency_symbol(self, create_split):
        split = create_split(total_price=300, people=[("Alice", [True, True, True])])

        summary = SummarizeSplitService().summarize(split, currency_symbol="€")

        assert summary.startswith("Total: €300.00")

    def test_no_people_returns_none(self, create_split):
        assert SummarizeSplitService().summarize(create_split()) is None

    def test_no_costs_returns_none(self, create_split):
        split = create_split(total_price=0, people=[("Alice", [True, True, True])])
        assert SummarizeSplitService().summarize(split) is None


class TestSummarizeSplitServicePairing:
    def test_each_person_is_listed_with_own_cost(self, create_split):
        split = create_split(
            total_price=300,
            people=[
                ("Alice", [True, True, True]),
                ("Bob", [False, False, False]),
                ("Charlie", [False, False, True]),
            ],
        )

        summary = SummarizeSplitService().summarize(split)

        assert "Alice: $250.00" in summary
        assert "Charlie: $50.00" in summary
        assert "Bob" not in summary
        assert summary.index("Alice") < summary.index("Charlie")

    def test_costs_are_paired_with_people_by_position(self, create_split):
        split = create_split(
            total_price=300,
            people=[("Alice", [True, True, True]), ("Bob", [False, False, False])],
        )
        calculation = CalculateSplitService().calculate(split)

        summary = SummarizeSplitService().summarize(split, calculation=calculation)

        assert "Alice: $300.00" in summary
        assert "Bob" not in summary


class TestFormatNightDate:
    def test_format_night_date(self):
        assert format_night_date("2024-01-15") == "Mon, Jan 15"
        assert format_night_date("2023-12-31") == "Sun, Dec 31"

    @pytest.mark.parametrize(
        ("night_date", "expected"),
        [
            ("2024-01-20", "Sat, Jan 20"),
            ("2024-06-09", "Sun, Jun 9"),
            ("2024-09-04", "Wed, Sep 4"),
            ("2024-02-29", "Thu, Feb 29"),
        ],
    )
    def test_english_abbreviations(self, night_date, expected):
        assert format_night_date(night_date) == expected
