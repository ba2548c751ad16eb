from datetime import date, datetime

from groundbooking.core.catalog import (
    CRICKET_SLOT,
    FOOTBALL_FULL_DAY_SLOT,
    FOOTBALL_SUB_SLOTS,
    DateStatus,
    GroundType,
    ReportPeriod,
    SlotStatus,
)
from groundbooking.services.availability_engine import (
    aggregate_report,
    calendar_marks,
    classify_date,
    classify_slot,
    is_slot_bookable,
    slot_board,
)

MORNING, MIDDAY, AFTERNOON = FOOTBALL_SUB_SLOTS
JULY_4 = date(2024, 7, 4)


def _record(booking_date, slot, status, ground="football"):
    return {
        "booking_date": booking_date,
        "time_slot": slot,
        "status": status,
        "ground_type": ground,
    }


def test_cricket_approved_booking_blocks_slot_and_date():
    records = [_record(date(2024, 6, 1), CRICKET_SLOT, "approved", "cricket")]

    assert classify_slot(date(2024, 6, 1), CRICKET_SLOT, records) is SlotStatus.BOOKED
    assert classify_date(date(2024, 6, 1), GroundType.CRICKET, records) is DateStatus.FULLY_BOOKED


def test_football_pending_sub_slot_blocks_full_day_only():
    records = [_record(JULY_4, MORNING, "pending")]

    assert classify_slot(JULY_4, MORNING, records) is SlotStatus.PENDING
    assert classify_slot(JULY_4, FOOTBALL_FULL_DAY_SLOT, records) is SlotStatus.PENDING
    assert classify_slot(JULY_4, MIDDAY, records) is SlotStatus.AVAILABLE
    assert classify_slot(JULY_4, AFTERNOON, records) is SlotStatus.AVAILABLE


def test_approved_dominates_pending_and_rejected_on_same_slot():
    records = [
        _record(JULY_4, MIDDAY, "pending"),
        _record(JULY_4, MIDDAY, "rejected"),
        _record(JULY_4, MIDDAY, "approved"),
        _record(JULY_4, MIDDAY, "pending"),
    ]

    assert classify_slot(JULY_4, MIDDAY, records) is SlotStatus.BOOKED


def test_classify_slot_is_idempotent_and_does_not_mutate_input():
    records = [_record(JULY_4, MORNING, "pending"), _record(JULY_4, MIDDAY, "approved")]
    snapshot = [dict(record) for record in records]

    first = classify_slot(JULY_4, FOOTBALL_FULL_DAY_SLOT, records)
    second = classify_slot(JULY_4, FOOTBALL_FULL_DAY_SLOT, records)

    assert first is second is SlotStatus.BOOKED
    assert records == snapshot


def test_rejected_only_and_empty_input_are_available():
    records = [_record(JULY_4, MORNING, "rejected")]

    assert classify_slot(JULY_4, MORNING, records) is SlotStatus.AVAILABLE
    assert classify_slot(JULY_4, FOOTBALL_FULL_DAY_SLOT, records) is SlotStatus.AVAILABLE
    assert classify_slot(JULY_4, MORNING, []) is SlotStatus.AVAILABLE
    assert classify_date(JULY_4, GroundType.FOOTBALL, []) is DateStatus.NORMAL


def test_full_day_approved_books_every_sub_slot():
    records = [_record(JULY_4, FOOTBALL_FULL_DAY_SLOT, "approved")]

    for slot in FOOTBALL_SUB_SLOTS:
        assert classify_slot(JULY_4, slot, records) is SlotStatus.BOOKED
    assert classify_date(JULY_4, GroundType.FOOTBALL, records) is DateStatus.FULLY_BOOKED


def test_full_day_pending_marks_sub_slots_pending():
    records = [_record(JULY_4, FOOTBALL_FULL_DAY_SLOT, "pending")]

    for slot in FOOTBALL_SUB_SLOTS:
        assert classify_slot(JULY_4, slot, records) is SlotStatus.PENDING


def test_all_sub_slots_approved_books_full_day():
    records = [_record(JULY_4, slot, "approved") for slot in FOOTBALL_SUB_SLOTS]

    assert classify_slot(JULY_4, FOOTBALL_FULL_DAY_SLOT, records) is SlotStatus.BOOKED
    assert classify_date(JULY_4, GroundType.FOOTBALL, records) is DateStatus.FULLY_BOOKED


def test_partial_approved_sub_slots_book_full_day_but_not_the_date():
    records = [_record(JULY_4, MORNING, "approved"), _record(JULY_4, MIDDAY, "approved")]

    assert classify_slot(JULY_4, FOOTBALL_FULL_DAY_SLOT, records) is SlotStatus.BOOKED
    assert classify_slot(JULY_4, AFTERNOON, records) is SlotStatus.AVAILABLE
    assert classify_date(JULY_4, GroundType.FOOTBALL, records) is DateStatus.NORMAL


def test_pending_coverage_never_counts_as_fully_booked():
    records = [_record(JULY_4, slot, "pending") for slot in FOOTBALL_SUB_SLOTS]

    assert classify_date(JULY_4, GroundType.FOOTBALL, records) is DateStatus.HAS_PENDING


def test_fully_booked_takes_precedence_over_pending():
    records = [
        _record(JULY_4, FOOTBALL_FULL_DAY_SLOT, "approved"),
        _record(JULY_4, MORNING, "pending"),
    ]

    assert classify_date(JULY_4, GroundType.FOOTBALL, records) is DateStatus.FULLY_BOOKED


def test_other_dates_and_grounds_are_ignored():
    records = [
        _record(date(2024, 7, 5), MORNING, "approved"),
        _record(JULY_4, CRICKET_SLOT, "approved", "cricket"),
    ]

    assert classify_slot(JULY_4, MORNING, records) is SlotStatus.AVAILABLE
    assert classify_date(JULY_4, GroundType.FOOTBALL, records) is DateStatus.NORMAL
    assert classify_date(JULY_4, GroundType.CRICKET, records) is DateStatus.FULLY_BOOKED


def test_malformed_records_are_skipped():
    records = [
        _record("not-a-date", MORNING, "approved"),
        _record(JULY_4, MORNING, "cancelled"),
        _record(JULY_4, MORNING, "approved", "tennis"),
        _record(None, MORNING, "approved"),
        {"booking_date": JULY_4, "status": "approved", "ground_type": "football"},
    ]

    assert classify_slot(JULY_4, MORNING, records) is SlotStatus.AVAILABLE
    assert classify_date(JULY_4, GroundType.FOOTBALL, records) is DateStatus.NORMAL
    assert aggregate_report(records, ReportPeriod.YEAR, JULY_4).total_count == 0


def test_loosely_formatted_records_are_accepted():
    records = [
        {
            "date": "2024-07-04T18:30:00.000Z",
            "timeSlot": MORNING,
            "status": " Approved ",
            "groundType": "Football",
        },
        _record(datetime(2024, 7, 4, 9, 0), MIDDAY, "PENDING"),
    ]

    assert classify_slot(JULY_4, MORNING, records) is SlotStatus.BOOKED
    assert classify_slot(JULY_4, MIDDAY, records) is SlotStatus.PENDING


def test_slot_board_lists_catalog_in_order():
    records = [_record(JULY_4, AFTERNOON, "pending")]

    board = slot_board(JULY_4, GroundType.FOOTBALL, records)

    assert [entry.slot for entry in board] == [*FOOTBALL_SUB_SLOTS, FOOTBALL_FULL_DAY_SLOT]
    assert [entry.status for entry in board] == [
        SlotStatus.AVAILABLE,
        SlotStatus.AVAILABLE,
        SlotStatus.PENDING,
        SlotStatus.PENDING,
    ]
    assert board[-1].is_full_day
    assert board[0].is_available and not board[2].is_available


def test_is_slot_bookable():
    records = [_record(JULY_4, MORNING, "approved")]

    assert not is_slot_bookable(JULY_4, FOOTBALL_FULL_DAY_SLOT, GroundType.FOOTBALL, records)
    assert is_slot_bookable(JULY_4, MIDDAY, GroundType.FOOTBALL, records)


def test_calendar_marks_only_flagged_dates():
    records = [
        _record(date(2024, 7, 1), FOOTBALL_FULL_DAY_SLOT, "approved"),
        _record(date(2024, 7, 2), MORNING, "pending"),
        _record(date(2024, 7, 3), MORNING, "rejected"),
        _record(date(2024, 7, 3), MIDDAY, "approved"),
    ]

    assert calendar_marks(GroundType.FOOTBALL, records) == {
        date(2024, 7, 1): DateStatus.FULLY_BOOKED,
        date(2024, 7, 2): DateStatus.HAS_PENDING,
    }


def test_monthly_report_counts():
    records = [
        _record(date(2024, 3, 1), CRICKET_SLOT, "approved", "cricket"),
        _record(date(2024, 3, 2), MORNING, "rejected", "football"),
    ]

    report = aggregate_report(records, ReportPeriod.MONTH, date(2024, 3, 15))

    assert report.total_count == 2
    assert report.approved_count == 1
    assert report.rejected_count == 1
    assert report.pending_count == 0
    assert report.cricket_count == 1
    assert report.football_count == 1


def test_report_periods_select_calendar_units():
    records = [
        _record(date(2024, 3, 1), MORNING, "pending"),
        _record(date(2024, 3, 2), MORNING, "approved"),
        _record(date(2024, 11, 2), MIDDAY, "rejected"),
        _record(date(2023, 3, 1), MORNING, "approved"),
    ]

    day = aggregate_report(records, ReportPeriod.DAY, date(2024, 3, 1))
    month = aggregate_report(records, ReportPeriod.MONTH, date(2024, 3, 1))
    year = aggregate_report(records, ReportPeriod.YEAR, date(2024, 3, 1))

    assert (day.total_count, month.total_count, year.total_count) == (1, 2, 3)
    for report in (day, month, year):
        assert (
            report.approved_count + report.rejected_count + report.pending_count
            == report.total_count
        )


def test_empty_report_is_all_zero():
    report = aggregate_report([], ReportPeriod.DAY, JULY_4)

    assert report.total_count == 0
    assert report.cricket_count == report.football_count == 0


def test_datetime_target_matches_bookings_of_that_day():
    records = [_record(JULY_4, MORNING, "approved")]
    evening = datetime(2024, 7, 4, 19, 30)

    assert classify_slot(evening, MORNING, records) is SlotStatus.BOOKED
    assert classify_date(evening, GroundType.FOOTBALL, records) is DateStatus.NORMAL
    assert slot_board(evening, GroundType.FOOTBALL, records)[0].status is SlotStatus.BOOKED
    assert not is_slot_bookable(evening, FOOTBALL_FULL_DAY_SLOT, GroundType.FOOTBALL, records)


def test_approved_sub_slot_stays_booked_under_pending_full_day():
    records = [
        _record(JULY_4, FOOTBALL_FULL_DAY_SLOT, "pending"),
        _record(JULY_4, MIDDAY, "approved"),
    ]

    assert classify_slot(JULY_4, MIDDAY, records) is SlotStatus.BOOKED
    assert classify_slot(JULY_4, MORNING, records) is SlotStatus.PENDING
