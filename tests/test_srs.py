from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from flashcard_study.schemas import Card, format_timestamp
from flashcard_study.srs import DAY, grade_and_reschedule, next_interval


T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def make_card(**overrides):
    fields = dict(id="card-1", front="Capital of France?", back="Paris", next_review=T0)
    fields.update(overrides)
    return Card(**fields)


@pytest.mark.parametrize("answer", ["Paris", " paris ", "PARIS", "\tParis\n"])
def test_answer_comparison_ignores_case_and_surrounding_whitespace(answer):
    result = grade_and_reschedule(make_card(), answer, T0)
    assert result.was_correct
    assert result.card.repetitions == 1


@pytest.mark.parametrize("answer", ["", "   ", "London", "Pari", "Par is"])
def test_incorrect_answer_is_a_lapse(answer):
    card = make_card(repetitions=4, interval=38)
    now = T0 + timedelta(hours=3)

    result = grade_and_reschedule(card, answer, now)

    assert not result.was_correct
    assert result.card.repetitions == 0
    assert result.card.interval == 1
    assert result.card.next_review == now + timedelta(milliseconds=86_400_000)


def test_consecutive_correct_answers_follow_growth_curve():
    card = make_card()
    now = T0
    intervals = []
    for _ in range(4):
        card = grade_and_reschedule(card, "paris", now).card
        intervals.append(card.interval)
        assert card.next_review == now + card.interval * DAY
        now = card.next_review
    assert intervals == [1, 6, 15, 38]
    assert card.repetitions == 4


def test_growth_rounds_halves_up():
    assert next_interval(1, 40) == 1
    assert next_interval(2, 40) == 6
    assert next_interval(3, 1) == 3
    assert next_interval(3, 3) == 8
    assert next_interval(4, 15) == 38


def test_correct_answer_always_moves_review_into_the_future():
    for card in (
        make_card(),
        make_card(repetitions=0, interval=1, next_review=T0 - timedelta(days=30)),
        make_card(repetitions=7, interval=200),
    ):
        now = T0 + timedelta(minutes=5)
        result = grade_and_reschedule(card, "Paris", now)
        assert result.card.repetitions == card.repetitions + 1
        assert result.card.interval >= 1
        assert result.card.next_review > now


def test_grading_returns_a_new_card_and_keeps_identity_fields():
    card = make_card(repetitions=1, interval=1)
    result = grade_and_reschedule(card, "paris", T0)

    assert card.repetitions == 1
    assert result.card is not card
    assert result.card.id == card.id
    assert result.card.front == card.front
    assert result.card.back == card.back


def test_study_scenario_correct_correct_incorrect():
    t1 = T0 + timedelta(hours=1)
    card = make_card(next_review=T0 - timedelta(days=1))

    card = grade_and_reschedule(card, "Paris", t1).card
    assert (card.repetitions, card.interval, card.next_review) == (1, 1, t1 + DAY)

    t2 = card.next_review + timedelta(minutes=10)
    card = grade_and_reschedule(card, "paris", t2).card
    assert (card.repetitions, card.interval, card.next_review) == (2, 6, t2 + 6 * DAY)

    t3 = card.next_review
    card = grade_and_reschedule(card, "Lyon", t3).card
    assert (card.repetitions, card.interval, card.next_review) == (0, 1, t3 + DAY)


@pytest.mark.parametrize("interval", [10**8, 10**12, 10**400])
def test_huge_intervals_do_not_overflow(interval):
    card = make_card(repetitions=5, interval=interval)
    result = grade_and_reschedule(card, "Paris", T0)
    assert result.was_correct
    assert result.card.next_review == datetime.max.replace(tzinfo=timezone.utc)


def test_back_with_whitespace_still_matches():
    card = replace(make_card(), back="  Paris ")
    assert grade_and_reschedule(card, "paris", T0).was_correct


def test_pinned_due_date_is_utc_for_any_offset():
    eastern = timezone(timedelta(hours=-5))
    now = datetime(2024, 5, 1, 4, 0, tzinfo=eastern)

    result = grade_and_reschedule(make_card(repetitions=5, interval=10**12), "Paris", now)

    assert result.card.next_review == datetime.max.replace(tzinfo=timezone.utc)
    assert format_timestamp(result.card.next_review) == "9999-12-31T23:59:59.999Z"


def test_lapse_at_end_of_calendar_does_not_overflow():
    now = datetime.max.replace(tzinfo=timezone.utc) - timedelta(hours=1)

    result = grade_and_reschedule(make_card(), "London", now)

    assert not result.was_correct
    assert result.card.next_review == datetime.max.replace(tzinfo=timezone.utc)


def test_growth_stays_exact_for_large_intervals():
    assert next_interval(3, 10**400) == (10**400 * 5) // 2
    assert next_interval(3, 10**400 + 1) == (10**400 * 5 + 6) // 2
