import random

import pytest

from kana_srs.sm2 import (
    InvalidQualityError,
    LearningItem,
    MS_PER_DAY,
    Quality,
    initialize_item,
    review_item,
    validate_quality,
)
from kana_srs.sm2.scheduler import round_half_up


def _second_rep_item(now):
    return LearningItem(
        id="card_ka",
        symbol_id="ka",
        ease_factor=2.5,
        interval=6,
        repetitions=2,
        next_review_at=now,
        last_review_at=now - 6 * MS_PER_DAY,
        lapse_count=0,
        first_learned_at=now - 7 * MS_PER_DAY,
    )


def test_good_review_at_third_repetition_has_no_bonus(noon):
    outcome = review_item(_second_rep_item(noon), 4, noon)

    assert outcome.is_correct is True
    assert outcome.item.repetitions == 3
    assert outcome.item.ease_factor == pytest.approx(2.5)
    assert outcome.item.interval == 15
    assert outcome.item.next_review_at == noon + 15 * MS_PER_DAY


def test_perfect_review_applies_easy_bonus(noon):
    outcome = review_item(_second_rep_item(noon), 5, noon)

    assert outcome.item.ease_factor == pytest.approx(2.6)
    assert outcome.item.interval == 21


def test_hard_review_applies_dampener(noon):
    outcome = review_item(_second_rep_item(noon), 3, noon)

    assert outcome.item.ease_factor == pytest.approx(2.36)
    assert outcome.item.interval == 11


def test_first_review_failure_of_new_item(noon):
    item = initialize_item("ka", noon - MS_PER_DAY)
    outcome = review_item(item, 2, noon)

    assert outcome.is_correct is False
    assert outcome.item.repetitions == 0
    assert outcome.item.interval == 1
    assert outcome.item.lapse_count == 1
    assert outcome.item.ease_factor == pytest.approx(2.3)
    assert outcome.item.first_learned_at == noon
    assert outcome.item.last_review_at == noon


def test_review_does_not_mutate_input(noon):
    item = _second_rep_item(noon)
    snapshot = LearningItem(**vars(item))

    review_item(item, 5, noon)

    assert item == snapshot


def test_first_learned_at_is_set_once(noon):
    item = initialize_item("a", noon)
    first = review_item(item, 4, noon).item
    later = review_item(first, 1, noon + 3 * MS_PER_DAY).item

    assert first.first_learned_at == noon
    assert later.first_learned_at == noon


@pytest.mark.parametrize("quality", [0, 1, 2])
def test_failing_grades_share_one_path(noon, quality):
    outcome = review_item(_second_rep_item(noon), quality, noon)

    assert outcome.item.repetitions == 0
    assert outcome.item.interval == 1
    assert outcome.item.lapse_count == 1
    assert outcome.item.ease_factor == pytest.approx(2.3)


def test_ease_factor_never_drops_below_floor(noon):
    item = initialize_item("a", noon)
    for day in range(20):
        item = review_item(item, 0, noon + day * MS_PER_DAY).item
        assert item.ease_factor >= 1.3
    assert item.ease_factor == pytest.approx(1.3)


@pytest.mark.parametrize("quality", [3, 4, 5])
def test_fixed_first_intervals(noon, quality):
    item = _second_rep_item(noon)
    item.repetitions = 0
    item.ease_factor = 1.3

    first = review_item(item, quality, noon).item
    second = review_item(first, quality, noon + MS_PER_DAY).item

    assert first.interval == 1
    assert second.interval == 6


def test_random_review_sequences_keep_invariants(noon):
    rng = random.Random(7)
    item = initialize_item("a", noon)
    timestamp = noon
    for _ in range(200):
        quality = rng.randint(0, 5)
        outcome = review_item(item, quality, timestamp)
        updated = outcome.item

        assert updated.ease_factor >= 1.3
        assert updated.interval >= 1
        assert updated.lapse_count >= item.lapse_count
        assert updated.next_review_at == timestamp + updated.interval * MS_PER_DAY
        assert outcome.is_correct == (quality >= 3)
        if outcome.is_correct:
            assert updated.repetitions == item.repetitions + 1
        else:
            assert updated.repetitions == 0

        item = updated
        timestamp = updated.next_review_at


@pytest.mark.parametrize("quality", [-1, 6, 2.5, "4", None, True])
def test_invalid_quality_is_rejected(noon, quality):
    with pytest.raises(InvalidQualityError):
        review_item(initialize_item("a", noon), quality, noon)


def test_validate_quality_returns_enum():
    assert validate_quality(5) is Quality.PERFECT


@pytest.mark.parametrize("value, expected", [(2.5, 3), (15.6, 16), (20.8, 21), (11.2, 11), (14.16, 14)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_interval_never_collapses_to_zero(noon):
    item = _second_rep_item(noon)
    item.interval = 0

    outcome = review_item(item, 4, noon)

    assert outcome.item.repetitions == 3
    assert outcome.item.interval == 1
    assert outcome.item.next_review_at == noon + MS_PER_DAY
