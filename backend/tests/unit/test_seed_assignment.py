import random
from collections import Counter

import pytest

from clubhub.domain.seeding.assignment import MembershipAssignmentGenerator
from clubhub.domain.seeding.capacity import ClubCapacityTracker


def _generator(draws, scripted_random, clubs=10):
	rng = scripted_random(draws)
	return MembershipAssignmentGenerator(list(range(1, clubs + 1)), rng), rng


@pytest.mark.parametrize(
	"draws,expected",
	[
		([0.0], 0),
		([0.199], 0),
		([0.2, 0.0], 1),
		([0.5, 0.5], 3),
		([0.899, 0.999], 4),
		([0.9, 0.0], 5),
		([0.999, 0.6], 6),
	],
)
def test_draw_club_count_partitions(draws, expected, scripted_random):
	generator, rng = _generator(draws, scripted_random)
	assert generator.draw_club_count() == expected
	assert rng.consumed == len(draws)


def test_count_policy_distribution():
	rng = random.Random(20240601)
	generator = MembershipAssignmentGenerator(list(range(1, 11)), rng)
	samples = 20000
	counts = Counter(generator.draw_club_count() for _ in range(samples))

	assert set(counts) <= {0, 1, 2, 3, 4, 5, 6}
	zero = counts[0] / samples
	regular = sum(counts[n] for n in range(1, 5)) / samples
	enthusiast = (counts[5] + counts[6]) / samples
	assert zero == pytest.approx(0.2, abs=0.02)
	assert regular == pytest.approx(0.7, abs=0.02)
	assert enthusiast == pytest.approx(0.1, abs=0.015)


def test_shuffle_is_fisher_yates(scripted_random):
	# i=3 -> j=0, i=2 -> j=2, i=1 -> j=0
	generator, rng = _generator([0.0, 0.99, 0.0], scripted_random, clubs=4)
	assert generator.shuffled_club_ids() == [2, 4, 3, 1]
	assert rng.consumed == 3


def test_shuffle_returns_permutation():
	generator = MembershipAssignmentGenerator(list(range(1, 11)), random.Random(7))
	for _ in range(50):
		assert sorted(generator.shuffled_club_ids()) == list(range(1, 11))


def test_choose_clubs_zero_draw_skips_shuffle(scripted_random):
	generator, rng = _generator([0.1], scripted_random)
	tracker = ClubCapacityTracker({}, capacity=30)
	assert generator.choose_clubs(tracker) == []
	assert rng.consumed == 1


def test_choose_clubs_filters_full_clubs(scripted_random):
	# count: 0.95 -> 5..6, 0.0 -> 5; shuffle of 3 clubs: i=2 -> j=0, i=1 -> j=0 => [2, 3, 1]
	generator, _ = _generator([0.95, 0.0, 0.0, 0.0], scripted_random, clubs=3)
	tracker = ClubCapacityTracker({1: 0, 2: 30, 3: 29}, capacity=30)
	assert generator.choose_clubs(tracker) == [3, 1]


def test_choose_clubs_never_repeats_a_club():
	generator = MembershipAssignmentGenerator(list(range(1, 11)), random.Random(99))
	tracker = ClubCapacityTracker({}, capacity=30)
	for _ in range(500):
		chosen = generator.choose_clubs(tracker)
		assert len(chosen) == len(set(chosen))
		assert len(chosen) <= 6
