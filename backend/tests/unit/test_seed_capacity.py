from clubhub.domain.seeding.capacity import ClubCapacityTracker


def test_tracker_starts_from_persisted_counts():
	tracker = ClubCapacityTracker({1: 29, 2: 30}, capacity=30)
	assert tracker.has_capacity(1) is True
	assert tracker.has_capacity(2) is False
	# Clubs missing from the store count as empty.
	assert tracker.count(3) == 0
	assert tracker.has_capacity(3) is True


def test_record_join_fills_club():
	tracker = ClubCapacityTracker({1: 29}, capacity=30)
	tracker.record_join(1)
	assert tracker.count(1) == 30
	assert tracker.has_capacity(1) is False
	tracker.record_join(4)
	assert tracker.count(4) == 1


def test_tracker_copies_input_mapping():
	counts = {1: 0}
	tracker = ClubCapacityTracker(counts, capacity=2)
	tracker.record_join(1)
	assert counts == {1: 0}
