# ---------------------------------------------------------------------------
# File: test_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for key normalization / allocation and group tracking.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from scripthub.menu.groups import RUN_MODES_GROUP, GroupTracker
from scripthub.menu.keys import AssignReason, KeyAllocator, is_numeric_key, key_weight, normalize_key


def test_normalize_key_is_uppercase():
	assert normalize_key("x") == "X"
	assert normalize_key("Ab") == "AB"


def test_key_weight_orders_numbers_numerically_and_first():
	keys = ["10", "B", "2", "A", "1"]
	ordered = sorted(keys, key=key_weight)

	assert ordered[:3] == ["1", "2", "10"]
	# non-numeric keys share one weight; stable sort keeps their order
	assert ordered[3:] == ["B", "A"]


def test_is_numeric_key():
	assert is_numeric_key("12") is True
	assert is_numeric_key("1a") is False
	assert is_numeric_key("") is False


def test_allocator_keeps_free_explicit_key():
	alloc = KeyAllocator()
	a = alloc.assign("7")

	assert a.key == "7"
	assert a.reassigned is False


def test_allocator_assigns_for_missing_key():
	alloc = KeyAllocator()
	a = alloc.assign("")

	assert a.key == "1"
	assert a.reason is AssignReason.MISSING


def test_allocator_collision_is_case_insensitive():
	alloc = KeyAllocator()
	alloc.assign("x")
	a = alloc.assign("X")

	assert a.reason is AssignReason.COLLISION
	assert a.key == "1"
	assert a.requested == "X"


def test_allocator_skips_reserved_numbers():
	alloc = KeyAllocator()
	alloc.assign("1")
	alloc.assign("2")

	assert alloc.assign("").key == "3"
	assert alloc.assign("").key == "4"


def test_allocator_counter_only_moves_forward():
	alloc = KeyAllocator()
	assert alloc.assign("").key == "1"
	assert alloc.assign("3").key == "3"
	assert alloc.assign("").key == "2"
	assert alloc.assign("").key == "4"


def test_group_tracker_first_seen_order_and_no_duplicates():
	g = GroupTracker()
	for name in ["A", "B", "A", "C", "B"]:
		g.see(name)

	assert g.groups == ["A", "B", "C"]
	assert len(g) == 3
	assert "B" in g
	assert g.index("C") == 2


def test_group_tracker_force_last_moves_group():
	g = GroupTracker()
	for name in ["A", RUN_MODES_GROUP, "C"]:
		g.see(name)

	g.force_last(RUN_MODES_GROUP)

	assert g.groups == ["A", "C", RUN_MODES_GROUP]


def test_group_tracker_force_last_absent_is_noop():
	g = GroupTracker()
	g.see("A")
	g.force_last(RUN_MODES_GROUP)

	assert g.groups == ["A"]


def test_group_tracker_reset():
	g = GroupTracker()
	g.see("A")
	g.reset()

	assert list(g) == []
