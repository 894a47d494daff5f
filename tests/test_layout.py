import pytest

from proplayout.ui.layout import (
    Axis, LayoutDirection, LayoutParameters, Participant, Rect,
    select_participants, distribute, distribute_primary, distribute_secondary,
    compute_layout,
)
from proplayout.ui.style import EdgeInsets
from proplayout.ui.widget import Widget


def make_participants(*weights):
    return tuple(Participant(child=Widget(proportion=w), weight=w) for w in weights)


def sizes_and_offsets(placements):
    return [p.size for p in placements], [p.offset for p in placements]


# -----------------------------------------------------------------------------
# Scenarios
# -----------------------------------------------------------------------------

def test_two_children_one_to_three():
    params = LayoutParameters(width=300, height=50)
    sizes, offsets = sizes_and_offsets(distribute_primary(make_participants(1, 3), params))

    assert sizes == pytest.approx([75, 225])
    assert offsets == pytest.approx([0, 75])


def test_spacing_is_removed_before_splitting():
    params = LayoutParameters(width=300, height=50, spacing=10)
    sizes, offsets = sizes_and_offsets(distribute_primary(make_participants(1, 1), params))

    assert sizes == pytest.approx([145, 145])
    assert offsets == pytest.approx([0, 155])


def test_zero_weight_child_between_others():
    params = LayoutParameters(width=400, height=50)
    sizes, offsets = sizes_and_offsets(distribute_primary(make_participants(1, 0, 3), params))

    assert sizes == pytest.approx([100, 0, 300])
    assert offsets == pytest.approx([0, 100, 100])


def test_reversed_selection():
    a = Widget(proportion=1)
    b = Widget(proportion=3)
    participants = select_participants([a, b], reverse_order=True)

    assert [p.child for p in participants] == [b, a]

    params = LayoutParameters(width=200, height=50, reverse_order=True)
    sizes, offsets = sizes_and_offsets(distribute_primary(participants, params))
    assert sizes == pytest.approx([150, 50])
    assert offsets == pytest.approx([0, 150])


# -----------------------------------------------------------------------------
# Primary axis properties
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("weights", [
    (1.0,),
    (2.0, 5.0, 0.5),
    (0.1, 0.2, 0.3, 0.4),
    (7.0, 0.0, 0.0, 1.0, 3.5),
])
@pytest.mark.parametrize("spacing", [0.0, 4.0, 12.5])
def test_sizes_partition_available_space(weights, spacing):
    params = LayoutParameters(
        width=640, height=100, spacing=spacing,
        padding=EdgeInsets(top=3, right=7, bottom=5, left=11),
    )
    placements = distribute_primary(make_participants(*weights), params)

    available = max(0.0, 640 - 18 - spacing * (len(weights) - 1))
    total = sum(weights)
    assert sum(p.size for p in placements) == pytest.approx(available)
    for weight, placement in zip(weights, placements):
        assert placement.size == pytest.approx(weight / total * available)


def test_first_offset_starts_at_leading_padding():
    params = LayoutParameters(
        direction=LayoutDirection.VERTICAL, width=100, height=200,
        padding=EdgeInsets(top=20, right=1, bottom=10, left=2),
    )
    placements = distribute_primary(make_participants(1, 1), params)

    assert placements[0].offset == pytest.approx(20)
    assert placements[1].offset == pytest.approx(20 + 85)
    assert sum(p.size for p in placements) == pytest.approx(170)


def test_zero_weight_always_zero_size():
    params = LayoutParameters(width=500, height=10, spacing=3)
    for others in [(1,), (0.01, 100), (4, 4, 4)]:
        placements = distribute_primary(make_participants(0, *others), params)
        assert placements[0].size == 0


def test_negative_weight_treated_as_zero():
    params = LayoutParameters(width=300, height=10)
    participants = (
        Participant(child=Widget(), weight=-5),
        Participant(child=Widget(), weight=1),
    )
    sizes, offsets = sizes_and_offsets(distribute_primary(participants, params))

    assert sizes == pytest.approx([0, 300])
    assert offsets == pytest.approx([0, 0])


def test_no_participants_is_noop():
    assert distribute_primary((), LayoutParameters(width=100, height=100)) == []


def test_all_zero_weights_is_noop():
    params = LayoutParameters(width=100, height=100)
    assert distribute_primary(make_participants(0, 0, 0), params) == []


def test_padding_and_spacing_larger_than_container():
    params = LayoutParameters(width=50, height=50, spacing=30, padding=EdgeInsets.all(10))
    sizes, offsets = sizes_and_offsets(distribute_primary(make_participants(1, 2), params))

    assert sizes == [0, 0]
    assert offsets == pytest.approx([10, 40])


def test_negative_spacing_clamped():
    params = LayoutParameters(width=100, height=10, spacing=-20)
    sizes, offsets = sizes_and_offsets(distribute_primary(make_participants(1, 1), params))

    assert sizes == pytest.approx([50, 50])
    assert offsets == pytest.approx([0, 50])


# -----------------------------------------------------------------------------
# Secondary axis
# -----------------------------------------------------------------------------

def test_secondary_fills_padded_extent():
    params = LayoutParameters(
        width=300, height=120, spacing=15,
        padding=EdgeInsets(top=8, right=0, bottom=12, left=0),
    )
    placements = distribute_secondary(make_participants(1, 0, 9), params)

    assert [p.offset for p in placements] == [8, 8, 8]
    assert [p.size for p in placements] == [100, 100, 100]


def test_secondary_for_vertical_direction_uses_width():
    params = LayoutParameters(
        direction=LayoutDirection.VERTICAL, width=80, height=400,
        padding=EdgeInsets(top=0, right=5, bottom=0, left=15),
    )
    placements = distribute_secondary(make_participants(2, 3), params)

    assert all(p.offset == 15 for p in placements)
    assert all(p.size == 60 for p in placements)


def test_secondary_applies_with_zero_total_weight():
    params = LayoutParameters(width=100, height=40)
    placements = distribute_secondary(make_participants(0, 0), params)

    assert [p.size for p in placements] == [40, 40]


def test_distribute_picks_role_from_direction():
    participants = make_participants(1, 1)
    horizontal = LayoutParameters(width=200, height=60)
    vertical = LayoutParameters(direction=LayoutDirection.VERTICAL, width=200, height=60)

    assert [p.size for p in distribute(participants, Axis.X, horizontal)] == pytest.approx([100, 100])
    assert [p.size for p in distribute(participants, Axis.Y, horizontal)] == [60, 60]
    assert [p.size for p in distribute(participants, Axis.X, vertical)] == [200, 200]
    assert [p.size for p in distribute(participants, Axis.Y, vertical)] == pytest.approx([30, 30])


# -----------------------------------------------------------------------------
# Selection
# -----------------------------------------------------------------------------

def test_select_skips_missing_inactive_and_unweighted():
    weighted = Widget(proportion=2)
    zero = Widget(proportion=0)
    unweighted = Widget()
    hidden = Widget(proportion=1, visible=False)

    participants = select_participants([weighted, None, unweighted, hidden, zero])

    assert [p.child for p in participants] == [weighted, zero]
    assert [p.weight for p in participants] == [2, 0]


def test_select_skips_children_of_hidden_ancestor():
    outer = Widget(visible=False)
    inner = Widget(proportion=1)
    outer.add_child(inner)

    assert select_participants([inner]) == ()


def test_select_is_idempotent_and_does_not_mutate():
    children = [Widget(proportion=1), Widget(proportion=2)]
    first = select_participants(children, reverse_order=True)
    second = select_participants(children, reverse_order=True)

    assert first == second
    assert [c.proportion for c in children] == [1, 2]


def test_reversal_keeps_size_multiset():
    children = [Widget(proportion=w) for w in (1, 2, 5)]
    params = LayoutParameters(width=800, height=10, spacing=5)

    forward = distribute_primary(select_participants(children), params)
    backward = distribute_primary(select_participants(children, reverse_order=True), params)

    assert sorted(p.size for p in forward) == pytest.approx(sorted(p.size for p in backward))
    assert [p.child for p in backward] == [p.child for p in reversed(forward)]


# -----------------------------------------------------------------------------
# Combined
# -----------------------------------------------------------------------------

def test_compute_layout_merges_axes():
    params = LayoutParameters(width=300, height=90, padding=EdgeInsets.all(5))
    results = compute_layout(make_participants(1, 2), params)

    assert [r.primary_size for r in results] == pytest.approx([96.66666666666667, 193.33333333333334])
    assert [r.secondary_offset for r in results] == [5, 5]
    assert [r.secondary_size for r in results] == [80, 80]


def test_compute_layout_zero_weight_leaves_primary_unset():
    results = compute_layout(make_participants(0), LayoutParameters(width=10, height=10))

    assert results[0].primary_offset is None
    assert results[0].primary_size is None
    assert results[0].secondary_size == 10


def test_rect_along_axis():
    rect = Rect(1, 2, 3, 4)
    rect.set_along(Axis.Y, 10, 20)

    assert rect.along(Axis.X) == (1, 3)
    assert rect.along(Axis.Y) == (10, 20)
    assert rect.bottom == 30


def test_direction_parse():
    assert LayoutDirection.parse("vertical") is LayoutDirection.VERTICAL
    assert LayoutDirection.parse(LayoutDirection.HORIZONTAL) is LayoutDirection.HORIZONTAL
    with pytest.raises(ValueError):
        LayoutDirection.parse("diagonal")
