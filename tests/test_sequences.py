import pytest

from contestkit.sequences import (
    advancers,
    can_pass_all_levels,
    fence_width,
    general_swaps,
    gift_givers,
    gravity_flip,
    horseshoes_to_buy,
    is_easy,
    magnet_groups,
    min_coins_to_take,
    polyhedron_faces,
    problems_solved,
    rooms_with_space,
    tram_capacity,
    uniform_clashes,
    untreated_crimes,
)


@pytest.mark.parametrize(
    "name, faces",
    [
        ("Tetrahedron", 4),
        ("Cube", 6),
        ("Octahedron", 8),
        ("Dodecahedron", 12),
        ("Icosahedron", 20),
    ],
)
def test_polyhedron_faces_single(name, faces):
    assert polyhedron_faces([name]) == faces


def test_polyhedron_faces_is_additive():
    names = ["Cube", "Tetrahedron", "Icosahedron"]
    assert polyhedron_faces(names) == sum(polyhedron_faces([n]) for n in names)
    assert polyhedron_faces([]) == 0


def test_general_swaps_already_in_order():
    assert general_swaps([9, 7, 5, 3, 1]) == 0


def test_general_swaps_worked_example():
    assert general_swaps([33, 44, 11, 22]) == 2


def test_general_swaps_reversed_pair_crossing():
    heights = [1, 5]
    assert general_swaps(heights) == len(heights) - 1


def test_general_swaps_empty():
    with pytest.raises(ValueError):
        general_swaps([])


def test_uniform_clashes_none():
    assert uniform_clashes([(1, 2), (3, 4), (5, 6)]) == 0


def test_uniform_clashes_worked_example():
    assert uniform_clashes([(1, 2), (2, 4), (3, 4)]) == 1


def test_uniform_clashes_ignores_own_colours():
    assert uniform_clashes([(7, 7)]) == 0


def test_rooms_with_space():
    full = [(1, 1), (2, 3), (5, 5)]
    roomy = [(0, 2), (1, 10)]
    assert rooms_with_space(full) == 0
    assert rooms_with_space(roomy) == len(roomy)
    assert rooms_with_space(full + roomy) == len(roomy)


def test_can_pass_all_levels():
    assert can_pass_all_levels(4, [1, 2, 3], [2, 4]) is True
    assert can_pass_all_levels(4, [1, 2, 3], [2, 3]) is False


def test_is_easy():
    assert is_easy([0, 0, 0]) is True
    assert is_easy([0, 1, 0]) is False


def test_horseshoes_all_different():
    assert horseshoes_to_buy([1, 7, 3, 3]) == 1
    assert horseshoes_to_buy([1, 2, 3, 4]) == 0


def test_horseshoes_wrong_count():
    with pytest.raises(ValueError):
        horseshoes_to_buy([1, 2, 3])


def test_magnet_groups():
    same = ["10", "10", "10"]
    alternating = ["01", "10", "01", "10"]
    assert magnet_groups(same) == 1
    assert magnet_groups(alternating) == len(alternating)


def test_advancers_all_zero():
    assert advancers([0, 0, 0, 0], 2) == 0


def test_advancers_all_equal():
    scores = [5, 5, 5, 5]
    assert advancers(scores, 1) == len(scores)


def test_advancers_threshold_respected():
    scores = [10, 9, 8, 7, 7, 7, 5, 5]
    result = advancers(scores, 5)
    assert result == sum(1 for s in scores if s >= scores[4])


def test_advancers_bad_k():
    with pytest.raises(ValueError):
        advancers([3, 2, 1], 4)
    with pytest.raises(ValueError):
        advancers([3, 2, 1], 0)


def test_untreated_crimes():
    crimes = [-1, -1, -1]
    assert untreated_crimes(crimes) == len(crimes)
    assert untreated_crimes([1, -1]) == 0
    assert untreated_crimes([-1, 2, -1, -1]) == 1


def test_gift_givers_identity():
    identity = [1, 2, 3, 4]
    assert gift_givers(identity) == identity


def test_gift_givers_inverse_round_trip():
    receivers = [2, 3, 4, 1]
    givers = gift_givers(receivers)
    assert gift_givers(givers) == receivers
    assert all(receivers[g - 1] == friend for friend, g in enumerate(givers, 1))


def test_gift_givers_invalid():
    with pytest.raises(ValueError):
        gift_givers([1, 1, 3])


def test_problems_solved():
    votes = [(1, 1, 0), (1, 1, 1), (1, 0, 0), (0, 1, 1), (1, 0, 1), (0, 0, 0)]
    sure = [v for v in votes if sum(v) >= 2]
    assert problems_solved(votes) == len(sure)
    assert problems_solved([(1, 0, 0)]) == 0


def test_tram_capacity():
    assert tram_capacity([(0, 6)]) == 6
    assert tram_capacity([(0, 6), (6, 0)]) == 6


def test_tram_capacity_empty():
    with pytest.raises(ValueError):
        tram_capacity([])


def test_fence_width():
    short = [1, 2, 3]
    assert fence_width(short, 3) == len(short)
    assert fence_width([4, 5, 6], 1) == 4 + 5 + 6


def test_fence_width_bad_height():
    with pytest.raises(ValueError):
        fence_width([1], 0)


def test_gravity_flip():
    columns = [3, 2, 1, 2]
    flipped = gravity_flip(columns)
    assert flipped == sorted(columns)
    assert sorted(flipped) == flipped
    assert columns == [3, 2, 1, 2]


def test_min_coins_to_take_single():
    assert min_coins_to_take([5]) == 1


def test_min_coins_to_take_worked_example():
    assert min_coins_to_take([3, 3]) == 2


def test_min_coins_to_take_invariant():
    coins = [2, 1, 2, 8, 4, 4]
    taken = min_coins_to_take(coins)
    ordered = sorted(coins, reverse=True)
    assert sum(ordered[:taken]) > sum(ordered[taken:])
    assert sum(ordered[: taken - 1]) <= sum(ordered[taken - 1:])