"""Puzzles over lists of numbers, names and records."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, groupby
from typing import Iterable, Sequence

_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
}
_ICOSAHEDRON_FACES = 20
_HORSESHOES = 4
_CRIME = -1


def polyhedron_faces(names: Iterable[str]) -> int:
    """Total faces of a collection of regular polyhedra.

    Any name other than the four listed counts as an icosahedron.
    """
    return sum(_FACES.get(name, _ICOSAHEDRON_FACES) for name in names)


def general_swaps(heights: Sequence[int]) -> int:
    """Neighbour swaps needed to put the tallest soldier first and the shortest last."""
    if not heights:
        raise ValueError("at least one soldier is needed")
    tallest = max(heights)
    shortest = min(heights)
    max_index = heights.index(tallest)
    min_index = len(heights) - 1 - heights[::-1].index(shortest)
    swaps = max_index + (len(heights) - 1 - min_index)
    if max_index > min_index:
        swaps -= 1
    return swaps


def uniform_clashes(teams: Sequence[tuple[int, int]]) -> int:
    """Games in which the home team must wear its guest uniform.

    Each team is a (home colour, guest colour) pair and every team hosts
    every other team once.
    """
    guest_colours = Counter(guest for _, guest in teams)
    matches = sum(guest_colours[home] for home, _ in teams)
    self_matches = sum(1 for home, guest in teams if home == guest)
    return matches - self_matches


def rooms_with_space(rooms: Iterable[tuple[int, int]]) -> int:
    """Rooms, given as (occupants, capacity), with space for two more people."""
    return sum(1 for occupants, capacity in rooms if capacity - occupants >= 2)


def can_pass_all_levels(
    n: int, x_levels: Iterable[int], y_levels: Iterable[int]
) -> bool:
    """Return True if the two players together can pass all n levels."""
    return len(set(x_levels) | set(y_levels)) == n


def is_easy(opinions: Iterable[int]) -> bool:
    """Return True if nobody answered 1, meaning the problem is easy."""
    return not any(opinion == 1 for opinion in opinions)


def horseshoes_to_buy(colors: Sequence[int]) -> int:
    """Horseshoes to buy so that all four have different colours."""
    if len(colors) != _HORSESHOES:
        raise ValueError("exactly four horseshoes are expected")
    return _HORSESHOES - len(set(colors))


def magnet_groups(magnets: Iterable[str]) -> int:
    """Groups formed by a row of magnets, each written as '01' or '10'."""
    return sum(1 for _ in groupby(magnets))


def advancers(scores: Sequence[int], k: int) -> int:
    """Participants with a positive score at least that of the k-th place."""
    if not 1 <= k <= len(scores):
        raise ValueError("k must name a place among the scores")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score > 0 and score >= threshold)


def untreated_crimes(events: Iterable[int]) -> int:
    """Crimes (-1) that happen while no officer is free; other events hire officers."""
    free = 0
    untreated = 0
    for event in events:
        if event == _CRIME:
            if free <= 0:
                untreated += 1
            else:
                free -= 1
        else:
            free += event
    return untreated


def gift_givers(receivers: Sequence[int]) -> list[int]:
    """For each friend, the friend who gave them a gift.

    The i-th entry of receivers (counting from 1) is the friend that friend i
    gave a gift to.
    """
    n = len(receivers)
    if sorted(receivers) != list(range(1, n + 1)):
        raise ValueError("receivers must be a permutation of 1..n")
    givers = [0] * n
    for giver, receiver in enumerate(receivers, start=1):
        givers[receiver - 1] = giver
    return givers


def problems_solved(votes: Iterable[tuple[int, int, int]]) -> int:
    """Problems at least two of the three friends are sure about."""
    return sum(1 for triple in votes if sum(1 for v in triple if v) >= 2)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest tram capacity, given (exiting, entering) passengers per stop."""
    loads = list(accumulate(entering - exiting for exiting, entering in stops))
    if not loads:
        raise ValueError("at least one stop is needed")
    return max(loads)


def fence_width(heights: Iterable[int], h: int) -> int:
    """Road width needed for friends to pass a fence of height h.

    Anyone taller than the fence bends and takes up the width of that many
    fence heights, rounded up.
    """
    if h <= 0:
        raise ValueError("fence height must be positive")
    return sum(1 if height <= h else -(-height // h) for height in heights)


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity pulls every cube to the right."""
    return sorted(columns)


def min_coins_to_take(coins: Iterable[int]) -> int:
    """Fewest coins whose sum is strictly more than the sum of the rest."""
    ordered = sorted(coins, reverse=True)
    total = sum(ordered)
    taken = 0
    for count, coin in enumerate(ordered, start=1):
        taken += coin
        if taken > total - taken:
            return count
    return len(ordered)