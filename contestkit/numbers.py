"""Arithmetic puzzles."""

from __future__ import annotations

from itertools import count
from typing import Sequence

_BILLS = (100, 20, 10, 5, 1)
_LARGEST_DISTINCT = 9876543210


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def years_until_bigger(limak: int, bob: int) -> int:
    """Years until Limak, tripling yearly, outweighs Bob, doubling yearly."""
    if limak <= 0:
        raise ValueError("weights must be positive")
    years = 0
    while limak <= bob:
        limak *= 3
        bob *= 2
        years += 1
    return years


def _has_distinct_digits(year: int) -> bool:
    text = str(year)
    return len(set(text)) == len(text)


def next_distinct_year(year: int) -> int:
    """Smallest year after the given one whose digits are all different."""
    if year >= _LARGEST_DISTINCT:
        raise ValueError("no later year has distinct digits")
    return next(y for y in count(year + 1) if _has_distinct_digits(y))


def calculating_function(n: int) -> int:
    """Value of -1 + 2 - 3 + ... + (-1)^n * n."""
    if n % 2 == 0:
        return _trunc_div(n, 2)
    return -_trunc_div(n + 1, 2)


def candy_distributions(n: int) -> int:
    """Ways to split n candies so the elder sister gets strictly more and both get some."""
    return _trunc_div(n - 1, 2)


def moves_to_divisible(a: int, b: int) -> int:
    """Fewest increments of a needed to make it divisible by b."""
    return (b - a % b) % b


def max_dominoes(m: int, n: int) -> int:
    """Most 2x1 dominoes that fit on an m by n board."""
    return m * n // 2


def orange_fraction(percentages: Sequence[float]) -> float:
    """Percentage of orange juice in a cocktail of equal parts of each drink."""
    if not percentages:
        raise ValueError("at least one drink is needed")
    return sum(percentages) / len(percentages)


def elephant_steps(distance: int) -> int:
    """Fewest steps of length 1 to 5 that cover the distance."""
    return (distance + 4) // 5


def min_bills(amount: int) -> int:
    """Fewest bills of 1, 5, 10, 20 and 100 that make up the amount."""
    bills = 0
    for bill in _BILLS:
        used, amount = divmod(amount, bill)
        bills += used
    return bills


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count dragons 1..d whose number is a multiple of any of k, l, m, n."""
    return sum(
        1
        for dragon in range(1, d + 1)
        if any(dragon % step == 0 for step in (k, l, m, n))
    )


def _is_lucky(value: int) -> bool:
    return value > 0 and set(str(value)) <= {"4", "7"}


def is_nearly_lucky(number: int) -> bool:
    """Return True if the count of lucky digits 4 and 7 is itself a lucky number."""
    digits = str(number) if number > 0 else ""
    return _is_lucky(sum(1 for d in digits if d in "47"))


def toasts_per_friend(
    n: int, k: int, l: int, c: int, d: int, p: int, nl: int, np: int
) -> int:
    """Toasts each of n friends can make given the drink, limes and salt at hand."""
    by_drink = k * l // nl
    by_limes = c * d
    by_salt = p // np
    return min(by_drink, by_limes, by_salt) // n


def borrow_needed(k: int, n: int, w: int) -> int:
    """Dollars to borrow to buy w bananas costing k, 2k, ... with n dollars in hand."""
    return max(0, k * w * (w + 1) // 2 - n)


def one_is_sum(a: int, b: int, c: int) -> bool:
    """Return True if one of the three numbers is the sum of the other two."""
    return a + b == c or a + c == b or b + c == a


def round_summands(n: int) -> list[int]:
    """Split n into the fewest round numbers, lowest place first."""
    parts = []
    place = 1
    while n > 0:
        n, digit = divmod(n, 10)
        if digit:
            parts.append(digit * place)
        place *= 10
    return parts


def can_split_watermelon(weight: int) -> bool:
    """Return True if the weight splits into two positive even parts."""
    return weight % 2 == 0 and weight > 2


def wrong_subtract(n: int, k: int) -> int:
    """Subtract one k times the way Tanya does it."""
    for _ in range(k):
        n = n - 1 if n % 10 else n // 10
    return n


def even_odds(n: int, k: int) -> int:
    """The k-th number when 1..n is listed odds first, then evens."""
    odds = (n + 1) // 2
    if k <= odds:
        return 2 * k - 1
    return 2 * (k - odds)


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Row and column swaps needed to move the single 1 to the centre of a 5x5 grid."""
    ones = [
        (r, c)
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if value == 1
    ]
    if not ones:
        raise ValueError("matrix holds no 1")
    r, c = ones[-1]
    return abs(r - 2) + abs(c - 2)


def meeting_distance(x1: int, x2: int, x3: int) -> int:
    """Least total distance three friends on a line travel to meet."""
    points = sorted((x1, x2, x3))
    return points[-1] - points[0]