"""Text and character-sequence puzzles."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Iterable

_INCREMENTS = frozenset({"++X", "X++"})


def amusing_joke(guest: str, host: str, pile: str) -> bool:
    """Return True if the pile of letters is exactly the two names mixed together."""
    return sorted(guest + host) == sorted(pile)


def anton_and_danik(outcomes: str) -> str:
    """Name who won more games, given one 'A' or 'D' per game."""
    anton = outcomes.count("A")
    danik = len(outcomes) - anton
    if anton > danik:
        return "Anton"
    if danik > anton:
        return "Danik"
    return "Friendship"


def distinct_letters(text: str) -> int:
    """Count the distinct ASCII letters in a set written like '{a, b, c}'."""
    return len({c for c in text if c.isascii() and c.isalpha()})


def boy_or_girl(username: str) -> str:
    """Guess the gender from the parity of distinct characters in a user name."""
    if len(set(username)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def helpful_maths(expression: str) -> str:
    """Rearrange a sum such as '3+2+1' so its summands are in non-decreasing order."""
    return "+".join(sorted(expression[::2]))


def is_pangram(text: str) -> bool:
    """Return True if the text, case ignored, holds at least 26 different characters."""
    return len(set(text.upper())) >= 26


def compare_ignoring_case(first: str, second: str) -> int:
    """Compare two strings case-insensitively, returning -1, 0 or 1."""
    a, b = first.lower(), second.lower()
    return (a > b) - (a < b)


def is_translation(word: str, translated: str) -> bool:
    """Return True if the translation is the word spelt backwards."""
    return word == translated[::-1]


def ultra_fast_xor(first: str, second: str) -> str:
    """XOR two binary strings of equal length digit by digit."""
    if len(first) != len(second):
        raise ValueError("both numbers must have the same length")
    return "".join("1" if a != b else "0" for a, b in zip(first, second))


def abbreviate(word: str) -> str:
    """Shorten words longer than ten characters to first letter, count, last letter."""
    if len(word) <= 10:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def fix_word_case(word: str) -> str:
    """Switch a word to all lower or all upper case, whichever needs fewer changes."""
    upper = sum(1 for c in word if c.isupper())
    lower = len(word) - upper
    return word.lower() if lower >= upper else word.upper()


def capitalize_word(word: str) -> str:
    """Upper-case the first letter of a word, leaving the rest untouched."""
    if not word:
        raise ValueError("word must not be empty")
    return word[0].upper() + word[1:]


def is_dangerous(situation: str) -> bool:
    """Return True if at least seven players of one team stand in a row."""
    return any(len(list(run)) >= 7 for _, run in groupby(situation))


def produces_output(program: str) -> bool:
    """Return True if an HQ9+ program prints anything."""
    return any(c in "HQ9" for c in program)


def stones_to_remove(colors: str) -> int:
    """Count the stones to take away so that no neighbours share a colour."""
    return sum(a == b for a, b in zip(colors, colors[1:]))


def queue_after(queue: str, seconds: int) -> str:
    """Let each boy step behind the girl behind him once per second."""
    for _ in range(seconds):
        queue = queue.replace("BG", "GB")
    return queue


def hulk_feelings(layers: int) -> str:
    """Describe Dr. Banner's feelings with the given number of layers."""
    if layers <= 0:
        return ""
    parts = ["I hate" if layer % 2 else "I love" for layer in range(1, layers + 1)]
    return " that ".join(parts) + " it"


def snake_pattern(rows: int, cols: int) -> list[str]:
    """Draw the fox's snake on a grid, one string per row."""
    full = "#" * cols
    right_turn = "." * (cols - 1) + "#"
    left_turn = "#" + "." * (cols - 1)
    lines = []
    turns = 0
    for row in range(1, rows + 1):
        if row % 2:
            lines.append(full)
        else:
            lines.append(right_turn if turns % 2 == 0 else left_turn)
            turns += 1
    return lines


def run_bit_program(statements: Iterable[str]) -> int:
    """Run a Bit++ program starting from x = 0 and return the final value of x."""
    counts = Counter(s in _INCREMENTS for s in statements)
    return counts[True] - counts[False]