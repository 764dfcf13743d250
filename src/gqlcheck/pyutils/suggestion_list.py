from typing import Collection, List

__all__ = ["suggestion_list", "edit_distance"]


def suggestion_list(input_: str, options: Collection[str]) -> List[str]:
    """Pick the options that look like a misspelling of the input.

    An option is kept when its edit distance to the input is at most half the
    length of the longer of both, but at least one. The closest options come
    first, options with the same distance are ordered alphabetically.
    """
    half_input = len(input_) // 2
    scored = []
    for option in options:
        distance = edit_distance(input_, option)
        if distance <= max(half_input, len(option) // 2, 1):
            scored.append((distance, option))
    return [option for _distance, option in sorted(set(scored))]


def edit_distance(a: str, b: str) -> int:
    """Count the edits needed to turn one string into the other.

    Insertions, deletions, substitutions and swaps of two neighbouring characters
    count as one edit each. Differences in case alone count as a single edit for
    the whole string.
    """
    if a == b:
        return 0
    a, b = a.lower(), b.lower()
    if a == b:
        return 1

    # rows of the Damerau-Levenshtein matrix, two_back is needed for swaps
    two_back: List[int] = []
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            cost = previous[j - 1] + (char_a != char_b)
            cost = min(cost, previous[j] + 1, current[j - 1] + 1)
            if i > 1 and j > 1 and char_a == b[j - 2] and a[i - 2] == char_b:
                cost = min(cost, two_back[j - 2] + 1)
            current.append(cost)
        two_back, previous = previous, current
    return previous[-1]
