"""Word sorting"""

from typing import List, Sequence


def sort_words(words: Sequence[str]) -> List[str]:
    """
    Sort words lexicographically with a pairwise exchange sort.

    Each position i is compared with every later position j and the two are
    swapped when words[i] > words[j]. Comparison is ordinal (code point by
    code point), so "Zebra" sorts before "apple".

    Returns a new list; the input is left untouched.
    """
    ordered = list(words)
    for i in range(len(ordered) - 1):
        for j in range(i + 1, len(ordered)):
            if ordered[i] > ordered[j]:
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered
