"""Lexicographic permutations.

``next_permutation`` rearranges a mutable sequence into the next greater
arrangement of its elements:

1. Find the largest index ``k`` such that ``seq[k] < seq[k + 1]``. If there is
   none, the sequence is already the last permutation.
2. Find the largest index ``l`` such that ``seq[k] < seq[l]``. ``k + 1``
   qualifies, so ``l`` always exists.
3. Swap ``seq[k]`` and ``seq[l]``.
4. Reverse ``seq[k + 1:]``.
"""


def _reverse(seq, start, end):
    while start < end:
        seq[start], seq[end] = seq[end], seq[start]
        start += 1
        end -= 1


def next_permutation(seq):
    """Advance ``seq`` in place to its lexicographic successor.

    Returns False, leaving ``seq`` untouched, when it is already the last
    (non-increasing) permutation. Sequences shorter than two have no successor.
    """
    if len(seq) < 2:
        return False
    k = len(seq) - 2
    while not seq[k] < seq[k + 1]:
        if k == 0:
            return False
        k -= 1
    l = len(seq) - 1
    while not seq[k] < seq[l]:
        l -= 1
    seq[k], seq[l] = seq[l], seq[k]
    _reverse(seq, k + 1, len(seq) - 1)
    return True


def lexicographic_permutations(items):
    """Yield every distinct ordering of ``items`` as a new list, smallest first."""
    current = sorted(items)
    yield list(current)
    while next_permutation(current):
        yield list(current)
