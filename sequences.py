def str_rev(text):
    return text[::-1]


def is_palindrome(seq):
    return list(seq) == list(reversed(seq))


def is_sorted(seq):
    for left, right in zip(seq[:-1], seq[1:]):
        if left > right:
            return False
    return True
