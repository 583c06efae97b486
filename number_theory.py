from math import isqrt

import sequences


def digits(value):
    """Decimal digits of a non-negative integer, most significant first."""
    if value < 0:
        raise ValueError(f"digits() requires a non-negative integer, got {value}.")
    if value == 0:
        return [0]
    result = []
    while value > 0:
        value, digit = divmod(value, 10)
        result.append(digit)
    result.reverse()
    return result


def is_palindrome(value):
    if value < 0:
        return False
    return sequences.is_palindrome(digits(value))


def is_prime(value):
    # Trial division; fine for scripting, slow for large inputs.
    if value < 2:
        return False
    if value == 2:
        return True
    if value % 2 == 0:
        return False
    for divisor in range(3, isqrt(value) + 1, 2):
        if value % divisor == 0:
            return False
    return True
