from types import MappingProxyType

from number_theory import digits

MAX_VALUE = 1000

NUMBER_WORDS = MappingProxyType(
    {
        0: "zero",
        1: "one",
        2: "two",
        3: "three",
        4: "four",
        5: "five",
        6: "six",
        7: "seven",
        8: "eight",
        9: "nine",
        10: "ten",
        11: "eleven",
        12: "twelve",
        13: "thirteen",
        14: "fourteen",
        15: "fifteen",
        16: "sixteen",
        17: "seventeen",
        18: "eighteen",
        19: "nineteen",
        20: "twenty",
        30: "thirty",
        40: "forty",
        50: "fifty",
        60: "sixty",
        70: "seventy",
        80: "eighty",
        90: "ninety",
        100: "one hundred",
        1000: "one thousand",
    }
)


def _lookup(value):
    assert value in NUMBER_WORDS, f"no word for {value}"
    return NUMBER_WORDS[value]


def _words_1_digit(ones):
    return _lookup(ones)


def _words_2_digits(tens, ones):
    if tens == 1:
        return _lookup(10 + ones)
    if ones == 0:
        return _lookup(tens * 10)
    return f"{_lookup(tens * 10)}-{_lookup(ones)}"


def _words_3_digits(hundreds, tens, ones):
    head = _words_1_digit(hundreds)
    if tens == 0 and ones == 0:
        return f"{head} hundred"
    if tens == 0:
        return f"{head} hundred and {_words_1_digit(ones)}"
    return f"{head} hundred and {_words_2_digits(tens, ones)}"


def spell_number(value):
    """Spell out an integer between 0 and 1000 (inclusive) in English words."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"spell_number() requires an int, got {type(value).__name__}.")
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"spell_number() supports 0..{MAX_VALUE}, got {value}.")
    parts = digits(value)
    if len(parts) == 1:
        return _words_1_digit(*parts)
    if len(parts) == 2:
        return _words_2_digits(*parts)
    if len(parts) == 3:
        return _words_3_digits(*parts)
    return _lookup(value)


def letter_count(value):
    """Number of letters in the spelled form, ignoring spaces and hyphens."""
    words = spell_number(value)
    return len(words.replace(" ", "").replace("-", ""))
