"""Spelling out numbers in British English and counting their letters."""

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = {
    2: "twenty", 3: "thirty", 4: "forty", 5: "fifty",
    6: "sixty", 7: "seventy", 8: "eighty", 9: "ninety",
}


def _below_hundred(number: int) -> str:
    if number < 20:
        return _ONES[number]
    tens, ones = divmod(number, 10)
    return _TENS[tens] + (f"-{_ONES[ones]}" if ones else "")


def number_to_words(number: int) -> str:
    """Spell out a number from 1 to 1000, e.g. 'one hundred and fifteen'."""
    if not 1 <= number <= 1000:
        raise ValueError(f"only numbers from 1 to 1000 are spelled, got {number}")
    if number == 1000:
        return "one thousand"
    hundreds, rest = divmod(number, 100)
    parts = []
    if hundreds:
        parts.append(f"{_ONES[hundreds]} hundred")
        if rest:
            parts.append("and")
    if rest:
        parts.append(_below_hundred(rest))
    return " ".join(parts)


def letter_count(limit: int = 1000) -> int:
    """Return the number of letters used to spell every number from 1 to limit."""
    return sum(
        sum(ch.isalpha() for ch in number_to_words(number))
        for number in range(1, limit + 1)
    )