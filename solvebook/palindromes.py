"""The next larger palindromic number."""


def next_palindrome(number_text: str) -> str:
    """Return the smallest palindromic number strictly greater than the given one.

    The number is given and returned as a decimal string, so it may be of any length.
    """
    text = number_text.strip()
    if not text or not all("0" <= ch <= "9" for ch in text):
        raise ValueError(f"not a non-negative decimal number: {number_text!r}")
    text = text.lstrip("0") or "0"
    size = len(text)
    half = (size + 1) // 2

    def mirrored(prefix: str) -> str:
        return prefix + prefix[: size // 2][::-1]

    candidate = mirrored(text[:half])
    if candidate > text:
        return candidate
    bumped = str(int(text[:half]) + 1).zfill(half)
    if len(bumped) > half:
        return "1" + "0" * (size - 1) + "1"
    return mirrored(bumped)