"""Pattern search with prefix functions and decoding of shifted ciphers."""


def prefix_function(pattern: str) -> list[int]:
    """Return the prefix function of pattern.

    Entry i is the length of the longest proper prefix of pattern[:i + 1]
    that is also a suffix of it.
    """
    table = [0] * len(pattern)
    for index, ch in enumerate(pattern[1:], start=1):
        length = table[index - 1]
        while length > 0 and ch != pattern[length]:
            length = table[length - 1]
        if ch == pattern[length]:
            length += 1
        table[index] = length
    return table


def find_all(pattern: str, text: str) -> list[int]:
    """Return the start index of every occurrence of pattern in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_function(pattern)
    positions = []
    matched = 0
    for index, ch in enumerate(text):
        while matched > 0 and ch != pattern[matched]:
            matched = table[matched - 1]
        if ch == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                positions.append(index - matched + 1)
                matched = table[matched - 1]
    return positions


def decipher(encoded: str) -> str:
    """Decode a string in which every letter is followed later by its closing copy.

    Each letter of the message is taken, then everything up to and including
    the next occurrence of the same letter is skipped.
    """
    result = []
    position = 0
    while position < len(encoded):
        ch = encoded[position]
        result.append(ch)
        closing = encoded.find(ch, position + 1)
        position = (closing if closing != -1 else position) + 1
    return "".join(result)