"""Alphabetical value scores for lists of names."""

from string import ascii_letters, ascii_uppercase


def parse_names(text: str) -> list[str]:
    """Split comma-separated names, keeping only their letters and dropping empty entries."""
    names = ("".join(ch for ch in part if ch in ascii_letters) for part in text.split(","))
    return [name for name in names if name]


def name_score(name: str) -> int:
    """Return the sum of the alphabet positions of the letters of name (A=1, ..., Z=26)."""
    letters = name.upper()
    if any(ch not in ascii_uppercase for ch in letters):
        raise ValueError(f"names may contain only letters A-Z, got {name!r}")
    return sum(ord(ch) - ord("A") + 1 for ch in letters)


def total_name_scores(text: str) -> int:
    """Sort the names in text and return the sum of position times alphabetical value."""
    ordered = sorted(parse_names(text))
    return sum(position * name_score(name) for position, name in enumerate(ordered, start=1))