"""Name normalization shared by all schema records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

INVALID_NAME_CHARACTERS: Final[str] = "<>{}|#"
MAX_NAME_BYTES: Final[int] = 255

_LABEL_PREFIXES: Final[tuple[tuple[str, ...], ...]] = (("Has ", "Has_"), ("Is ", "Is_"))


class InvalidNameError(ValueError):
    """Raised when a record name is empty, too long or uses reserved characters."""


def normalize_name(value: str, *, kind: str = "Category") -> str:
    name = value.strip()
    if not name:
        raise InvalidNameError(f"{kind} name cannot be empty")
    if any(char in INVALID_NAME_CHARACTERS for char in name):
        raise InvalidNameError(f"{kind} '{name}' contains invalid characters")
    if len(name.encode("utf-8")) > MAX_NAME_BYTES:
        raise InvalidNameError(f"{kind} '{name[:32]}...' exceeds {MAX_NAME_BYTES} bytes")
    return name


def is_valid_name(value: str) -> bool:
    try:
        normalize_name(value)
    except InvalidNameError:
        return False
    return True


def normalize_names(values: Iterable[str]) -> tuple[str, ...]:
    """Trim, drop blanks and dedupe while keeping first occurrence order."""

    out: list[str] = []
    for value in values:
        name = str(value).strip()
        if name and name not in out:
            out.append(name)
    return tuple(out)


def generate_label(name: str) -> str:
    """Human-readable fallback label, e.g. ``"Has full_name"`` -> ``"Full Name"``."""

    clean = name.strip()
    for prefixes in _LABEL_PREFIXES:
        for prefix in prefixes:
            if clean.startswith(prefix):
                clean = clean[len(prefix) :]
                break
    words = clean.replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def promote_required(
    required: Iterable[str],
    optional: Iterable[str],
) -> tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]:
    """Split buckets so that required wins.

    Returns ``(required, optional, promoted)`` where ``promoted`` lists the names
    that were declared in both buckets and now live in ``required`` only.
    """

    normalized_required = normalize_names(required)
    normalized_optional = normalize_names(optional)
    required_set = set(normalized_required)
    promoted = tuple(name for name in normalized_optional if name in required_set)
    remaining = tuple(name for name in normalized_optional if name not in required_set)
    return normalized_required, remaining, promoted
