"""Domain normalization helpers."""


def normalize_identity(identity: str | None) -> str | None:
    """Normalize a party address for case-insensitive comparison.

    Args:
        identity: Raw identity (address) from a market payload.

    Returns:
        str | None: Lower-cased identity, or None when blank.
    """
    if not identity:
        return None
    cleaned = identity.strip()
    return cleaned.lower() if cleaned else None


def normalize_category(category: str | None) -> str | None:
    """Normalize an ad unit category tag.

    Args:
        category: Raw ad unit type from a market payload.

    Returns:
        str | None: Stripped category, or None when blank.
    """
    if not category:
        return None
    cleaned = category.strip()
    return cleaned or None


__all__ = ["normalize_identity", "normalize_category"]
