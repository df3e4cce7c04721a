"""General utility functions."""

__all__ = ("pad",)


def pad(value: int, width: int = 2) -> str:
    """Left-pad an integer with zeros.

    Args:
        value: Non-negative integer to render.
        width: Minimum number of digits. Defaults to 2.

    Returns:
        str: The zero-padded decimal representation.
    """
    return str(value).rjust(width, "0")
