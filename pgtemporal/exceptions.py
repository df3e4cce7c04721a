from typing import Any, Optional

__all__ = (
    "InvalidInstantError",
    "PGTemporalError",
    "TemporalDecodeError",
    "TemporalEncodeError",
    "TemporalFormatError",
    "TemporalModeError",
)


class PGTemporalError(Exception):
    """Base exception class from which all pgtemporal exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``PGTemporalError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class TemporalDecodeError(PGTemporalError, ValueError):
    """A date/time string could not be turned into an instant."""

    def __init__(self, message: Optional[str] = None, value: Optional[str] = None) -> None:
        if message is None:
            message = "Issues decoding date/time string."
        self.value = value
        super().__init__(message)


class TemporalEncodeError(PGTemporalError):
    """An instant could not be rendered as a date/time string."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues encoding instant."
        super().__init__(message)


class InvalidInstantError(TemporalEncodeError):
    """Fields were requested from the invalid-instant sentinel."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Invalid instant has no calendar fields."
        super().__init__(message)


class TemporalModeError(PGTemporalError, ValueError):
    """Unknown zone interpretation mode."""

    def __init__(self, mode: Any) -> None:
        super().__init__(f"Unknown zone mode {mode!r}; expected 'UTC', 'local' or None")


class TemporalFormatError(PGTemporalError, ValueError):
    """Unknown output string format."""

    def __init__(self, fmt: Any) -> None:
        super().__init__(
            f"Unknown temporal format {fmt!r}; expected one of "
            "'timestamptz', 'timestamp:UTC', 'timestamp:local', 'date:UTC', 'date:local'"
        )
