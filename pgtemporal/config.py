"""Configuration objects for the temporal codec."""

from dataclasses import dataclass

__all__ = ("TemporalConfig",)


@dataclass(slots=True)
class TemporalConfig:
    """Controls how the codec treats input it cannot parse.

    Attributes:
        strict: Raise ``TemporalDecodeError`` for malformed input, and for
            zone-less strings decoded without a zone mode, instead of
            returning ``Instant.invalid()``.
        log_invalid: Emit a DEBUG record whenever decoding yields an invalid
            instant.
    """

    strict: bool = False
    log_invalid: bool = True

    def copy(self) -> "TemporalConfig":
        """Return a copy to avoid sharing mutable state."""

        return TemporalConfig(strict=self.strict, log_invalid=self.log_invalid)

