"""Central configuration for the tscol column encoders."""

from dataclasses import dataclass

DEFAULT_CHECKPOINT_INTERVAL = 4


@dataclass(frozen=True)
class EncoderConfig:
    """All encoder settings in one place.

    Fixed at construction: encoders keep a reference to the frozen instance
    and never change it afterwards.
    """

    # --- Delta encoding ---
    checkpoint_interval: int = DEFAULT_CHECKPOINT_INTERVAL  # rows per checkpoint group

    # --- Diagnostics ---
    retain_originals: bool = True  # keep every appended row for verify_correctness()

    def __post_init__(self):
        interval = self.checkpoint_interval
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise ValueError(
                f"checkpoint_interval must be an int, got {type(interval).__name__}"
            )
        if interval < 1:
            raise ValueError(f"checkpoint_interval must be positive, got {interval}")
