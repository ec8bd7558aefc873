"""Prototype description of a timing source: frequency, offsets and noise terms."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class PrototypeTiming:
    """Timing source settings shared by every clock built from it.

    A random offset, when set, always takes precedence over a constant one.
    """

    name: str
    frequency: float = 0.0
    sync_on_pulse: bool = False
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    _alphas: list[float] = field(default_factory=list, init=False, repr=False)
    _weights: list[float] = field(default_factory=list, init=False, repr=False)
    _freq_offset: float | None = field(default=None, init=False, repr=False)
    _phase_offset: float | None = field(default=None, init=False, repr=False)
    _random_freq: float | None = field(default=None, init=False, repr=False)
    _random_phase: float | None = field(default=None, init=False, repr=False)

    def add_alpha(self, alpha: float, weight: float) -> None:
        """Add one noise entry with its exponent ``alpha`` and ``weight``."""
        self._alphas.append(alpha)
        self._weights.append(weight)

    def alphas_and_weights(self) -> tuple[list[float], list[float]]:
        """Return copies of the alpha and weight lists."""
        return list(self._alphas), list(self._weights)

    def use_freq_offset(self, offset: float) -> None:
        """Set a constant frequency offset."""
        if self._random_freq is not None:
            self._log_offset_conflict("frequency")
        self._freq_offset = offset

    def use_phase_offset(self, offset: float) -> None:
        """Set a constant phase offset."""
        if self._random_phase is not None:
            self._log_offset_conflict("phase")
        self._phase_offset = offset

    def use_random_freq_offset(self, stdev: float) -> None:
        """Draw the frequency offset from a zero-mean Gaussian with ``stdev``."""
        if self._freq_offset is not None:
            self._log_offset_conflict("frequency")
        self._random_freq = stdev

    def use_random_phase_offset(self, stdev: float) -> None:
        """Draw the phase offset from a zero-mean Gaussian with ``stdev``."""
        if self._phase_offset is not None:
            self._log_offset_conflict("phase")
        self._random_phase = stdev

    def freq_offset(self) -> float:
        """Return the frequency offset: random if configured, else constant, else 0."""
        if self._random_freq is not None:
            return self.rng.gauss(0.0, self._random_freq)
        return self._freq_offset if self._freq_offset is not None else 0.0

    def phase_offset(self) -> float:
        """Return the phase offset: random if configured, else constant, else 0."""
        if self._random_phase is not None:
            return self.rng.gauss(0.0, self._random_phase)
        return self._phase_offset if self._phase_offset is not None else 0.0

    def _log_offset_conflict(self, offset_type: str) -> None:
        logger.error(
            "Random %s offset and constant %s offset are set for timing source %s. "
            "Only the random offset will be used.",
            offset_type,
            offset_type,
            self.name,
        )