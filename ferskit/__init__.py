"""Radar simulation building blocks: DSP filters, waveforms, timing prototypes, XML handling and scenario utilities."""

__version__ = "0.1.0"