"""Signal filtering, resampling, statistics, Bessel I0 and factorial functions."""

__version__ = "0.1.0"