# sigkit

A small toolkit for one-dimensional signal processing, descriptive
statistics and a few special functions. It is a library: there is no
command-line program.

## What it covers

- **Filtering** (`sigkit.sosfilt`, `sigkit.sosfiltfilt`, `sigkit.sosfilt_zi`,
  `sigkit.lfilter_zi`, `sigkit.padding`, `sigkit.savgol`)
  - `Sos`: one second-order section with coefficients `b`, `a` and state
    `zi0`, `zi1`; `Sos.from_scipy(sections, coefficients)` builds a list of
    sections from a flat `[b0, b1, b2, a0, a1, a2] * sections` array.
  - `sosfilt`, `sosfilt_iter` and `sosfilt_item` run samples through a
    cascade of sections; the state is kept in the sections.
  - `sosfilt_fast32` and `sosfilt_ifast32` do the same in 32-bit floating
    point (the latter for integer samples) and return float32 numpy arrays.
  - `sosfiltfilt`: zero-phase forward-backward filtering with odd-extension
    edges; the sections passed in are left unchanged.
  - `lfilter_zi` and `sosfilt_zi`: steady-state initial conditions for the
    step response.
  - `Pad`, `pad` and `odd_ext`: edge extension of one- and two-dimensional
    arrays (odd extension, or none).
  - `savgol_coeffs` and `savgol_filter`: Savitzky-Golay design and
    filtering with nearest-edge padding, including derivatives.
- **Resampling** (`sigkit.resample`): `resample(x, n)` resamples by
  truncating or zero-padding the Fourier spectrum and returns a numpy array.
- **Statistics** (`sigkit.stats`): `mean`, `median`, `variance`, `stdev`,
  `median_abs_deviation` (each returning the value and the number of
  points), `autocorr`, `autocorr_fast`, `rms`, `lag_diff`, `rmssd`,
  `zscore` and `mod_zscore`.
- **Special functions**: `i0` and `i0e` (`sigkit.bessel`), accepting a
  number, a numpy array or nested iterables; `chbevl` (`sigkit.chebyshev`)
  for Chebyshev series; `factorial`, `factorial2` and `factorialk`
  (`sigkit.factorial`).

## Installation

```
pip install sigkit
```

numpy is the only runtime dependency.

## Examples

Filter a signal with sections given in the usual six-numbers-per-section
layout:

```python
from sigkit.sosfilt import Sos, sosfilt
from sigkit.sosfiltfilt import sosfiltfilt

sections = Sos.from_scipy(4, coefficients)   # 24 numbers
forward = sosfilt(signal, sections)          # filter state is kept in `sections`
zero_phase = sosfiltfilt(signal, sections)
```

Because `sosfilt` keeps its state in the sections, a stream fed in chunks
gives the same result as filtering it all at once.

Smooth a signal with a Savitzky-Golay filter:

```python
from sigkit.savgol import savgol_filter

smoothed = savgol_filter([2, 2, 5, 2, 1, 0, 1, 4, 9], 5, 2, None, None)
```

Basic statistics return the value together with the number of points used:

```python
from sigkit.stats import mean, median

mean([1.0, 2.0, 3.0, 4.0, 5.0])   # (3.0, 5)
median([1.0, 2.0, 3.0, 4.0])      # (2.5, 4)
```

For integer data, `mean` and `median` divide with truncation toward zero.

Special functions:

```python
from sigkit.bessel import i0
from sigkit.factorial import factorial2, factorialk

i0(1.0)            # about 1.2660658777520082
factorial2(6)      # 48
factorialk(5, 3)   # 10
```

## What it does not do

- It does not design filters: section coefficients must be supplied.
- It has no waveform generators and no combinatorics functions
  (binomial coefficients, permutations, Stirling numbers).
- `pad` supports odd extension and no padding only; even and constant
  extension raise `ValueError`.

## Running the tests

```
pip install -e .[test]
pytest
```