# ferskit

Building blocks for radar simulation in Python.

## Modules

- `ferskit.dsp_filters`
  - `sinc(x)`: the normalised sinc function.
  - `blackman_fir(cutoff, filter_length)`: designs a Blackman-windowed sinc
    lowpass with `2 * filter_length` coefficients.
  - `FirFilter(coeffs).filter(samples)`: filters complex samples. The filter
    state starts at zero on every call.
  - `IirFilter(den_coeffs, num_coeffs)`: a direct-form II IIR filter over real
    samples. `filter(sample)` filters one sample and `filter_block(samples)`
    filters a block. The state carries over between calls.
  - `upsample(samples, ratio, filter_length)`: zero-stuffs the samples and
    lowpass filters them. It returns `len(samples) * ratio` samples.
  - `downsample(samples, ratio, filter_length)`: lowpass filters the samples,
    keeps every `ratio`-th one and scales it by `1 / ratio`. An empty input
    raises `ValueError`.
  - `DecadeUpsampler().upsample(sample)`: returns ten output samples for each
    input sample, using an 11th-order elliptic lowpass.
- `ferskit.prototype_timing`
  - `PrototypeTiming(name, frequency=0.0, sync_on_pulse=False, rng=...)`: a
    clock description.
  - `add_alpha(alpha, weight)` adds a noise entry, and `alphas_and_weights()`
    returns copies of both lists.
  - `use_freq_offset`, `use_phase_offset`, `use_random_freq_offset` and
    `use_random_phase_offset` set constant or Gaussian offsets.
  - `freq_offset()` and `phase_offset()` return the random offset if one is
    set, otherwise the constant one, otherwise 0. Setting both a random and a
    constant offset logs an error.
- `ferskit.radar_signal`
  - `Signal` stores complex samples and a rate.
  - `Signal.load(samples, rate, oversample_ratio=1, filter_length=None)`
    oversamples through `upsample` when the ratio is above 1, and multiplies
    the rate by the ratio.
  - `RadarSignal(name, power, carrier, length, signal)` is a named pulse. Its
    `rate` property gives the waveform's sample rate.
- `ferskit.xmlwrap`
  - `XmlDocument` has a `root` property, `load_file`, `save_file` (indented
    UTF-8), `validate_with_dtd(bytes)` and `validate_with_xsd(bytes)`.
  - `XmlElement` has `create`, `name`, `text`, `attribute`, `set_attribute`,
    `add_child` and `child_element(name, index)`. `child_element` returns an
    empty element, with `valid` false, when there is no match.
  - `merge_xml_documents(main_doc, included_doc)` copies the included root's
    child elements into the main root.
  - `remove_include_elements(doc)` deletes the `include` elements under the
    root.
  - Failures raise `XmlException`.
- `ferskit.clutter`
  - `generate_clutter(...)` and `generate_clutter_2d(...)` return an
    `<incblock>` of clutter platforms as text. The platforms are placed
    uniformly at random and drift by `end_time` times a Gaussian draw with
    standard deviation `spread`.
  - Both functions take an optional `random.Random` for reproducible output.
- `ferskit.csv2antenna`
  - `convert_csv(lines)` yields one `<gainsample>` block per `angle,gain`
    line. A line without a comma raises `MalformedCsvError`.
  - `write_antenna(out, elevation_lines, azimuth_lines)` writes a complete
    `<antenna>` document.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### ferskit-cluttergen

Generate a clutter block for a scenario file:

```
ferskit-cluttergen
ferskit-cluttergen --2d
```

The tool reads these answers from standard input, in this order:

1. the number of samples
2. the start range and the range; with `--2d`, these are asked separately
   for x and for y
3. the RCS
4. the spreading standard deviation
5. the simulation end time, asked only when the spreading is not zero
6. the output filename

### ferskit-csv2antenna

Build an antenna description from two CSV files of `angle,gain` lines:

```
ferskit-csv2antenna antenna.xml elevation.csv azimuth.csv
```

It exits with status 2 on wrong usage or an unreadable file, and with status 1
on a malformed line.

## Library example

```python
import random
from ferskit.clutter import generate_clutter

xml_text = generate_clutter(
    samples=10, start_range=1000.0, span=500.0, rcs=1.0,
    spread=0.0, end_time=0.0, rng=random.Random(1),
)
```

```python
from ferskit.dsp_filters import blackman_fir, FirFilter

coeffs = blackman_fir(0.25, 16)
filtered = FirFilter(coeffs).filter([1.0, 0.0, 0.0, 0.0])
```

## What the package does not do

ferskit has no simulation runner, and nothing in it reads a full simulation
scenario into objects. Specifically, it does not:

- load pulse waveforms from files
- render received responses
- export receiver output as XML, CSV or binary files
- model receiver noise or quantisation

`Signal` only stores samples. Rendering them against interpolation points is
not provided.