# tracesampling

Small, dependency-free helpers for deterministic, ID-based trace sampling.

A sampler that keeps a fraction of traces should make the same decision for
the same trace ID everywhere. The `tracesampling.sampling_util` module
provides the pieces needed for that:

- `knuth_hash(value)`: reduces `value` to an unsigned 64-bit integer,
  multiplies it by the constant `1111111111111111111` and wraps the result
  modulo 2**64, spreading IDs across the 64-bit range.
- `max_id_from_rate(rate)`: converts a sample rate in `[0.0, 1.0]` into the
  largest hashed value that should be kept. A rate of exactly `1.0` maps to
  `UINT64_MAX`; any other rate maps to `int(rate * float(UINT64_MAX))`.
  A rate that is NaN or outside `[0.0, 1.0]` raises `ValueError`.
- `UINT64_MAX`: the largest unsigned 64-bit value, `2**64 - 1`.

## Installation

```
pip install tracesampling
```

## Usage

```python
from tracesampling.sampling_util import knuth_hash, max_id_from_rate

def keep(trace_id: int, rate: float) -> bool:
    return knuth_hash(trace_id) <= max_id_from_rate(rate)

keep(42, 1.0)   # always True
keep(42, 0.0)   # True only if the hash happens to be 0
```

## What this package does not do

It holds only the hashing and threshold helpers. It has no tracer, no span
or trace sampler with rules, no rate limiter, no configuration from
environment variables, and nothing that sends traces anywhere; those are
left to the code that uses these helpers.

## Running the tests

```
pip install -e ".[test]"
pytest
```