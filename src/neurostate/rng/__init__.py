"""Random stream subsystem for neurostate.

Re-exports the ABC, registry, and built-in stream implementations::

    from neurostate.rng import RandomStream, StreamRegistry
    from neurostate.rng import LCGStream, NumpyStream
"""

from neurostate.rng.base import RandomStream, validate_seed
from neurostate.rng.lcg import LCGStream
from neurostate.rng.numpy_stream import NumpyStream
from neurostate.rng.registry import StreamRegistry, register_stream

__all__ = [
    "LCGStream",
    "NumpyStream",
    "RandomStream",
    "StreamRegistry",
    "register_stream",
    "validate_seed",
]
