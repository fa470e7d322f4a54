"""Base protocol for uniform sources consumed by the samplers."""

from __future__ import annotations

from typing import Protocol

import numpy as np
from numpy.typing import NDArray


class UniformSource(Protocol):
    """Anything exposing the Mersenne Twister draw surface."""

    def next_u32(self) -> int: ...

    def next_real_closed(self) -> float: ...

    def next_real_half_open(self) -> float: ...

    def next_u32_array(self, n: int) -> NDArray[np.uint32]:
        """Next ``n`` raw 32-bit words, in stream order."""
        ...
