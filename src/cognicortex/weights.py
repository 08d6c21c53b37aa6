"""
Opaque parameter storage.

Raw bytes are decoded as little-endian float32 values. The pipeline never
reads these values; they are kept so a host can load and inspect them.
"""

import logging
from typing import Dict

import numpy as np

from cognicortex.errors import WeightLoadError

logger = logging.getLogger(__name__)

MIN_WEIGHT_BYTES = 1024
BYTES_PER_PARAMETER = 4


def decode_weights(data) -> np.ndarray:
    """
    Decode raw bytes into float32 parameters.

    A trailing partial chunk (fewer than 4 bytes) is ignored.

    Args:
        data: bytes-like object of at least 1024 bytes

    Returns:
        np.ndarray: Decoded float32 values

    Raises:
        WeightLoadError: If data is not bytes-like or too small
    """
    try:
        raw = memoryview(data).cast("B")
    except TypeError as exc:
        raise WeightLoadError(f"expected a bytes-like object, got {type(data).__name__}") from exc

    if raw.nbytes < MIN_WEIGHT_BYTES:
        raise WeightLoadError(f"weight data too small: {raw.nbytes} bytes (< {MIN_WEIGHT_BYTES})")

    count = raw.nbytes // BYTES_PER_PARAMETER
    return np.frombuffer(raw[:count * BYTES_PER_PARAMETER], dtype="<f4").astype(np.float32)


class WeightStore:
    """
    Flat float32 parameter buffer.

    Attributes:
        weights (np.ndarray): Shape (slots,) parameter values
        loaded (bool): Whether any data has been loaded
    """

    def __init__(self, slots: int = 0):
        self.weights = np.zeros(slots, dtype=np.float32)
        self.loaded = False

    def load_bytes(self, data) -> bool:
        """
        Load raw parameter bytes, growing the buffer if needed.

        Returns:
            bool: True on success, False if the data was rejected
        """
        try:
            values = decode_weights(data)
        except WeightLoadError as exc:
            logger.warning("Rejected weight data: %s", exc)
            return False

        if len(values) > len(self.weights):
            logger.info("Expanding weight store from %d to %d parameters",
                        len(self.weights), len(values))
            grown = np.zeros(len(values), dtype=np.float32)
            grown[:len(self.weights)] = self.weights
            self.weights = grown

        self.weights[:len(values)] = values
        self.loaded = True
        logger.info("Loaded %d parameters", len(values))
        return True

    def info(self) -> Dict:
        return {
            'total_parameters': len(self.weights),
            'memory_usage_mb': round(self.weights.nbytes / (1024.0 * 1024.0), 2),
            'loaded': self.loaded,
        }

    def __len__(self):
        return len(self.weights)
