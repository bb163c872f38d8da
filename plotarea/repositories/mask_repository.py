import numpy as np

from ..models.thresholds import ColorClass, ChannelRange


class MaskRepository:
    """
    Vectorised channel predicates over an (H, W, 3) float pixel array.

    • One boolean mask per colour class.
    • Pure: never touches the pixel array it reads.
    """

    # ---------- private helpers ----------
    @staticmethod
    def _in_range(channel: np.ndarray, rng: ChannelRange) -> np.ndarray:
        return (channel > rng.low) & (channel < rng.high)

    # ---------- public API ----------
    def retrieve_mask(self, pixels: np.ndarray, color: ColorClass) -> np.ndarray:
        """
        Returns bool mask (H, W): True where all three channels fall
        strictly inside the class ranges.
        """
        r, g, b = pixels[:, :, 0], pixels[:, :, 1], pixels[:, :, 2]
        return (
            self._in_range(r, color.r)
            & self._in_range(g, color.g)
            & self._in_range(b, color.b)
        )

    @staticmethod
    def retrieve_coordinates(mask: np.ndarray) -> np.ndarray:
        """(N, 2) array of (col, row) storage coordinates where *mask* is set."""
        rows, cols = np.nonzero(mask)
        return np.column_stack([cols, rows])
