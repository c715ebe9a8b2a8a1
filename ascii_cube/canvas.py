#
# PROJECT: ascii-cube
# MODULE: ascii_cube/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

# Depth of an empty cell: nothing drawn, maximal distance.
DEPTH_SENTINEL = 0.0


class Canvas:
    """
    Character framebuffer with its depth buffer.

    Both buffers are flat, row-major lists of w * h cells. A cell only
    changes when a sample with a larger depth_key (nearer to the camera)
    lands on it. Samples with exactly the same depth_key, such as the shared
    edge points of two faces, go to the tag that sorts last, so the final
    frame never depends on the order faces were drawn in.
    """
    __slots__ = ['w', 'h', 'background', 'z_buffer', 'grid']

    def __init__(self, w: int, h: int, background: str = ' '):
        if w <= 0 or h <= 0:
            raise ValueError(f"canvas size must be positive, got {w}x{h}")
        if len(background) != 1:
            raise ValueError(f"background must be a single character, got {background!r}")
        self.w, self.h = w, h
        self.background = background
        self.z_buffer = [DEPTH_SENTINEL] * (w * h)
        self.grid = [background] * (w * h)

    def clear(self):
        """Reset every cell to background and the depth sentinel."""
        n = self.w * self.h
        self.z_buffer[:] = [DEPTH_SENTINEL] * n
        self.grid[:] = [self.background] * n

    def plot(self, x: int, y: int, depth_key: float, tag: str) -> bool:
        """Depth-tested write of one sample. Returns True if the cell changed."""
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False

        idx = x + y * self.w
        current = self.z_buffer[idx]
        # Strictly nearer wins; only an exact tie falls back to tag order.
        if depth_key > current or (depth_key == current and current > DEPTH_SENTINEL
                                   and tag > self.grid[idx]):
            self.z_buffer[idx] = depth_key
            self.grid[idx] = tag
            return True
        return False

    def cell(self, x: int, y: int) -> str:
        return self.grid[x + y * self.w]

    def depth(self, x: int, y: int) -> float:
        return self.z_buffer[x + y * self.w]

    def rows(self):
        """Character buffer as a list of h strings."""
        w = self.w
        return [''.join(self.grid[r * w:(r + 1) * w]) for r in range(self.h)]

    def covered(self) -> int:
        """Number of cells holding a face sample."""
        return sum(1 for z in self.z_buffer if z > DEPTH_SENTINEL)

    def snapshot(self):
        return tuple(self.z_buffer), tuple(self.grid)
