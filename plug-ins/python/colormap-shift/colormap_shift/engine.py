#   This program is free software: you can redistribute it and/or modify
#   it under the terms of the GNU General Public License as published by
#   the Free Software Foundation; either version 3 of the License, or
#   (at your option) any later version.
#
#   This program is distributed in the hope that it will be useful,
#   but WITHOUT ANY WARRANTY; without even the implied warranty of
#   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#   GNU General Public License for more details.
#
#   You should have received a copy of the GNU General Public License
#   along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Circular shifting of an indexed image colormap."""

from .colormap import DEFAULT_STRIDE, MAX_COLORS, check_color
from .errors import InvalidPaletteSize


class RotationEngine:
    '''
    Rotates a snapshot of a colormap.

    The only state is the net offset: how many positions the original
    colormap has been rotated left so far, always in [0, palsize).
    Rotating by k means the entry at original index k becomes entry 0.

    The colormap is copied on construction, later changes to the caller's
    sequence are not seen.

    With legacy_reset, reset() undoes row selections the way earlier versions
    of the plug-in counted them, in whole rows. That only restores the original
    order when palsize is a multiple of the stride.
    '''

    def __init__(self, palette, stride=DEFAULT_STRIDE, legacy_reset=False):
        original = tuple(check_color(c, i) for i, c in enumerate(palette))
        if not 0 < len(original) <= MAX_COLORS:
            raise InvalidPaletteSize(len(original))
        if stride <= 0:
            raise ValueError(f"Stride must be positive, got {stride}")

        self._original = original
        self.stride = stride
        self.legacy_reset = legacy_reset
        self._net_offset = 0
        # Entries to add back on a legacy reset, and whether any row was
        # selected since the last reset.
        self._reset_accum = 0
        self._rows_selected = False

    def __len__(self):
        return len(self._original)

    @property
    def palsize(self):
        return len(self._original)

    @property
    def original(self):
        return self._original

    @property
    def net_offset(self):
        return self._net_offset

    def rotate_by(self, offset):
        """Rotate left by offset entries. Negative offsets rotate right."""
        self._net_offset = (self._net_offset + offset) % self.palsize
        return self.materialize()

    def rotate_to_index(self, chosen_index, stride=None):
        '''
        Make row chosen_index of a grid with stride entries per row the new
        start of the colormap, counted from the current order.
        '''
        if stride is None:
            stride = self.stride
        if stride <= 0:
            raise ValueError(f"Stride must be positive, got {stride}")

        palsize = self.palsize
        delta = (chosen_index * stride) % palsize
        self._net_offset = (self._net_offset + delta) % palsize

        rows_back = ((palsize - delta) // stride) % stride
        self._reset_accum += rows_back * stride
        self._rows_selected = True
        return self.materialize()

    def reset(self):
        """Go back to the original order."""
        if self.legacy_reset and self._rows_selected:
            self._net_offset = (self._net_offset + self._reset_accum) % self.palsize
        else:
            self._net_offset = 0
        self._reset_accum = 0
        self._rows_selected = False
        return self.materialize()

    def original_indices(self):
        """Original colormap index of the entry now at each position."""
        palsize = self.palsize
        return [(i + self._net_offset) % palsize for i in range(palsize)]

    def materialize(self):
        original = self._original
        return [original[i] for i in self.original_indices()]
