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

"""Batch and interactive colormap shifting on top of RotationEngine."""

import enum
import logging

from .colormap import DEFAULT_STRIDE
from .engine import RotationEngine
from .errors import NotIndexedPalette, SessionClosed, SizeMismatch

log = logging.getLogger(__name__)


class SessionState(enum.Enum):
    IDLE      = "idle"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


def check_indexed(is_indexed):
    if not is_indexed:
        raise NotIndexedPalette()


def shift_colormap(palette, offset, num_colors=None):
    '''
    Return palette rotated left by offset entries.

    num_colors is the size the caller believes the colormap has. When it is
    given and differs from the real size, SizeMismatch is raised and
    nothing is rotated.
    '''
    palette = list(palette)
    if num_colors is not None and num_colors != len(palette):
        raise SizeMismatch(num_colors, len(palette))

    engine = RotationEngine(palette)
    shifted = engine.rotate_by(offset)
    log.debug("Shifted %d colors by %d (net offset %d)",
              len(palette), offset, engine.net_offset)
    return shifted


def run_batch(palette, offset, num_colors=0):
    """Non-interactive run: num_colors of 0 means no size was declared."""
    declared = num_colors if num_colors > 0 else None
    return shift_colormap(palette, offset, declared)


class ShiftSession:
    '''
    One interactive edit of a colormap.

    The session starts IDLE and ends exactly once, either with commit(),
    which hands back the shifted colormap, or with cancel(). Until then
    nothing is written anywhere, the caller only sees previews.
    '''

    def __init__(self, palette, stride=DEFAULT_STRIDE, legacy_reset=False):
        self.engine = RotationEngine(palette, stride=stride,
                                     legacy_reset=legacy_reset)
        self.state = SessionState.IDLE
        log.debug("Shift session started with %d colors, %d per row",
                  len(self.engine), stride)

    def _check_idle(self):
        if self.state is not SessionState.IDLE:
            raise SessionClosed(self.state)

    @property
    def stride(self):
        return self.engine.stride

    @property
    def net_offset(self):
        return self.engine.net_offset

    def preview(self):
        self._check_idle()
        return self.engine.materialize()

    def original_indices(self):
        self._check_idle()
        return self.engine.original_indices()

    def select_row(self, row):
        self._check_idle()
        shifted = self.engine.rotate_to_index(row)
        log.debug("Row %d selected, net offset now %d",
                  row, self.engine.net_offset)
        return shifted

    def select_entry(self, position):
        """The user picked the swatch displayed at position."""
        self._check_idle()
        return self.select_row(position // self.engine.stride)

    def rotate_by(self, offset):
        self._check_idle()
        return self.engine.rotate_by(offset)

    def reset(self):
        self._check_idle()
        shifted = self.engine.reset()
        log.debug("Order reset, net offset now %d", self.engine.net_offset)
        return shifted

    def commit(self):
        self._check_idle()
        shifted = self.engine.materialize()
        self.state = SessionState.COMMITTED
        log.debug("Session committed with net offset %d", self.engine.net_offset)
        return shifted

    def cancel(self):
        self._check_idle()
        self.state = SessionState.CANCELLED
        log.debug("Session cancelled")
