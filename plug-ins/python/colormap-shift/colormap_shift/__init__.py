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

'''
Shift the colors of an indexed image's colormap.

The rotation itself lives in engine.RotationEngine. session wraps it for
the two ways the plug-in runs: a single batch offset, or an interactive
dialog where every selected row becomes the new start of the colormap.
Nothing here imports the GIMP bindings, the plug-in colormap-shift.py
next to this package does.
'''

from .colormap import (COLORMAP_FORMAT, DEFAULT_OFFSET, DEFAULT_STRIDE,
                       MAX_COLORS, pack_colormap, unpack_colormap)
from .config import ShiftConfig
from .engine import RotationEngine
from .errors import (ColormapShiftError, ConfigError, InvalidColormap,
                     InvalidPaletteSize, NotIndexedPalette, SessionClosed,
                     SizeMismatch, pdb_status_name)
from .logger import ShiftLogger
from .session import (SessionState, ShiftSession, check_indexed, run_batch,
                      shift_colormap)

VERSION = "0.1.0"
