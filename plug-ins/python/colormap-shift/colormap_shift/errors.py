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
Errors raised while shifting a colormap.

All of them are precondition failures: they are raised before the
colormap or the rotation state is touched, so a caller that catches one
can report it and leave the image as it was.
'''


class ColormapShiftError(Exception):
    pass


class InvalidPaletteSize(ColormapShiftError):
    def __init__(self, num_colors):
        self.num_colors = num_colors
        super().__init__(f"Colormap must hold 1 to 256 colors, got {num_colors}")


class InvalidColormap(ColormapShiftError):
    pass


class SizeMismatch(ColormapShiftError):
    def __init__(self, declared, actual):
        self.declared = declared
        self.actual = actual
        super().__init__(f"Declared colormap size {declared} does not match "
                         f"the image colormap size {actual}")


class NotIndexedPalette(ColormapShiftError):
    def __init__(self, msg="Image is not in indexed color mode"):
        super().__init__(msg)


class SessionClosed(ColormapShiftError):
    def __init__(self, state):
        self.state = state
        super().__init__(f"Shift session is already {state.value}")


class ConfigError(ColormapShiftError):
    pass


def pdb_status_name(err):
    '''
    Name of the Gimp.PDBStatusType member a run that failed with err
    reports. A wrong declared size is the caller's mistake, everything
    else means the image could not be shifted.
    '''
    if isinstance(err, SizeMismatch):
        return "CALLING_ERROR"
    return "EXECUTION_ERROR"
