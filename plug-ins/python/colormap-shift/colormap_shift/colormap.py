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

"""Conversion between GIMP's packed colormap bytes and RGB triples."""

from .errors import InvalidColormap

# Babl format of the buffers exchanged with Gimp.Palette.get_colormap()
# and Gimp.Palette.set_colormap().
COLORMAP_FORMAT = "R'G'B' u8"
BYTES_PER_COLOR = 3

MAX_COLORS     = 256
DEFAULT_STRIDE = 16
DEFAULT_OFFSET = 16


def check_color(color, index=None):
    '''
    Return color as a tuple of 3 ints, raising InvalidColormap when it is
    not an 8-bit RGB triple.
    '''
    where = "" if index is None else f" at index {index}"
    try:
        rgb = tuple(color)
    except TypeError:
        raise InvalidColormap(f"Color{where} is not a sequence: {color!r}") from None
    if len(rgb) != BYTES_PER_COLOR:
        raise InvalidColormap(f"Color{where} must have 3 components, got {len(rgb)}")
    for c in rgb:
        if not isinstance(c, int) or isinstance(c, bool) or not 0 <= c <= 255:
            raise InvalidColormap(f"Color{where} has a component outside 0..255: {rgb!r}")
    return rgb


def unpack_colormap(data):
    """Split a packed R'G'B' u8 buffer into a list of (r, g, b) tuples."""
    data = bytes(data)
    if len(data) % BYTES_PER_COLOR:
        raise InvalidColormap(f"Colormap buffer of {len(data)} bytes is not "
                              f"a whole number of RGB entries")
    return [tuple(data[i:i + BYTES_PER_COLOR])
            for i in range(0, len(data), BYTES_PER_COLOR)]


def pack_colormap(entries):
    """Pack (r, g, b) entries back into a R'G'B' u8 buffer."""
    buf = bytearray()
    for i, color in enumerate(entries):
        buf.extend(check_color(color, i))
    return bytes(buf)
