#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#    This program is free software: you can redistribute it and/or modify
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

import gi
gi.require_version('Babl', '0.1')
from gi.repository import Babl
gi.require_version('Gimp', '3.0')
from gi.repository import Gimp
gi.require_version('GimpUi', '3.0')
from gi.repository import GimpUi
gi.require_version('Gegl', '0.4')
from gi.repository import Gegl
from gi.repository import GObject
from gi.repository import GLib
import sys

from colormap_shift import (COLORMAP_FORMAT, DEFAULT_OFFSET, MAX_COLORS,
                            ColormapShiftError, ConfigError, ShiftConfig,
                            ShiftLogger, ShiftSession, check_indexed,
                            pack_colormap, pdb_status_name, run_batch,
                            unpack_colormap)

def N_(message): return message
def _(message): return GLib.dgettext(None, message)

PLUG_IN_PROC   = "plug-in-colormap-shift"
PLUG_IN_BINARY = "colormap-shift"
PLUG_IN_ROLE   = "gimp-colormap-shift"

RESPONSE_RESET = 1

# ListStore columns
COLOR_INDEX, COLOR_INDEX_TEXT, COLOR_RGB = range(3)

help_doc = r"""
Shift the colors in the colormap of an indexed image by a given offset.
The entry at the offset becomes the first entry and the colors before it
wrap around to the end, which lets you edit an image meant to be palette
shifted. In the dialog, click a color to make its row the start of the
colormap; Reset restores the original order.
"""


def read_colormap(image):
    palette = image.get_palette()
    colormap, num_colors = palette.get_colormap(Babl.format(COLORMAP_FORMAT))
    return palette, unpack_colormap(colormap[:num_colors * 3])


def write_colormap(image, palette, entries):
    image.undo_group_start()
    palette.set_colormap(Babl.format(COLORMAP_FORMAT), pack_colormap(entries))
    image.undo_group_end()


def gegl_color(rgb):
    color = Gegl.Color.new("black")
    color.set_rgba(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0, 1.0)
    return color


class ShiftDialog:
    '''
    Grid of the colormap swatches, one row per stride.
    Activating a swatch makes its row the new start of the colormap.
    '''

    def __init__(self, session):
        gi.require_version('Gtk', '3.0')
        from gi.repository import Gtk
        self.Gtk = Gtk
        self.session = session

        GimpUi.init(PLUG_IN_BINARY)

        use_header_bar = Gtk.Settings.get_default().get_property("gtk-dialogs-use-header")
        self.dialog = GimpUi.Dialog(use_header_bar=use_header_bar,
                                    title=_("Shift Colormap"),
                                    role=PLUG_IN_ROLE)
        self.dialog.add_button(_("_Reset"), RESPONSE_RESET)
        self.dialog.add_button(_("_Cancel"), Gtk.ResponseType.CANCEL)
        self.dialog.add_button(_("_OK"), Gtk.ResponseType.OK)
        self.dialog.set_alternative_button_order_from_array([RESPONSE_RESET,
                                                             Gtk.ResponseType.OK,
                                                             Gtk.ResponseType.CANCEL])
        Gimp.window_set_transient(self.dialog)

        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL,
                       homogeneous=False, spacing=12)
        vbox.set_border_width(12)
        self.dialog.get_content_area().pack_start(vbox, True, True, 0)

        self.store = Gtk.ListStore(GObject.TYPE_INT, GObject.TYPE_STRING, Gegl.Color)
        self.refill()

        iconview = Gtk.IconView.new_with_model(self.store)
        iconview.set_selection_mode(Gtk.SelectionMode.SINGLE)
        iconview.set_item_orientation(Gtk.Orientation.VERTICAL)
        iconview.set_columns(session.stride)
        iconview.set_row_spacing(0)
        iconview.set_column_spacing(0)
        iconview.set_reorderable(False)
        iconview.set_activate_on_single_click(True)

        renderer = GimpUi.CellRendererColor()
        renderer.set_property("width", 24)
        iconview.pack_start(renderer, True)
        iconview.add_attribute(renderer, "color", COLOR_RGB)

        renderer = Gtk.CellRendererText()
        renderer.set_property("size-points", 6.0)
        renderer.set_property("xalign", 0.5)
        renderer.set_property("ypad", 0)
        iconview.pack_start(renderer, True)
        iconview.add_attribute(renderer, "text", COLOR_INDEX_TEXT)

        iconview.connect("item-activated", self.on_item_activated)
        iconview.connect("button-press-event", self.on_button_press)
        iconview.connect("popup-menu", self.on_popup_menu)
        vbox.pack_start(iconview, True, True, 0)

        self.menu = Gtk.Menu()
        item = Gtk.MenuItem.new_with_mnemonic(_("_Reset Order"))
        item.connect("activate", lambda widget: self.reset())
        self.menu.append(item)
        self.menu.show_all()
        self.menu.attach_to_widget(iconview, None)

        box = GimpUi.HintBox.new(_("Click a color to make its row the start of the "
                                   "colormap.  The numbers shown are the original "
                                   "indices.  Right-click to reset the order."))
        vbox.pack_start(box, False, False, 0)

        self.dialog.show_all()

    def refill(self):
        self.store.clear()
        for index, rgb in zip(self.session.original_indices(), self.session.preview()):
            self.store.append([index, str(index), gegl_color(rgb)])

    def reset(self):
        self.session.reset()
        self.refill()

    def on_item_activated(self, iconview, path):
        self.session.select_entry(path.get_indices()[0])
        self.refill()
        iconview.unselect_all()

    def on_button_press(self, widget, event):
        if event.triggers_context_menu():
            self.menu.popup_at_pointer(event)
            return True
        return False

    def on_popup_menu(self, widget):
        self.menu.popup_at_widget(widget, 0, 0, None)
        return True

    def run(self):
        '''
        Run the dialog until OK or Cancel.
        Returns the shifted colormap, or None when the user cancelled.
        '''
        while True:
            response = self.dialog.run()
            if response == RESPONSE_RESET:
                self.reset()
                continue
            break

        self.dialog.destroy()
        if response == self.Gtk.ResponseType.OK:
            return self.session.commit()
        self.session.cancel()
        return None


def failure(procedure, err):
    status = getattr(Gimp.PDBStatusType, pdb_status_name(err))
    return procedure.new_return_values(status, GLib.Error(str(err)))


def shift_colors(procedure, run_mode, image, drawables, config, data):
    interactive = run_mode == Gimp.RunMode.INTERACTIVE
    try:
        settings = ShiftConfig()
    except ConfigError as err:
        return failure(procedure, err)

    log = ShiftLogger(interactive, settings.log_file, append=True,
                      verbose=settings.verbose, debugging=settings.debugging)
    try:
        return run_shift(procedure, run_mode, image, config, settings, log)
    finally:
        log.close()


def run_shift(procedure, run_mode, image, config, settings, log):
    offset     = config.get_property("offset")
    num_colors = config.get_property("num-colors")

    try:
        check_indexed(image.get_base_type() == Gimp.ImageBaseType.INDEXED)
        palette, entries = read_colormap(image)

        if run_mode == Gimp.RunMode.INTERACTIVE:
            session = ShiftSession(entries, stride=settings.stride,
                                   legacy_reset=settings.legacy_reset)
            shifted = ShiftDialog(session).run()
            if shifted is None:
                return procedure.new_return_values(Gimp.PDBStatusType.CANCEL,
                                                   GLib.Error())
            config.set_property("offset", session.net_offset)
        else:
            shifted = run_batch(entries, offset, num_colors)
    except ColormapShiftError as err:
        log.error(str(err))
        return failure(procedure, err)

    write_colormap(image, palette, shifted)
    log.debug(f"Colormap of {len(shifted)} colors written")

    if run_mode != Gimp.RunMode.NONINTERACTIVE:
        Gimp.displays_flush()

    return procedure.new_return_values(Gimp.PDBStatusType.SUCCESS, GLib.Error())


class ColormapShift (Gimp.PlugIn):
    ## GimpPlugIn virtual methods ##
    def do_set_i18n(self, procname):
        return True, 'gimp30-python', None

    def do_query_procedures(self):
        return [ PLUG_IN_PROC ]

    def do_create_procedure(self, name):
        procedure = None
        if name == PLUG_IN_PROC:
            try:
                default_offset = ShiftConfig().default_offset
            except ConfigError:
                # Reported again, with the reason, when the procedure runs.
                default_offset = DEFAULT_OFFSET

            procedure = Gimp.ImageProcedure.new(self, name,
                                                Gimp.PDBProcType.PLUGIN,
                                                shift_colors, None)
            procedure.set_image_types("INDEXED*")
            procedure.set_sensitivity_mask (Gimp.ProcedureSensitivityMask.DRAWABLE |
                                            Gimp.ProcedureSensitivityMask.DRAWABLES |
                                            Gimp.ProcedureSensitivityMask.NO_DRAWABLES)
            procedure.set_menu_label(_("_Shift Colors..."))
            procedure.set_icon_name(GimpUi.ICON_COLORMAP)
            procedure.set_documentation(_("Shift the colors in the colormap"),
                                        help_doc,
                                        name)
            procedure.set_attribution("Jestin Stoffel",
                                      "Copyright 2022 by Jestin Stoffel",
                                      "2022")
            procedure.add_menu_path("<Image>/Colors/Map/Colormap")
            procedure.add_menu_path("<Colormap>")

            procedure.add_int_argument("offset", _("_Offset"),
                                       _("The number of colors to shift"),
                                       0, 255, default_offset,
                                       GObject.ParamFlags.READWRITE)
            procedure.add_int_argument("num-colors", _("_Number of colors"),
                                       _("Expected size of the colormap, 0 to skip the check"),
                                       0, MAX_COLORS, 0,
                                       GObject.ParamFlags.READWRITE)

        return procedure

Gimp.main(ColormapShift.__gtype__, sys.argv)
