"""
GTK Adapter - Main-loop dispatch and drag-and-drop for exported icons.

GLibDispatcher publishes search results on the GLib main loop.
attach_drag_source() renders a variant when a drag starts on its preview
and offers the written file to the drop target; a failed export offers
an empty payload instead.

Requires PyGObject with GTK 4 (pip install "symbolic[gtk]").
"""

import gi

gi.require_version("Gdk", "4.0")
gi.require_version("Gtk", "4.0")

from gi.repository import Gdk, Gio, GLib, Gtk  # noqa: E402

from symbolic.export.models import ExportItem  # noqa: E402


class GLibDispatcher:
    """Run callbacks on the GLib main loop."""

    def __init__(self, priority: int = GLib.PRIORITY_HIGH_IDLE):
        self.priority = priority

    def dispatch(self, callback, *args):
        GLib.idle_add(_run_once, callback, args, priority=self.priority)


def _run_once(callback, args) -> bool:
    """GLib.idle_add wrapper that never repeats."""
    callback(*args)
    return False


def content_provider(item: ExportItem) -> Gdk.ContentProvider:
    """Drag payload for an exported variant (empty when the export failed)."""
    if item.is_empty:
        return Gdk.ContentProvider.new_union([])
    return Gdk.ContentProvider.new_for_value(Gio.File.new_for_path(str(item.path)))


def attach_drag_source(widget, pipeline, icon, definition, directory=None) -> Gtk.DragSource:
    """
    Make a preview widget draggable as an exported file.

    Args:
        widget: Preview widget for the variant
        pipeline: IconExportPipeline used to write the snapshot
        icon: Icon to render
        definition: Variant shown by the preview
        directory: Snapshot directory, defaults to the pipeline's

    Returns:
        The Gtk.DragSource controller added to the widget
    """
    source = Gtk.DragSource()
    source.set_actions(Gdk.DragAction.COPY)
    source.connect(
        "prepare",
        lambda _source, _x, _y: content_provider(pipeline.export_item(icon, definition, directory)),
    )
    widget.add_controller(source)
    return source
