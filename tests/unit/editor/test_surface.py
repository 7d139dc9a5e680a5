"""Unit tests for editor/surface.py"""

from docedit.editor.surface import EditingSurface


def test_snapshot_reflects_replace():
    surface = EditingSurface("<p>a</p>")
    surface.replace("<p>b</p>")
    assert surface.get_snapshot() == "<p>b</p>"


def test_replace_does_not_notify():
    seen = []
    surface = EditingSurface()
    surface.subscribe(seen.append)
    surface.replace("<p>loaded</p>")
    assert seen == []


def test_apply_edit_notifies_subscribers():
    seen = []
    surface = EditingSurface()
    surface.subscribe(seen.append)
    surface.apply_edit("<p>typed</p>")
    assert seen == ["<p>typed</p>"]
    assert surface.get_snapshot() == "<p>typed</p>"


def test_unsubscribe_stops_notifications():
    seen = []
    surface = EditingSurface()
    unsubscribe = surface.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    surface.apply_edit("<p>x</p>")
    assert seen == []
