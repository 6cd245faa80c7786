from __future__ import annotations

import signal

from lyricbar.render.ansi import AnsiRenderer


class TestAnsiRendererSigwinch:
    """Test SIGWINCH handling in renderer."""

    def test_sigwinch_registered_on_enter(self):
        renderer = AnsiRenderer(use_alt_screen=False)

        old_handler = signal.signal(signal.SIGWINCH, signal.SIG_DFL)
        signal.signal(signal.SIGWINCH, old_handler)  # restore

        renderer.enter()

        current_handler = signal.signal(signal.SIGWINCH, signal.SIG_DFL)
        assert current_handler != old_handler
        signal.signal(signal.SIGWINCH, old_handler)  # restore

        renderer.exit()

    def test_sigwinch_restored_on_exit(self):
        renderer = AnsiRenderer(use_alt_screen=False)

        old_handler = signal.signal(signal.SIGWINCH, signal.SIG_DFL)
        signal.signal(signal.SIGWINCH, old_handler)  # restore

        renderer.enter()
        renderer.exit()

        current_handler = signal.signal(signal.SIGWINCH, signal.SIG_DFL)
        assert current_handler == signal.SIG_DFL
        signal.signal(signal.SIGWINCH, old_handler)  # restore

    def test_sigwinch_redraws_last_frame(self, capsys):
        renderer = AnsiRenderer(use_alt_screen=False)
        renderer.enter()
        capsys.readouterr()
        renderer.render("Test", ["Line 1", "Line 2"])
        first = capsys.readouterr().out

        assert renderer._resize_handler is not None
        renderer._resize_handler()
        second = capsys.readouterr().out

        assert "Line 1" in first
        assert second == first
        renderer.exit()

    def test_last_render_args_stored(self):
        renderer = AnsiRenderer(use_alt_screen=False)
        renderer.enter()

        assert renderer._last_render_args is None

        renderer.render("Title", ["A", "B"], placeholder=True)

        assert renderer._last_render_args == ("Title", ["A", "B"], True)

        renderer.exit()
        assert renderer._last_render_args is None


def test_frame_layout(capsys, monkeypatch):
    monkeypatch.setattr("shutil.get_terminal_size", lambda fallback=(80, 24): (80, 3))
    renderer = AnsiRenderer(use_alt_screen=False)
    renderer.render("Artist - Song", ["one", "two", "three"])
    out = capsys.readouterr().out
    assert "♫ Artist - Song ♫" in out
    assert "one" in out and "two" in out
    assert "three" not in out


def test_placeholder_is_dimmed(capsys):
    renderer = AnsiRenderer(use_alt_screen=False)
    renderer.render("T", ["Loading..."], placeholder=True)
    out = capsys.readouterr().out
    assert renderer.theme.dim + "Loading..." in out
