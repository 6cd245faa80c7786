from __future__ import annotations

import subprocess

import pytest

from lyricbar.host.base import TrackView
from lyricbar.host.playlist import PlaylistHost
from lyricbar.sources.errors import TemplateError
from lyricbar.sources.script import ScriptSource, render_command


def view(**metadata: str) -> TrackView:
    host, item = PlaylistHost.single(**metadata)
    return TrackView(host, item)


class TestRenderCommand:
    def test_fields_are_substituted_and_quoted(self):
        track = view(artist="Guns N' Roses", title="Patience")
        assert render_command("lyr %artist% %title%", track) == "lyr 'Guns N'\"'\"' Roses' Patience"

    def test_missing_field_is_empty_argument(self):
        assert render_command("lyr %album%", view(artist="A")) == "lyr ''"

    def test_double_percent_is_literal(self):
        assert render_command("echo 100%%", view()) == "echo 100%"

    def test_no_placeholders(self):
        assert render_command("cat /tmp/lyrics.txt", view()) == "cat /tmp/lyrics.txt"

    @pytest.mark.parametrize("template", ["lyr %artist", "echo 50%", "%title% %"])
    def test_unterminated_percent_is_invalid(self, template):
        with pytest.raises(TemplateError):
            render_command(template, view(artist="A", title="T"))


class TestScriptSource:
    def test_unconfigured(self):
        assert ScriptSource(None).fetch(view(artist="A", title="T")) is None
        assert ScriptSource("   ").fetch(view(artist="A", title="T")) is None

    def test_output_is_returned(self):
        src = ScriptSource("printf '%%s\\n' %artist% %title%")
        assert src.fetch(view(artist="Björk", title="Jóga")) == "Björk\nJóga\n"

    def test_non_zero_exit(self):
        assert ScriptSource("echo lyrics; exit 3").fetch(view()) is None

    def test_empty_output(self):
        assert ScriptSource("true").fetch(view()) is None

    def test_invalid_utf8_output(self):
        assert ScriptSource("printf '\\377\\376'").fetch(view()) is None

    def test_invalid_template(self):
        assert ScriptSource("lyr %artist").fetch(view(artist="A")) is None

    def test_timeout(self, monkeypatch):
        def _raise(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd=args[0], timeout=kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", _raise)
        assert ScriptSource("sleep 100", timeout_s=0.01).fetch(view()) is None

    def test_spawn_failure(self, monkeypatch):
        def _raise(*args, **kwargs):
            raise OSError("no shell")

        monkeypatch.setattr(subprocess, "run", _raise)
        assert ScriptSource("echo x").fetch(view()) is None
