import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import pygame
import pytest

from djinni.engine import Engine, VideoSettings, WindowSettings, main


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((8, 8))
    surface.fill((255, 255, 255))
    path = tmp_path / "player.bmp"
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def engine():
    eng = Engine()
    eng.initialize(
        WindowSettings(name="Demo", width=800, height=800, flags=0),
        VideoSettings(index=0, renderer_flags=0, video_flags=0),
    )
    yield eng
    eng.terminate()


def test_initialize_creates_window_and_renderer(engine):
    assert engine.window.title == "Demo"
    assert engine.window.surface.get_size() == (800, 800)
    assert engine.renderer.window is engine.window
    assert engine.window_settings.width == 800
    assert engine.video_settings.index == 0


def test_initialize_logs(capsys):
    eng = Engine()
    eng.initialize(WindowSettings(name="Demo", width=16, height=16), VideoSettings())
    eng.terminate()
    out = capsys.readouterr().out
    assert "[DEV]: Djinni.initialize" in out
    assert "[DEV]: Djinni::Video::Window.create" in out
    assert "[DEV]: Djinni::Video::Renderer.create" in out
    assert "[DEV]: Djinni.terminate" in out


@pytest.mark.parametrize("value", ["linear", "nearest"])
def test_set_flag_sets_hint(monkeypatch, value):
    name = "SDL_RENDER_SCALE_QUALITY"
    monkeypatch.delenv(name, raising=False)
    Engine().set_flag(name, value)
    assert os.environ.get(name) == value


def test_terminate_releases_everything():
    eng = Engine()
    eng.initialize(WindowSettings(name="Demo", width=16, height=16), VideoSettings())
    window = eng.window
    renderer = eng.renderer
    eng.terminate()
    assert window.surface is None
    assert renderer.surface is None
    assert eng.window is None and eng.renderer is None
    assert not pygame.display.get_init()


def test_engine_as_context_manager():
    with Engine() as eng:
        eng.initialize(WindowSettings(name="Demo", width=16, height=16), VideoSettings())
        window = eng.window
        assert window.surface.get_size() == (16, 16)
    assert window.surface is None


def test_main_runs_frames(image_path, capsys):
    assert main(["--frames", "2", "--delay", "0", str(image_path)]) == 0
    out = capsys.readouterr().out
    assert out.count("[DEBUG]: Terminate( 0 )") == 2
    assert "x:(10) y:(10)" in out
    assert "x:(0) y:(0) w:(10) h:(20)" in out
    assert not pygame.display.get_init()


def test_main_missing_image(tmp_path, capsys):
    assert main(["--frames", "1", "--delay", "0", str(tmp_path / "missing.png")]) == 1
    assert "djinni:" in capsys.readouterr().err
    assert not pygame.display.get_init()