import pygame
import pytest

from errorreboot.dialogs import MessageLevel
from errorreboot.main_loop import (
    MIN_WINDOW_SIZE,
    MUSIC_VOLUME,
    WINDOW_TITLE,
    BackgroundMusic,
    MainLoop,
)
from errorreboot.render import Surface
from errorreboot.scene import Scene
from errorreboot.scenes import DynamicScene
from errorreboot.world import World


class FakePlayer:
    def __init__(self):
        self.calls = []

    def load(self, track):
        self.calls.append(("load", track))

    def play(self, loops=0):
        self.calls.append(("play", loops))

    def pause(self):
        self.calls.append(("pause",))

    def unpause(self):
        self.calls.append(("unpause",))

    def set_volume(self, volume):
        self.calls.append(("set_volume", volume))


class RecordingSurface(Surface):
    instances = []

    def __init__(self, size, window):
        self.initial_size = size
        self.window = window
        self.sizes = []
        self.draws = 0
        RecordingSurface.instances.append(self)

    def resize(self, size):
        self.sizes.append(size)

    def draw(self):
        self.draws += 1


class FailingScene(Scene):
    def draw(self):
        raise RuntimeError("boom")


def _event(kind, **attrs):
    return pygame.event.Event(kind, **attrs)


def _source(batches, *, then_quit=True):
    pending = list(batches)

    def source():
        if pending:
            return pending.pop(0)
        return [_event(pygame.QUIT)] if then_quit else []

    return source


def _loop(batches=(), **kwargs):
    windows = []

    def window_factory(size, title):
        windows.append((size, title))
        return pygame.Surface(size)

    presented = []
    loop = MainLoop(
        music=kwargs.pop("music", BackgroundMusic()),
        window_factory=window_factory,
        event_source=_source(batches, then_quit=kwargs.pop("then_quit", True)),
        presenter=lambda title, text, level: presented.append((text, level)),
        **kwargs,
    )
    return loop, windows, presented


@pytest.fixture(autouse=True)
def _reset_instances():
    RecordingSurface.instances.clear()


def test_silent_music_tracks_state():
    music = BackgroundMusic()
    assert music.playing is False
    music.play()
    assert music.playing is True
    music.pause()
    assert music.playing is False
    music.set_volume(0.5)
    assert music.volume == 0.5


def test_music_with_track_loads_looped_and_paused():
    player = FakePlayer()
    music = BackgroundMusic("track.ogg", player=player)
    assert player.calls == [("load", "track.ogg"), ("play", -1), ("pause",)]
    assert music.playing is False


def test_music_controls_forward_to_player():
    player = FakePlayer()
    music = BackgroundMusic("track.ogg", player=player)
    music.set_volume(MUSIC_VOLUME)
    music.play()
    music.pause()
    assert player.calls[3:] == [("set_volume", MUSIC_VOLUME), ("unpause",), ("pause",)]


def test_run_opens_window_and_closes_on_escape():
    loop, windows, presented = _loop([[_event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]])
    loop.run(RecordingSurface)
    assert windows[0][1] == WINDOW_TITLE
    surface = RecordingSurface.instances[0]
    assert surface.initial_size == windows[0][0]
    assert surface.draws == 1
    assert loop.running is False
    assert presented == []
    assert loop.music.volume == MUSIC_VOLUME


def test_game_thread_loads_dynamic_scene():
    loop, _, _ = _loop()
    loop.run(RecordingSurface)
    assert [type(scene) for scene in loop.world.scenes] == [DynamicScene]


def test_focus_controls_music():
    loop, _, _ = _loop([[_event(pygame.WINDOWFOCUSGAINED)]])
    loop.run(RecordingSurface)
    assert loop.music.playing is True

    loop, _, _ = _loop([[_event(pygame.WINDOWFOCUSGAINED), _event(pygame.WINDOWFOCUSLOST)]])
    loop.run(RecordingSurface)
    assert loop.music.playing is False


def test_resize_expose_and_space():
    loop, _, _ = _loop(
        [
            [
                _event(pygame.VIDEORESIZE, size=(640, 480), w=640, h=480),
                _event(pygame.VIDEORESIZE, size=(0, 480), w=0, h=480),
                _event(pygame.KEYDOWN, key=pygame.K_SPACE),
                _event(pygame.WINDOWEXPOSED),
            ]
        ]
    )
    loop.run(RecordingSurface)
    surface = RecordingSurface.instances[0]
    assert surface.sizes == [(640, 480)]
    assert surface.draws == 2


def test_resize_clamped_to_minimum():
    loop, _, _ = _loop([[_event(pygame.VIDEORESIZE, size=(10, 10), w=10, h=10)]])
    loop.run(RecordingSurface)
    assert RecordingSurface.instances[0].sizes == [MIN_WINDOW_SIZE]


def test_failing_window_setup_exits_with_dialog():
    def broken(size, window):
        raise RuntimeError("no adapter")

    loop, _, presented = _loop()
    with pytest.raises(SystemExit) as info:
        loop.run(broken)
    assert info.value.code == 1
    assert presented == [("[FAILED] no adapter", MessageLevel.ERROR)]
    assert loop.running is False


def test_failing_render_thread_stops_everything():
    world = World()
    world.load_scene(FailingScene())
    loop, _, presented = _loop(world=world, then_quit=False)
    with pytest.raises(SystemExit) as info:
        loop.run(RecordingSurface)
    assert info.value.code == 1
    assert ("[FAILED] boom", MessageLevel.ERROR) in presented
    assert loop.running is False


def test_stop_clears_running():
    loop = MainLoop(music=BackgroundMusic())
    assert loop.running is True
    loop.stop()
    assert loop.running is False