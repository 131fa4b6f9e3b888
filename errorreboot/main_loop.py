"""The application loop: window events, background music, game and render threads."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any, Callable, Iterable, Optional, Protocol

import pygame

from errorreboot.dialogs import (
    DIALOG_TITLE,
    MessageLevel,
    Presenter,
    dialog_message_format,
    show_failed_dialog,
)
from errorreboot.render import Surface
from errorreboot.scenes import DynamicScene
from errorreboot.world import World

WINDOW_TITLE = "Error: Reboot"
DEFAULT_WINDOW_SIZE = (800, 600)
MIN_WINDOW_SIZE = (400, 300)
MUSIC_VOLUME = 0.3

logger = logging.getLogger(__name__)

SurfaceFactory = Callable[[tuple[int, int], Any], Surface]
WindowFactory = Callable[[tuple[int, int], str], Any]
EventSource = Callable[[], Iterable[Any]]


class MusicPlayer(Protocol):
    """The subset of ``pygame.mixer.music`` that background music needs."""

    def load(self, track: Any) -> None: ...

    def play(self, loops: int = ...) -> None: ...

    def pause(self) -> None: ...

    def unpause(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...


class BackgroundMusic:
    """A looping track that starts paused; silent when no track is given."""

    def __init__(self, track: Any = None, *, player: Optional[MusicPlayer] = None) -> None:
        self._volume = 1.0
        self._playing = False
        self._player: Optional[MusicPlayer] = None
        if track is not None:
            if player is None:
                pygame.mixer.init()
                player = pygame.mixer.music
            player.load(track)
            player.play(loops=-1)
            player.pause()
            self._player = player

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def playing(self) -> bool:
        return self._playing

    def set_volume(self, volume: float) -> None:
        """Set the playback volume."""
        self._volume = float(volume)
        if self._player is not None:
            self._player.set_volume(self._volume)

    def play(self) -> None:
        """Resume playback."""
        if self._player is not None:
            self._player.unpause()
        self._playing = True

    def pause(self) -> None:
        """Pause playback."""
        if self._player is not None:
            self._player.pause()
        self._playing = False


def _open_window(size: tuple[int, int], title: str) -> pygame.Surface:
    pygame.display.init()
    pygame.display.set_caption(title)
    return pygame.display.set_mode(size, pygame.RESIZABLE)


def _pygame_events() -> list[Any]:
    first = pygame.event.wait(100)
    events = [first] if first.type != pygame.NOEVENT else []
    events.extend(pygame.event.get())
    return events


class MainLoop:
    """Runs the window on the calling thread and the game and renderer on their own."""

    def __init__(
        self,
        *,
        world: Optional[World] = None,
        music: Optional[BackgroundMusic] = None,
        window_factory: Optional[WindowFactory] = None,
        event_source: Optional[EventSource] = None,
        presenter: Optional[Presenter] = None,
    ) -> None:
        self._world = world if world is not None else World()
        self._music = music if music is not None else BackgroundMusic()
        self._window_factory = window_factory or _open_window
        self._event_source = event_source or _pygame_events
        self._presenter = presenter
        self._running = threading.Event()
        self._running.set()

    @property
    def world(self) -> World:
        return self._world

    @property
    def music(self) -> BackgroundMusic:
        return self._music

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def stop(self) -> None:
        """Ask every loop to finish."""
        self._running.clear()

    def run(self, surface_factory: SurfaceFactory) -> None:
        """Run until the window closes; raise SystemExit(1) if any part failed."""
        failures: list[BaseException] = []
        threads = [
            threading.Thread(
                target=self._guarded, args=(loop, failures), name=name, daemon=True
            )
            for name, loop in (("render", self._render), ("game", self._game))
        ]
        for thread in threads:
            thread.start()
        try:
            self._guarded(lambda: self._main(surface_factory), failures)
        finally:
            self.stop()
            for thread in threads:
                thread.join()
        if failures:
            raise SystemExit(1)

    def _guarded(self, loop: Callable[[], None], failures: list[BaseException]) -> None:
        try:
            loop()
        except Exception as err:
            self.stop()
            self._report_failure(err)
            failures.append(err)

    def _report_failure(self, err: BaseException) -> None:
        if self._presenter is None:
            show_failed_dialog(err)
            return
        display, debug = dialog_message_format(err, "FAILED")
        logger.error("%s", debug)
        try:
            self._presenter(DIALOG_TITLE, display, MessageLevel.ERROR)
        except Exception as dialog_err:
            print(f"[FAILED] {dialog_err}", end="", file=sys.stderr)

    def _game(self) -> None:
        self._world.load_scene(DynamicScene())
        while self.running:
            self._world.update()

    def _render(self) -> None:
        while self.running:
            self._world.draw()

    def _main(self, surface_factory: SurfaceFactory) -> None:
        self._music.set_volume(MUSIC_VOLUME)
        window = self._window_factory(DEFAULT_WINDOW_SIZE, WINDOW_TITLE)
        try:
            surface = surface_factory(tuple(window.get_size()), window)
            surface.draw()
            while self.running:
                for event in self._event_source():
                    if not self._handle(event, surface):
                        return
        finally:
            if self._window_factory is _open_window:
                pygame.display.quit()

    def _handle(self, event: Any, surface: Surface) -> bool:
        """Apply one window event; return False when the window should close."""
        kind = event.type
        if kind == pygame.WINDOWFOCUSLOST:
            self._music.pause()
        elif kind == pygame.WINDOWFOCUSGAINED:
            self._music.play()
        elif kind == pygame.VIDEORESIZE:
            width, height = event.size
            if width and height:
                surface.resize(
                    (max(width, MIN_WINDOW_SIZE[0]), max(height, MIN_WINDOW_SIZE[1]))
                )
        elif kind == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
        elif kind == pygame.QUIT:
            return False
        elif kind in (pygame.WINDOWEXPOSED, pygame.VIDEOEXPOSE):
            surface.draw()
        elif kind == pygame.APP_DIDENTERBACKGROUND:
            logger.warning("APP suspended")
        return True