# Error: Reboot

A small game skeleton built on a scene / object / component model, with a
window drawn through pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
error-reboot
```

Options:

- `--log-level {CRITICAL,ERROR,WARNING,INFO,DEBUG}`: the lowest level of log
  messages written to standard output (default `ERROR`). Messages from
  `errorreboot.render` are always let through at `INFO` and above.

The command opens a resizable 800x600 window titled "Error: Reboot". Every
frame it clears the window to transparent. Resizing to a non-zero size
reconfigures the window, never smaller than 400x300; a resize to zero width
or height is ignored. Press Escape or close the window to quit.

Game logic and drawing each run on their own thread, each paced to at most
60 ticks per second. If the window loop or either thread raises, every loop
is stopped, the error is logged and shown in an error message box, and the
program exits with status 1.

## What it does not do

- There is no game content yet: the game starts with one empty
  `DynamicScene`, so the window shows nothing but its cleared background.
- No music track is shipped. `BackgroundMusic` pauses on focus loss and
  resumes on focus gain, but the default `MainLoop` creates it without a
  track, so it stays silent.
- Message boxes use `tkinter`. Where it is not available, the dialog's own
  error is printed to standard error as `[FAILED] <error>` instead.

## Building a game

- `errorreboot.component.Component`: an abstract piece of behaviour with
  `update(delta_time)` and `draw()`.
- `errorreboot.gameobject.GameObject`: holds at most one component of each
  exact type. `add_component(component)` attaches one, replacing any
  component of the same type, and raises `TypeError` for anything that is not
  a `Component`. `get_component(component_type)` returns the component of
  exactly that type, or `None`. `components` lists them in the order they
  were first added. `update` and `draw` pass on to every component.
- `errorreboot.transform.Transform2d` and `Transform3d`: dataclasses for a
  local `position`, `rotation` and `scale`. In 2D the rotation is an angle;
  in 3D it is a quaternion `(x, y, z, w)`. Values are stored as floats, and a
  vector of the wrong length raises `ValueError`.
- `errorreboot.scene.Scene`: a group of objects updated and drawn together.
  The `scene(objects=..., object_fields=...)` class decorator declares where
  a subclass keeps its objects: either one collection attribute (`objects`)
  or several single attributes (`object_fields`), never both. Using both,
  naming something that is not an identifier, or decorating a class that is
  not a `Scene` subclass raises `SceneDefinitionError`. `objects()` iterates
  over the declared objects; `update` and `draw` pass on to each of them.
- `errorreboot.scenes.DynamicScene`: a scene whose objects are added while
  the game runs with `add_object(obj)`. `clone()` returns a new scene holding
  deep copies of the objects; `len()` gives the number of objects.
- `errorreboot.world.World`: holds the loaded scenes (`load_scene(scene)`,
  `remove_scene(index)`, which raises `IndexError` if there is none; the
  `scenes` property lists them). `update()` and `draw()` step every scene
  once, wait out the rest of a 1/60 s frame, and return the seconds elapsed
  since the previous call. The clock and sleep functions can be passed in
  with `World(clock=..., sleep=...)`.

A short example:

```python
from errorreboot.gameobject import GameObject
from errorreboot.scenes import DynamicScene
from errorreboot.world import World

world = World()
scene = DynamicScene()
scene.add_object(GameObject())
world.load_scene(scene)
world.update()
world.draw()
```

## Rendering and the main loop

- `errorreboot.render.Surface`: abstract surface with `resize(size)` and
  `draw()`.
- `errorreboot.render.PygameSurface(size, window)`: clears `window` to
  transparent and presents it on `draw()`; `resize(size)` reopens the display
  at the new size. Negative sizes raise `ValueError`.
- `errorreboot.main_loop.MainLoop`: `run(surface_factory)` runs the window on
  the calling thread and the game and render loops on their own threads;
  `stop()` asks them all to finish. The world, music, window factory, event
  source and dialog presenter can be passed in as keyword arguments.
- `errorreboot.main_loop.BackgroundMusic(track)`: loads a looping track with
  `pygame.mixer.music`, starting paused, with `set_volume`, `play` and
  `pause`.

## Reporting errors

`errorreboot.dialogs` provides `dialog_message_format(payload, message)`,
which returns a `(display, debug)` pair of texts, and `show_dialog`,
`show_dialog_with_log` (which also logs at a given `logging` level) and
`show_failed_dialog`, shown at a `MessageLevel` of `INFO`, `WARNING` or
`ERROR`. `set_presenter` and the `use_presenter` context manager replace the
function that actually shows the dialog.