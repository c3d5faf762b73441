# bonobo

Building blocks for small real-time 3D rendering programs, with no
dependency on a windowing system or graphics driver. It needs only numpy.

## Modules

- `bonobo.log`: a `Logger` that formats messages of a given `LogType`
  (success, info, neutral, warning, error, file, assert, param, trivia)
  and sends them to standard output or standard error (by `Severity`), a
  log file (`log.txt` by default, opened when the `OutputTarget.FILE`
  target is set) and a custom callback. Each type has a `Verbosity`:
  `WHISPER` drops the message, `LOUD` prefixes it with file, function and
  line. `ReportFlag.MESSAGE_ONCE` and `ReportFlag.LOCATION_ONCE` report a
  message only the first time it is seen. `report_param` reports a bad
  parameter when its test is false. `Logger` is also a context manager
  that calls `init()` and `destroy()`.
- `bonobo.logview`: `LogView`, a fixed-size ring buffer of recent log
  messages (64 rows of up to 511 characters by default). `attach(logger)`
  makes it the logger's custom output; `entries(filter_text)` returns the
  stored `(LogType, text)` pairs oldest first; `color(log_type)` gives an
  RGBA colour per type. `text_filter_passes` implements the
  comma-separated `"incl,-excl"` filter, case-insensitively.
- `bonobo.various`: `slurp_file(path)` returns the text of a file up to
  its first NUL character.
- `bonobo.transform`: `TRSTransform`, a translation, rotation and
  per-axis scale composed as `T * R * S`. It has relative operations
  (`translate`, `scale_by`, `rotate`, `rotate_x/y/z`, `pre_rotate`,
  `pre_rotate_x/y/z`), absolute ones (`set_translate`, `set_scale`,
  `set_rotate`, `set_rotate_x/y/z`), `look_towards` and `look_at`, 4×4
  matrices and their inverses (`matrix`, `matrix_inverse`,
  `translation_matrix`, `rotation_matrix`, `scale_matrix` and so on),
  direction vectors (`up`, `down`, `left`, `right`, `front`, `back`) and
  a text form (`dumps` / `loads`). Matrices use column vectors:
  `t.matrix() @ p` maps a homogeneous point to parent space.
  `axis_rotation(angle, axis)` builds a 3×3 rotation.
- `bonobo.inputs`: `InputHandler` tracks keycode, scancode and mouse
  button states per tick. Feed it events with `feed_keyboard`,
  `feed_mouse_buttons` and `feed_mouse_motion`, call `advance()` once per
  frame, and read `InputState` flags (`PRESSED`, `RELEASED`,
  `JUST_PRESSED`, `JUST_RELEASED`) with `keycode_state`, `scancode_state`
  and `mouse_state`. `Action`, `Key` and `MouseButton` hold the event
  codes the camera uses.
- `bonobo.camera`: `FPSCamera`, a first-person camera with a
  `perspective` projection. `update(delta_seconds, input_handler,
  ignore_keys, ignore_mouse)` turns the view while the left mouse button
  is held and moves with W/A/S/D/Q/E (Left Control slows, Left Shift
  speeds up). It gives view, world and clip conversion matrices,
  `clip_to_view` / `clip_to_world`, and a text form (`dumps` / `loads`).
- `bonobo.geometry`: `basis_geometry` (the arrow vertices and triangle
  indices for drawing one axis of a basis), `viewport_for` (pixel
  origin and size of a rectangle given in [-1, 1] window coordinates) and
  `debug_texture_pixels` (a placeholder texture filled with `0xFFE935DA`).
- `bonobo.gldebug`: `DebugType`, `DebugSource` and `DebugSeverity` with
  their readable names (`debug_type_name`, `debug_source_name`,
  `debug_severity_name`), and `report_debug_message`, which forwards a
  driver debug message to a `Logger` as info, warning or error by
  severity.

## What it does not do

The package does not open windows, create a graphics context, compile
shaders, upload meshes or textures, load model files or draw anything.
It has no scene-graph node or mesh and material types, and no command to
run. It supplies the state, maths and data that such a program would
feed to a graphics API of its own choosing.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import math
from bonobo.camera import FPSCamera
from bonobo.inputs import InputHandler, Key, Action

camera = FPSCamera(math.radians(60), 16 / 9, 0.1, 100.0)
inputs = InputHandler()

inputs.feed_keyboard(Key.W, 17, Action.PRESS)
inputs.advance()
camera.update(1 / 60, inputs, False, False)

print(camera.world_to_clip_matrix())
```

```python
from bonobo.log import Logger, LogType, OutputTarget
from bonobo.logview import LogView

logger = Logger("log.txt")
logger.set_output_targets(OutputTarget.STD | OutputTarget.CUSTOM)
view = LogView(64, 512)
view.attach(logger)
logger.report(0, "main.py", "main", 12, LogType.WARNING, "%d frames dropped", 3)
for log_type, text in view.entries(""):
    print(log_type.name, text, end="")
```