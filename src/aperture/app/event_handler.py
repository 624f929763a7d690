"""Route windowing events to a camera's input methods.

Events are duck-typed on the attributes VisPy gives its canvas events
(``type``, ``pos``, ``button``, ``delta``, ``text``), so any toolkit can feed
the handler by building objects with the same shape.
"""

from __future__ import annotations

from typing import Any

from ..core.camera import ButtonState, Camera, MouseButton

# Wheel steps arrive in notches; the camera's scroll model expects pixels.
WHEEL_PIXELS_PER_STEP = 20.0

_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.RIGHT}
_ACTIONS = {"mouse_press": ButtonState.PRESSED, "mouse_release": ButtonState.RELEASED}


def camera_event_handler(cam: Camera, event: Any) -> bool:
    """Forward one event to ``cam``; return True if it was used.

    Keys: ``s`` stores the current pose as the default, ``d`` jumps back to it.
    Intercept key events before calling this if those shortcuts are unwanted.
    """
    kind = getattr(event, "type", None)
    if kind == "mouse_wheel":
        delta = getattr(event, "delta", None)
        if delta is None:
            return False
        # Wheel up zooms in.
        cam.handle_scroll(-float(delta[1]) * WHEEL_PIXELS_PER_STEP)
        return True
    if kind == "mouse_move":
        x, y = event.pos[:2]
        cam.handle_mouse_move(float(x), float(y))
        return True
    if kind in _ACTIONS:
        button = _BUTTONS.get(getattr(event, "button", None))
        if button is None:
            return False
        cam.handle_mouse_input(button, _ACTIONS[kind])
        return True
    if kind == "key_press":
        text = getattr(event, "text", "") or ""
        if text == "s":
            cam.set_current_as_default()
            return True
        if text == "d":
            cam.transition_to_default()
            return True
    return False
