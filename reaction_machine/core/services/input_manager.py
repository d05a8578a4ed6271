"""
input_manager.py
----------------
Translates pygame keyboard events into machine actions.

Actions:
- "coin"     -> controller.coin_inserted()
- "go_stop"  -> controller.go_stop_pressed()
- "quit"     -> stop the main loop
"""

import pygame

from reaction_machine.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "coin": [pygame.K_c, pygame.K_INSERT],
    "go_stop": [pygame.K_SPACE, pygame.K_RETURN],
    "quit": [pygame.K_ESCAPE],
}


class InputManager:
    """
    Key-to-action lookup with edge detection on key presses.

    Usage:
        action = input_manager.handle_event(event)
        if action == "coin":
            controller.coin_inserted()
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: Custom {action: [keys]} dict (DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._key_to_action = {}

        for action_name, keys in self.key_bindings.items():
            for key in keys:
                if key in self._key_to_action:
                    DebugLogger.warn(
                        f"Key {key} bound to both '{self._key_to_action[key]}' "
                        f"and '{action_name}' - keeping '{action_name}'",
                        category="input"
                    )
                self._key_to_action[key] = action_name

        DebugLogger.init_entry("InputManager")

    def handle_event(self, event):
        """
        Map one pygame event to an action name.

        Returns:
            str | None: Action for a bound KEYDOWN (or "quit" on window close)
        """
        if event.type == pygame.QUIT:
            return "quit"
        if event.type != pygame.KEYDOWN:
            return None

        action = self._key_to_action.get(event.key)
        if action:
            DebugLogger.action(f"Key {event.key} -> {action}", category="input")
        return action

    def keys_for(self, action_name):
        """Keys bound to an action, as a tuple."""
        return tuple(self.key_bindings.get(action_name, ()))
