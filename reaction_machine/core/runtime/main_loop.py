"""
main_loop.py
------------
pygame front end for the reaction machine.

Responsibilities:
- Open the window and render the controller's display text
- Turn key presses into coin / Go-Stop events
- Feed controller.tick() at a fixed cadence from real frame time
"""

import pygame

from reaction_machine.core.debug.debug_logger import DebugLogger
from reaction_machine.core.runtime.game_settings import Display, Physics, Timing
from reaction_machine.core.services.input_manager import InputManager
from reaction_machine.core.services.interfaces import DisplaySink


# ===========================================================
# Display Sink
# ===========================================================

class PygameDisplay(DisplaySink):
    """Holds the latest text; MainLoop renders it every frame."""

    def __init__(self):
        self.text = ""

    def set_display(self, text: str) -> None:
        self.text = text


# ===========================================================
# Main Loop
# ===========================================================

class MainLoop:
    """
    Runs the window, input and fixed-step tick feed for one controller.

    The controller must already be connected to `display` and initialized.
    """

    HINT = "C: insert coin    Space: go/stop    Esc: quit"

    def __init__(self, controller, display: PygameDisplay, input_manager: InputManager = None,
                 tick_seconds: float = Timing.TICK_SECONDS):
        self.controller = controller
        self.display = display
        self.input_manager = input_manager or InputManager()
        self.tick_seconds = tick_seconds

        self.accumulator = 0.0
        self.running = False

        self.screen = None
        self.clock = None
        self.font = None
        self.hint_font = None

        self._actions = {
            "coin": self.controller.coin_inserted,
            "go_stop": self.controller.go_stop_pressed,
            "quit": self.stop,
        }

    # ===========================================================
    # Initialization
    # ===========================================================

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()

        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, Display.FONT_SIZE)
        self.hint_font = pygame.font.Font(None, Display.HINT_FONT_SIZE)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} @ {Display.FPS} FPS")
        DebugLogger.init_sub(f"Tick every {self.tick_seconds * 1000:.0f}ms")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute the loop until quit.

        Frame time accumulates and is spent in fixed tick_seconds steps,
        so the controller sees a steady tick rate regardless of FPS.
        """
        self._init_pygame()
        DebugLogger.section("Game Loop")
        self.running = True

        while self.running:
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            self._handle_events()
            self.advance(frame_time)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def stop(self):
        self.running = False
        DebugLogger.action("Quit signal received", category="input")

    def advance(self, frame_time: float) -> int:
        """
        Spend elapsed frame time on controller ticks.

        Args:
            frame_time: Seconds since last frame (clamped to MAX_FRAME_TIME)

        Returns:
            Number of ticks delivered
        """
        self.accumulator += min(frame_time, Physics.MAX_FRAME_TIME)

        ticks = 0
        while self.accumulator >= self.tick_seconds:
            self.controller.tick()
            self.accumulator -= self.tick_seconds
            ticks += 1
        return ticks

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        """Route one pygame event to the controller. Returns the action taken."""
        action = self.input_manager.handle_event(event)
        if action in self._actions:
            self._actions[action]()
        return action

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.screen.fill(Display.BACKGROUND)

        text_surface = self.font.render(self.display.text, True, Display.FOREGROUND)
        text_rect = text_surface.get_rect(center=(Display.WIDTH // 2, Display.HEIGHT // 2))
        self.screen.blit(text_surface, text_rect)

        hint_surface = self.hint_font.render(self.HINT, True, Display.HINT_COLOR)
        hint_rect = hint_surface.get_rect(midbottom=(Display.WIDTH // 2, Display.HEIGHT - 16))
        self.screen.blit(hint_surface, hint_rect)

        pygame.display.flip()
