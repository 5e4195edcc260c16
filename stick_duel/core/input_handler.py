"""
Input handling for the keyboard
"""

import pygame
from typing import Dict, Set
from dataclasses import dataclass, field

from stick_duel.core.simulation import Intent


@dataclass
class InputState:
    """Current state of all inputs"""
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_pressed: Set[int] = field(default_factory=set)

    quit_requested: bool = False


class InputHandler:
    """
    Centralized input handling.
    Tracks held and just-pressed keys and turns them
    into one Intent per frame for the human fighter.
    """

    def __init__(self):
        self.state = InputState()
        self._prev_keys: Set[int] = set()

        # Key bindings (action -> key)
        self.bindings: Dict[str, int] = {
            'up': pygame.K_w,
            'down': pygame.K_s,
            'left': pygame.K_a,
            'right': pygame.K_d,
            'shoot': pygame.K_f,
            'block': pygame.K_g,
            'pause': pygame.K_ESCAPE,
            'restart': pygame.K_r,
        }

    def update(self):
        """
        Update input state. Call once per frame before processing events.
        """
        self._prev_keys = self.state.keys_pressed.copy()

        # Reset just-pressed
        self.state.keys_just_pressed.clear()
        self.state.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self.state.keys_pressed.add(event.key)
            if event.key not in self._prev_keys:
                self.state.keys_just_pressed.add(event.key)

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)

    def is_key_pressed(self, key: int) -> bool:
        """Check if key is currently held down"""
        return key in self.state.keys_pressed

    def is_key_just_pressed(self, key: int) -> bool:
        """Check if key was just pressed this frame"""
        return key in self.state.keys_just_pressed

    def is_action_pressed(self, action: str) -> bool:
        """Check if bound action key is pressed"""
        if action in self.bindings:
            return self.is_key_pressed(self.bindings[action])
        return False

    def is_action_just_pressed(self, action: str) -> bool:
        """Check if bound action key was just pressed"""
        if action in self.bindings:
            return self.is_key_just_pressed(self.bindings[action])
        return False

    def get_intent(self) -> Intent:
        """
        Build this frame's intent.
        Up/down and left/right pairs resolve to the later check, so down
        beats up and right beats left when both are held.
        Fire only triggers on the frame the key goes down.
        """
        dx, dy = 0, 0
        if self.is_action_pressed('up'):
            dy = -1
        if self.is_action_pressed('down'):
            dy = 1
        if self.is_action_pressed('left'):
            dx = -1
        if self.is_action_pressed('right'):
            dx = 1

        return Intent(
            dx=dx, dy=dy,
            fire=self.is_action_just_pressed('shoot'),
            block=self.is_action_pressed('block')
        )

    def set_binding(self, action: str, key: int):
        """Change a key binding"""
        self.bindings[action] = key

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.state.quit_requested
