"""
State Machine for game flow management
"""

from typing import Dict, Optional, Callable

from stick_duel.config import GameState


class StateMachine:
    """
    Manages game states and transitions.
    """

    def __init__(self, initial_state: GameState = GameState.FIGHTING):
        self.current_state: GameState = initial_state
        self.previous_state: Optional[GameState] = None

        # State handlers
        self._enter_handlers: Dict[GameState, Callable] = {}
        self._exit_handlers: Dict[GameState, Callable] = {}
        self._update_handlers: Dict[GameState, Callable] = {}

    def register_handlers(
        self,
        state: GameState,
        enter: Optional[Callable] = None,
        exit_handler: Optional[Callable] = None,
        update: Optional[Callable] = None
    ):
        """Register handlers for a state"""
        if enter:
            self._enter_handlers[state] = enter
        if exit_handler:
            self._exit_handlers[state] = exit_handler
        if update:
            self._update_handlers[state] = update

    def transition_to(self, new_state: GameState):
        """
        Transition to a new state.
        Calls exit handler on current state, then enter handler on new state.
        Re-entering the current state runs both handlers again.
        """
        if self.current_state in self._exit_handlers:
            self._exit_handlers[self.current_state]()

        self.previous_state = self.current_state
        self.current_state = new_state

        if new_state in self._enter_handlers:
            self._enter_handlers[new_state]()

    def update(self, dt: float):
        """Update current state"""
        if self.current_state in self._update_handlers:
            self._update_handlers[self.current_state](dt)

    def is_state(self, state: GameState) -> bool:
        """Check if current state matches"""
        return self.current_state == state
