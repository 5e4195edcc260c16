"""
Main Game Engine for Stick Duel
"""

import pygame
from typing import Optional

from stick_duel.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, GAME_TITLE,
    AUDIO_SAMPLE_RATE, AUDIO_CHANNELS, AUDIO_BUFFER_SIZE,
    GameState, CombatEventType, DEBUG_FRAMERATE, BLACK, WHITE
)
from stick_duel.core.state_machine import StateMachine
from stick_duel.core.input_handler import InputHandler
from stick_duel.core.simulation import Simulation, Arena


class Game:
    """
    Main game engine that coordinates all systems.
    One Simulation per match; the loop steps it once per frame and
    then hands the resulting state to the renderer and HUD.
    """

    def __init__(self):
        pygame.init()

        # Try to initialize audio (optional - may fail on servers)
        self.audio_available = False
        try:
            pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE, size=-16,
                              channels=AUDIO_CHANNELS, buffer=AUDIO_BUFFER_SIZE)
            self.audio_available = True
        except pygame.error as e:
            print(f"[Audio] Could not initialize mixer: {e}")

        # Display
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)

        # Clock
        self.clock = pygame.time.Clock()
        self.running = True
        self.dt = 0.0
        self.fps = 0
        self.frame_count = 0

        # Core systems
        self.state_machine = StateMachine()
        self.input_handler = InputHandler()
        self.arena = Arena(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.simulation: Optional[Simulation] = None

        # Systems (will be initialized later)
        self.renderer = None
        self.particle_system = None
        self.hud = None
        self.sound_manager = None

        # Match tally across rematches
        self.matches_played = 0
        self.wins = [0, 0]

        self._setup_state_handlers()

    def _setup_state_handlers(self):
        """Register handlers for each game state"""
        self.state_machine.register_handlers(
            GameState.FIGHTING,
            update=self._update_fighting
        )
        self.state_machine.register_handlers(
            GameState.PAUSED,
            enter=self._enter_paused,
            exit_handler=self._exit_paused,
            update=self._update_paused
        )
        self.state_machine.register_handlers(
            GameState.MATCH_END,
            enter=self._enter_match_end,
            update=self._update_match_end
        )

    def initialize_systems(self, renderer, particle_system, hud, sound_manager):
        """Initialize all game systems"""
        self.renderer = renderer
        self.particle_system = particle_system
        self.hud = hud
        self.sound_manager = sound_manager

    def start_match(self):
        """Fresh fighters and projectiles for a new match"""
        self.simulation = Simulation(self.arena)
        if self.particle_system:
            self.particle_system.clear()
        print(f"[Match] Match {self.matches_played + 1} started")
        self.state_machine.transition_to(GameState.FIGHTING)

    def run(self):
        """Main game loop"""
        if self.simulation is None:
            self.start_match()

        while self.running:
            self.dt = self.clock.tick(FPS) / 1000.0
            self.fps = self.clock.get_fps()
            self.frame_count += 1

            self._handle_events()

            if self.input_handler.should_quit():
                self.running = False
                continue

            self._update()
            self._render()

            pygame.display.flip()

        self._cleanup()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

    def _update(self):
        """Update game logic"""
        if self.input_handler.is_action_just_pressed('pause'):
            if self.state_machine.is_state(GameState.FIGHTING):
                self.state_machine.transition_to(GameState.PAUSED)
            elif self.state_machine.is_state(GameState.PAUSED):
                self.state_machine.transition_to(GameState.FIGHTING)
                return

        self.state_machine.update(self.dt)

        # Sparks keep fading after the match ends
        if self.particle_system:
            self.particle_system.update(self.dt)

    def _render(self):
        """Render current frame"""
        self.screen.fill(BLACK)

        if self.renderer and self.simulation:
            self.renderer.render(self.screen, self.simulation, self.particle_system)

        if self.hud and self.simulation:
            self.hud.render(self.screen, self.simulation,
                            self.state_machine.current_state)

        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        """Render FPS counter"""
        font = pygame.font.Font(None, 24)
        fps_text = font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (SCREEN_WIDTH // 2 - 30, 10))

    def _cleanup(self):
        """Clean up resources"""
        if self.sound_manager:
            self.sound_manager.cleanup()
        elif self.audio_available:
            pygame.mixer.quit()
        pygame.quit()

    # =========================================================================
    # STATE HANDLERS
    # =========================================================================

    def _update_fighting(self, dt: float):
        """Step the simulation once and react to what happened"""
        intent = self.input_handler.get_intent()
        ended = self.simulation.step(intent)

        for event in self.simulation.events:
            self._handle_combat_event(event)

        if self.simulation.last_decision and self.simulation.last_decision.projectile:
            self._play('shot')
        if intent.fire:
            self._play('shot')

        if ended:
            self.state_machine.transition_to(GameState.MATCH_END)

    def _handle_combat_event(self, event):
        """Particles and sound for one projectile outcome"""
        if event.event_type == CombatEventType.HIT:
            if self.particle_system:
                self.particle_system.spawn_hit_effect(event.position)
            self._play('hit')
        elif event.event_type == CombatEventType.REFLECT:
            if self.particle_system:
                self.particle_system.spawn_reflect_effect(event.position)
            self._play('reflect')

    def _play(self, sound_name: str):
        if self.sound_manager:
            self.sound_manager.play(sound_name)

    def _enter_paused(self):
        if self.sound_manager:
            self.sound_manager.pause()

    def _exit_paused(self):
        if self.sound_manager:
            self.sound_manager.unpause()

    def _update_paused(self, dt: float):
        if self.input_handler.is_action_just_pressed('restart'):
            self.start_match()

    def _enter_match_end(self):
        """Tally the result; the loop stops stepping the simulation"""
        result = self.simulation.result
        self.matches_played += 1
        if result is not None and not result.is_draw:
            self.wins[result.winner] += 1

        print(f"[Match] Tally after {self.matches_played}: "
              f"A {self.wins[0]} - B {self.wins[1]}")

        if self.particle_system:
            for fighter in self.simulation.fighters:
                if not fighter.is_alive:
                    self.particle_system.spawn_ko_effect(fighter.position)
        self._play('ko')

    def _update_match_end(self, dt: float):
        if self.input_handler.is_action_just_pressed('restart'):
            self.start_match()
