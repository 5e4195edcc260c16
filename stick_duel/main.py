#!/usr/bin/env python3
"""
STICK DUEL - Stick Figure Arena Duel
====================================
Entry point for the game.

Run: stick-duel  (or python -m stick_duel.main)
"""

import sys

from stick_duel.config import GAME_TITLE

CONTROLS = """\
Controls:
  W/A/S/D  - Move
  F        - Shoot (once per key press)
  G        - Block (hold; reflects incoming shots)
  Escape   - Pause / Resume
  R        - Restart after a match or from pause"""


def main():
    """Main entry point"""
    if len(sys.argv) > 1 and sys.argv[1] in ('--help', '-h'):
        print("Stick Duel - Stick Figure Arena Duel")
        print("\nUsage: stick-duel")
        print()
        print(CONTROLS)
        return

    print(f"\n{'='*60}")
    print(f"  {GAME_TITLE}")
    print(f"{'='*60}\n")
    print("Loading game...")

    from stick_duel.core.game import Game
    from stick_duel.graphics.renderer import Renderer
    from stick_duel.graphics.particles import ParticleSystem
    from stick_duel.ui.hud import HUD
    from stick_duel.audio.sound_manager import SoundManager

    game = Game()

    renderer = Renderer()
    particle_system = ParticleSystem()
    hud = HUD()

    # Sound manager (optional - may fail without an audio device)
    sound_manager = None
    if game.audio_available:
        sound_manager = SoundManager()
        if sound_manager.initialized:
            print("Audio: OK")
        else:
            print("Audio: Disabled (initialization failed)")
            sound_manager = None
    else:
        print("Audio: Disabled (no device)")

    game.initialize_systems(
        renderer=renderer,
        particle_system=particle_system,
        hud=hud,
        sound_manager=sound_manager
    )

    print("\nReady! Fight!")
    print(CONTROLS + "\n")

    try:
        game.run()
    except KeyboardInterrupt:
        print("\nGame stopped by user.")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
