"""Entry point: python -m asteroids"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .controls import Keyboard
from .pilot import RandomPilot
from .settings import Settings
from .sim.sim import Sim

logger = logging.getLogger("asteroids")


def run_session(sim: Sim, pilot: RandomPilot, frames: int) -> dict:
    shots = rejected = expired = wraps = 0
    peak = 0
    for _ in range(frames):
        pilot.press()
        for ev in sim.step(pilot.keyboard.sample()):
            kind = ev["type"]
            if kind == "shot":
                shots += 1
            elif kind == "shot_rejected":
                rejected += 1
            elif kind == "projectile_expired":
                expired += 1
            elif kind == "wrap":
                wraps += 1
        peak = max(peak, len(sim.projectiles))
    return {
        "frames": sim.tick,
        "seconds": round(sim.time_s, 3),
        "shots": shots,
        "rejected": rejected,
        "expired": expired,
        "wraps": wraps,
        "peak_in_flight": peak,
    }


def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    parser = argparse.ArgumentParser(description="Headless ship simulation")
    parser.add_argument("--frames", type=int, default=settings.FPS * 30)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--width", type=float, default=settings.WIDTH)
    parser.add_argument("--height", type=float, default=settings.HEIGHT)
    parser.add_argument("--fire-prob", type=float, default=0.15, help="Chance per frame of tapping fire")
    parser.add_argument("--record", type=Path, default=None, help="Write replay frames to this JSON file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    sim = Sim(settings.to_game_config(), record_replay=args.record is not None)
    if (args.width, args.height) != (sim.bounds.width, sim.bounds.height):
        sim.resize(args.width, args.height)
        sim.reset()
    pilot = RandomPilot(Keyboard(), seed=args.seed, fire_prob=args.fire_prob)

    summary = run_session(sim, pilot, args.frames)
    logger.info("session done: %s", summary)
    print(json.dumps(summary))

    replay = sim.get_replay()
    if args.record is not None and replay is not None:
        args.record.parent.mkdir(parents=True, exist_ok=True)
        args.record.write_text(json.dumps(replay), encoding="utf-8")
        logger.info("replay written to %s (%d frames)", args.record, len(replay["frames"]))


if __name__ == "__main__":
    main()
