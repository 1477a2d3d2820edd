"""RPG Quest dev launcher. Plays one three-chapter adventure on the console."""

import argparse
import asyncio
import logging
import os
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

from rpg_quest import (
    AdventureEngine,
    AdventureError,
    ChatServiceError,
    EchoChatService,
    HttpChatService,
    PlayerStats,
    load_config,
)
from rpg_quest.content import ENEMIES, LOCATIONS, OBJECTIVES

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

SETTINGS_PATH = os.getenv("RPG_QUEST_SETTINGS", "apisettings.json")
LOG_LEVEL = os.getenv("RPG_QUEST_LOG_LEVEL", "WARNING")


async def play(engine: AdventureEngine, player: PlayerStats, rng: random.Random) -> None:
    rolls = {
        "location_roll": rng.randrange(len(LOCATIONS)),
        "enemy_roll": rng.randrange(len(ENEMIES)),
        "objective_roll": rng.randrange(len(OBJECTIVES)),
    }
    print(await engine.generate_adventure(player, **rolls))

    for choice in (2, 3):
        await asyncio.to_thread(input, f"\nPress Enter to continue to chapter {choice}...")
        print(await engine.generate_adventure(player, chapter_choice=choice))


def main():
    parser = argparse.ArgumentParser(description="RPG Quest dev launcher")
    parser.add_argument("--name", default="Hero", help="Player character name")
    parser.add_argument("--settings", type=Path, default=Path(SETTINGS_PATH),
                        help="API settings file (default: apisettings.json)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the dice for a reproducible adventure")
    parser.add_argument("--echo", action="store_true",
                        help="Echo prompts back instead of calling a model")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed)
    if args.echo:
        chat = EchoChatService()
    else:
        chat = HttpChatService.from_config(load_config(args.settings))

    player = PlayerStats(
        name=args.name,
        health=20,
        strength=rng.randint(1, 5),
        speed=rng.randint(1, 5),
        magic=rng.randint(1, 8),
        luck=rng.randint(1, 10),
    )
    print(f"{player.name}: HP {player.health}, STR {player.strength}, "
          f"SPD {player.speed}, MAG {player.magic}, LCK {player.luck}\n")

    engine = AdventureEngine(chat=chat, rng=rng, narrate=print)
    try:
        asyncio.run(play(engine, player, rng))
    except ChatServiceError as e:
        print(f"\nThe storyteller is unavailable: {e}", file=sys.stderr)
        sys.exit(1)
    except AdventureError as e:
        print(f"\nThe adventure cannot continue: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
