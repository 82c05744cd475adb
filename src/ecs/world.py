import random

from esper import World
from .events.bus import EventBus
from ecs.components.game_state import GameState, GameMode
from ecs.constants import DEFAULT_SIDE


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    side: int = DEFAULT_SIDE,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    if rng is None:
        rng = random.Random(seed)
    elif seed is not None:
        rng.seed(seed)
    setattr(world, "random", rng)

    # Register the global game state resource.
    world.create_entity(GameState(mode=initial_mode, side=side, seed=seed))
    return world
