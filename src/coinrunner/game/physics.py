"""Player physics: gravity integration, ground clamp and jumping."""

from coinrunner.game.entities import Player


def update_player(player: Player, ground_y: float) -> None:
    """Advance the player by one tick (explicit Euler) and clamp to ground."""
    player.velocity_y += player.gravity
    player.y += player.velocity_y

    floor_y = ground_y - player.height
    if player.y >= floor_y:
        player.y = floor_y
        player.velocity_y = 0.0
        player.on_ground = True
    else:
        player.on_ground = False


def jump(player: Player) -> bool:
    """Start a jump if the player is standing on the ground.

    Returns:
        True if the jump happened, False if it was ignored (mid-air).
    """
    if not player.on_ground:
        return False

    player.velocity_y = player.jump_power
    return True


def reset_player(player: Player, ground_y: float) -> None:
    """Put the player back on the ground at rest. Constants are kept."""
    player.y = ground_y - player.height
    player.velocity_y = 0.0
    player.on_ground = True
