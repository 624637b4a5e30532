"""Collision tests between the player and scrolling entities."""

import math

from coinrunner.game.entities import Coin, Obstacle, Player

# Fixed pickup leniency added to the coin radius. Independent of player size.
COIN_PICKUP_MARGIN = 20.0


def obstacle_hits(player: Player, obstacle: Obstacle) -> bool:
    """AABB overlap test. Touching edges do not count."""
    return (
        player.x < obstacle.x + obstacle.width
        and player.x + player.width > obstacle.x
        and player.y < obstacle.y + obstacle.height
        and player.y + player.height > obstacle.y
    )


def coin_hits(player: Player, coin: Coin) -> bool:
    """True if the coin center is within pickup range of the player's center."""
    cx, cy = player.center
    distance = math.hypot(coin.x - cx, coin.y - cy)
    return distance < coin.radius + COIN_PICKUP_MARGIN
