"""Draws a game session into an RGB buffer."""

from coinrunner.game.entities import Coin, Obstacle, Player
from coinrunner.game.session import GameSession
from coinrunner.graphics.primitives import Buffer, draw_circle, draw_rect, fill

SKY = (135, 206, 235)
CLOUD = (255, 255, 255)
GROUND = (144, 238, 144)
GRASS = (34, 139, 34)
PLAYER = (102, 126, 234)
EYES = (255, 255, 255)
OBSTACLE = (255, 107, 107)
COIN = (255, 215, 0)
COIN_SHINE = (255, 237, 78)

# (base x, y, parallax factor)
CLOUDS = [(100, 80, 0.3), (300, 120, 0.5), (500, 60, 0.2)]


def draw_clouds(buffer: Buffer, offset: int) -> None:
    """Parallax clouds drifting right with the offset, wrapping past the edge."""
    width = buffer.shape[1]
    for base_x, y, factor in CLOUDS:
        x = int((base_x + offset * factor) % (width + 100))
        draw_circle(buffer, x, y, 30, CLOUD, alpha=0.7)
        draw_circle(buffer, x + 25, y, 35, CLOUD, alpha=0.7)
        draw_circle(buffer, x + 50, y, 30, CLOUD, alpha=0.7)


def draw_ground(buffer: Buffer, ground_y: float) -> None:
    height, width = buffer.shape[:2]
    gy = int(ground_y)
    draw_rect(buffer, 0, gy, width, height - gy, GROUND)
    for x in range(0, width, 40):
        draw_rect(buffer, x, gy, 30, 5, GRASS)


def draw_player(buffer: Buffer, p: Player) -> None:
    x, y = int(p.x), int(p.y)
    draw_rect(buffer, x, y, int(p.width), int(p.height), PLAYER)
    draw_rect(buffer, x + 10, y + 10, 8, 8, EYES)
    draw_rect(buffer, x + 22, y + 10, 8, 8, EYES)


def draw_obstacle(buffer: Buffer, obs: Obstacle) -> None:
    draw_rect(buffer, int(obs.x), int(obs.y), int(obs.width), int(obs.height), OBSTACLE)


def draw_coin(buffer: Buffer, coin: Coin) -> None:
    draw_circle(buffer, int(coin.x), int(coin.y), int(coin.radius), COIN)
    draw_circle(buffer, int(coin.x) - 3, int(coin.y) - 3, 6, COIN_SHINE)


def render_session(buffer: Buffer, session: GameSession) -> None:
    """Render sky, clouds, ground and all live entities."""
    fill(buffer, SKY)
    draw_clouds(buffer, session.cloud_offset)
    draw_ground(buffer, session.area.ground_y)

    draw_player(buffer, session.player)
    for obs in session.obstacles:
        draw_obstacle(buffer, obs)
    for coin in session.coins:
        draw_coin(buffer, coin)
