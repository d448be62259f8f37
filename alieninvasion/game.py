"""Game state: the screens, the enemy formation, shooting, scoring and the rules of play."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum

from .enemy import EnemyShip
from .player import Move, PlayerShip, Rotation
from .projectile import Projectile
from .world import World

logger = logging.getLogger(__name__)

ENTER = "\r"
ESCAPE = "\x1b"
SPACE = " "
BACKSPACE = "\b"

# Projectile direction index used for enemy shots (straight down).
_DOWN = 3


class State(Enum):
    INITIAL = "initial"
    PAUSED = "paused"
    PLAYING = "playing"
    HELP_PAUSED = "help_paused"
    HELP_INITIAL = "help_initial"
    DIFFICULTY_SELECT = "difficulty_select"
    WON = "won"
    LOST = "lost"


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


@dataclass(frozen=True)
class _Settings:
    lives: int
    fire_interval: float
    enemy_fire_interval: float
    vertical_ratio: float
    horizontal_ratio: float
    player_speed: float


_SETTINGS = {
    Difficulty.EASY: _Settings(5, 0.15, 3.0, 0.2, 0.8, 2.0),
    Difficulty.MEDIUM: _Settings(3, 0.5, 2.0, 0.2, 0.8, 1.0),
    Difficulty.HARD: _Settings(2, 1.5, 1.0, 0.3, 0.4, 1.0),
}


class Game:
    """Everything that changes while the program runs, driven by key presses and time."""

    cycles_to_descend = 4
    enemy_speed = 1.0

    def __init__(self, world: World | None = None, rng: random.Random | None = None) -> None:
        self.world = world if world is not None else World()
        self.rng = rng if rng is not None else random.Random()
        self.state = State.INITIAL
        self.difficulty: Difficulty | None = None
        self.quit_requested = False

        self.player: PlayerShip | None = None
        self.enemies: list[EnemyShip] = []
        self.player_shots: list[Projectile] = []
        self.enemy_shots: list[Projectile] = []

        self.player_speed = 1.0
        self.vertical_ratio = 0.2
        self.horizontal_ratio = 0.8

        self.last_shot = 0.0
        self.fire_interval = 1.5
        self.lives = 3
        self.kills = 0
        self.game_time = 0.0
        self.last_time_update = 0.0
        self.score = 0
        self.last_enemy_shot = 0.0
        self.enemy_fire_interval = 2.0

        w = self.world
        self.enemy_horizontal_speed = 0.5 * w.scale
        self.horizontal_spacing = w.enemy_size[0] * w.scale * 3.5
        self.vertical_spacing = w.enemy_size[1] * w.scale * 3
        self.moving_right = True
        self.move_cycles = 0
        self.behind_lines = False

    # ----- setting up a round -----

    def start(self, difficulty: Difficulty | int) -> None:
        """Begin a new round at the given difficulty."""
        difficulty = Difficulty(difficulty)
        settings = _SETTINGS[difficulty]
        self.enemies = []
        self.player_shots = []
        self.enemy_shots = []

        self.difficulty = difficulty
        self.lives = settings.lives
        self.fire_interval = settings.fire_interval
        self.enemy_fire_interval = settings.enemy_fire_interval
        self.vertical_ratio = settings.vertical_ratio
        self.horizontal_ratio = settings.horizontal_ratio
        self.player_speed = settings.player_speed

        self.kills = 0
        self.game_time = 0.0
        self.score = 0
        self.last_enemy_shot = 0.0

        self.player = PlayerShip(self.player_speed, self.world)
        self.create_enemies()
        self.state = State.PLAYING

    def create_enemies(self) -> None:
        """Add a grid of enemies below the top-left corner of the field."""
        w = self.world
        rows = int(w.height / w.enemy_size[1] * self.vertical_ratio)
        cols = int(w.width / w.enemy_size[0] * self.horizontal_ratio)
        for i in range(rows):
            for j in range(cols):
                enemy = EnemyShip(self.enemy_speed, w)
                enemy.x = w.xmin + self.horizontal_spacing * (j + 1)
                enemy.y = w.ymax - self.vertical_spacing * (i + 1)
                self.enemies.append(enemy)

    # ----- rules applied every frame -----

    def move_enemies(self) -> None:
        """Sweep the formation sideways, reversing at the edges and descending now and then."""
        w = self.world
        margin = w.enemy_size[0] * w.scale / 2
        left, right = w.xmin + margin, w.xmax - margin

        change = any(
            (self.moving_right and e.x >= right) or (not self.moving_right and e.x <= left)
            for e in self.enemies
        )
        if change:
            self.moving_right = not self.moving_right
            self.move_cycles += 1
            if self.move_cycles >= self.cycles_to_descend:
                floor = w.ymin + w.enemy_size[1] * w.scale
                for enemy in self.enemies:
                    enemy.y -= self.vertical_spacing
                    if enemy.y - self.vertical_spacing <= floor:
                        self.state = State.LOST
                        return
                self.move_cycles = 0

        dx = self.enemy_horizontal_speed if self.moving_right else -self.enemy_horizontal_speed
        for enemy in self.enemies:
            enemy.x += dx

    def check_player_enemy_collision(self) -> None:
        """Remove the first enemy touching the player and take a life for it."""
        if self.player is None:
            return
        w = self.world
        player_half = w.player_size[0] * w.scale
        enemy_half = w.enemy_size[0] * w.scale
        px, py = self.player.position
        for index, enemy in enumerate(self.enemies):
            if (
                px + player_half >= enemy.x - enemy_half
                and px - player_half <= enemy.x + enemy_half
                and py + player_half >= enemy.y - enemy_half
                and py - player_half <= enemy.y + enemy_half
            ):
                del self.enemies[index]
                self.lives -= 1
                if self.lives <= 0:
                    self.state = State.LOST
                return

    def check_player_position(self) -> None:
        """Penalise a player who has slipped above the lowest enemy."""
        if self.player is None:
            return
        lowest = min((e.y for e in self.enemies), default=self.world.ymax)
        lowest = min(lowest, self.world.ymax)
        self.behind_lines = self.player.y > lowest
        if self.behind_lines:
            self.score -= 5
            self.lives = 1 if self.lives <= 1 else self.lives - 1

    def update(self, now: float) -> None:
        """Advance play by one frame at time ``now`` in seconds; idle outside of play."""
        if self.state is not State.PLAYING:
            return

        if now - self.last_time_update >= 1.0:
            self.game_time += 1.0
            self.last_time_update = now

        self.check_player_position()
        self.check_player_enemy_collision()
        self.move_enemies()

        self._advance_player_shots()

        if now - self.last_enemy_shot >= self.enemy_fire_interval and self.enemies:
            shooter = self.enemies[self.rng.randrange(len(self.enemies))]
            self.enemy_shots.append(
                Projectile(shooter.x, shooter.y, _DOWN, False, self.world)
            )
            self.last_enemy_shot = now

        if self._advance_enemy_shots():
            return

        if not self.enemies:
            # A round cleared within its first second earns the largest time bonus.
            time_bonus = int(1000 / self.game_time) if self.game_time else 1000
            self.score += time_bonus
            self.score += self.lives * 500
            self.state = State.WON

    def _advance_player_shots(self) -> None:
        remaining = []
        for shot in self.player_shots:
            if shot.step():
                continue
            half = self.world.enemy_size[0] * self.world.scale
            target = next(
                (e for e in self.enemies if shot.hits(e.position, half)), None
            )
            if target is None:
                remaining.append(shot)
                continue
            self.enemies.remove(target)
            self.kills += 1
            self.score += 10
        self.player_shots = remaining

    def _advance_enemy_shots(self) -> bool:
        """Move enemy shots; return True if one of them ended the game."""
        remaining = []
        shots = iter(self.enemy_shots)
        for shot in shots:
            shot.step()
            if not shot.on_screen():
                continue
            if self.player is not None:
                half = self.world.player_size[0] * self.world.scale
                if shot.hits(self.player.position, half):
                    self.lives -= 1
                    if self.lives <= 0:
                        self.state = State.LOST
                        remaining.extend(shots)
                        self.enemy_shots = remaining
                        return True
                    continue
            remaining.append(shot)
        self.enemy_shots = remaining
        return False

    # ----- input -----

    def press(self, key: str | int, now: float) -> None:
        """Handle one key press; ``key`` is a character or its code."""
        if isinstance(key, int):
            key = chr(key)
        handlers = {
            State.INITIAL: self._press_initial,
            State.DIFFICULTY_SELECT: self._press_difficulty,
            State.HELP_INITIAL: self._press_help,
            State.HELP_PAUSED: self._press_help,
            State.PAUSED: self._press_paused,
            State.PLAYING: self._press_playing,
            State.LOST: self._press_finished,
            State.WON: self._press_finished,
        }
        handlers[self.state](key, now)

    def _press_initial(self, key: str, now: float) -> None:
        if key == ENTER:
            self.state = State.DIFFICULTY_SELECT
        elif key in ("h", "H"):
            self.state = State.HELP_INITIAL
        elif key == ESCAPE:
            self.quit_requested = True

    def _press_difficulty(self, key: str, now: float) -> None:
        if key in ("1", "2", "3"):
            self.start(int(key))
        elif key == ESCAPE:
            self.state = State.INITIAL

    def _press_help(self, key: str, now: float) -> None:
        if key == ENTER:
            self.state = State.PAUSED if self.state is State.HELP_PAUSED else State.INITIAL

    def _press_paused(self, key: str, now: float) -> None:
        if key == ENTER:
            self.state = State.PLAYING
        elif key in ("m", "M"):
            self.state = State.INITIAL
        elif key in ("h", "H"):
            self.state = State.HELP_PAUSED

    def _press_finished(self, key: str, now: float) -> None:
        if key == ENTER:
            self.state = State.INITIAL

    def _press_playing(self, key: str, now: float) -> None:
        moves = {"w": Move.UP, "a": Move.LEFT, "s": Move.DOWN, "d": Move.RIGHT}
        turns = {"q": Rotation.COUNTERCLOCKWISE, "e": Rotation.CLOCKWISE}
        lower = key.lower()
        if key == ESCAPE:
            self.state = State.PAUSED
        elif key == SPACE:
            self._fire(now)
        elif key == BACKSPACE:
            self.quit_requested = True
        elif self.player is None:
            return
        elif lower in moves:
            self.player.move(moves[lower])
            logger.debug("X = %s, Y = %s", self.player.x, self.player.y)
        elif lower in turns:
            self.player.rotate(turns[lower])
            logger.debug("heading: %s", self.player.heading())

    def _fire(self, now: float) -> None:
        if self.player is None or now - self.last_shot < self.fire_interval:
            return
        direction = int(self.player.heading() / 90.0)
        self.player_shots.append(
            Projectile(self.player.x, self.player.y, direction, True, self.world)
        )
        self.last_shot = now

    # ----- queries -----

    def can_fire(self, now: float) -> bool:
        """Whether the player's weapon has reloaded at time ``now``."""
        return self.fire_interval - (now - self.last_shot) <= 0

    def final_score(self) -> int:
        """The score shown on the victory screen; the easiest level scores nothing."""
        return 0 if self.difficulty is Difficulty.EASY else self.score