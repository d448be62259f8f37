import random

import pygame
import pytest

from alieninvasion.game import Difficulty, Game, State
from alieninvasion.render import TextLine, draw, screen_text, world_to_screen
from alieninvasion.world import World


def _texts(game, now=0.0):
    return [line.text for line in screen_text(game, now)]


def _playing(difficulty=Difficulty.MEDIUM):
    game = Game(World(), random.Random(1))
    game.start(difficulty)
    return game


def test_initial_screen_text():
    game = Game(World(), random.Random(0))
    assert _texts(game) == [
        "ALIEN INVASION",
        "Press ENTER to play",
        "Press H for help",
        "Press ESC to exit",
    ]


def test_title_is_large_and_above_the_rest():
    game = Game(World(), random.Random(0))
    lines = screen_text(game, 0.0)
    title, *rest = lines
    assert title.size > max(line.size for line in rest)
    assert all(title.y > line.y for line in rest)


def test_difficulty_screen_lists_levels():
    game = Game(World(), random.Random(0))
    game.press("\r", 0.0)
    assert game.state is State.DIFFICULTY_SELECT
    texts = _texts(game)
    assert texts[0] == "SELECT DIFFICULTY"
    assert "1 - Deux Ex Machina" in texts
    assert "2 - Medium" in texts
    assert "3 - Hard" in texts
    assert texts[-1] == "Press ESC to go back"


@pytest.mark.parametrize("state", [State.HELP_INITIAL, State.HELP_PAUSED])
def test_help_screen(state):
    game = Game(World(), random.Random(0))
    game.state = state
    texts = _texts(game)
    assert texts[0] == "GAME HELP"
    assert "Space - Shoot" in texts
    assert texts[-1] == "Press ENTER to go back"


def test_pause_screen():
    game = _playing()
    game.press("\x1b", 0.0)
    texts = _texts(game)
    assert texts[0] == "GAME PAUSED"
    assert "Press M to return to menu" in texts


def test_playing_hud_shows_lives_and_kills():
    game = _playing(Difficulty.MEDIUM)
    texts = _texts(game, 100.0)
    assert f"Lifes: {game.lives}" in texts
    assert f"Enemies: {game.kills}" in texts
    assert "BEHIND ENEMY LINES!" not in texts


def test_fire_status_follows_reload():
    game = _playing(Difficulty.HARD)
    game.press(" ", 10.0)
    assert "LOADING..." in _texts(game, 10.0)
    assert "FIRE!" not in _texts(game, 10.0)
    later = 10.0 + game.fire_interval
    assert "FIRE!" in _texts(game, later)


def test_behind_lines_warning():
    game = _playing()
    game.behind_lines = True
    assert "BEHIND ENEMY LINES!" in _texts(game, 100.0)


def test_game_over_screen():
    game = _playing()
    game.kills = 4
    game.game_time = 12.7
    game.state = State.LOST
    texts = _texts(game)
    assert texts[0] == "GAME OVER"
    assert "Game Time: 12 seconds" in texts
    assert "Enemies eliminated: 4" in texts


def test_victory_score_on_easy_is_zero():
    game = _playing(Difficulty.EASY)
    game.score = 1234
    game.state = State.WON
    texts = _texts(game)
    assert texts[0] == "VICTORY!"
    assert "Score: 0" in texts


def test_victory_score_on_medium():
    game = _playing(Difficulty.MEDIUM)
    game.score = 1234
    game.state = State.WON
    assert "Score: 1234" in _texts(game)


def test_world_to_screen_corners_and_centre():
    world = World()
    assert world_to_screen(world, world.xmin, world.ymax, 720, 720) == (0.0, 0.0)
    assert world_to_screen(world, world.xmax, world.ymin, 720, 720) == (720.0, 720.0)
    assert world_to_screen(world, 0.0, 0.0, 720, 720) == (360.0, 360.0)


def test_world_to_screen_flips_y():
    world = World()
    _, high = world_to_screen(world, 0.0, 5.0, 400, 400)
    _, low = world_to_screen(world, 0.0, -5.0, 400, 400)
    assert high < low


def test_text_line_defaults_to_small():
    line = TextLine("FIRE!", (0.0, 1.0, 0.0), 0.0, 0.0)
    assert line.size == 12


def _colors(surface):
    width, height = surface.get_size()
    return {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(0, width)
        for y in range(0, height)
    }


def test_draw_initial_screen_uses_text_colours():
    pygame.font.init()
    surface = pygame.Surface((200, 200))
    game = Game(World(), random.Random(0))
    draw(surface, game, 0.0)
    colors = _colors(surface)
    assert (0, 0, 0) in colors
    assert (0, 255, 0) in colors
    assert (255, 0, 0) in colors


def test_draw_playing_shows_player_cockpit():
    pygame.font.init()
    surface = pygame.Surface((400, 400))
    game = _playing()
    draw(surface, game, 100.0)
    px, py = world_to_screen(game.world, game.player.x, game.player.y, 400, 400)
    pixel = surface.get_at((round(px), round(py)))
    assert pixel.b == 255
    assert pixel.r == 51
    assert tuple(surface.get_at((200, 300)))[:3] == (0, 0, 0)