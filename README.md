# alieninvasion

A small arcade shooter. A grid of alien ships sweeps from side to side
across the top of the screen. Every fourth time it reverses direction, it
drops a row. Your ship starts at the bottom. Shoot every alien before the
grid reaches the bottom or you run out of lives.

## Installing

```
pip install .
```

This installs the game and pygame. To run the tests, install the `test`
extra (`pip install .[test]`) and run `pytest`.

## Playing

```
alieninvasion
```

The game opens a 720×720 window. To stop, close the window or use the
quit keys listed below.

### Menus

| Screen            | Keys                                                   |
|-------------------|--------------------------------------------------------|
| Title             | ENTER: choose difficulty, H: help, ESC: quit           |
| Difficulty        | 1, 2 or 3: start a game, ESC: back to title            |
| Help              | ENTER: back to the screen you came from                |
| Paused            | ENTER: resume, M: title screen, H: help                |
| Game over / win   | ENTER: back to title                                   |

### In game

| Key          | Action                                       |
|--------------|----------------------------------------------|
| W, A, S, D   | Move up, left, down, right                   |
| Q, E         | Rotate 90° anticlockwise / clockwise         |
| Space        | Fire in the direction the ship is facing     |
| ESC          | Pause                                        |
| Backspace    | Quit                                         |

The top of the screen shows your lives, the time played and the number
of aliens destroyed. The bottom-left corner shows **FIRE!** when your gun
is ready and **LOADING...** while it reloads.

### Difficulty

1. **Deux Ex Machina**: 5 lives, fast firing, slow enemy fire. The victory
   screen always shows a score of 0.
2. **Medium**: 3 lives, moderate firing.
3. **Hard**: 2 lives, slow firing, and enemies fire twice as often as on
   Medium. The grid has more rows but fewer columns.

### Scoring

- You get 10 points for each alien you destroy.
- If you fly above the lowest alien, you are **behind enemy lines**. On
  each game tick you spend there, you lose 5 points and one life. You
  never lose your last life this way.
- Clear the grid to win. You then get a time bonus of 1000 divided by
  the whole seconds played (1000 if you win within the first second),
  plus 500 points for each life you have left.

If you touch an alien, the alien is destroyed and you lose a life. Each
enemy shot that hits you also costs a life. You lose the game when your
lives reach zero or when the grid comes down to the bottom of the field.

## Using the game logic in code

The rules run without a window:

- `alieninvasion.game.Game` holds the whole game state. `Game.press(key, now)`
  takes a key, given as a character or a character code. `Game.update(now)`
  advances play by one tick. Both take the current time in seconds.
  `Game.state` is a `State`. `Game.start(difficulty)` begins a round
  directly.
- `alieninvasion.render.screen_text(game, now)` lists the text lines that
  the current screen shows.
- `alieninvasion.render.draw(surface, game, now)` paints the screen onto a
  pygame surface.
- `alieninvasion.shapes` gives the outlines of the ships and projectiles,
  placed in world coordinates.

## What it does not do

The game has no sound. It does not save scores or settings between runs,
and it has no options on the command line.