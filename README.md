# apishooter

A small arcade shooter built around REST concepts. You control a ship at the
bottom of the screen. An API resource such as `User-412` or `Payment-731`
moves around near the top and fires HTTP error codes at you. Your weapons are
HTTP methods.

## Installation

```
pip install .
```

This installs the `api-shooter` command and pulls in `pygame`.

## Playing

```
api-shooter
```

The window is 800×600 and runs at up to 60 frames per second. To make the
random targets and attacks repeatable, pass a seed:

```
api-shooter --seed 42
```

| Key               | Action                                   |
|-------------------|------------------------------------------|
| W A S D / arrows  | Move                                     |
| 1                 | `GET`: scans the target for its weakness |
| 2                 | `POST`: 20 damage, 40 on a weakness      |
| 3                 | `PUT`: 25 damage, 45 on a weakness       |
| 4                 | `DELETE`: 100 damage, only 3 shots       |
| Space             | Next target after a victory              |
| R                 | Restart after a game over                |
| Esc               | Quit                                     |

You start with 99 `GET`, 20 `POST`, 20 `PUT` and 3 `DELETE` shots and 100 HP.
Each target has between 80 and 119 HP and is weak to one of `POST`, `PUT` or
`DELETE`. Hitting a target with its weakness shows "CRITICAL HIT!". Every
1.5 seconds the target fires one of these at you:

| Attack                      | Damage |
|-----------------------------|--------|
| 400 Bad Request             | 15     |
| 401 Unauthorized            | 20     |
| 403 Forbidden               | 25     |
| 429 Too Many Requests       | 30     |
| 500 Internal Server Error   | 35     |

Each point of damage you deal adds to your score, and every target you destroy
adds another 100. The game ends when your HP reaches zero.

## Using the game logic

The simulation runs without a window. You can drive it from code or from tests
with `GameState` and `Controls` from `apishooter.game_state`:

```python
import random

from apishooter.game_state import Controls, GameState

state = GameState.new(random.Random(1))
state.update(1 / 60, Controls(fire_get=True))
print(state.ui_message, state.score, state.player.hp)
```

`Controls` has the flags `left`, `right`, `up`, `down` (keys held) and
`fire_get`, `fire_post`, `fire_put`, `fire_delete`, `next_target` (keys
pressed this frame). `GameState` also offers `fire_bullet`, `enemy_attack`
and `check_collisions` for driving single steps of the rules.

Other pieces:

- `apishooter.player.Player`, `apishooter.enemy.Enemy` (`Enemy.spawn(rng)`,
  `Enemy.update(dt, rng)`) and `apishooter.bullet.Bullet` / `EnemyBullet`
  hold the game objects.
- `apishooter.colors.Color` is an RGBA colour with components from 0.0 to 1.0,
  with `with_alpha` and `to_rgba`.
- `apishooter.render.draw(surface, state)` draws a state onto any pygame
  surface.
- `apishooter.app.read_controls(held, pressed)` turns pygame key codes into
  `Controls`; `apishooter.app.main` runs the windowed game.

## Running the tests

```
pip install ".[test]"
pytest
```