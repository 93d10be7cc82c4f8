# gamelabs

Three small games and simulations built on pygame, with their logic kept
in modules that work without a window.

## Install

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Programs

### Flocking

```
gamelabs-flock
gamelabs-flock --count 200
```

Opens a borderless window slightly smaller than the desktop and moves a
flock of boids (500 by default, set with `--count`) following separation,
alignment and cohesion. Boids leaving the area wrap around to the other
side.

- **Space** switches between flocking and swarming.
- Releasing the **left mouse button** drops a predator at the pointer; the
  flock steers hard away from predators.
- **Escape** or closing the window quits.

The current mode is shown in the corner when the font file
`assets/fonts/ariblk.ttf` is found relative to the working directory;
otherwise the label is left out.

### Cathedral

```
gamelabs-cathedral
```

A 12 × 12 board whose outer ring is a border that no piece may cover. The
pieces on offer are drawn on the right. Click one to select it, hover over
the board to preview the tiles it would cover, and click to place it,
centred on the tile under the pointer. A piece is only placed when all its
tiles are on the board and free. **Escape** or closing the window quits.

After each placement the opponent (`gamelabs.ai.Ai`) runs a depth-2
minimax search over the free tiles and prints the number of searched
positions and its best move to the console.

### Movement lab

```
gamelabs-lab
```

A player sprite that accelerates with **W** (up to a top speed), brakes
with **S** and turns with **A** and **D**, slowing down on its own when no
key is held. Next to it a character walks to the right. Both wrap around to
the left edge when they pass the right edge of the window. Closing the
window quits. The sprites are loaded from `ASSETS/ART/playerTexture.png`
and `ASSETS/ART/npcTexture.png` relative to the working directory; a
sprite whose file is missing is not drawn.

## Library use

### Boids

`gamelabs.vector.Vector` is a small mutable 2-D vector; `gamelabs.boids`
holds `Boid`, `Flock` and `heading_angle`.

```python
import random

from gamelabs.boids import Boid, Flock

rng = random.Random(1)
flock = Flock()
for _ in range(50):
    flock.add(Boid(rng.uniform(0, 800), rng.uniform(0, 600), False, rng))

for _ in range(100):
    flock.flocking(800, 600)

print(flock[0].location)
```

`Flock.swarming(width, height, loose)` moves the flock under a
Lennard-Jones style potential instead. `gamelabs.flock_app.FlockSimulation`
wraps a flock together with the triangle shapes used to display it.

### Cathedral board

`gamelabs.pieces` defines `PieceType`, `Team`, `Piece` and the piece
shapes (`shape_matrix`, `matrix_dimensions`); `gamelabs.board` the `Tile`
and `Grid`; `gamelabs.manager` the `PieceManager` that selects, previews
and places pieces; `gamelabs.ai` the `Ai` and `evaluate_board`.

```python
from gamelabs.board import Grid
from gamelabs.manager import PieceManager
from gamelabs.pieces import PieceType

grid = Grid()
manager = PieceManager((700, 50))

print(manager.can_place(PieceType.TOWER, 30, grid))  # True
manager.place(PieceType.TOWER, 30, grid, True)
print(manager.can_place(PieceType.TOWER, 30, grid))  # False
```

`gamelabs.cathedral_app.CathedralApp` ties a grid, a manager and an
opponent together and advances them with `frame(mouse, pressed)`.

## What it does not do

- The Cathedral opponent only chooses and reports a move; it does not put
  a piece on the board. There are no turns, no captured areas, no scoring
  and no end of game.
- No image or font files are included; the flocking label and the lab
  sprites appear only when their files are present in the working
  directory.