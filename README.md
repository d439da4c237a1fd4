# dodgedrop

A small arcade game built on pygame. You steer a paddle along the bottom of
the screen while blocks in three sizes fall from the top. Your score is the
time you survive, in seconds. Blocks fall faster and appear more often as the
run goes on, and one hit ends it.

## Install

```
pip install .
```

This installs pygame as a dependency.

## Play

```
dodgedrop
```

The game opens a 1280×720 window and aims for 60 frames per second.

Options:

- `--hi-score-file PATH`: where the high score is read from and written to
  (default: `hiscore.dat` in the current directory).

### Controls

| Action            | Keyboard          | Gamepad                     |
|-------------------|-------------------|-----------------------------|
| Move              | Left/Right or A/D | Left stick or D-pad         |
| Decide            | Enter or Space    | Button 1                    |
| Back              | —                 | Button 2                    |
| Quit the game     | Esc               | —                           |
| Toggle FPS display| F1                | —                           |
| Force low quality | F2                | —                           |

Esc closes the game from any screen; closing the window does the same. Only
the first connected gamepad is read.

### Screens

- **Title**: shows the high score and a blinking start prompt. Decide starts
  a run. F2 here switches between high and low quality.
- **Game**: the score counts up while you play. A hit pauses the action
  briefly, shakes the screen, flashes it white and then moves to the result
  screen. Back ends the run early and goes to the result screen.
- **Result**: shows this run's score and the high score. A new record is
  marked "NEW RECORD!" and saved. Decide starts another run; Back returns to
  the title.

A frame-rate readout (toggled with F1) and the current quality level are
drawn at the bottom of every screen.

### High score

The high score is a single 4-byte little-endian float. Scores are clamped to
the range 0–999999. A missing or too-short file counts as a high score of 0.
If the file cannot be written, the new record still counts for the rest of
the session.

### Quality

The frame rate is averaged about once a second. One sample below 30 FPS
switches the glow effects to a lighter low-quality mode; two samples in a row
above 40 FPS switch back to high quality. Forcing low quality with F2 sets the
starting point, and the automatic check still applies afterwards.

## Sound

Sound effects and music are played only if these files exist relative to the
current directory:

- `assets/se_decide.wav`, `assets/se_back.wav`, `assets/se_hit.wav`
- `assets/bgm.wav` (looped)

The package does not ship any audio files; without them the game runs silently.

## Using the pieces

The game logic can be driven without a window. `dodgedrop.app.App.step` runs
one frame from a set of held `dodgedrop.input.Action` values onto any pygame
surface, and returns `False` when Quit is pressed. The scenes
(`TitleScene`, `GameScene`, `ResultScene`) are run by
`dodgedrop.manager.SceneManager`, which shares a `SceneContext` between them.
Smaller parts such as `dodgedrop.quality.Quality`,
`dodgedrop.timing.FrameTimer`, `dodgedrop.timing.FpsCounter` and
`dodgedrop.score.load_hi_score` / `save_hi_score` work on their own.

## Tests

```
pip install .[test]
pytest
```