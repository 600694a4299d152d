# endgame

A top-down arcade shooter built on pygame. You walk a hero across three
maps, shoot the waves of zombies that close in on you, and in the last
map face a boss that fires back.

## Installing

```
pip install .
```

This pulls in pygame, which the game uses for its window, graphics,
sound and input.

## Running

```
endgame
```

Options:

- `--resources DIR`: the directory that holds the `resource/` folder
  (default: the current directory). The game stops with exit status 1
  if there is no `resource/` folder there.
- `--mute`: play without sound. Without it the game opens the audio
  mixer and stops with "sound error" if that fails.

The same entry point is available as `endgame.app.main(argv=None)`,
which returns the exit status.

## How to play

- **Main menu**: move the mouse over a button and click. *Play* starts
  the game, *Guide* opens the help screens, *Made by* shows the credits.
  `Esc` or closing the window quits.
- **Help screens**: the back button or `Esc` returns to the menu. Left
  alone, the guide moves on to a joke screen and then to the controls.
- **Intro**: press `Enter` to begin, or `Esc` to quit.
- **Moving**: `W`, `A`, `S`, `D`. The screen edges and the obstacles on
  each map block the way.
- **Shooting**: click to fire a bullet toward the mouse pointer. There
  is a cooldown of 100 ms between shots.
- **Levels**: the hero starts each level with 1000 health. The park ends
  after 25 zombies are killed, the campus after 30; zombies arrive in
  timed waves. In the server room a boss fires at you every 0.6 s; once
  it falls the server is drawn broken and glows when you stand near it.
  `E` ends the server-room level, and `Esc` ends any level.
- A zombie that touches you takes away health each frame. When your
  health reaches zero the game-over screen appears; click it to leave
  (exit status 1). Closing the window during a level also exits with
  status 1.
- After the third level the win screen plays its music; press `Esc` to
  close the game.

## What it does not do

The package holds code only: the images, sounds, music and the
`PublicPixel.ttf` font are not included and must be supplied in a
`resource/` folder. There is no saving, no score table and no settings
screen.

## Tests

```
pip install .[test]
pytest
```