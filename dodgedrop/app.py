"""Application window, main loop, audio and the shared HUD."""

from __future__ import annotations

import argparse
import os

import pygame

from dodgedrop.config import (
    BGM_VOL,
    HI_SCORE_FILE,
    SCREEN_H,
    SCREEN_W,
    SE_VOL,
    TARGET_FPS,
    WINDOW_TITLE,
)
from dodgedrop.input import Action, Input, poll_actions
from dodgedrop.manager import SceneManager
from dodgedrop.quality import Quality, QualityLevel
from dodgedrop.scene import SceneContext, draw_text
from dodgedrop.score import load_hi_score
from dodgedrop.timing import FpsCounter, FrameTimer
from dodgedrop.title import TitleScene

_SE_FILES = {
    "decide": "assets/se_decide.wav",
    "back": "assets/se_back.wav",
    "hit": "assets/se_hit.wav",
}
_BGM_FILE = "assets/bgm.wav"

_CLEAR = (0, 0, 0)
_HUD = (180, 180, 180)


class App:
    """Holds the game state and drives one frame at a time."""

    def __init__(self, hi_score_path: str | os.PathLike[str] = HI_SCORE_FILE) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self.context = SceneContext(hi_score_path=os.fspath(hi_score_path))
        self.context.hi_score = load_hi_score(hi_score_path)

        self.manager = SceneManager(self.context, self._play_se)
        self.manager.set(TitleScene(self.manager))

        self._input = Input()
        self._timer = FrameTimer()
        self._fps = FpsCounter()
        self._quality = Quality(QualityLevel.HIGH)

        self.context.show_fps = True
        self.context.fps = 60.0
        self.context.quality = QualityLevel.HIGH

    def _play_se(self, key: str) -> None:
        sound = self._sounds.get(key)
        if sound is not None:
            sound.play()

    def _load_audio(self) -> None:
        for key, path in _SE_FILES.items():
            try:
                sound = pygame.mixer.Sound(path)
            except (pygame.error, OSError):
                continue
            sound.set_volume(SE_VOL / 255)
            self._sounds[key] = sound
        try:
            pygame.mixer.music.load(_BGM_FILE)
            pygame.mixer.music.set_volume(BGM_VOL / 255)
            pygame.mixer.music.play(-1)
        except (pygame.error, OSError):
            pass

    def step(self, down, surface: pygame.Surface) -> bool:
        """Run one frame with the held actions; return False when the player quits."""
        self._input.update(down)
        if self._input.triggered(Action.QUIT):
            return False

        self._timer.update()
        dt = self._timer.delta_time

        ctx = self.context
        if self._fps.update():
            fps = self._fps.fps
            ctx.fps = fps
            # A manual switch to LOW is kept as the starting point; recovery stays automatic.
            self._quality.force(ctx.quality)
            self._quality.update_on_fps_sample(fps)
            ctx.quality = self._quality.level

        self.manager.update(dt, self._input)

        surface.fill(_CLEAR)
        self.manager.draw(surface)

        if ctx.show_fps:
            draw_text(surface, f"FPS: {ctx.fps:.1f}", 20, SCREEN_H - 30, _HUD)
        label = "QUALITY: HIGH" if ctx.quality is QualityLevel.HIGH else "QUALITY: LOW"
        draw_text(surface, label, SCREEN_W - 220, SCREEN_H - 30, _HUD)
        return True

    def run(self) -> int:
        """Open the window and play until the player quits; return an exit status."""
        pygame.init()
        try:
            pygame.display.set_caption(WINDOW_TITLE)
            screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
            pygame.mixer.init()
        except pygame.error:
            pygame.quit()
            return 1

        try:
            self._load_audio()
            pygame.joystick.init()
            joystick = pygame.joystick.Joystick(0) if pygame.joystick.get_count() > 0 else None
            clock = pygame.time.Clock()
            self._timer.reset()
            self._fps.reset()

            while True:
                if any(event.type == pygame.QUIT for event in pygame.event.get()):
                    break
                if not self.step(poll_actions(joystick), screen):
                    break
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            pygame.mixer.quit()
            pygame.quit()
        return 0


def main(argv=None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="dodgedrop", description="Dodge the falling blocks.")
    parser.add_argument(
        "--hi-score-file",
        default=HI_SCORE_FILE,
        help="where the hi-score is stored (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    return App(args.hi_score_file).run()


if __name__ == "__main__":
    raise SystemExit(main())