"""Screen, timing and volume settings shared across the game."""

SCREEN_W = 1280
SCREEN_H = 720

TARGET_FPS = 60

# Audio volume, 0-255.
BGM_VOL = 180
SE_VOL = 220

WINDOW_TITLE = "Game A Week - Week1 (Final Day7)"
HI_SCORE_FILE = "hiscore.dat"