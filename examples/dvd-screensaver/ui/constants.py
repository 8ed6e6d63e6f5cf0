"""Window, badge, and color constants."""

# Timing
FPS = 60

# Window
SCREEN_W = 960
SCREEN_H = 600
TITLE = "bounce - maintenance screen"

# Badge
BADGE_LINES = ["SYSTEM MAINTENANCE", "Follow @commonwarexyz for updates and new releases."]
BADGE_PAD_X = 18
BADGE_PAD_Y = 12
BADGE_BORDER = 3
LINE_GAP = 6
TITLE_SIZE = 28
BODY_SIZE = 14

LINK_URL = "https://x.com/commonwarexyz"

# Colors
BG_COLOR = (0, 0, 0)
HUD_COLOR = (120, 120, 140)
