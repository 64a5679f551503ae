# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Path Editor — click to place start/goal/walls, then run A*

- Mouse (grid):
    1st click    -> start
    2nd click    -> goal
    later clicks -> toggle wall
    click start/goal again -> clear it
- Keyboard:
    [SPACE]      -> run A*
    [C]          -> clear canvas
    [M]          -> toggle corner rule (fixed / diagonal)
    [Q]/[ESC]    -> quit

Config (env, overridden by CLI):
- GRIDPATH_SIZE=WxH            / --size=WxH
- GRIDPATH_CORNER_RULE=fixed   / --corner-rule=fixed|diagonal
- GRIDPATH_MAX_EXPANSIONS=N    / --max-expansions=N
"""

# --- bootstrap import path so `from gridpath...` works when run as a script ---
import sys, os
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

from dataclasses import dataclass
from typing import List, Tuple, Optional, Sequence
import pygame

from gridpath.core import (
    Cell, Grid, SearchConfig, CORNER_RULES, new_grid, search,
)

# ---------- Config ----------
DEFAULT_SIZE = (10, 10)
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 30
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 40, 90,220)
RED         = (220, 50, 47)
PATH_GREEN  = ( 46,190, 87)
EMPTY_GRAY  = (205,205,210)
BORDER_GRAY = (120,120,128)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


@dataclass
class EditorSettings:
    width: int = DEFAULT_SIZE[0]
    height: int = DEFAULT_SIZE[1]
    corner_rule: str = "fixed"
    max_expansions: Optional[int] = None


def _flag_value(argv: Sequence[str], name: str) -> Optional[str]:
    value = None
    for arg in argv:
        if arg.startswith(f"--{name}="):
            value = arg.split("=", 1)[1]
    return value


def parse_size(text: str) -> Tuple[int, int]:
    try:
        w, h = (int(p) for p in text.lower().split("x", 1))
    except ValueError:
        raise ValueError(f"size must look like WxH, got {text!r}")
    if w <= 0 or h <= 0:
        raise ValueError(f"size must be positive, got {text!r}")
    return w, h


def resolve_settings(argv: Optional[Sequence[str]] = None, env=None) -> EditorSettings:
    """Env vars first, then `--key=value` flags on top."""
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env

    size = _flag_value(argv, "size") or env.get("GRIDPATH_SIZE")
    rule = _flag_value(argv, "corner-rule") or env.get("GRIDPATH_CORNER_RULE", "fixed")
    budget = _flag_value(argv, "max-expansions") or env.get("GRIDPATH_MAX_EXPANSIONS")

    s = EditorSettings(corner_rule=rule.lower())
    if size:
        s.width, s.height = parse_size(size)
    if s.corner_rule not in CORNER_RULES:
        raise ValueError(f"corner rule must be one of {CORNER_RULES}, got {rule!r}")
    if budget:
        s.max_expansions = int(budget)
    return s


# ---------- Editor state (no pygame) ----------
class EditorModel:
    """View state owned by the editor: start, goal, last path and status."""

    def __init__(self, grid: Grid, config: Optional[SearchConfig] = None):
        self.grid = grid
        self.config = config or SearchConfig()
        self.start: Optional[Cell] = None
        self.goal: Optional[Cell] = None
        self.path: List[Cell] = []
        self.state = "Idle"
        self.metrics: dict = {}

    def _invalidate(self):
        self.path = []
        self.state = "Idle"

    def click(self, c: Cell) -> None:
        if not self.grid.in_bounds(c):
            return
        if c == self.start:
            self.start = None
        elif c == self.goal:
            self.goal = None
        elif self.start is None:
            self.start = c
        elif self.goal is None:
            self.goal = c
        else:
            self.grid.toggle_wall(c)
        self._invalidate()

    def run(self) -> None:
        if self.start is None or self.goal is None:
            self.state = "Place start and goal"
            return
        res = search(self.grid, self.start, self.goal, self.config)
        self.metrics = res.metrics
        self.path = res.path or []
        self.state = {
            "found": "Done",
            "no_path": "No path",
            "invalid": "Invalid start/goal",
            "aborted": "Aborted",
        }[res.status]

    def clear(self) -> None:
        self.grid.clear_walls()
        self.start = None
        self.goal = None
        self.metrics = {}
        self._invalidate()

    def toggle_corner_rule(self) -> None:
        nxt = "diagonal" if self.grid.corner_rule == "fixed" else "fixed"
        self.grid = self.grid.with_corner_rule(nxt)
        self._invalidate()


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg = (46, 50, 60, 230) if self.hover else (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        # subtle highlight top band
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))

        screen.blit(base, self.rect.topleft)
        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, model: EditorModel):
        pygame.init()

        self.model = model
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid = model.grid
        self.cell_size = self._auto_cell_size(grid)
        grid_px_w = GRID_MARGIN*2 + grid.width * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.height* self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 460)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Grid Path Editor")

        self._buttons: List[UIButton] = []
        self._path_cells: set = set()
        self._layout(win_w, win_h)
        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        g = self.model.grid
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(8, min(avail_w // g.width, avail_h // g.height)))

        plate_w = g.width  * self.cell_size + 2 * GRID_MARGIN
        plate_h = g.height * self.cell_size + 2 * GRID_MARGIN
        left_x = max(0, (win_w - (plate_w + PANEL_W)) // 2)
        top_y  = max(0, (win_h - plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, plate_w, plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    # row 0 is drawn at the bottom
    def _cell_rect(self, c: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        col, row = c
        return pygame.Rect(ox + col*cs, oy + (self.model.grid.height - 1 - row)*cs, cs, cs)

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        cs = self.cell_size
        ox, oy = self._grid_origin
        px, py = pos
        if px < ox or py < oy:
            return None
        col = (px - ox) // cs
        row = self.model.grid.height - 1 - (py - oy) // cs
        c = (col, row)
        return c if self.model.grid.in_bounds(c) else None

    def run(self):
        while True:
            self._handle_events()
            self._draw()
            self.clock.tick(60)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self.model.run()
                elif e.key == pygame.K_c:
                    self.model.clear()
                elif e.key == pygame.K_m:
                    self.model.toggle_corner_rule()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                handled = False
                for b in self._buttons:
                    handled = b.handle_mouse(e) or handled
                if not handled and e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    c = self._cell_at(e.pos)
                    if c is not None:
                        self.model.click(c)

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _color_for(self, c: Cell) -> Tuple[int, int, int]:
        m = self.model
        if c == m.start:
            return BLUE
        if c == m.goal:
            return RED
        if c in self._path_cells:
            return PATH_GREEN
        if m.grid.contains_wall(c):
            return BLACK
        return EMPTY_GRAY

    def _draw_grid(self):
        g = self.model.grid
        self._path_cells = set(self.model.path)
        for row in range(g.height):
            for col in range(g.width):
                rect = self._cell_rect((col, row))
                pygame.draw.rect(self.screen, self._color_for((col, row)), rect)
                pygame.draw.rect(self.screen, BORDER_GRAY, rect, 1)

        if len(self.model.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.model.path]
            pygame.draw.lines(self.screen, WHITE, False, pts, 3)

        for c, label in ((self.model.start, "S"), (self.model.goal, "G")):
            if c is not None:
                txt = self.font_small.render(label, True, WHITE)
                self.screen.blit(txt, txt.get_rect(center=self._cell_rect(c).center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 260  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 38
        gap = 10
        for label, cb in (("Run A*", self.model.run),
                          ("Clear", self.model.clear),
                          ("Corner rule", self.model.toggle_corner_rule)):
            self._buttons.append(UIButton(label, pygame.Rect(x, y, w, h), cb))
            y += h + gap

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 240
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self.model.metrics
        line(f"State: {self.model.state}")
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("total_cost") is not None:
            line(f"Total Cost: {m['total_cost']:.3f}")
        line(f"Corner rule: {self.model.grid.corner_rule}")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    try:
        s = resolve_settings()
        grid = new_grid(s.width, s.height, corner_rule=s.corner_rule)
        model = EditorModel(grid, SearchConfig(max_expansions=s.max_expansions))
    except ValueError as ex:
        print(f"Invalid configuration: {ex}")
        sys.exit(1)
    Viewer(model).run()

if __name__ == "__main__":
    main()
