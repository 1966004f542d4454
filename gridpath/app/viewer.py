# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Path Viewer: click-to-edit grid + animated Dijkstra

- Mouse:
    [LEFT CLICK] -> wall block under the cursor (or press a side-panel button)
- Keyboard:
    [S]/[G]      -> place start / goal under the cursor
    [SPACE]      -> run/pause the search
    [N]          -> single step
    [R]          -> reset the search
    [C]          -> clear the grid
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Any edit drops the running search; the next run starts from the edited grid.
"""

import logging
import sys
import time
from typing import Callable, List, Optional, Tuple

import pygame

from gridpath.core.builder import index_to_cell
from gridpath.core.dijkstra import DijkstraSearch
from gridpath.core.graph import Graph
from gridpath.core.types import Cell, MissingEndpointError, UNSET, WALL, START, GOAL

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 280            # right band: status + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 64
MIN_CELL = 8
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
BACKGROUND  = ( 28, 31, 38)
WALL_GRAY   = ( 40, 44, 52)
FLOOR_GRAY  = (200,200,200)
VISITED_A   = (255,0,120,90)
FRONTIER_A  = (0,150,255,110)
PATH_MINT   = (0,255,200)
BUTTON_BG   = ( 46, 52, 64)
BUTTON_HOT  = ( 66, 74, 90)
TEXT_LIGHT  = (230,235,240)
HIGHLIGHT   = (255,210,0)


# ---------- Geometry helpers ----------
def fit_cell_size(win_w: int, win_h: int, width: int, height: int) -> int:
    """Largest integer cell size that fits the grid next to the side panel."""
    avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
    avail_h = max(1, win_h - 2 * GRID_MARGIN)
    return max(MIN_CELL, min(avail_w // width, avail_h // height))


def cell_at(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int,
            width: int, height: int) -> Optional[Cell]:
    """Grid cell under a pixel position, or None outside the grid."""
    px, py = pos
    ox, oy = origin
    if px < ox or py < oy:
        return None
    x, y = (px - ox) // cell_size, (py - oy) // cell_size
    if x >= width or y >= height:
        return None
    return x, y


# ---------- Viewer ----------
class Viewer:
    def __init__(self, graph: Graph):
        pygame.init()

        self.graph = graph
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_small = pygame.font.Font(FONT_NAME, 14)

        win_w = GRID_MARGIN*2 + graph.width * CELL_SIZE_DEFAULT + PANEL_W
        win_h = max(GRID_MARGIN*2 + graph.height * CELL_SIZE_DEFAULT, 400)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Grid Path - Dijkstra")

        self.buttons: List[Tuple[str, pygame.Rect, Callable[[], None]]] = []
        self._layout(win_w, win_h)

        self.search: Optional[DijkstraSearch] = None
        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self.state = "Idle"
        self.message = ""
        self._last_step_t = 0.0

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Grid top-left, side panel with one button per action to its right."""
        self.cell_size = fit_cell_size(win_w, win_h, self.graph.width, self.graph.height)
        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        panel_x = GRID_MARGIN*2 + self.graph.width * self.cell_size
        self._panel = pygame.Rect(panel_x, 0, max(PANEL_W, win_w - panel_x), win_h)

        actions = (("Run / Pause", self._toggle_run), ("Step", self._do_step),
                   ("Reset", self._reset), ("Clear Grid", self._clear))
        top = 200
        self.buttons = [(label, pygame.Rect(panel_x + 12, top + i * 44, self._panel.width - 24, 36), cb)
                        for i, (label, cb) in enumerate(actions)]

    def _hovered_cell(self) -> Optional[Cell]:
        return cell_at(pygame.mouse.get_pos(), self._grid_origin, self.cell_size,
                       self.graph.width, self.graph.height)

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    # ---------- search ----------
    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _ensure_search(self) -> bool:
        if self.search is not None:
            return True
        try:
            self.search = self.graph.new_search()
        except MissingEndpointError as e:
            self.message = str(e)
            self.running = False
            self.state = "Idle"
            return False
        self.message = ""
        return True

    def _do_step(self):
        if self.state in ("Done", "No path") or not self._ensure_search():
            return
        res = self.search.step()
        if res.status == "done":
            self.state = "Done"
            self.message = f"Shortest distance: {self.graph.apply_search(self.search)}"
            self.running = False
        elif res.status == "no_path":
            self.graph.apply_search(self.search)
            self.state = "No path"
            self.message = "No path between start and goal"
            self.running = False
        else:
            self.state = "Running" if self.running else "Paused"

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.search = None
        self.graph.clear_path()

    # ---------- edits ----------
    def _edit(self, action, *args):
        self._reset()
        try:
            action(*args)
        except (IndexError, ValueError) as e:
            logger.warning("edit rejected: %s", e)
            self.message = str(e)

    def _clear(self):
        self._edit(self.graph.new_grid)
        self.message = ""

    def _click(self, pos: Tuple[int, int]):
        for _, rect, cb in self.buttons:
            if rect.collidepoint(pos):
                cb()
                return
        cell = cell_at(pos, self._grid_origin, self.cell_size,
                       self.graph.width, self.graph.height)
        if cell is not None:
            self._edit(self.graph.make_wall_block, *cell)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_c:
                    self._clear()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self.steps_per_sec = min(60, self.steps_per_sec + 1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self.steps_per_sec = max(1, self.steps_per_sec - 1)
                elif e.key in (pygame.K_s, pygame.K_g):
                    cell = self._hovered_cell()
                    if cell is not None:
                        place = self.graph.place_start if e.key == pygame.K_s else self.graph.place_goal
                        self._edit(place, *cell)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                self._click(e.pos)

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BACKGROUND)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        return pygame.Rect(ox + x*cs, oy + y*cs, cs, cs)

    def _shade(self, index: int, rgba):
        s = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        s.fill(rgba)
        self.screen.blit(s, self._cell_rect(*index_to_cell(index, self.graph.width)).topleft)

    def _draw_grid(self):
        for y in range(self.graph.height):
            for x in range(self.graph.width):
                rect = self._cell_rect(x, y)
                color = WALL_GRAY if self.graph.category_at(x, y) == WALL else FLOOR_GRAY
                pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        search = self.search
        if search is not None:
            for index in search.visited:
                self._shade(index, VISITED_A)
            for index in search.unvisited:
                if search.dist.get(index, search.unreached) < search.unreached:
                    self._shade(index, FRONTIER_A)

        cells = self.graph.path_cells()
        if len(cells) >= 2:
            pygame.draw.lines(self.screen, PATH_MINT, False,
                              [self._cell_rect(x, y).center for (x, y) in cells], 5)

        for index, color, label in ((self.graph.start, BLUE, START), (self.graph.goal, RED, GOAL)):
            if index == UNSET:
                continue
            center = self._cell_rect(*index_to_cell(index, self.graph.width)).center
            pygame.draw.circle(self.screen, color, center, max(4, self.cell_size//2 - 4))
            txt = self.font_small.render(label.upper(), True, WHITE)
            self.screen.blit(txt, txt.get_rect(center=center))

    def _draw_panel(self):
        x0, y0 = self._panel.x + 12, 16
        search = self.search
        lines = [
            f"State: {self.state}",
            f"Expanded: {len(search.visited) if search else 0}",
            f"Unvisited: {len(search.unvisited) if search else 0}",
            f"Speed: {self.steps_per_sec} steps/s",
        ]
        for text in lines:
            self.screen.blit(self.font.render(text, True, TEXT_LIGHT), (x0, y0))
            y0 += 26
        if self.message:
            self.screen.blit(self.font.render(self.message, True, HIGHLIGHT), (x0, y0 + 8))

        mouse = pygame.mouse.get_pos()
        for label, rect, _ in self.buttons:
            pygame.draw.rect(self.screen, BUTTON_HOT if rect.collidepoint(mouse) else BUTTON_BG,
                             rect, border_radius=8)
            txt = self.font.render(label, True, TEXT_LIGHT)
            self.screen.blit(txt, txt.get_rect(center=rect.center))


# ---------- main ----------
def main(graph: Optional[Graph] = None):
    Viewer(graph or Graph()).run()


if __name__ == "__main__":
    main()
