"""Drawing of the title screen, playfield and overlays."""

from __future__ import annotations

import pygame

from .entities import Side
from .match import PaddleView, PhaseKind, RenderState
from .settings import TextConfig
from .utils import BLACK, FPS_COLOR, GREEN, WHITE, YELLOW


class Renderer:
    """Renders RenderState snapshots onto a pygame surface."""

    def __init__(self, text: TextConfig) -> None:
        self.text = text
        self.title_font = pygame.font.SysFont("consolas", text.title_size, bold=True)
        self.start_font = pygame.font.SysFont("consolas", text.start_msg_size)
        self.small_font = pygame.font.SysFont("consolas", text.controls_size)

    def render(self, surface: pygame.Surface, state: RenderState, fps: float | None = None) -> None:
        """Draw one frame; pass fps to show the overlay."""
        surface.fill(BLACK)
        if state.phase.kind is PhaseKind.TITLE:
            self._render_title(surface, state)
        else:
            self._render_playfield(surface, state)
            if state.phase.kind is PhaseKind.WON:
                self._render_winner(surface, state)

        if fps is not None:
            label = self.small_font.render(f"{int(round(fps))} FPS", True, FPS_COLOR)
            surface.blit(label, (10, 10))

    def _blit_centered(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        color: tuple[int, int, int],
        y: float,
    ) -> None:
        line = font.render(text, True, color)
        surface.blit(line, (surface.get_width() // 2 - line.get_width() // 2, int(y)))

    def _render_title(self, surface: pygame.Surface, state: RenderState) -> None:
        mid_y = surface.get_height() / 2
        title = self.text.return_title if state.returned_to_title else self.text.title
        self._blit_centered(surface, self.title_font, title, GREEN, mid_y - 100)
        self._blit_centered(surface, self.start_font, self.text.start_msg, WHITE, mid_y + 120)
        self._blit_centered(surface, self.small_font, self.text.controls_msg, WHITE, mid_y + 180)

    def _render_playfield(self, surface: pygame.Surface, state: RenderState) -> None:
        ball = state.ball
        pygame.draw.circle(surface, WHITE, (int(ball.x), int(ball.y)), int(ball.radius))
        for paddle in (state.left_paddle, state.right_paddle):
            self._draw_paddle(surface, paddle)

    @staticmethod
    def _draw_paddle(surface: pygame.Surface, paddle: PaddleView) -> None:
        # The hit box sits half a width outside the drawn body; both are filled.
        for x, y, w, h in (paddle.draw_rect, paddle.collision_rect):
            pygame.draw.rect(surface, WHITE, pygame.Rect(int(x), int(y), int(w), int(h)))

    def _render_winner(self, surface: pygame.Surface, state: RenderState) -> None:
        mid_y = surface.get_height() / 2
        message = self.text.left_wins if state.winner is Side.LEFT else self.text.right_wins
        self._blit_centered(surface, self.title_font, message, YELLOW, mid_y)
        self._blit_centered(surface, self.small_font, self.text.restart_msg, WHITE, mid_y + 160)
