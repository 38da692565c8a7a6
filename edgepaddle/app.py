"""Window, input and drawing for the edge paddle game."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from edgepaddle.scores import (  # noqa: E402
    DEFAULT_SCORES_PATH,
    format_score_list,
    load_scores,
    save_score,
)
from edgepaddle.world import (  # noqa: E402
    BALL_RADIUS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Controls,
    GameState,
    Side,
)

_KEY_SIDES = {
    pygame.K_w: Side.TOP,
    pygame.K_s: Side.BOTTOM,
    pygame.K_a: Side.LEFT,
    pygame.K_d: Side.RIGHT,
}

_WHITE = (255, 255, 255)
_TEXT_SIZE = 25
_FRAME_RATE = 60


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="edgepaddle",
        description="Keep the ball inside the window with a paddle on one edge.",
    )
    parser.add_argument("--name", help="player name; asked for when omitted")
    parser.add_argument(
        "--scores",
        default=DEFAULT_SCORES_PATH,
        help="file the scores are appended to",
    )
    return parser.parse_args(argv)


def side_for_key(key: int) -> Optional[Side]:
    """Edge chosen by a key press, or None for other keys."""
    return _KEY_SIDES.get(key)


def _load_paddle_texture() -> Optional[pygame.Surface]:
    try:
        return pygame.image.load("paddle_texture.jpg")
    except (pygame.error, FileNotFoundError):
        return None


def _draw_text(screen: pygame.Surface, font: pygame.font.Font, message: str, x: int, y: int) -> None:
    if message:
        screen.blit(font.render(message, True, _WHITE), (x, y))


def _controls() -> Controls:
    pressed = pygame.key.get_pressed()
    return Controls(
        up=bool(pressed[pygame.K_UP]),
        down=bool(pressed[pygame.K_DOWN]),
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
    )


def _report_game_over(player_name: str, time_survived: float, scores_path: str) -> None:
    save_score(player_name, time_survived, scores_path)
    print(f"Game Over! Time survived: {time_survived:g} seconds")
    print(format_score_list(load_scores(scores_path)), end="")


def run(player_name: str, scores_path: str = DEFAULT_SCORES_PATH) -> None:
    """Open the window and play until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("smth game")
        font = pygame.font.SysFont("arial", _TEXT_SIZE)
        texture = _load_paddle_texture()
        clock = pygame.time.Clock()
        state = GameState()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    side = side_for_key(event.key)
                    if side is not None:
                        state.choose_side(side)
            if not running:
                break

            dt = clock.tick(_FRAME_RATE) / 1000.0
            finished = state.step(dt, _controls())
            if finished is not None:
                _report_game_over(player_name, finished, scores_path)

            screen.fill(state.background)
            pygame.draw.circle(
                screen, _WHITE, (round(state.ball_x), round(state.ball_y)), int(BALL_RADIUS)
            )
            paddle = state.paddle_rect() if state.paddle_active else None
            if paddle is not None:
                area = pygame.Rect(
                    round(paddle.left), round(paddle.top), round(paddle.width), round(paddle.height)
                )
                if texture is not None:
                    screen.blit(pygame.transform.scale(texture, area.size), area)
                else:
                    pygame.draw.rect(screen, _WHITE, area)

            _draw_text(screen, font, f"Time: {int(state.time_survived)}", 10, 10)
            _draw_text(screen, font, f"Player: {player_name}", 10, 40)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    name = args.name
    if name is None:
        words = input("Enter your name: ").split()
        name = words[0] if words else ""
    run(name, args.scores)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())