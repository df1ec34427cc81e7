"""The game window: input handling, the frame loop and the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .mapcheck import check_map
from .player import HEIGHT, WIDTH, Key, KeyState, Player, move
from .render import Frame, render
from .scene import Scene, check_name, load_scene
from .textparse import CubError

_TITLE = "cub3D"
_FPS = 60


class Game:
    """A running game: the scene, the player on it and the keys held.

    Building a game places the player on the map and checks that the map
    is closed; a bad map raises ``CubError``.
    """

    def __init__(
        self,
        scene: Scene,
        minimap: bool = False,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        self.scene = scene
        self.minimap = minimap
        self.player = Player()
        self.keys = KeyState()
        self.frame = Frame(width, height)
        check_map(scene.grid, scene.width, scene.height, self.player)

    def press(self, keycode: int) -> bool:
        """Handle a key press; return True when the game should end."""
        return self.keys.press(keycode)

    def release(self, keycode: int) -> None:
        """Handle a key release."""
        self.keys.release(keycode)

    def tick(self, mouse_x: int | None = None) -> Frame:
        """Advance one frame and draw it.

        ``mouse_x`` is the pointer column, read before it is put back to
        the centre of the window; None means the mouse is not used.
        """
        mouse_dx = 0 if mouse_x is None else mouse_x - self.frame.width // 2
        move(self.player, self.keys, self.scene.grid, mouse_dx)
        return render(self.frame, self.scene, self.player, self.minimap)


def _report(message: str) -> int:
    print(f"Error : {message}", file=sys.stderr)
    return 1


def _run(game: Game) -> int:
    import pygame

    keymap = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_ESCAPE: Key.ESC,
    }
    size = (game.frame.width, game.frame.height)
    centre = (size[0] // 2, size[1] // 2)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(_TITLE)
        clock = pygame.time.Clock()
        if game.minimap:
            pygame.mouse.set_visible(False)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key in keymap:
                    if game.press(keymap[event.key]):
                        return 0
                elif event.type == pygame.KEYUP and event.key in keymap:
                    game.release(keymap[event.key])
            mouse_x = None
            if game.minimap:
                mouse_x = pygame.mouse.get_pos()[0]
                pygame.mouse.set_pos(centre)
            frame = game.tick(mouse_x)
            surface = pygame.image.frombuffer(frame.to_bytes(), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on a ``.cub`` file; ``--bonus`` adds minimap and mouse look."""
    args = list(sys.argv[1:] if argv is None else argv)
    minimap = False
    if args and args[0] == "--bonus":
        minimap = True
        args = args[1:]
    if len(args) != 1 or not check_name(args[0]):
        return _report("Wrong argument")
    try:
        scene = load_scene(args[0])
        game = Game(scene, minimap=minimap)
    except CubError as exc:
        return _report(str(exc))
    return _run(game)


if __name__ == "__main__":
    sys.exit(main())