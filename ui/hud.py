# ui/hud.py
from typing import List

import pygame

from core.settings import CAMERA_BORDER_COLOR, HUD_COLOR


def debug_lines(level, camera) -> List[str]:
    p = level.player
    s = p.speed
    cue = p.animation()
    return [
        f"POS  {p.position.x:8.2f} {p.position.y:8.2f}",
        f"XSP  {s.xsp:8.4f}  YSP {s.ysp:8.4f}",
        f"GSP  {s.gsp:8.4f}  ANG {s.angle:6.1f}",
        f"GND  {p.ground}  ACT {p.action.value}  DIR {p.direction.name}",
        f"ANIM {cue.name if cue else '-'}",
        f"CAM  {camera.position.x:8.2f} {camera.position.y:8.2f}  DSP {camera.displacement:6.1f}",
        f"MODE {camera.vertical_behaviour.value} / {camera.displacement_behaviour.value}",
    ]


class HUD:
    """
    Debug overlay: player kinematics, action, and camera state.
    Toggle with the Debug button (F1).
    """

    def __init__(self, font_size: int = 16):
        pygame.font.init()
        fs = max(10, min(48, int(font_size)))
        self.font = pygame.font.SysFont("consolas", fs)
        self.line_height = fs + 2

    def draw(self, surf: pygame.Surface, level, camera):
        pygame.draw.rect(surf, CAMERA_BORDER_COLOR, camera.border_rect(), 1)

        x, y = 8, 8
        for line in debug_lines(level, camera):
            txt = self.font.render(line, True, HUD_COLOR)
            surf.blit(txt, (x, y))
            y += self.line_height
