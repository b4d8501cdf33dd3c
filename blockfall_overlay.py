
import pygame
from blockfall_game import GameSnapshot, GameStatus

MESSAGES = {
    GameStatus.IDLE: ("BLOCKFALL", "Press Enter to start"),
    GameStatus.GAME_OVER: ("GAME OVER", "Press Enter to play again"),
}

class Overlay:
    """Dims the board and shows a message while no run is in progress."""
    def __init__(self, big_font: pygame.font.Font, font: pygame.font.Font):
        self.big_font=big_font; self.font=font

    def active(self, snap: GameSnapshot) -> bool:
        return snap.status in MESSAGES

    def draw(self, screen, snap: GameSnapshot, rect: pygame.Rect):
        if not self.active(snap): return
        s=pygame.Surface(rect.size,pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s,rect.topleft)
        title,hint=MESSAGES[snap.status]
        t=self.big_font.render(title,True,(255,220,220))
        screen.blit(t,t.get_rect(center=(rect.centerx,rect.centery-20)))
        h=self.font.render(hint,True,(200,210,235))
        screen.blit(h,h.get_rect(center=(rect.centerx,rect.centery+16)))
        if snap.status is GameStatus.GAME_OVER:
            sc=self.font.render(f"Score {snap.score}   Lines {snap.lines}",True,(230,240,255))
            screen.blit(sc,sc.get_rect(center=(rect.centerx,rect.centery+44)))
