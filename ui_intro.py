import pygame
from gui import BG, TEXT_MAIN, TEXT_SECONDARY, CARD_BG, GRID, BUTTON_HOVER

def draw_intro(screen: pygame.Surface, title_font: pygame.font.Font, body_font: pygame.font.Font):
    screen.fill(BG)
    w, h = screen.get_size()

    # Title
    title = title_font.render("How it Works: Insertion Sort", True, TEXT_MAIN)
    screen.blit(title, (40, 40))

    # Content
    lines = [
        "Insertion sort builds the sorted row one card at a time.",
        "",
        "1. Lift:",
        "   The first card not yet sorted is lifted out of the row.",
        "",
        "2. Shift:",
        "   Every sorted card that belongs after it slides one slot right.",
        "   Equal cards never move past each other.",
        "",
        "3. Insert:",
        "   The lifted card drops into the gap that is left.",
        "",
        "Next steps once, Auto runs to the end. Reset deals new cards,",
        "or type your own values (1 to 13) and press Use Input.",
    ]

    y = 100
    for line in lines:
        surf = body_font.render(line, True, TEXT_SECONDARY)
        screen.blit(surf, (40, y))
        y += 30

    # Next Button
    button_rect = pygame.Rect(w - 160, h - 80, 120, 50)
    mouse_pos = pygame.mouse.get_pos()
    color = CARD_BG
    if button_rect.collidepoint(mouse_pos):
        color = BUTTON_HOVER

    pygame.draw.rect(screen, color, button_rect, border_radius=8)
    pygame.draw.rect(screen, GRID, button_rect, width=1, border_radius=8)

    btn_text = body_font.render("Start >", True, TEXT_MAIN)
    text_rect = btn_text.get_rect(center=button_rect.center)
    screen.blit(btn_text, text_rect)

def get_intro_action(mouse_pos: tuple[int, int], screen_size: tuple[int, int]) -> str | None:
    w, h = screen_size
    button_rect = pygame.Rect(w - 160, h - 80, 120, 50)
    if button_rect.collidepoint(mouse_pos):
        return "start"
    return None
