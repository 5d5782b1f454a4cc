"""
Deep Mine
Pygame host for the delve packages: click to mine, buy gear, dodge gas lines.
"""
from __future__ import annotations

import logging
import sys

import pygame

from delve_economy import EquipmentCategory, catalog, transitions
from delve_minigame import MinigameView, Phase
from delve_session import Session, SessionConfig, SessionView

# --- Configuration ---
WIDTH, HEIGHT = 1024, 720
FPS = 60
TITLE = "Deep Mine"

BG_COLOR = (22, 20, 38)
PANEL_COLOR = (36, 34, 58)
TEXT_COLOR = (220, 220, 235)
DIM_COLOR = (120, 120, 140)
ACCENT_COLOR = (90, 150, 255)
MONEY_COLOR = (240, 200, 60)
GAS_COLOR = (239, 68, 68)
PLAYER_COLOR = (59, 130, 246)
OVERLAY_BG = (30, 41, 59)

EQUIPMENT_KEYS = [pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4,
                  pygame.K_5, pygame.K_6, pygame.K_7]
UPGRADE_KEYS = [pygame.K_q, pygame.K_w, pygame.K_e]
SKILL_KEYS = [pygame.K_a, pygame.K_s, pygame.K_d, pygame.K_f, pygame.K_g]
SELL_KEYS = [pygame.K_z, pygame.K_x, pygame.K_c, pygame.K_v]

RESULT_LINGER_FRAMES = FPS * 2


def _draw_lines(
    screen: pygame.Surface,
    font: pygame.font.Font,
    lines: list[tuple[str, tuple[int, int, int]]],
    x: int,
    y: int,
) -> None:
    for i, (text, color) in enumerate(lines):
        screen.blit(font.render(text, True, color), (x, y + i * 20))


def _economy_lines(view: SessionView, session: Session) -> list[tuple[str, tuple[int, int, int]]]:
    state = view.player
    current = transitions.current_resource(state.depth)
    lines = [
        (f"Money ${state.money:,.2f}   Depth {int(state.depth)}m   "
         f"Value {transitions.portfolio_value(state):,.0f}", MONEY_COLOR),
        (f"Level {state.level}   XP {state.experience:.1f}/{state.experience_to_next}   "
         f"Skill points {state.skill_points}", TEXT_COLOR),
        (f"Mining {current.name}   Power {state.click_power:g}x   "
         f"Auto {state.auto_mine_rate:g}/sec", TEXT_COLOR),
        ("", TEXT_COLOR),
        ("Resources (Z/X/C/V sell all)", ACCENT_COLOR),
    ]
    for resource in catalog.RESOURCES:
        unlocked = state.depth >= resource.unlock_depth
        label = (f"  {resource.name:<8} {state.quantity(resource.id):>10,.1f}  value {resource.value:g}"
                 if unlocked else f"  {resource.name:<8} unlock at {resource.unlock_depth:g}m")
        lines.append((label, TEXT_COLOR if unlocked else DIM_COLOR))

    lines += [("", TEXT_COLOR), ("Equipment (1-7)", ACCENT_COLOR)]
    for defn in catalog.EQUIPMENT:
        cost = session.economy.equipment_cost(defn.id) or 0.0
        unit = "/sec" if defn.category is EquipmentCategory.AUTOMATION else "x"
        color = TEXT_COLOR if state.money >= cost else DIM_COLOR
        lines.append((f"  {defn.name:<14} {defn.power:g}{unit:<5} owned {state.owned(defn.id):<3}"
                      f" ${cost:,.0f}", color))

    lines += [("", TEXT_COLOR), ("Upgrades (Q/W/E)", ACCENT_COLOR)]
    for defn in catalog.UPGRADES:
        cost = session.economy.upgrade_cost(defn.id) or 0.0
        color = TEXT_COLOR if state.money >= cost else DIM_COLOR
        lines.append((f"  {defn.name:<18} lvl {state.upgrade_level(defn.id):<3} ${cost:,.0f}", color))

    lines += [("", TEXT_COLOR), ("Skills (A/S/D/F/G)", ACCENT_COLOR)]
    for defn in catalog.SKILLS:
        color = TEXT_COLOR if transitions.can_spend_skill_point(state, defn.id) else DIM_COLOR
        lines.append((f"  {defn.name:<16} {state.skill_level(defn.id)}/{defn.max_level}"
                      f"  cost {defn.cost_at(state.skill_level(defn.id))}", color))
    return lines


def _draw_minigame(
    screen: pygame.Surface, font: pygame.font.Font, view: MinigameView, width: float, height: float,
) -> None:
    ox = (WIDTH - int(width)) // 2
    oy = (HEIGHT - int(height)) // 2
    frame = pygame.Rect(ox - 10, oy - 40, int(width) + 20, int(height) + 50)
    pygame.draw.rect(screen, OVERLAY_BG, frame)
    canvas = pygame.Rect(ox, oy, int(width), int(height))
    pygame.draw.rect(screen, PANEL_COLOR, canvas)

    if view.phase is Phase.ACTIVE:
        title = f"Dodge the gas lines! {view.seconds_left}s   (Left/Right, Esc gives up)"
    elif view.phase is Phase.WON:
        title = "You made it! +XP"
    else:
        title = "Gas! Your money is gone."
    screen.blit(font.render(title, True, TEXT_COLOR), (ox, oy - 30))

    for rect in view.obstacles:
        pygame.draw.rect(screen, GAS_COLOR, pygame.Rect(
            ox + int(rect.x), oy + int(rect.y), int(rect.width), int(rect.height),
        ).clip(canvas))
    if view.player is not None:
        p = view.player
        pygame.draw.rect(screen, PLAYER_COLOR, pygame.Rect(
            ox + int(p.x), oy + int(p.y), int(p.width), int(p.height),
        ))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 15)

    session = Session(SessionConfig(tps=FPS))
    mg_config = session.minigame.config
    linger = 0
    running = True

    while running:
        pg_clock.tick(FPS)
        phase = session.minigame.phase

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                key = event.key
                if phase is Phase.ACTIVE:
                    if key == pygame.K_LEFT:
                        session.left()
                    elif key == pygame.K_RIGHT:
                        session.right()
                    elif key == pygame.K_ESCAPE:
                        session.dismiss()
                    continue
                if key == pygame.K_ESCAPE:
                    if phase is Phase.IDLE:
                        running = False
                    else:
                        session.dismiss()
                        linger = 0
                elif key == pygame.K_SPACE:
                    session.click()
                elif key in EQUIPMENT_KEYS:
                    session.buy_equipment(catalog.EQUIPMENT[EQUIPMENT_KEYS.index(key)].id)
                elif key in UPGRADE_KEYS:
                    session.buy_upgrade(catalog.UPGRADES[UPGRADE_KEYS.index(key)].id)
                elif key in SKILL_KEYS:
                    session.spend_skill_point(catalog.SKILLS[SKILL_KEYS.index(key)].id)
                elif key in SELL_KEYS:
                    session.sell_all(catalog.RESOURCES[SELL_KEYS.index(key)].id)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if phase is not Phase.ACTIVE:
                    session.click()

        # --- Update ---
        session.step()
        view = session.view()
        if view.minigame.phase in (Phase.WON, Phase.LOST):
            linger += 1
            if linger >= RESULT_LINGER_FRAMES:
                session.dismiss()
                linger = 0

        # --- Draw ---
        screen.fill(BG_COLOR)
        _draw_lines(screen, font, _economy_lines(view, session), 16, 12)
        _draw_lines(screen, font, [
            (f"FPS {pg_clock.get_fps():.0f}   Space/LClick=Mine  Esc=Quit", DIM_COLOR),
        ], 16, HEIGHT - 28)
        if view.minigame.phase is not Phase.IDLE:
            _draw_minigame(screen, font, view.minigame, mg_config.width, mg_config.height)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
