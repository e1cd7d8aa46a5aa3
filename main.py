import logging
import math

import pygame

import constants
from constants import BLACK, FPS, GREEN, HEIGHT, ORANGE, WHITE, WIDTH
from gravity.BlackHole import BlackHole
from gravity.galaxy import Galaxy
from gravity.Ship import Intent, Ship, ShipStatus
from gravity.timestep import FixedStepClock
from gravity.Vec2 import Vec2

logger = logging.getLogger(__name__)

KEY_INTENTS = {
    pygame.K_UP: Intent.THRUST,
    pygame.K_LEFT: Intent.ROTATE_LEFT,
    pygame.K_RIGHT: Intent.ROTATE_RIGHT,
}


def place(vec):
    """Simulation space [-1, 1] to screen pixels."""
    return (int((vec.x + 1) / 2 * WIDTH), int((vec.y + 1) / 2 * HEIGHT))


def setup_galaxy():
    gargantua = BlackHole(Vec2(0, 0), 50)
    galaxy = Galaxy([gargantua], n_stars=constants.N_STARS, size=constants.GALAXY_SIZE)
    galaxy.attach_ship(Ship(Vec2(0.8, 0.8), constants.SHIP_SIZE, prediction_iterations=300))
    return galaxy


def draw_galaxy(screen, galaxy):
    for star in galaxy.stars:
        level = star.brightness(galaxy.max_velocity)
        pygame.draw.circle(screen, (level, level, level), place(star.pos), max(1, int(star.size / 2)))

    for black_hole in galaxy.black_holes:
        if not black_hole.show:
            continue
        pygame.draw.circle(screen, WHITE, place(black_hole.pos), int(black_hole.size * 0.3) + 2)
        pygame.draw.circle(screen, BLACK, place(black_hole.pos), int(black_hole.size * 0.3))

    ship = galaxy.ship
    if ship is None:
        return
    if ship.show_path and len(ship.path) > 1:
        pygame.draw.lines(screen, GREEN, False, [place(p) for p in ship.path], 2)

    half = ship.size / 8
    cx, cy = place(ship.pos)
    sin_a, cos_a = math.sin(ship.angle), math.cos(ship.angle)
    points = []
    for lx, ly in ((0, -2 * half), (half, half), (-half, half)):
        points.append((cx + lx * cos_a - ly * sin_a, cy + lx * sin_a + ly * cos_a))
    pygame.draw.polygon(screen, WHITE, points)
    if ship.status is ShipStatus.THRUSTING:
        tail = (cx - 2 * half * sin_a, cy + 2 * half * cos_a)
        pygame.draw.circle(screen, ORANGE, (int(tail[0]), int(tail[1])), max(2, int(half / 2)))


def main():
    logging.basicConfig(level=constants.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Galaxy")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 28)

    galaxy = setup_galaxy()
    stepper = FixedStepClock(step=constants.DT, speed=1.0)
    held = set()

    running = True
    paused = False
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in KEY_INTENTS:
                    held.add(KEY_INTENTS[event.key])
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_p and galaxy.ship:
                    galaxy.ship.show_path = not galaxy.ship.show_path
                elif event.key == pygame.K_b:
                    for black_hole in galaxy.black_holes:
                        black_hole.show = not black_hole.show
                elif event.key == pygame.K_r:
                    galaxy.reset_stars(constants.N_STARS)
                elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                    stepper.speed = min(stepper.speed * 2, 64.0)
                elif event.key == pygame.K_MINUS:
                    stepper.speed = max(stepper.speed / 2, 1 / 64)
                elif event.key == pygame.K_RIGHTBRACKET and galaxy.ship:
                    galaxy.ship.prediction_iterations = min(galaxy.ship.prediction_iterations + 100, 5000)
                elif event.key == pygame.K_LEFTBRACKET and galaxy.ship:
                    galaxy.ship.prediction_iterations = max(galaxy.ship.prediction_iterations - 100, 0)
                elif event.key == pygame.K_ESCAPE:
                    running = False
            elif event.type == pygame.KEYUP:
                held.discard(KEY_INTENTS.get(event.key))

        # --- Update ---
        elapsed = clock.tick(FPS) / 1000.0
        if not paused:
            stepper.run(elapsed, galaxy, frozenset(held))

        # --- Draw ---
        screen.fill(BLACK)
        draw_galaxy(screen, galaxy)

        info = f"Stars: {galaxy.star_count}  Speed: x{stepper.speed:g}"
        if galaxy.ship:
            info += f"  Ship velocity: {galaxy.ship.speed:.5f}"
        screen.blit(font.render(info, True, WHITE), (10, HEIGHT - 30))
        if paused:
            pause_text = font.render("PAUSED", True, WHITE)
            screen.blit(pause_text, (WIDTH - pause_text.get_width() - 10, 10))

        pygame.display.flip()

    logger.info("exiting with %d stars left", galaxy.star_count)
    pygame.quit()


if __name__ == "__main__":
    main()
