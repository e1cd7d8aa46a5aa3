# --- Constants ---
WIDTH, HEIGHT = 800, 800
FPS = 60
DT = 1.0 / FPS

LOG_LEVEL = "INFO"

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (30, 255, 117)  # predicted path
ORANGE = (255, 160, 40)  # thrust flame

# --- Gravity ---
G = 6.6743e-11
# scales G up to the [-1, 1] coordinate space
STAR_K_GRAVITY = 5000
STAR_K_INIT_VELOCITY = 80
STAR_MAX_SIZE = 5.0
ORBIT_PERTURBATION = 0.1

SIZE_MASS_RATIO = 10
CAPTURE_DIVISOR = 600

# --- Galaxy ---
N_STARS = 2000
GALAXY_SIZE = 0.7
GALAXY_MIN_SIZE, GALAXY_MAX_SIZE = 0.1, 2.0

# --- Ship ---
THRUST_POWER = 10e-5
RADIAL_POWER = 0.002
SHIP_MASS_FACTOR = 3
SHIP_PULL_LIMIT = 0.4
SHIP_SIZE = 50
PREDICTION_ITERATIONS = 3000
