# config.py

# Grid parameters
GRID_SIZE = 10                # Side length of the square grid (cells)
DEFAULT_HEURISTIC = "axis-sum"  # "axis-sum" or "euclidean"
CUMULATIVE_COST = False       # True → g accumulates distance + terrain cost from the start

# Terrain traversal costs, in TerrainKind order (AIR, GRASS, WATER, MUD, MOUNTAIN)
TERRAIN_COSTS = (0.0, 10.0, 25.0, 50.0, 100.0)

# A node whose F is at or below this has not been reached yet
UNVISITED_EPSILON = 1.1920929e-07

# Terrain generation (Perlin noise)
NOISE_SCALE = 6.0             # Larger → smoother, wider terrain patches
NOISE_OCTAVES = 4
NOISE_PERSISTENCE = 0.5
NOISE_LACUNARITY = 2.0
TERRAIN_BANDS = (0.45, 0.60, 0.72, 0.85)  # Normalised noise cut points between kinds

# Demo / plotting
START_CELL = (1, 1)
GOAL_CELL = (8, 8)
PLOT_OUTPUT = "route.png"
TERRAIN_COLORS = (
    "#ffffff",  # AIR
    "#00b430",  # GRASS
    "#0079b4",  # WATER
    "#7f6a4f",  # MUD
    "#505050",  # MOUNTAIN
)
ROUTE_COLOR = "#e62937"
LOG_LEVEL = "INFO"
