DEFAULT_SIDE = 4
MIN_SIDE = 3
# Number of squares painted on a freshly generated board (one per cube face).
PAINTED_SQUARE_COUNT = 6

# ============================================================================
# CUBE FACES
# ============================================================================
FACE_COUNT = 6
FACE_NEAR = 0    # vertical, facing row 0
FACE_FAR = 1     # vertical, facing the last row
FACE_LEFT = 2    # vertical, facing column 0
FACE_RIGHT = 3   # vertical, facing the last column
FACE_BOTTOM = 4
FACE_TOP = 5

FACE_NAMES = {
    FACE_NEAR: "near",
    FACE_FAR: "far",
    FACE_LEFT: "left",
    FACE_RIGHT: "right",
    FACE_BOTTOM: "bottom",
    FACE_TOP: "top",
}

# Roll direction (drow, dcol) -> for each new face index, the old face index it takes.
ROLL_PERMUTATIONS = {
    (1, 0): (4, 5, 2, 3, 1, 0),    # down
    (-1, 0): (5, 4, 2, 3, 0, 1),   # up
    (0, 1): (0, 1, 4, 5, 3, 2),    # right
    (0, -1): (0, 1, 5, 4, 2, 3),   # left
}
