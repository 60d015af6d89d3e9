# Tile marker constants shared with level-building collaborators.
# The maze core stores these on cells but never interprets them.
EMPTY = " "
WALL = "#"
DOOR = "/"
FLOOR = "."
PLAYER = "@"
MONSTER = "M"
STAIRS = "%"
VERTICAL_WALL = "|"
GOLD = "$"

VALUES = (EMPTY, WALL, DOOR, FLOOR, PLAYER, MONSTER, STAIRS, VERTICAL_WALL, GOLD)

# Monsters count as walkable until combat blocks movement.
WALKABLE = frozenset({EMPTY, FLOOR, DOOR, STAIRS, GOLD, MONSTER})
WALLS = frozenset({WALL, VERTICAL_WALL})


def is_valid(tile) -> bool:
    return tile in VALUES


def is_walkable(tile) -> bool:
    return tile in WALKABLE


def is_wall(tile) -> bool:
    return tile in WALLS


__all__ = [
    "EMPTY",
    "WALL",
    "DOOR",
    "FLOOR",
    "PLAYER",
    "MONSTER",
    "STAIRS",
    "VERTICAL_WALL",
    "GOLD",
    "VALUES",
    "is_valid",
    "is_walkable",
    "is_wall",
]
