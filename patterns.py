# cubing-algs, copyright 2021 Zach Wegner
#
# This file is part of cubing-algs.
#
# cubing-algs is free software: you can redistribute it and/or modify it under
# the terms of the GNU Affero General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# cubing-algs is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE.  See the GNU Affero General Public License for more
# details.
#
# You should have received a copy of the GNU Affero General Public License
# along with cubing-algs.  If not, see <https://www.gnu.org/licenses/>.

import collections
import enum
import threading

import config
from cube import (Color, SIDE_COLORS, TOP_COLOR, POSITION_PIECE, SOLVED_CUBE,
        apply_moves)
from expand import AlgExpander
from notation import invert_moves, parse_moves

# Where the top color of each top layer sticker is facing
Orientation = enum.IntEnum('Orientation', 'TOP FRONT BACK LEFT RIGHT', start=0)
SIDE_ORIENTATION = {
    'front': Orientation.FRONT,
    'back': Orientation.BACK,
    'left': Orientation.LEFT,
    'right': Orientation.RIGHT,
}

# Top face plus the top row (indices 0-2) of each side, as stored in the cube
LastLayer = collections.namedtuple('LastLayer', ['top', 'back', 'left',
        'right', 'front'])

# Side rows in the order they're drawn in a top-down diagram: back and front
# left to right, left and right top to bottom. Seen from above, the back and
# right rows run backwards compared to their own faces.
SideStrips = collections.namedtuple('SideStrips', ['back', 'left', 'right',
        'front'])
REVERSED_SIDES = {'back', 'right'}

DerivedPattern = collections.namedtuple('DerivedPattern', ['cube',
        'last_layer', 'orientations', 'side_strips'])

# y rotations that bring each side color to the front
COLOR_ROTATIONS = {
    Color.BLUE: [],
    Color.RED: parse_moves('y'),
    Color.GREEN: parse_moves('y2'),
    Color.ORANGE: parse_moves("y'"),
}

def parse_color(color):
    if isinstance(color, str):
        try:
            color = Color[color.upper()]
        except KeyError:
            raise ValueError('unknown color: %s' % color) from None
    if color not in SIDE_COLORS:
        raise ValueError('not a side color: %s' % Color(color).name.lower())
    return Color(color)

def rotation_for_color(color):
    return list(COLOR_ROTATIONS[parse_color(color)])

def last_layer_colors(cube):
    return LastLayer(cube.top, cube.back[:3], cube.left[:3], cube.right[:3],
            cube.front[:3])

def side_strips(cube):
    rows = {}
    for side in SideStrips._fields:
        row = cube.face(side)[:3]
        rows[side] = row[::-1] if side in REVERSED_SIDES else row
    return SideStrips(**rows)

def oll_orientations(cube):
    result = []
    for [i, color] in enumerate(cube.top):
        if color == TOP_COLOR:
            result.append(Orientation.TOP)
            continue
        # Find which side sticker of the same piece has the top color. This
        # can only fail if the piece isn't a top layer piece at all.
        for [face, j] in POSITION_PIECE[('top', i)]:
            if face != 'top' and cube.face(face)[j] == TOP_COLOR:
                result.append(SIDE_ORIENTATION[face])
                break
        else:
            result.append(None)
    return result

class PatternDeriver:
    """Works out what a case looks like from its primary alg.

    Undoing the alg on a solved cube gives exactly the state the alg solves,
    so no pattern data has to be stored with the cases. Results are memoized
    forever, which is fine since the catalogue never changes.
    """

    def __init__(self, catalogue, expander=None):
        self.catalogue = catalogue
        self.expander = expander or AlgExpander(catalogue)
        self.lock = threading.Lock()
        self.cache = {}
        self.rotated_cache = {}

    def derive_pattern(self, case_id, pre_rotation=()):
        algs = self.catalogue.get_algs_for_case(case_id)
        if not algs:
            return None
        if isinstance(pre_rotation, str):
            pre_rotation = parse_moves(pre_rotation)

        expanded = self.expander.expand(algs[0])
        moves = list(pre_rotation) + invert_moves(expanded.moves)
        cube = apply_moves(SOLVED_CUBE, moves)
        return DerivedPattern(cube, last_layer_colors(cube),
                oll_orientations(cube), side_strips(cube))

    def get_pattern(self, case_id, color=config.DEFAULT_COLOR):
        color = parse_color(color)
        case_id = case_id.lower()
        if color == Color.BLUE:
            [cache, key] = [self.cache, case_id]
        else:
            [cache, key] = [self.rotated_cache, (case_id, color)]

        with self.lock:
            if key in cache:
                return cache[key]
        pattern = self.derive_pattern(case_id, COLOR_ROTATIONS[color])
        if pattern is None:
            return None
        with self.lock:
            return cache.setdefault(key, pattern)

    def get_cube(self, case_id, color=config.DEFAULT_COLOR):
        pattern = self.get_pattern(case_id, color)
        return pattern.cube if pattern else None

    def get_oll_orientations(self, case_id):
        pattern = self.get_pattern(case_id)
        return pattern.orientations if pattern else None

    def get_side_colors(self, case_id, color=config.DEFAULT_COLOR):
        pattern = self.get_pattern(case_id, color)
        return pattern.side_strips if pattern else None
