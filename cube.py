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

from notation import (FACE_STR, WIDE_STR, SLICE_STR, ROTATE_STR, ALL_BASES,
        CW, HALF, CCW, parse_moves)

################################################################################
## Sticker layout ##############################################################
################################################################################

Color = enum.IntEnum('Color', 'WHITE YELLOW RED ORANGE GREEN BLUE GRAY', start=0)
SIDE_COLORS = [Color.BLUE, Color.RED, Color.GREEN, Color.ORANGE]

# Faces are stored in the same order as FACE_STR (U D R L F B), nine stickers
# each, row-major as seen when looking straight at the face:
#   0 1 2
#   3 4 5
#   6 7 8
FACE_NAMES = ['top', 'bottom', 'right', 'left', 'front', 'back']
FACE_INDEX = {f: i for [i, f] in enumerate(FACE_NAMES)}

SOLVED_COLORS = {
    'top': Color.YELLOW,
    'bottom': Color.WHITE,
    'right': Color.RED,
    'left': Color.ORANGE,
    'front': Color.BLUE,
    'back': Color.GREEN,
}
TOP_COLOR = SOLVED_COLORS['top']

def sticker_index(face, i):
    return FACE_INDEX[face] * 9 + i

################################################################################
## Permutation tables ##########################################################
################################################################################

# A permutation is a 54-tuple: new_stickers[i] = old_stickers[perm[i]]
IDENTITY = tuple(range(54))

# Where each sticker of a face comes from when the face turns clockwise
FACE_ROT = [6, 3, 0, 7, 4, 1, 8, 5, 2]

# Strip cycles for a clockwise quarter turn. Each strip receives the stickers
# of the strip after it (the last one wraps around to the first).
FACE_CYCLES = {
    'R': [('front', (2, 5, 8)), ('bottom', (2, 5, 8)), ('back', (6, 3, 0)),
            ('top', (2, 5, 8))],
    'L': [('front', (0, 3, 6)), ('top', (0, 3, 6)), ('back', (8, 5, 2)),
            ('bottom', (0, 3, 6))],
    'U': [('front', (0, 1, 2)), ('right', (0, 1, 2)), ('back', (0, 1, 2)),
            ('left', (0, 1, 2))],
    'D': [('front', (6, 7, 8)), ('left', (6, 7, 8)), ('back', (6, 7, 8)),
            ('right', (6, 7, 8))],
    'F': [('top', (6, 7, 8)), ('left', (8, 5, 2)), ('bottom', (2, 1, 0)),
            ('right', (0, 3, 6))],
    'B': [('top', (0, 1, 2)), ('right', (2, 5, 8)), ('bottom', (8, 7, 6)),
            ('left', (6, 3, 0))],
}
OWN_FACE = {'U': 'top', 'D': 'bottom', 'R': 'right', 'L': 'left',
        'F': 'front', 'B': 'back'}

# Slices turn like the face they follow: M like L, E like D, S like F
SLICE_CYCLES = {
    'M': [('front', (1, 4, 7)), ('top', (1, 4, 7)), ('back', (7, 4, 1)),
            ('bottom', (1, 4, 7))],
    'E': [('front', (3, 4, 5)), ('left', (3, 4, 5)), ('back', (3, 4, 5)),
            ('right', (3, 4, 5))],
    'S': [('top', (3, 4, 5)), ('left', (7, 4, 1)), ('bottom', (5, 4, 3)),
            ('right', (1, 4, 7))],
}

# Wide move = face turn plus the slice next to it. The slice turns the same
# way as the face for l/d/f and the opposite way for r/u/b.
WIDE_PARTS = {
    'r': ('R', 'M', CCW),
    'l': ('L', 'M', CW),
    'u': ('U', 'E', CCW),
    'd': ('D', 'E', CW),
    'f': ('F', 'S', CW),
    'b': ('B', 'S', CCW),
}

# Whole cube rotations: (destination face, source face, quarter turns the
# source face's stickers get rotated by on the way)
ROTATE_FACES = {
    'x': [('top', 'front', 0), ('front', 'bottom', 0), ('bottom', 'back', 2),
            ('back', 'top', 2), ('right', 'right', 1), ('left', 'left', 3)],
    'y': [('front', 'right', 0), ('right', 'back', 0), ('back', 'left', 0),
            ('left', 'front', 0), ('top', 'top', 1), ('bottom', 'bottom', 3)],
    'z': [('top', 'left', 1), ('right', 'top', 1), ('bottom', 'right', 1),
            ('left', 'bottom', 1), ('front', 'front', 1), ('back', 'back', 3)],
}

# Compose permutations, applied left to right
def compose(*perms):
    result = IDENTITY
    for perm in perms:
        result = tuple(result[i] for i in perm)
    return result

def face_rotation(n):
    rot = list(range(9))
    for i in range(n % 4):
        rot = [rot[x] for x in FACE_ROT]
    return rot

def cycle_perm(cycle, face=None):
    perm = list(IDENTITY)
    if face is not None:
        for [i, src] in enumerate(FACE_ROT):
            perm[sticker_index(face, i)] = sticker_index(face, src)
    for [k, [dst, dst_idx]] in enumerate(cycle):
        [src, src_idx] = cycle[(k + 1) % len(cycle)]
        for [d, s] in zip(dst_idx, src_idx):
            perm[sticker_index(dst, d)] = sticker_index(src, s)
    return tuple(perm)

def rotation_perm(face_map):
    perm = list(IDENTITY)
    for [dst, src, n] in face_map:
        for [i, s] in enumerate(face_rotation(n)):
            perm[sticker_index(dst, i)] = sticker_index(src, s)
    return tuple(perm)

# TURNS[base][n] is the permutation for n clockwise quarter turns of base
QUARTER_TURNS = {}
TURNS = {}
def gen_turns():
    for F in FACE_STR:
        QUARTER_TURNS[F] = cycle_perm(FACE_CYCLES[F], face=OWN_FACE[F])
    for S in SLICE_STR:
        QUARTER_TURNS[S] = cycle_perm(SLICE_CYCLES[S])
    for w in WIDE_STR:
        [face, slice, n] = WIDE_PARTS[w]
        QUARTER_TURNS[w] = compose(QUARTER_TURNS[face],
                *[QUARTER_TURNS[slice]] * n)
    for r in ROTATE_STR:
        QUARTER_TURNS[r] = rotation_perm(ROTATE_FACES[r])

    for base in ALL_BASES:
        quarter = QUARTER_TURNS[base]
        TURNS[base] = {n: compose(*[quarter] * n) for n in (CW, HALF, CCW)}
        assert compose(*[quarter] * 4) == IDENTITY, base

gen_turns()

################################################################################
## Cube state ##################################################################
################################################################################

SOLVED_STICKERS = tuple(SOLVED_COLORS[f] for f in FACE_NAMES for i in range(9))

class Cube:
    # Stickers are a tuple, so cubes are never changed in place: every move
    # makes a new cube and old ones can be shared freely
    def __init__(self, stickers=SOLVED_STICKERS):
        stickers = tuple(stickers)
        assert len(stickers) == 54, len(stickers)
        self.stickers = stickers

    @classmethod
    def from_faces(cls, faces):
        stickers = []
        for f in FACE_NAMES:
            assert len(faces[f]) == 9, f
            stickers.extend(faces[f])
        return cls(stickers)

    def face(self, name):
        start = FACE_INDEX[name] * 9
        return self.stickers[start:start+9]

    def faces(self):
        return {f: self.face(f) for f in FACE_NAMES}

    def __getattr__(self, name):
        if name in FACE_INDEX:
            return self.face(name)
        raise AttributeError(name)

    def turn(self, move):
        perm = TURNS[move.base][move.turn]
        return Cube(self.stickers[i] for i in perm)

    def run_alg(self, alg):
        if isinstance(alg, (str, list)) and all(isinstance(m, str) for m in alg):
            alg = parse_moves(alg)
        cube = self
        for move in alg:
            cube = cube.turn(move)
        return cube

    def is_solved(self):
        return self.stickers == SOLVED_STICKERS

    def __eq__(self, other):
        return isinstance(other, Cube) and self.stickers == other.stickers

    def __hash__(self):
        return hash(self.stickers)

    def __repr__(self):
        return 'Cube(%s)' % ' '.join(''.join(Color(c).name[0] for c in
                self.face(f)) for f in FACE_NAMES)

SOLVED_CUBE = Cube()

def create_solved_cube():
    return SOLVED_CUBE

def apply_move(cube, move):
    return cube.turn(move)

def apply_moves(cube, moves):
    for move in moves:
        cube = cube.turn(move)
    return cube

def cubes_equal(a, b):
    return a.stickers == b.stickers

def is_solved(cube):
    return cubes_equal(cube, SOLVED_CUBE)

################################################################################
## Animation hints #############################################################
################################################################################

# Only used for drawing turns. Nothing that affects cube state looks at this.
MoveAnimation = collections.namedtuple('MoveAnimation',
        ['base', 'axis', 'degrees', 'is_full_cube'])

# base: (axis, sign, layers)
MOVE_METADATA = {
    'R': ('x', 1, 1), 'L': ('x', -1, 1),
    'U': ('y', -1, 1), 'D': ('y', 1, 1),
    'F': ('z', 1, 1), 'B': ('z', -1, 1),
    'M': ('x', -1, 1), 'S': ('z', 1, 1), 'E': ('y', 1, 1),
    'r': ('x', 1, 2), 'l': ('x', -1, 2),
    'u': ('y', -1, 2), 'd': ('y', 1, 2),
    'f': ('z', 1, 2), 'b': ('z', -1, 2),
    'x': ('x', 1, 3), 'y': ('y', -1, 3), 'z': ('z', 1, 3),
}
TURN_DEGREES = {CW: 90, HALF: 180, CCW: -90}

def get_move_animation(move):
    [axis, sign, layers] = MOVE_METADATA[move.base]
    return MoveAnimation(move.base, axis, TURN_DEGREES[move.turn] * sign,
            layers == 3)

################################################################################
## Masking #####################################################################
################################################################################

# Sticker positions of all 26 pieces: centers, edges, then corners
CENTER_PIECES = [((f, 4),) for f in FACE_NAMES]
EDGE_PIECES = [
    (('top', 1), ('back', 1)), (('top', 3), ('left', 1)),
    (('top', 5), ('right', 1)), (('top', 7), ('front', 1)),
    (('bottom', 1), ('front', 7)), (('bottom', 3), ('left', 7)),
    (('bottom', 5), ('right', 7)), (('bottom', 7), ('back', 7)),
    (('front', 3), ('left', 5)), (('front', 5), ('right', 3)),
    (('back', 3), ('right', 5)), (('back', 5), ('left', 3)),
]
CORNER_PIECES = [
    (('top', 0), ('back', 2), ('left', 0)),
    (('top', 2), ('back', 0), ('right', 2)),
    (('top', 6), ('front', 0), ('left', 2)),
    (('top', 8), ('front', 2), ('right', 0)),
    (('bottom', 0), ('front', 6), ('left', 8)),
    (('bottom', 2), ('front', 8), ('right', 6)),
    (('bottom', 6), ('back', 8), ('left', 6)),
    (('bottom', 8), ('back', 6), ('right', 8)),
]
PIECES = CENTER_PIECES + EDGE_PIECES + CORNER_PIECES
POSITION_PIECE = {pos: piece for piece in PIECES for pos in piece}

def piece_colors(cube, piece):
    return [cube.stickers[sticker_index(f, i)] for [f, i] in piece]

def piece_key(colors):
    return tuple(sorted(colors))

# Build the piece sets for each solving stage the lazy way, from a solved cube
def _stage_pieces(pred):
    return {piece_key(piece_colors(SOLVED_CUBE, p)) for p in PIECES if pred(p)}

def _faces(piece):
    return {f for [f, i] in piece}

CROSS_PIECES = _stage_pieces(lambda p: 'top' not in _faces(p) and
        (len(p) == 1 or (len(p) == 2 and 'bottom' in _faces(p))))
F2L_PIECES = _stage_pieces(lambda p: 'top' not in _faces(p))

MASK_STEPS = ['cross', 'f2l', 'oll', 'pll']

def mask_cube(cube, step):
    if step is None:
        return cube
    assert step in MASK_STEPS, step
    stickers = list(cube.stickers)
    for [f, i] in POSITION_PIECE:
        idx = sticker_index(f, i)
        colors = piece_colors(cube, POSITION_PIECE[(f, i)])
        if step == 'oll':
            show = cube.stickers[idx] == TOP_COLOR
        elif step == 'pll':
            show = TOP_COLOR in colors
        else:
            pieces = CROSS_PIECES if step == 'cross' else F2L_PIECES
            show = piece_key(colors) in pieces
        if not show:
            stickers[idx] = Color.GRAY
    return Cube(stickers)
