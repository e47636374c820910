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
import re

################################################################################
## Move vocabulary #############################################################
################################################################################

FACE_STR = 'UDRLFB'
WIDE_STR = 'udrlfb'
SLICE_STR = 'EMS'
ROTATE_STR = 'yxz'
ALL_BASES = FACE_STR + WIDE_STR + SLICE_STR + ROTATE_STR

# Turns are counted in clockwise quarter turns, so an inverse is just 4 - n
CW, HALF, CCW = 1, 2, 3
TURN_STR = {1: '', 2: '2', 3: "'"}
INV_TURN_STR = {'': CW, '2': HALF, "'": CCW, '²': HALF}

class Move(collections.namedtuple('Move', ['base', 'turn'])):
    __slots__ = ()

    def __new__(cls, base, turn=CW):
        assert base in ALL_BASES and len(base) == 1, base
        assert turn in (CW, HALF, CCW), turn
        return super().__new__(cls, base, turn)

    def __str__(self):
        return move_str(self)

    def is_face(self):
        return self.base in FACE_STR

    def is_wide(self):
        return self.base in WIDE_STR

    def is_slice(self):
        return self.base in SLICE_STR

    def is_rotation(self):
        return self.base in ROTATE_STR

ALL_MOVES = [Move(base, turn) for base in ALL_BASES for turn in (CW, HALF, CCW)]

################################################################################
## Parsing #####################################################################
################################################################################

# Anything that doesn't match is skipped, since algs come in with all sorts of
# decoration (parens, trigger braces, HTML) attached
MOVE_RE = re.compile("([%s])(['2²])?" % ALL_BASES)

def parse_moves(alg):
    if isinstance(alg, list):
        alg = ' '.join(alg)
    return [Move(m.group(1), INV_TURN_STR[m.group(2) or ''])
            for m in MOVE_RE.finditer(alg)]

# Same as parse_moves, but also say whether anything besides whitespace got
# thrown away. This lets callers tell "" apart from "garbage".
def parse_moves_checked(alg):
    moves = parse_moves(alg)
    leftover = MOVE_RE.sub('', alg if isinstance(alg, str) else ' '.join(alg))
    return (moves, bool(leftover.split()))

def move_str(move):
    return move.base + TURN_STR[move.turn]

def alg_str(moves):
    return ' '.join(move_str(m) for m in moves)

################################################################################
## Inversion ###################################################################
################################################################################

def invert_move(move):
    return Move(move.base, 4 - move.turn)

def invert_moves(moves):
    return [invert_move(m) for m in reversed(moves)]

def clean_alg(alg):
    alg = re.sub(r'[()\[\]{}~*]', '', alg)
    return ' '.join(alg.split())

def invert_alg(alg):
    return alg_str(invert_moves(parse_moves(clean_alg(alg))))
