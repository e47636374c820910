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

import pytest

from cube import (Color, Cube, IDENTITY, SOLVED_CUBE, FACE_NAMES, PIECES,
        apply_moves, create_solved_cube, get_move_animation, is_solved,
        mask_cube, piece_colors, piece_key)
from notation import Move, ALL_MOVES, CW, HALF, CCW, invert_move

T_PERM = "R U R' U' R' F R2 U' R' U' R U R' F'"

# Every sticker gets its own label, so this catches any permutation mistake
# that a colored cube would hide
def labeled_cube():
    return Cube(IDENTITY)

def test_solved_cube():
    cube = create_solved_cube()
    assert is_solved(cube)
    assert cube.top == (Color.YELLOW,) * 9
    assert cube.bottom == (Color.WHITE,) * 9
    assert cube.front == (Color.BLUE,) * 9
    assert cube.back == (Color.GREEN,) * 9
    assert cube.right == (Color.RED,) * 9
    assert cube.left == (Color.ORANGE,) * 9

def test_move_then_inverse():
    cube = labeled_cube()
    for move in ALL_MOVES:
        assert cube.turn(move).turn(invert_move(move)) == cube, move

def test_four_quarter_turns():
    cube = labeled_cube()
    for move in ALL_MOVES:
        if move.turn != CW:
            continue
        assert apply_moves(cube, [move] * 4) == cube, move
        assert apply_moves(cube, [move] * 2) == cube.turn(Move(move.base,
            HALF)), move
        assert apply_moves(cube, [move] * 3) == cube.turn(Move(move.base,
            CCW)), move

@pytest.mark.parametrize('move,parts', [
    ('r', "R M'"), ('l', 'L M'), ('u', "U E'"), ('d', 'D E'), ('f', 'F S'),
    ('b', "B S'"), ('x', "R M' L'"), ('y', "U E' D'"), ('z', "F S B'"),
])
def test_compound_moves(move, parts):
    cube = labeled_cube()
    assert cube.run_alg(move) == cube.run_alg(parts)

def test_r_turn():
    cube = SOLVED_CUBE.run_alg('R')
    assert [cube.top[i] for i in (2, 5, 8)] == [Color.BLUE] * 3
    assert [cube.front[i] for i in (2, 5, 8)] == [Color.WHITE] * 3
    assert [cube.back[i] for i in (0, 3, 6)] == [Color.YELLOW] * 3
    assert cube.right == (Color.RED,) * 9
    assert cube.left == (Color.ORANGE,) * 9

def test_u_turn():
    cube = SOLVED_CUBE.run_alg('U')
    assert cube.front[:3] == (Color.RED,) * 3
    assert cube.left[:3] == (Color.BLUE,) * 3
    assert cube.front[3:] == (Color.BLUE,) * 6

def test_y_rotation():
    cube = SOLVED_CUBE.run_alg('y')
    assert cube.front == (Color.RED,) * 9
    assert cube.left == (Color.BLUE,) * 9
    assert cube.top == (Color.YELLOW,) * 9

def test_sticker_counts():
    cube = SOLVED_CUBE.run_alg("R U F' L2 D B' M E S x y' z2 r u' f2 b d l'")
    for color in Color:
        expected = 0 if color == Color.GRAY else 9
        assert cube.stickers.count(color) == expected

def test_pieces_preserved():
    cube = SOLVED_CUBE.run_alg("R U F' L2 D B' M2 E S' x y' z2 r u' f2")
    def keys(c):
        return sorted(piece_key(piece_colors(c, p)) for p in PIECES)
    assert keys(cube) == keys(SOLVED_CUBE)

def test_known_orders():
    assert SOLVED_CUBE.run_alg("R U R' U'" * 6).is_solved()
    assert SOLVED_CUBE.run_alg("R U R' U R U2 R'" * 6).is_solved()
    assert not SOLVED_CUBE.run_alg("R U R' U'" * 3).is_solved()

def test_t_perm():
    cube = SOLVED_CUBE.run_alg(T_PERM)
    assert not cube.is_solved()
    assert cube.top == (Color.YELLOW,) * 9
    for face in ['front', 'back', 'left', 'right', 'bottom']:
        assert cube.face(face)[3:] == SOLVED_CUBE.face(face)[3:]
    assert cube.run_alg(T_PERM).is_solved()

def test_cube_is_immutable():
    cube = SOLVED_CUBE
    turned = cube.turn(Move('R'))
    assert cube.is_solved()
    assert turned != cube

def test_from_faces():
    faces = SOLVED_CUBE.run_alg("R U'").faces()
    assert set(faces) == set(FACE_NAMES)
    assert Cube.from_faces(faces) == SOLVED_CUBE.run_alg("R U'")

def test_animation():
    anim = get_move_animation(Move('R', CW))
    assert anim == ('R', 'x', 90, False)
    assert get_move_animation(Move('U', CW)).degrees == -90
    assert get_move_animation(Move('M', CCW)).degrees == 90
    anim = get_move_animation(Move('x', CCW))
    assert anim.is_full_cube
    assert anim.degrees == -90
    assert get_move_animation(Move('r', HALF)).degrees == 180

def test_mask_none():
    cube = SOLVED_CUBE.run_alg('R U')
    assert mask_cube(cube, None) is cube

def test_mask_cross():
    cube = mask_cube(SOLVED_CUBE, 'cross')
    # Bottom corners belong to f2l, not the cross
    assert cube.bottom == (Color.GRAY, Color.WHITE, Color.GRAY, Color.WHITE,
            Color.WHITE, Color.WHITE, Color.GRAY, Color.WHITE, Color.GRAY)
    assert cube.top == (Color.GRAY,) * 9
    assert cube.front == (Color.GRAY,) * 4 + (Color.BLUE,) + \
            (Color.GRAY,) * 2 + (Color.BLUE,) + (Color.GRAY,)

def test_mask_f2l():
    cube = mask_cube(SOLVED_CUBE, 'f2l')
    assert cube.front == (Color.GRAY,) * 3 + (Color.BLUE,) * 6
    assert cube.top == (Color.GRAY,) * 9

def test_mask_oll():
    cube = mask_cube(SOLVED_CUBE.run_alg("R U R' U R U2 R'"), 'oll')
    for color in cube.stickers:
        assert color in (Color.YELLOW, Color.GRAY)
    assert cube.stickers.count(Color.YELLOW) == 9

def test_mask_pll():
    cube = mask_cube(SOLVED_CUBE, 'pll')
    assert cube.top == (Color.YELLOW,) * 9
    assert cube.front[:3] == (Color.BLUE,) * 3
    assert cube.front[3:] == (Color.GRAY,) * 6
    assert cube.bottom == (Color.GRAY,) * 9
