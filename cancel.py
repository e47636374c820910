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

from notation import Move, move_str

# Moves of one expanded step, before any cancellation
StepMoves = collections.namedtuple('StepMoves', ['moves', 'step_index',
        'is_from_ref', 'ref_id', 'is_inverse'], defaults=[False, None, False])

class MoveWithMeta:
    def __init__(self, move, step_index, is_from_ref=False, ref_id=None,
            is_inverse=False, is_cancelled=False, is_result=False,
            original_moves=None, cancel_id=None):
        self.move = move
        self.step_index = step_index
        self.is_from_ref = is_from_ref
        self.ref_id = ref_id
        self.is_inverse = is_inverse
        self.is_cancelled = is_cancelled
        # Set on moves made by combining two others; original_moves holds
        # those two
        self.is_result = is_result
        self.original_moves = original_moves
        # Links cancelled moves to each other and to their result
        self.cancel_id = cancel_id

    def __repr__(self):
        flags = ''
        if self.is_cancelled:
            flags += ' cancelled'
        if self.is_result:
            flags += ' result'
        return '<MoveWithMeta %s step=%s%s>' % (move_str(self.move),
                self.step_index, flags)

def combine_moves(m1, m2):
    assert m1.base == m2.base, (m1, m2)
    turn = (m1.turn + m2.turn) % 4
    if turn == 0:
        return None
    return Move(m1.base, turn)

def _last_live(moves):
    for i in range(len(moves) - 1, -1, -1):
        if not moves[i].is_cancelled:
            return i
    return None

def _first_live(moves):
    for [i, m] in enumerate(moves):
        if not m.is_cancelled:
            return i
    return None

def apply_cancellations(step_moves):
    """Fold together same-base moves where one step ends and the next begins.

    Steps are walked left to right. `done` holds every move from the steps
    already processed and `step` holds the moves of the next one, so at each
    boundary we look at the last live move of `done` and the first live move
    of `step`. Matching bases get their turns added mod 4: both moves are
    marked cancelled, and unless the sum is zero a result move goes into
    `step` right after the cancelled one. A result can in turn cancel with
    what's left in `done`, so keep going until the bases differ or one side
    runs out.

    Returns all moves, cancelled ones included, in order. The MoveWithMeta
    objects are created here, nothing in step_moves is touched.
    """
    done = []
    next_id = 0
    for s in step_moves:
        step = [MoveWithMeta(m, s.step_index, is_from_ref=s.is_from_ref,
                ref_id=s.ref_id, is_inverse=s.is_inverse) for m in s.moves]
        cancel_id = None
        while True:
            i = _last_live(done)
            j = _first_live(step)
            if i is None or j is None:
                break
            [last, first] = [done[i], step[j]]
            if last.move.base != first.move.base:
                break

            if cancel_id is None:
                cancel_id = next_id
                next_id += 1
            for m in [last, first]:
                m.is_cancelled = True
                m.cancel_id = cancel_id

            combined = combine_moves(last.move, first.move)
            if combined is not None:
                step.insert(j + 1, MoveWithMeta(combined, first.step_index,
                        is_from_ref=last.is_from_ref or first.is_from_ref,
                        ref_id=first.ref_id or last.ref_id,
                        is_inverse=(first.is_inverse if first.ref_id
                            else last.is_inverse),
                        is_result=True,
                        original_moves=(last.move, first.move),
                        cancel_id=cancel_id))
        done.extend(step)
    return done

def get_effective_moves(moves_with_meta):
    return [m.move for m in moves_with_meta if not m.is_cancelled]
