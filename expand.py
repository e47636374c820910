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

import config
from cancel import StepMoves, apply_cancellations, get_effective_moves
from catalogue import MovesStep, RefStep
from notation import alg_str, invert_moves, parse_moves

class AlgError(Exception):
    pass

class UnknownAlgError(AlgError):
    def __init__(self, alg_id):
        super().__init__('algorithm not found: %s' % alg_id)
        self.alg_id = alg_id

class MaxDepthError(AlgError):
    def __init__(self, max_depth):
        super().__init__('max nesting depth (%s) exceeded' % max_depth)
        self.max_depth = max_depth

ExpandedAlg = collections.namedtuple('ExpandedAlg', ['alg', 'moves',
        'moves_with_meta', 'moves_by_step'])

class AlgExpander:
    """Resolves algs that reference other algs into flat move lists.

    Every step becomes one group of moves. A reference is expanded
    recursively (down to max_depth, which catches reference cycles in the
    catalogue), inverted if asked, and repeated as separate groups so that
    cancellation can fold the boundary between two repetitions.
    """

    def __init__(self, catalogue, max_depth=None):
        self.catalogue = catalogue
        self.max_depth = config.MAX_DEPTH if max_depth is None else max_depth

    def expand(self, alg):
        return self._expand(alg, 0)

    def expand_id(self, alg_id):
        alg = self.catalogue.get_algorithm(alg_id)
        if alg is None:
            raise UnknownAlgError(alg_id)
        return self.expand(alg)

    def alg_notation(self, alg_id):
        return alg_str(self.expand_id(alg_id).moves)

    def _expand(self, alg, depth):
        groups = []
        for step in alg.steps:
            groups.extend(self._expand_step(step, depth))
        moves_by_step = [StepMoves(moves, i, is_from_ref, ref_id, is_inverse)
                for [i, [moves, is_from_ref, ref_id, is_inverse]]
                in enumerate(groups)]
        moves_with_meta = apply_cancellations(moves_by_step)
        return ExpandedAlg(alg, get_effective_moves(moves_with_meta),
                moves_with_meta, moves_by_step)

    # Returns a list of (moves, is_from_ref, ref_id, is_inverse)
    def _expand_step(self, step, depth):
        if depth > self.max_depth:
            raise MaxDepthError(self.max_depth)

        if isinstance(step, MovesStep):
            return [(parse_moves(step.moves), False, None, False)]

        elif isinstance(step, RefStep):
            ref = self.catalogue.get_algorithm(step.ref)
            if ref is None:
                raise UnknownAlgError(step.ref)
            moves = self._expand(ref, depth + 1).moves
            if step.inverse:
                moves = invert_moves(moves)
            return [(list(moves), True, step.ref, step.inverse)
                    for i in range(step.repeat)]

        assert 0, step
