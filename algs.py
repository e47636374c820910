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

import argparse
import json
import sys

import config
import db
from cube import FACE_NAMES, SOLVED_CUBE
from expand import AlgExpander, AlgError
from notation import alg_str, move_str, parse_moves
from patterns import PatternDeriver
from util import color_str, time_execution

def load_catalogue():
    with db.get_session() as session:
        return db.load_catalogue(session)

def cmd_import(args):
    with open(args.file) as f:
        data = json.load(f)
    with db.get_session() as session:
        [n_algs, n_cases] = db.import_catalogue(session, data)
    print('imported %s algs and %s cases from %s' % (n_algs, n_cases,
        args.file))

def annotated_str(moves_with_meta):
    parts = []
    for m in moves_with_meta:
        s = move_str(m.move)
        if m.is_cancelled:
            s = '[%s]' % s
        elif m.is_result:
            s += '*'
        parts.append(s)
    return ' '.join(parts)

def cmd_expand(args):
    expander = AlgExpander(load_catalogue())
    expanded = expander.expand_id(args.alg_id)
    print(alg_str(expanded.moves))
    if args.verbose:
        for step in expanded.moves_by_step:
            label = step.ref_id or 'moves'
            if step.is_inverse:
                label += "'"
            print('  %2d %-16s %s' % (step.step_index, label,
                alg_str(step.moves)))
        print('  ' + annotated_str(expanded.moves_with_meta))

def cmd_pattern(args):
    deriver = PatternDeriver(load_catalogue())
    pattern = deriver.get_pattern(args.case_id, args.color)
    if pattern is None:
        print('no algs for case %s' % args.case_id)
        return 1
    strips = pattern.side_strips
    top = pattern.last_layer.top
    print('    %s' % color_str(strips.back))
    for row in range(3):
        print('  %s %s %s' % (color_str(strips.left[row:row+1]),
            color_str(top[row*3:row*3+3]), color_str(strips.right[row:row+1])))
    print('    %s' % color_str(strips.front))
    print('orientations: %s' % ' '.join('-' if o is None else o.name[0]
        for o in pattern.orientations))

def cmd_apply(args):
    cube = SOLVED_CUBE.run_alg(parse_moves(args.alg))
    for face in FACE_NAMES:
        print('%-6s %s' % (face, color_str(cube.face(face))))
    print('solved' if cube.is_solved() else 'not solved')

def main(argv=None):
    parser = argparse.ArgumentParser(description='Expand and inspect cube algs')
    parser.add_argument('--db', action='store', default=config.DB_PATH,
            help='SQLAlchemy URL of the alg DB')
    parser.add_argument('--time', action='store_true',
            help='print how long the command took')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('import', help='load a JSON alg catalogue')
    p.add_argument('file')
    p.set_defaults(fn=cmd_import)

    p = subparsers.add_parser('expand', help='expand an alg by ID')
    p.add_argument('alg_id')
    p.add_argument('-v', '--verbose', action='store_true',
            help='show steps and cancellations')
    p.set_defaults(fn=cmd_expand)

    p = subparsers.add_parser('pattern', help='show the pattern of a case')
    p.add_argument('case_id')
    p.add_argument('-c', '--color', default=config.DEFAULT_COLOR,
            help='front color to view the case from')
    p.set_defaults(fn=cmd_pattern)

    p = subparsers.add_parser('apply', help='apply moves to a solved cube')
    p.add_argument('alg')
    p.set_defaults(fn=cmd_apply)

    args = parser.parse_args(argv)

    db.init_db(args.db)

    try:
        if args.time:
            with time_execution(args.command):
                return args.fn(args)
        return args.fn(args)
    except (AlgError, ValueError) as e:
        print('error: %s' % e, file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main())
