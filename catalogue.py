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

# Alg steps are either literal moves, or a reference to another alg by ID
MovesStep = collections.namedtuple('MovesStep', ['moves'])
RefStep = collections.namedtuple('RefStep', ['ref', 'inverse', 'repeat'],
        defaults=[False, 1])

Algorithm = collections.namedtuple('Algorithm', ['id', 'steps', 'simplified',
        'inverse', 'mirror', 'tags'], defaults=[None, None, None, ()])

Case = collections.namedtuple('Case', ['id', 'name', 'category', 'number',
        'algorithms'], defaults=[None, ()])

def make_step(data):
    if isinstance(data, (MovesStep, RefStep)):
        return data
    if isinstance(data, str):
        return MovesStep(data)
    if 'moves' in data and 'ref' not in data:
        return MovesStep(data['moves'])
    if 'ref' in data and 'moves' not in data:
        repeat = data.get('repeat', 1)
        if not isinstance(repeat, int) or repeat < 1:
            raise ValueError('bad repeat count in step: %r' % (data,))
        return RefStep(data['ref'].lower(), bool(data.get('inverse', False)),
                repeat)
    raise ValueError('step needs exactly one of moves/ref: %r' % (data,))

def make_alg(data):
    return Algorithm(id=data['id'].lower(),
            steps=tuple(make_step(s) for s in data['steps']),
            simplified=data.get('simplified'), inverse=data.get('inverse'),
            mirror=data.get('mirror'), tags=tuple(data.get('tags', ())))

def make_case(data):
    return Case(id=data['id'].lower(), name=data.get('name', ''),
            category=data.get('category') or data['id'].split('-')[0].lower(),
            number=data.get('number'),
            algorithms=tuple(a.lower() for a in data.get('algorithms', ())))

def step_data(step):
    if isinstance(step, MovesStep):
        return {'moves': step.moves}
    data = {'ref': step.ref}
    if step.inverse:
        data['inverse'] = True
    if step.repeat != 1:
        data['repeat'] = step.repeat
    return data

# Read-only lookup of algs and cases. This gets filled once at startup (from
# JSON or the DB) and is never changed after that, so it can be shared
# between any number of expanders/pattern derivers.
class Catalogue:
    def __init__(self, algs=(), cases=()):
        self._algs = {a.id.lower(): a for a in algs}
        self._cases = {c.id.lower(): c for c in cases}

    @classmethod
    def from_json(cls, data):
        return cls([make_alg(a) for a in data.get('algorithms', [])],
                [make_case(c) for c in data.get('cases', [])])

    def get_algorithm(self, alg_id):
        return self._algs.get(alg_id.lower())

    def get_case(self, case_id):
        return self._cases.get(case_id.lower())

    # First alg is the primary one
    def get_algs_for_case(self, case_id):
        case = self.get_case(case_id)
        if case is None:
            return []
        return [self._algs[a] for a in case.algorithms if a in self._algs]

    def algs_with_tag(self, tag):
        return [a for a in self._algs.values() if tag in a.tags]

    def all_algs(self):
        return list(self._algs.values())

    def all_cases(self):
        return list(self._cases.values())

    def __len__(self):
        return len(self._algs)

################################################################################
## Alg IDs #####################################################################
################################################################################

# Alg IDs look like "oll-21-2" (OLL 21, second alg), "pll-ua" (first alg of
# the case, no variant) or "trigger-left-sexy" (triggers never have variants)

CATEGORIES = ['oll', 'pll', 'trigger']

AlgId = collections.namedtuple('AlgId', ['category', 'key', 'variant'])

def parse_alg_id(alg_id):
    parts = alg_id.lower().split('-')
    if len(parts) < 2:
        raise ValueError('invalid alg ID: %s' % alg_id)
    category = parts[0]
    if category != 'trigger' and parts[-1].isdigit() and len(parts) > 2:
        return AlgId(category, '-'.join(parts[1:-1]), int(parts[-1]))
    return AlgId(category, '-'.join(parts[1:]), None)

def build_alg_id(category, key, variant=None):
    if category == 'trigger' or variant is None:
        return '%s-%s' % (category, key.lower())
    return '%s-%s-%s' % (category, key.lower(), variant)

def case_id_for_alg(alg_id):
    [category, key, _] = parse_alg_id(alg_id)
    return '%s-%s' % (category, key)

def case_display_name(case_id):
    [category, _, key] = case_id.partition('-')
    category = category.upper()
    if category == 'OLL':
        return 'OLL %s' % key
    elif category == 'PLL':
        return 'PLL %s' % key.capitalize()
    elif category == 'TRIGGER':
        return key.capitalize().replace('-', ' ')
    return case_id

def alg_display_name(alg_id):
    [category, key, variant] = parse_alg_id(alg_id)
    name = case_display_name('%s-%s' % (category, key))
    if variant is not None and variant > 1:
        return '%s (Alt %s)' % (name, variant - 1)
    return name
