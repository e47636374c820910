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

from catalogue import Catalogue

CATALOGUE_DATA = {
    'algorithms': [
        {'id': 'trigger-sexy', 'steps': [{'moves': "R U R' U'"}],
            'tags': ['trigger']},
        {'id': 'trigger-sledge', 'steps': [{'moves': "R' F R F'"}],
            'tags': ['trigger']},
        {'id': 'trigger-sune', 'steps': [{'moves': "R U R' U R U2 R'"}],
            'tags': ['trigger']},
        {'id': 'oll-27', 'steps': [{'ref': 'trigger-sune'}],
            'inverse': 'oll-26', 'tags': ['oll', 'solved-cross']},
        {'id': 'oll-26', 'steps': [{'ref': 'trigger-sune', 'inverse': True}],
            'inverse': 'oll-27', 'tags': ['oll', 'solved-cross']},
        {'id': 'oll-45', 'steps': [{'moves': 'F'}, {'ref': 'trigger-sexy'},
            {'moves': "F'"}], 'tags': ['oll', 't-shapes']},
        {'id': 'oll-21-2', 'steps': [{'moves': 'F'},
            {'ref': 'trigger-sexy', 'repeat': 3}, {'moves': "F'"}],
            'tags': ['oll', 'solved-cross']},
        {'id': 'pll-t', 'steps': [{'ref': 'trigger-sexy'},
            {'ref': 'trigger-sledge'}, {'moves': 'F'},
            {'moves': "R U' R' U' R U R'"}, {'moves': "F'"}],
            'tags': ['pll', 'adjacent-corners']},
        {'id': 'loop-a', 'steps': [{'ref': 'loop-b'}]},
        {'id': 'loop-b', 'steps': [{'ref': 'loop-a'}]},
        {'id': 'bad-ref', 'steps': [{'moves': 'R'}, {'ref': 'nope'}]},
    ],
    'cases': [
        {'id': 'oll-27', 'name': 'Sune', 'number': 27,
            'algorithms': ['oll-27']},
        {'id': 'oll-26', 'name': 'Antisune', 'number': 26,
            'algorithms': ['oll-26']},
        {'id': 'oll-45', 'name': 'T', 'number': 45, 'algorithms': ['oll-45']},
        {'id': 'oll-21', 'name': 'H', 'number': 21,
            'algorithms': ['oll-21-2']},
        {'id': 'pll-t', 'name': 'T', 'category': 'pll',
            'algorithms': ['pll-t']},
        {'id': 'oll-99', 'name': 'Empty', 'number': 99, 'algorithms': []},
    ],
}

@pytest.fixture
def catalogue():
    return Catalogue.from_json(CATALOGUE_DATA)

@pytest.fixture
def catalogue_data():
    return CATALOGUE_DATA
