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

import contextlib
import time

@contextlib.contextmanager
def time_execution(label):
    start = time.time()
    yield
    print('%s: %.3fs' % (label, time.time() - start))

# Sticker colors as single letters, for printing cubes on a terminal
COLOR_CHARS = 'wyrogb-'

def color_str(colors):
    return ''.join(COLOR_CHARS[c] for c in colors)
