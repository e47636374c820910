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

import os

# SQLAlchemy URL of the alg catalogue
DB_PATH = os.environ.get('CUBE_ALGS_DB', 'sqlite:///algs.db')

# How deep alg references can nest before we give up. Real algs only go a
# couple levels deep, this is just to catch reference cycles.
MAX_DEPTH = int(os.environ.get('CUBE_ALGS_MAX_DEPTH', 10))

# Front color of the default (unrotated) view of a case
DEFAULT_COLOR = 'blue'
