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
import threading

import sqlalchemy as sa
from sqlalchemy import (text, Column, ForeignKey, Integer, String, Text,
        DateTime, JSON)
from sqlalchemy.orm import (declarative_base, relationship,
        Session as DBSession, sessionmaker)

import catalogue

SESSION_MAKER = None

# Set up default naming convention for indices/constraints/etc. so migrations
# can rename them later
SQL_NAMING_CONVENTION = {
    'ix': 'ix_%(column_0_label)s',
    'uq': 'uq_%(table_name)s_%(column_0_name)s',
    'ck': 'ck_%(table_name)s_%(constraint_name)s',
    'fk': 'fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s',
    'pk': 'pk_%(table_name)s',
}
metadata = sa.MetaData(naming_convention=SQL_NAMING_CONVENTION)

Base = declarative_base(metadata=metadata)

# Mixin for DB tables to add id/created_at/updated_at columns everywhere. It
# goes first in the bases so its __init__ is used instead of the declarative one
now = text("datetime('now', 'localtime')")
class NiceBase:
    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, default=now)
    updated_at = Column(DateTime, default=now, onupdate=now)

    def __init__(self, **kwargs):
        for [k, v] in kwargs.items():
            assert k in self.__table__.columns or hasattr(type(self), k), k
            setattr(self, k, v)

class AlgCase(NiceBase, Base):
    __tablename__ = 'alg_cases'
    case_key = Column(String(64), unique=True)
    name = Column(String(64))
    category = Column(String(32))
    number = Column(Integer)
    algs = relationship('Algorithm', back_populates='case',
            order_by='Algorithm.variant')

class Algorithm(NiceBase, Base):
    __tablename__ = 'algorithms'
    alg_key = Column(String(64), unique=True)
    alg_case_id = Column(Integer, ForeignKey(AlgCase.id))
    case = relationship('AlgCase', back_populates='algs')
    # Position within the case, primary alg first
    variant = Column(Integer, default=0)
    steps = Column(JSON)
    simplified = Column(String(256))
    inverse = Column(String(64))
    mirror = Column(String(64))
    tags = Column(JSON)
    notes = Column(Text)

# Subclass of DBSession with some convenience functions
class NiceSession(DBSession):
    def query_first(self, table, *args, **kwargs):
        return self.query(table).filter_by(*args, **kwargs).first()

    def query_all(self, table, *args, **kwargs):
        return self.query(table).filter_by(*args, **kwargs).all()

    # Insert a new row in this table with the given column values
    def insert(self, table, **kwargs):
        row = table(**kwargs)
        self.add(row)
        # Flushing gets the row an ID from the db
        self.flush()
        return row

    # Update an existing row that matches match_args if one exists, otherwise
    # insert a new one
    def upsert(self, table, match_args, **kwargs):
        for row in self.query_all(table, **match_args):
            for [k, v] in kwargs.items():
                setattr(row, k, v)
            return row
        else:
            return self.insert(table, **match_args, **kwargs)

THREAD_LOCALS = threading.local()

@contextlib.contextmanager
def get_session():
    if getattr(THREAD_LOCALS, 'session', None):
        yield THREAD_LOCALS.session
    else:
        THREAD_LOCALS.session = session = SESSION_MAKER()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            THREAD_LOCALS.session = None

def init_db(db_url):
    global SESSION_MAKER
    engine = sa.create_engine(db_url)
    SESSION_MAKER = sessionmaker(autocommit=False, autoflush=False, bind=engine,
            class_=NiceSession)
    Base.metadata.create_all(bind=engine)

################################################################################
## Catalogue import/export #####################################################
################################################################################

# Load a JSON catalogue ({"algorithms": [...], "cases": [...]}) into the DB.
# Algs that aren't listed by any case are stored without one (triggers).
def import_catalogue(session, data):
    algs = {}
    for a in data.get('algorithms', []):
        alg = catalogue.make_alg(a)
        algs[alg.id] = session.upsert(Algorithm, {'alg_key': alg.id},
                steps=[catalogue.step_data(s) for s in alg.steps],
                simplified=alg.simplified, inverse=alg.inverse,
                mirror=alg.mirror, tags=list(alg.tags))

    for c in data.get('cases', []):
        case = catalogue.make_case(c)
        row = session.upsert(AlgCase, {'case_key': case.id}, name=case.name,
                category=case.category, number=case.number)
        for [i, alg_id] in enumerate(case.algorithms):
            alg = algs.get(alg_id) or session.query_first(Algorithm,
                    alg_key=alg_id)
            if alg is None:
                raise ValueError('case %s lists unknown alg %s' % (case.id,
                    alg_id))
            alg.case = row
            alg.variant = i
    session.flush()
    return (len(algs), len(data.get('cases', [])))

# Snapshot the DB into an in-memory catalogue. This is done once at startup;
# nothing reads the DB after that.
def load_catalogue(session):
    algs = []
    for row in session.query_all(Algorithm):
        algs.append(catalogue.Algorithm(id=row.alg_key,
                steps=tuple(catalogue.make_step(s) for s in row.steps),
                simplified=row.simplified, inverse=row.inverse,
                mirror=row.mirror, tags=tuple(row.tags or ())))
    cases = []
    for row in session.query_all(AlgCase):
        cases.append(catalogue.Case(id=row.case_key, name=row.name,
                category=row.category, number=row.number,
                algorithms=tuple(a.alg_key for a in row.algs)))
    return catalogue.Catalogue(algs, cases)
