# Copyright (c) 2013 Mirantis Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from blueprint_resolver import exceptions as ex


ALL = 'ALL'


class Cardinality(object):
    """Component count constraint declared by stack metadata.

    Accepted forms are "N" (exactly N), "N+" (N or more), "N-M"
    (between N and M inclusive) and "ALL" (one per host). An upper bound
    of None means the count is unbounded.
    """

    def __init__(self, spec):
        self.spec = spec
        self.min, self.max = parse(spec)

    @property
    def is_all(self):
        return self.spec == ALL

    @property
    def allows_zero(self):
        return self.min == 0

    @property
    def allows_many(self):
        return self.max is None or self.max > 1

    def is_valid_count(self, count):
        return is_satisfied(count, self)

    def __eq__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        return (self.min, self.max) == (other.min, other.max)

    def __hash__(self):
        return hash((self.min, self.max))

    def __repr__(self):
        return 'Cardinality(%r)' % self.spec

    def __str__(self):
        return str(self.spec)


def parse(spec):
    """Parse a cardinality string into a (min, max) pair."""
    if spec is None:
        raise ex.InvalidCardinality(spec)

    value = str(spec).strip()
    if value == ALL:
        return 0, None

    try:
        if value.endswith('+'):
            lower, upper = int(value[:-1]), None
        elif '-' in value:
            lower, upper = (int(part) for part in value.split('-', 1))
        else:
            lower = upper = int(value)
    except ValueError:
        raise ex.InvalidCardinality(spec)

    if lower < 0 or (upper is not None and upper < lower):
        raise ex.InvalidCardinality(spec)
    return lower, upper


def is_satisfied(count, cardinality):
    if not isinstance(cardinality, Cardinality):
        cardinality = Cardinality(cardinality)

    if count < cardinality.min:
        return False
    return cardinality.max is None or count <= cardinality.max
