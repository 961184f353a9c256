"""Order and lattice operations on filters.

Filters on a carrier are ordered by reverse inclusion
of their sets of members:

```
a <= b  iff  every member of b is a member of a
```

so that larger filters have fewer members. This order
forms a complete lattice:

  - the least element (`bottom`) has all sets as members
  - the greatest element (`top`) has only the carrier
  - the meet of two filters is generated by the union of
    their members (basis: pairwise intersections)
  - the join of two filters has as members the sets that
    are members of both (basis: pairwise unions)

The basis of a meet or join is indexed by pairs of indices,
so index variables are renamed apart as needed.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import functools
import logging

from eventually import carriers as _crr
from eventually import filters as _flt


log = logging.getLogger(__name__)


def leq(a, b):
    """Return `True` if every member of `b` is a member of `a`.

    @type a, b: `Filter` on the same carrier
    """
    _assert_same_carrier(a, b)
    return _flt.refines(a, b)


def meet(a, b):
    """Return greatest lower bound of filters `a` and `b`.

    A set is a member of the meet iff it contains
    the intersection of a member of `a` and
    a member of `b`.

    @type a, b: `Filter` on the same carrier
    @rtype: `Filter`
    """
    _assert_same_carrier(a, b)
    b = _rename_apart(a, b)
    log.debug(f'meet of index {a.index.vars} and {b.index.vars}')
    return _combine(a, b, a.basis & b.basis)


def join(a, b):
    """Return least upper bound of filters `a` and `b`.

    A set is a member of the join iff it is
    a member of both `a` and `b`.

    @type a, b: `Filter` on the same carrier
    @rtype: `Filter`
    """
    _assert_same_carrier(a, b)
    b = _rename_apart(a, b)
    log.debug(f'join of index {a.index.vars} and {b.index.vars}')
    return _combine(a, b, a.basis | b.basis)


def top(carrier):
    """Return the filter whose only member is `carrier`."""
    return _flt.principal(carrier, carrier.care)


def bottom(carrier):
    """Return the filter with all subsets of `carrier` as members."""
    return _flt.principal(carrier, carrier.empty)


def infimum(filters, carrier):
    """Return the meet of all filters in `filters`.

    The meet of no filters is `top(carrier)`.

    @param filters: on `carrier`
    @type filters: iterable of `Filter`
    """
    return functools.reduce(meet, filters, top(carrier))


def supremum(filters, carrier):
    """Return the join of all filters in `filters`.

    The join of no filters is `bottom(carrier)`.

    @param filters: on `carrier`
    @type filters: iterable of `Filter`
    """
    return functools.reduce(join, filters, bottom(carrier))


def _rename_apart(a, b):
    """Return `b` with index variables not shared with `a`."""
    avoid = set(a.index.vars).union(a.carrier.vars)
    return b.rename_index(avoid)


def _combine(a, b, basis):
    ctx = a.context
    vrs = a.index.vars + b.index.vars
    index = _crr.Carrier(ctx, vrs)
    selector = a.selector & b.selector
    return _flt.Filter(
        a.carrier, basis, index, selector,
        check=False)


def _assert_same_carrier(a, b):
    if a.carrier == b.carrier:
        return
    raise ValueError(
        'filters on different carriers: '
        f'{a.carrier} and {b.carrier}')
