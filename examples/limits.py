"""Limits of sequences and functions, as relations of filters."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
from omega.symbolic import fol as _fol

from eventually import carriers
from eventually import convergence as cnv
from eventually import enumeration as enm
from eventually import filters as flt
from eventually import lattice as lat
from eventually import maps
from eventually import standard


def sequences():
    """The sequence `n / 2` tends to infinity."""
    ctx = _fol.Context()
    x = carriers.declare(ctx, n=(0, 31))
    y = carriers.declare(ctx, m=(0, 15))
    half = maps.from_expr(x, y, dict(m='n / 2'))
    const = maps.from_expr(x, y, dict(m='3'))
    F = standard.at_top(x, index='N')
    G = standard.at_top(y, index='M')
    print(f'n / 2 tends to `at_top`: {cnv.tendsto(half, F, G)}')
    H = flt.principal(y, 'm = 3')
    print(f'3 tends to `m = 3`: {cnv.tendsto(const, F, H)}')
    print(f'3 tends to `at_top`: {cnv.tendsto(const, F, G)}')


def neighborhoods():
    """Pull back neighborhoods of points along an inclusion."""
    ctx = _fol.Context()
    x = carriers.declare(ctx, x=(-16, 15))
    y = carriers.declare(ctx, y=(8, 15))
    inclusion = maps.from_expr(y, x, dict(x='y'))
    for point in (0, 9):
        N = standard.nhds(x, point, 4)
        r = maps.comap(inclusion, N)
        print(
            f'pullback of neighborhoods of {point} '
            f'is trivial: {r.is_bottom()}')


def order_of_filters(fname=None):
    """Compare some filters on a small carrier."""
    ctx = _fol.Context()
    x = carriers.declare(ctx, n=(0, 7))
    filters = dict(
        top=lat.top(x),
        bottom=lat.bottom(x),
        tails=standard.at_top(x, index='N'),
        heads=standard.at_bot(x, index='N'),
        middle=flt.principal(x, r'n \in 3..4'))
    filters['meet'] = lat.meet(filters['tails'], filters['middle'])
    filters['join'] = lat.join(filters['tails'], filters['heads'])
    g = enm.order_graph(filters)
    for u, v in g.edges():
        a = g.nodes[u]['label']
        b = g.nodes[v]['label']
        print(f'{a} <= {b}')
    if fname is not None:
        enm.dump_order(filters, fname)


if __name__ == '__main__':
    sequences()
    neighborhoods()
    order_of_filters()
