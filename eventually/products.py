r"""Products of carriers and of filters.

The product of two carriers with disjoint variables is the
carrier over all their variables. The product filter of `F`
and `G` has basis the products of basis sets:

```tla
{<<x, y>>:  x \in F_i  /\  y \in G_j}
```

so that it is the meet of the pullbacks of `F` and `G`
along the projections `fst` and `snd`.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
from eventually import carriers as _crr
from eventually import filters as _flt
from eventually import maps as _maps


def product(a, b):
    """Return product of carriers `a` and `b`.

    @type a, b: `Carrier` with disjoint variables
    @rtype: `Carrier`
    """
    if a.context is not b.context:
        raise ValueError(
            'carriers declared in different contexts')
    if not _crr.disjoint(a, b):
        raise ValueError(
            f'carriers {a.vars} and {b.vars} share variables')
    return _crr.Carrier(a.context, a.vars + b.vars)


def prod(F, G):
    """Return product filter of `F` and `G`.

    @type F, G: `Filter`, on carriers with disjoint variables
    @rtype: `Filter` on `product(F.carrier, G.carrier)`
    """
    carrier = product(F.carrier, G.carrier)
    F = F.rename_index(carrier.vars)
    avoid = set(carrier.vars).union(F.index.vars)
    G = G.rename_index(avoid)
    ctx = carrier.context
    index = _crr.Carrier(ctx, F.index.vars + G.index.vars)
    return _flt.Filter(
        carrier, F.basis & G.basis,
        index, F.selector & G.selector,
        check=False)


def fst(a, b):
    """Return projection from `product(a, b)` to `a`."""
    definitions = {var: var for var in a.vars}
    return _maps.from_expr(product(a, b), a, definitions)


def snd(a, b):
    """Return projection from `product(a, b)` to `b`."""
    definitions = {var: var for var in b.vars}
    return _maps.from_expr(product(a, b), b, definitions)
