r"""Quantifiers relative to a filter: eventually and frequently.

A predicate `p` over a carrier holds *eventually* in a filter `F`
when the set of elements that satisfy `p` is a member of `F`.
With the filter of tails of the natural numbers, this means
"for all sufficiently large `n`". A predicate holds *frequently*
when its negation does not hold eventually.

```
eventually(p, F)  iff  {x : p(x)} \in F
frequently(p, F)  iff  ~ eventually(~ p, F)
```

The laws of these quantifiers are those of the axioms of filters:

  - if `p` holds everywhere, then `eventually(p, F)`
  - if `eventually(p, F)` and `p => q`, then `eventually(q, F)`
  - if `eventually(p, F)` and `eventually(q, F)`,
    then `eventually(p /\ q, F)`
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import logging

import natsort

from eventually import carriers as _crr


log = logging.getLogger(__name__)


def eventually(p, F):
    """Return `True` if `p` holds eventually in `F`.

    @param p: predicate over the carrier of `F`,
        as BDD or expression
    @type F: `Filter`
    """
    return F.member(p)


def frequently(p, F):
    """Return `True` if `~ p` does not hold eventually in `F`."""
    carrier = F.carrier
    u = carrier.to_set(p)
    return not eventually(carrier.care & ~ u, F)


def witnesses(p, F):
    """Return set of indices where the basis of `F` implies `p`.

    The predicate `p` holds eventually in `F` iff
    the returned set is nonempty.

    @return: BDD over `F.index.vars`
    """
    u = F.carrier.to_set(p)
    r = F.carrier.subset(F.basis, u)
    return r & F.selector


def witness(p, F):
    """Return least index where the basis of `F` implies `p`.

    Indices are compared by their values,
    in the natural order of index variables.
    For example, for `F = at_top(naturals)` and
    `p = 'n >= 7'`, the witness is the tail
    that starts at 7.

    @return: `dict` that maps index variables
        to values, or `None` if `p` does not
        hold eventually in `F`
    """
    u = witnesses(p, F)
    ctx = F.context
    if u == ctx.bdd.false:
        return None
    keys = natsort.natsorted(F.index.vars)
    gen = ctx.pick_iter(u, care_vars=keys)
    w = min(gen, key=lambda d: tuple(d[k] for k in keys))
    log.debug(f'witness {w} of eventually {p}')
    return w


def eventually_eq(f, g, F):
    """Return `True` if `f` and `g` are eventually equal in `F`.

    @type f, g: `Map` with the same source and target
    @type F: `Filter` on the source
    """
    eq = _agree(f, g, _equals)
    return eventually(eq, F)


def eventually_le(f, g, F):
    """Return `True` if eventually `f <= g` in `F`.

    @type f, g: `Map` with the same source and target,
        the target with one integer-valued variable
    @type F: `Filter` on the source
    """
    target = f.target
    ctx = target.context
    if (len(target.vars) != 1 or
            ctx.vars[target.vars[0]]['type'] != 'int'):
        raise ValueError(
            'comparison `<=` requires a target with '
            f'one integer-valued variable, not {target.vars}')
    le = _agree(f, g, _less_equal)
    return eventually(le, F)


def _agree(f, g, compare):
    r"""Return set of elements where `compare` relates `f` and `g`.

    ```tla
    \E a, b:  /\ f(x) = a
              /\ g(x) = b
              /\ compare(a, b)
    ```
    """
    if f.source != g.source or f.target != g.target:
        raise ValueError(
            f'{f} and {g} have different '
            'sources or targets')
    ctx = f.context
    # `f` and `g` can share output variables
    avoid = set(f.source.vars).union(f.out, g.out)
    _, rename = _crr.Carrier(ctx, g.out).copy(avoid)
    g_out = [rename[var] for var in g.out]
    u = f.relation & ctx.let(rename, g.relation)
    for a, b in zip(f.out, g_out):
        u &= ctx.add_expr(compare(a, b, ctx))
    qvars = list(f.out) + g_out
    return ctx.exist(qvars, u)


def _equals(a, b, context):
    if context.vars[a]['type'] == 'bool':
        return f'{a} <=> {b}'
    return f'{a} = {b}'


def _less_equal(a, b, context):
    return f'{a} <= {b}'
