r"""Standard filters on integer-valued carriers.

- `at_top`: the tails `{x : x >= N}`, a bounded version
  of the filter of "sufficiently large" numbers
- `at_bot`: the tails `{x : x <= N}`
- `nhds`: balls `{x : |x - point| <= r}` around a point

Carriers are finite, so each of these filters has
a least member. For example, `at_top` on `n \in 0..31`
has least member `{31}`, so statements about it are
about a bounded window of the natural numbers.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import logging

from eventually import carriers as _crr
from eventually import filters as _flt


log = logging.getLogger(__name__)


def at_top(carrier, index=None):
    """Return filter with basis the tails `x >= N`.

    @param carrier: with one integer-valued variable `x`
    @type carrier: `Carrier`
    @param index: name for the index `N`,
        declared with the same type hint as `x`
    @type index: `str`
    @rtype: `Filter`
    """
    var, ind = _tail_index(carrier, index)
    (n,) = ind.vars
    basis = carrier.context.add_expr(f'{n} <= {var}')
    return _flt.Filter(carrier, basis, ind)


def at_bot(carrier, index=None):
    """Return filter with basis the tails `x <= N`.

    Read the docstring of `at_top`.
    """
    var, ind = _tail_index(carrier, index)
    (n,) = ind.vars
    basis = carrier.context.add_expr(f'{var} <= {n}')
    return _flt.Filter(carrier, basis, ind)


def nhds(carrier, point, radius, index=None):
    r"""Return filter with basis balls around `point`.

    The basis sets are:

    ```tla
    {x \in carrier:  (point <= x + r) /\ (x <= point + r)}
    ```

    for `r \in 0..radius`.

    @param carrier: with one integer-valued variable `x`
    @param point: center of balls
    @type point: `int`
    @param radius: largest radius
    @type radius: `int` >= 0
    @param index: name for the radius `r`
    @rtype: `Filter`
    """
    if radius < 0:
        raise ValueError(
            f'expected nonnegative radius, not {radius}')
    var = _integer_variable(carrier)
    ctx = carrier.context
    hint = (0, radius)
    if index is None:
        index = _crr.declare_fresh(
            'r', hint, set(carrier.vars), ctx)
    else:
        ctx.declare(**{index: hint})
    ind = _crr.Carrier(ctx, [index])
    basis = ctx.add_expr(
        rf'({point} <= {var} + {index}) /\ '
        rf'({var} <= {point} + {index})')
    return _flt.Filter(carrier, basis, ind)


def _tail_index(carrier, index):
    """Return variable of `carrier` and carrier of tail indices."""
    var = _integer_variable(carrier)
    ctx = carrier.context
    if index is None:
        index = _crr.fresh_name(var, set(carrier.vars), ctx)
    else:
        dom = tuple(ctx.vars[var]['dom'])
        ctx.declare(**{index: dom})
    log.debug(f'tails of "{var}" indexed by "{index}"')
    return var, _crr.Carrier(ctx, [index])


def _integer_variable(carrier):
    vrs = carrier.vars
    ctx = carrier.context
    if len(vrs) != 1 or ctx.vars[vrs[0]]['type'] != 'int':
        raise ValueError(
            'expected a carrier with one integer-valued '
            f'variable, not {vrs}')
    return vrs[0]
