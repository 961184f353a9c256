r"""Total functions between carriers, and transport of filters.

A function `f` from carrier `X` to carrier `Y` is represented
by its graph: a BDD over the variables of `X` and over fresh
copies of the variables of `Y`. The copies are declared when
the function is created, so the graph of a function from a
carrier to itself is a relation like:

```tla
(x \in 0..15) /\ (x_c1 = x / 2)
```

Filters are transported along functions:

  - `map_(f, F)`, the pushforward, has as members the sets
    whose preimage under `f` is a member of `F`.
    Its basis is the image of the basis of `F`.

  - `comap(f, G)`, the pullback, has as members the sets that
    contain the preimage of a member of `G`.
    Its basis is the preimage of the basis of `G`.

These form a Galois connection:

```
map_(f, F) <= G  iff  F <= comap(f, G)
```
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import logging

from omega.logic import syntax as stx

from eventually import carriers as _crr
from eventually import filters as _flt


log = logging.getLogger(__name__)


class Map:
    """Total function from `source` to `target`.

    Attributes:

    - `source`, `target`: `Carrier`
    - `out`: `tuple` of variable names,
      one for each variable in `target.vars`
      (in the same order), disjoint from `source.vars`

    Functions with the same target can share the
    variables `out`, so the number of declared
    variables does not grow with the number of functions.
    Graphs of two functions are renamed apart
    before they are conjoined.
    - `relation`: BDD over `source.vars` and `out`,
      the graph of the function
    """

    def __init__(self, source, target, out, relation):
        """Return function with graph `relation`.

        Raise `ValueError` if `relation` is not
        the graph of a total function.
        """
        ctx = source.context
        if target.context is not ctx:
            raise ValueError(
                'source and target are declared '
                'in different contexts')
        out = tuple(out)
        assert len(out) == len(target.vars), (out, target.vars)
        assert not set(out).intersection(source.vars), out
        assert not set(out).intersection(target.vars), out
        self.source = source
        self.target = target
        self.out = out
        self._to_target = dict(zip(out, target.vars))
        self._to_out = dict(zip(target.vars, out))
        support = ctx.support(relation)
        vrs = set(source.vars).union(out)
        if not support.issubset(vrs):
            raise ValueError(
                f'the graph depends on {support - vrs}, '
                f'which are not variables of the source '
                f'{source.vars} or the target {target.vars}')
        care = _crr.type_invariant(out, ctx)
        self.relation = relation & source.care & care
        self._assert_total()
        self._assert_single_valued()

    def __repr__(self):
        return f'Map({self.source.vars} -> {self.target.vars})'

    def __call__(self, element):
        """Return value at `element` of the source."""
        ctx = self.source.context
        u = self.source.point(element)
        u = ctx.exist(self.source.vars, u & self.relation)
        d = ctx.pick(u, care_vars=self.out)
        return {self._to_target[k]: v for k, v in d.items()}

    @property
    def context(self):
        return self.source.context

    def image(self, u):
        """Return image of set `u` under `self`.

        The set `u` can depend on variables other than
        those of the source (e.g., indices of a basis).
        These variables remain free in the result.

        @param u: BDD over variables that include
            `source.vars`
        @return: BDD over `target.vars` and the
            other variables of `u`
        """
        ctx = self.context
        other = ctx.support(u).difference(self.source.vars)
        assert other.isdisjoint(self.out), other
        assert other.isdisjoint(self.target.vars), other
        r = ctx.exist(self.source.vars, u & self.relation)
        return ctx.let(self._to_target, r)

    def preimage(self, v):
        """Return preimage of set `v` under `self`.

        @param v: BDD over variables that include
            `target.vars`
        @return: BDD over `source.vars` and the
            other variables of `v`
        """
        ctx = self.context
        other = ctx.support(v).difference(self.target.vars)
        assert other.isdisjoint(self.out), other
        assert other.isdisjoint(self.source.vars), other
        r = ctx.let(self._to_out, v)
        return ctx.exist(self.out, r & self.relation)

    def _assert_total(self):
        ctx = self.context
        defined = ctx.exist(self.out, self.relation)
        missing = self.source.care & ~ defined
        if missing == ctx.bdd.false:
            return
        x = ctx.pick(missing, care_vars=self.source.vars)
        raise ValueError(
            f'the element {x} of the source `{self.source}` '
            f'has no value in the target `{self.target}`')

    def _assert_single_valued(self):
        ctx = self.context
        avoid = set(self.source.vars).union(self.out)
        _, rename = _crr.Carrier(ctx, self.out).copy(avoid)
        other = ctx.let(rename, self.relation)
        eq = ctx.bdd.true
        for var, copy in rename.items():
            eq &= ctx.add_expr(_equals(var, copy, ctx))
        bad = self.relation & other & ~ eq
        if bad == ctx.bdd.false:
            return
        x = ctx.exist(self.out, ctx.exist(list(rename.values()), bad))
        x = ctx.pick(x, care_vars=self.source.vars)
        raise ValueError(
            f'the element {x} of the source `{self.source}` '
            'has more than one value')


def from_expr(source, target, definitions):
    """Return function defined by expressions.

    Example:

    ```python
    from omega.symbolic import fol as _fol
    from eventually import carriers
    from eventually import maps

    ctx = _fol.Context()
    x = carriers.declare(ctx, n=(0, 15))
    y = carriers.declare(ctx, m=(0, 7))
    half = maps.from_expr(x, y, dict(m='n / 2'))
    assert half(dict(n=9)) == dict(m=4)
    ```

    @param definitions: maps each variable of `target`
        to an expression over variables of `source`
    @type definitions: `dict`
    @rtype: `Map`
    """
    if set(definitions) != set(target.vars):
        raise ValueError(
            f'definitions for {set(definitions)} but '
            f'the target has variables {target.vars}')
    ctx = source.context
    out, rename = _declare_out(target, source)
    u = ctx.bdd.true
    for var, expr in definitions.items():
        s = _equals(rename[var], f'({expr})', ctx)
        u &= ctx.add_expr(s)
    return Map(source, target, out, u)


def from_callable(source, target, func):
    """Return function that agrees with `func`.

    The function `func` is evaluated at each element of `source`,
    given as a `dict` that maps variable names to values.
    It should return a `dict` that assigns to the
    variables of `target` values within their type hints.

    @param func: `callable` from `dict` to `dict`
    @rtype: `Map`
    """
    ctx = source.context
    out, rename = _declare_out(target, source)
    u = ctx.bdd.false
    for x in source.elements(source.care):
        y = func(dict(x))
        try:
            v = target.point(y)
        except ValueError as e:
            raise ValueError(
                f'{x} maps to {y}, which is not '
                f'an element of `{target}`') from e
        u |= source.point(x) & ctx.let(rename, v)
    return Map(source, target, out, u)


def from_relation(source, target, relation):
    """Return function with graph `relation`.

    @param relation: BDD or expression over the
        variables of `source` and `target`,
        which should be disjoint carriers
    @rtype: `Map`
    """
    if not _crr.disjoint(source, target):
        raise ValueError(
            'a graph over shared variables is ambiguous: '
            f'{source.vars} and {target.vars}')
    ctx = source.context
    if stx.isinstance_str(relation):
        relation = ctx.add_expr(relation)
    out, rename = _declare_out(target, source)
    relation = ctx.let(rename, relation)
    return Map(source, target, out, relation)


def identity(carrier):
    """Return identity function on `carrier`."""
    definitions = {var: var for var in carrier.vars}
    return from_expr(carrier, carrier, definitions)


def compose(g, f):
    """Return function `g` after `f`.

    @type f, g: `Map` with `f.target == g.source`
    @rtype: `Map`
    """
    if f.target != g.source:
        raise ValueError(
            f'cannot compose {g} after {f}: '
            f'{f.target} differs from {g.source}')
    ctx = f.context
    avoid = set(g.source.vars).union(f.out, g.out)
    out, rename = _declare_out(g.target, f.source, avoid)
    u = ctx.let(dict(zip(g.out, out)), g.relation)
    u = ctx.let(dict(zip(g.source.vars, f.out)), u)
    u = ctx.exist(f.out, f.relation & u)
    return Map(f.source, g.target, out, u)


def map_(f, F):
    """Return pushforward of filter `F` along `f`.

    The members are the sets `V` with
    `f.preimage(V)` a member of `F`.

    @type f: `Map`
    @type F: `Filter` on `f.source`
    @rtype: `Filter` on `f.target`
    """
    if F.carrier != f.source:
        raise ValueError(
            f'filter on {F.carrier}, '
            f'but {f} has source {f.source}')
    F = F.rename_index(set(f.target.vars).union(f.out))
    basis = f.image(F.basis)
    return _flt.Filter(
        f.target, basis, F.index, F.selector,
        check=False)


def comap(f, G):
    """Return pullback of filter `G` along `f`.

    The members are the sets that contain
    `f.preimage(V)` for some member `V` of `G`.

    @type f: `Map`
    @type G: `Filter` on `f.target`
    @rtype: `Filter` on `f.source`
    """
    if G.carrier != f.target:
        raise ValueError(
            f'filter on {G.carrier}, '
            f'but {f} has target {f.target}')
    G = G.rename_index(set(f.source.vars).union(f.out))
    basis = f.preimage(G.basis)
    return _flt.Filter(
        f.source, basis, G.index, G.selector,
        check=False)


def _declare_out(target, source, avoid=None):
    """Return copies of variables of `target`.

    The copies are not variables of `source` or `target`,
    nor in `avoid`. Copies declared earlier are reused.
    """
    if avoid is None:
        avoid = set()
    avoid = set(avoid).union(source.vars, target.vars)
    _, rename = target.copy(avoid)
    out = tuple(rename[var] for var in target.vars)
    return out, rename


def _equals(var, expr, context):
    if context.vars[var]['type'] == 'bool':
        return f'{var} <=> {expr}'
    return f'{var} = {expr}'
