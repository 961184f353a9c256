r"""Filters on finite carriers, represented by a basis.

A filter on a carrier `X` is a set of subsets of `X`
(the members) that:

  - contains `X`,
  - contains each superset of each member,
  - contains the intersection of any two members.

A filter is given here by a basis: an index carrier `I`,
a selector (subset of `I`), and a basis relation
(BDD over the variables of `I` and `X`). For each index
`i` in the selector, the set `basis(i)` is a basis set.
A set `S` is a member iff:

```tla
\E i \in selector:  basis(i) \subseteq S
```

Upward closure holds by construction. The other two
axioms hold iff the selector is nonempty and the basis
sets are directed (the intersection of two basis sets
contains a third). These conditions are checked by
`Filter.__init__`. A filter can also be given by all
its members (`from_members`), which are checked against
the axioms.

The filter whose members are all sets is the trivial
filter (the least element in the order of filters).


References
==========

Nicolas Bourbaki
    "General topology, Chapters 1--4"
    Springer, 1995
    Chapter I, Section 6

Jeremy Avigad, Patrick Massot
    "Mathematics in Lean"
    Chapter "Topology", Section "Filters"
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import itertools
import logging

from omega.logic import syntax as stx

from eventually import carriers as _crr


log = logging.getLogger(__name__)


class AxiomViolation(ValueError):
    """A basis or family of members that is not a filter."""


class Filter:
    """Filter over a carrier, given by a basis.

    Attributes:

    - `carrier`: `Carrier` whose subsets are members
    - `index`: `Carrier` that indexes the basis
    - `selector`: BDD over `index.vars`,
      the indices of basis sets
    - `basis`: BDD over `index.vars` and `carrier.vars`

    Instances are immutable values. Compare them with `==`,
    which is extensional: two filters are equal when they
    have the same members, irrespective of basis.
    """

    def __init__(
            self, carrier, basis,
            index=None, selector=None,
            check=True):
        """Return filter with basis `basis`.

        @param carrier: elements of the underlying set
        @type carrier: `Carrier`
        @param basis: basis relation,
            as BDD or expression
        @param index: carrier of indices,
            by default the carrier with one element
        @type index: `Carrier`
        @param selector: set of indices, as BDD or
            expression, by default all indices
        @param check: if `True`, then raise
            `AxiomViolation` when `basis` and `selector`
            do not define a filter
        """
        ctx = carrier.context
        if index is None:
            index = _crr.Carrier(ctx, ())
        if index.context is not ctx:
            raise ValueError(
                'the index and the carrier are '
                'declared in different contexts')
        if not _crr.disjoint(carrier, index):
            raise ValueError(
                f'index variables {index.vars} overlap '
                f'carrier variables {carrier.vars}')
        if selector is None:
            selector = ctx.bdd.true
        basis = _to_bdd(basis, ctx)
        selector = _to_bdd(selector, ctx)
        _assert_support(
            basis, set(carrier.vars).union(index.vars), ctx)
        _assert_support(selector, set(index.vars), ctx)
        self.carrier = carrier
        self.index = index
        self.selector = selector & index.care
        self.basis = basis & index.care & carrier.care
        if check:
            assert_axioms(self)

    def __eq__(self, other):
        if not isinstance(other, Filter):
            return NotImplemented
        if self.carrier != other.carrier:
            return False
        return refines(self, other) and refines(other, self)

    def __hash__(self):
        return hash(int(self.kernel))

    def __contains__(self, s):
        return self.member(s)

    def __repr__(self):
        return (
            f'Filter(carrier={self.carrier.vars}, '
            f'index={self.index.vars})')

    def __str__(self):
        return (
            f'filter on `{self.carrier}`, '
            f'with basis indexed by `{self.index}`')

    @property
    def context(self):
        return self.carrier.context

    @property
    def kernel(self):
        """Return the least member.

        The intersection of all basis sets
        is a member, because the carrier is finite.
        """
        ctx = self.context
        u = ctx.forall(self.index.vars, ~ self.selector | self.basis)
        return u & self.carrier.care

    def member(self, s):
        """Return `True` if the set `s` is a member.

        @param s: set as BDD or expression
            over the variables of the carrier
        """
        s = self.carrier.to_set(s)
        ctx = self.context
        u = self.carrier.subset(self.basis, s)
        u = ctx.exist(self.index.vars, self.selector & u)
        assert u in (ctx.bdd.true, ctx.bdd.false), (
            ctx.support(u))
        return u == ctx.bdd.true

    def is_bottom(self):
        """Return `True` if the empty set is a member."""
        return self.member(self.carrier.empty)

    def rename_index(self, avoid):
        """Return same filter, with index variables not in `avoid`.

        Returns `self` if no index variable is in `avoid`.
        """
        avoid = set(avoid)
        if avoid.isdisjoint(self.index.vars):
            return self
        avoid.update(self.carrier.vars, self.index.vars)
        index, rename = self.index.copy(avoid)
        ctx = self.context
        basis = ctx.let(rename, self.basis)
        selector = ctx.let(rename, self.selector)
        return Filter(
            self.carrier, basis, index, selector,
            check=False)


def is_nontrivial(f):
    """Return `True` if the empty set is not a member of `f`."""
    return not f.is_bottom()


def refines(a, b):
    """Return `True` if every member of `b` is a member of `a`.

    Read the docstring of `eventually.lattice.leq`.
    """
    assert a.carrier == b.carrier, (a.carrier, b.carrier)
    avoid = set(a.index.vars).union(a.carrier.vars)
    b = b.rename_index(avoid)
    ctx = a.context
    # each basis set of `b` contains some basis set of `a`
    u = a.carrier.subset(a.basis, b.basis)
    u = ctx.exist(a.index.vars, a.selector & u)
    u = ctx.forall(b.index.vars, ~ b.selector | u)
    assert u in (ctx.bdd.true, ctx.bdd.false), ctx.support(u)
    return u == ctx.bdd.true


def assert_axioms(f):
    """Raise `AxiomViolation` if `f` is not a filter."""
    log.info('++ checking filter axioms')
    ctx = f.context
    # the carrier is a member
    u = ctx.exist(f.index.vars, f.selector)
    if u != ctx.bdd.true:
        raise AxiomViolation(
            'The selector is empty, so the carrier '
            f'`{f.carrier}` is not a member.')
    # members are closed under intersection
    vrs = set(f.carrier.vars).union(f.index.vars)
    g = f.rename_index(vrs)
    vrs.update(g.index.vars)
    h = f.rename_index(vrs)
    u = f.carrier.subset(h.basis, f.basis & g.basis)
    u = ctx.exist(h.index.vars, h.selector & u)
    bad = f.selector & g.selector & ~ u
    if bad != ctx.bdd.false:
        indices = ctx.pick(bad)
        raise AxiomViolation(
            'The intersection of the basis sets at the '
            f'indices {indices} contains no basis set, '
            'so members are not closed under intersection.')
    log.info('-- filter axioms hold')


def principal(carrier, s):
    """Return the filter of supersets of `s`.

    @param s: set as BDD or expression
    @rtype: `Filter`
    """
    s = carrier.to_set(s)
    return Filter(carrier, s, check=False)


def from_family(carrier, sets, index=None):
    """Return filter with basis the sets in `sets`.

    The basis is indexed by the positions of sets in `sets`.

    @param sets: sets as BDDs or expressions
    @type sets: `list`
    @param index: name of index variable to declare,
        by default a fresh name
    @type index: `str`
    @rtype: `Filter`
    """
    sets = [carrier.to_set(s) for s in sets]
    if not sets:
        raise AxiomViolation(
            'An empty family is not a basis, '
            f'so the carrier `{carrier}` is not a member.')
    ctx = carrier.context
    hint = (0, len(sets) - 1)
    if index is None:
        index = _crr.declare_fresh(
            'i', hint, set(carrier.vars), ctx)
    else:
        ctx.declare(**{index: hint})
    ind = _crr.Carrier(ctx, [index])
    basis = ctx.bdd.false
    for k, s in enumerate(sets):
        basis |= ctx.add_expr(f'{index} = {k}') & s
    return Filter(carrier, basis, ind)


def from_members(carrier, sets, index=None):
    """Return filter whose members are the sets in `sets`.

    Unlike `from_family`, the family is not closed upward:
    the sets in `sets` are all the members.
    Raise `AxiomViolation` unless `sets`:

      - contains `carrier`
      - is closed upward
      - is closed under intersection

    Upward closure is checked by adding one element
    at a time to each set. Carriers are finite.

    @param sets: sets as BDDs or expressions
    @type sets: `list`
    @param index: as for `from_family`
    @rtype: `Filter`
    """
    sets = [carrier.to_set(s) for s in sets]
    log.info('++ checking family of members')
    if carrier.care not in sets:
        raise AxiomViolation(
            f'The carrier `{carrier}` is not a member.')
    elements = carrier.elements(carrier.care)
    for u in sets:
        for x in elements:
            v = u | carrier.point(x)
            if v in sets:
                continue
            raise AxiomViolation(
                f'The set {carrier.elements(u)} is a member, '
                f'but its union with the element {x} is not, '
                'so members are not closed upward.')
    for u, v in itertools.combinations(sets, 2):
        if (u & v) in sets:
            continue
        raise AxiomViolation(
            f'The sets {carrier.elements(u)} and '
            f'{carrier.elements(v)} are members, '
            'but their intersection is not, '
            'so members are not closed under intersection.')
    log.info('-- family of members is a filter')
    return from_family(carrier, sets, index)


def _to_bdd(u, context):
    if stx.isinstance_str(u):
        return context.add_expr(u)
    return u


def _assert_support(u, vrs, context):
    support = context.support(u)
    if support.issubset(vrs):
        return
    raise ValueError(
        f'depends on {support - vrs}, '
        f'but should depend only on {vrs}')
