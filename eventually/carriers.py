r"""Carriers: finite types made of declared variables.

A carrier is a tuple of variables declared in an
`omega.symbolic.fol.Context`. Its elements are the
assignments to these variables that satisfy the
type hints given at declaration.

Sets of elements are represented by BDDs over the
variables of the carrier. Quantification in `fol`
ranges over the bitfields that refine integers,
which can contain more values than the type hints
(e.g., `x \in 0..2` is refined by 2 bits,
so quantification ranges over `0..3`).
So all sets are intersected with the type invariant
of the carrier (attribute `Carrier.care`).
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import logging
import re

import natsort
from omega.logic import syntax as stx


log = logging.getLogger(__name__)
COPY_SUFFIX = re.compile(r'_c\d+$')


class Carrier:
    """Set of assignments to some declared variables.

    Attributes:

    - `context`: `omega.symbolic.fol.Context`
      where the variables are declared
    - `vars`: `tuple` of variable names,
      in natural order
    - `care`: BDD of the type invariant,
      i.e., the set of all elements

    The carrier with no variables has one element,
    the empty assignment.
    """

    def __init__(self, context, vrs):
        vrs = tuple(natsort.natsorted(set(vrs)))
        for var in vrs:
            if var not in context.vars:
                raise ValueError(
                    f'undeclared variable "{var}"')
            if stx.isprimed(var):
                raise ValueError(
                    f'primed variable "{var}" '
                    'cannot be in a carrier')
        self.context = context
        self.vars = vrs
        self.care = type_invariant(vrs, context)

    def __eq__(self, other):
        if not isinstance(other, Carrier):
            return NotImplemented
        return (
            self.context is other.context and
            self.vars == other.vars)

    def __hash__(self):
        return hash((id(self.context), self.vars))

    def __repr__(self):
        return f'Carrier({self.vars})'

    def __str__(self):
        hints = list()
        for var in self.vars:
            d = self.context.vars[var]
            if d['type'] == 'bool':
                hints.append(rf'{var} \in BOOLEAN')
            else:
                a, b = d['dom']
                hints.append(rf'{var} \in {a} .. {b}')
        return r' /\ '.join(hints) or 'TRUE'

    @property
    def empty(self):
        return self.context.bdd.false

    def add_expr(self, expr):
        """Return the set of elements that satisfy `expr`."""
        u = self.context.add_expr(expr)
        support = self.context.support(u)
        if not support.issubset(self.vars):
            raise ValueError(
                f'expression "{expr}" depends on '
                f'{support - set(self.vars)}, which are not '
                f'variables of the carrier {self.vars}')
        return u & self.care

    def to_set(self, u):
        """Return set from BDD or expression `u`."""
        if stx.isinstance_str(u):
            return self.add_expr(u)
        support = self.context.support(u)
        if not support.issubset(self.vars):
            raise ValueError(
                f'set depends on {support - set(self.vars)}, '
                f'which are not variables of the carrier {self.vars}')
        return u & self.care

    def point(self, assignment):
        """Return singleton that contains `assignment`."""
        if set(assignment) != set(self.vars):
            raise ValueError(
                f'assignment {assignment} does not '
                f'assign exactly the variables {self.vars}')
        u = self.context.bdd.true
        for var, value in assignment.items():
            u &= self.context.add_expr(
                _format_value(var, value, self.context))
        u &= self.care
        if u == self.context.bdd.false:
            raise ValueError(
                f'{assignment} is not an element of '
                f'the carrier `{self}`')
        return u

    def subset(self, u, v):
        r"""Return BDD for `u \subseteq v`.

        The result depends on the variables
        other than those of the carrier that
        occur in `u` or `v`. For example,
        when `u` and `v` are families of sets
        indexed by other variables.

        @param u, v: BDDs, may depend also on
            variables outside the carrier
        @return: BDD over variables not in `self.vars`
        """
        ctx = self.context
        diff = self.care & u & ~ v
        return ~ ctx.exist(self.vars, diff)

    def issubset(self, u, v):
        """Return `True` if set `u` is contained in set `v`."""
        r = self.subset(u, v)
        assert r in (self.context.bdd.true,
                     self.context.bdd.false), (
            'sets should depend only on the '
            f'variables {self.vars}')
        return r == self.context.bdd.true

    def elements(self, u):
        """Return `list` of elements in the set `u`.

        Each element is a `dict` that maps
        variable names to values. The list is
        sorted by values, in the natural
        order of variable names.
        """
        u = u & self.care
        support = self.context.support(u)
        assert support.issubset(self.vars), (support, self.vars)
        gen = self.context.pick_iter(u, care_vars=self.vars)
        r = sorted(gen, key=self.sort_key)
        return r

    def sort_key(self, assignment):
        return tuple(assignment[var] for var in self.vars)

    def copy(self, avoid):
        """Return fresh carrier with same type hints.

        The variables of the returned carrier are
        named after those of `self`, and are not in
        `avoid`. Names declared earlier with the same
        type hints can be reused.

        @param avoid: variable names to avoid
        @type avoid: `set` of `str`
        @return: `(carrier, rename)` where `rename`
            maps each variable of `self` to its copy
        @rtype: `tuple(Carrier, dict)`
        """
        avoid = set(avoid).union(self.vars)
        rename = dict()
        for var in self.vars:
            name = fresh_name(var, avoid, self.context)
            rename[var] = name
            avoid.add(name)
        log.debug(f'copy of carrier: {rename}')
        other = Carrier(self.context, rename.values())
        return other, rename


def declare(context, **vrs):
    """Declare variables and return carrier of them.

    Example:

    ```python
    from omega.symbolic import fol as _fol
    from eventually import carriers

    ctx = _fol.Context()
    naturals = carriers.declare(ctx, n=(0, 31))
    u = naturals.add_expr('n > 10')
    ```

    @param vrs: type hints, as for
        `omega.symbolic.fol.Context.declare`
    @rtype: `Carrier`
    """
    context.declare(**vrs)
    return Carrier(context, vrs)


def type_invariant(vrs, context):
    """Return conjunction of type hints for `vrs` as BDD."""
    u = context.bdd.true
    for var in vrs:
        hints = context.vars[var]
        if hints['type'] == 'bool':
            continue
        assert hints['type'] == 'int', hints
        a, b = hints['dom']
        u &= context.add_expr(rf'({a} <= {var}) /\ ({var} <= {b})')
    return u


def fresh_name(var, avoid, context):
    """Declare and return a copy of variable `var`.

    The copy has the same type hint as `var`.
    """
    hint = _type_hint(var, context)
    stem = COPY_SUFFIX.sub('', var)
    return declare_fresh(stem, hint, avoid, context)


def declare_fresh(stem, hint, avoid, context):
    """Declare and return a variable named after `stem`.

    A variable declared earlier with the same
    type hint is reused, unless its name is in `avoid`.

    @param hint: `'bool'` or `tuple(min, max)`
    """
    k = 0
    while True:
        k += 1
        name = f'{stem}_c{k}'
        if name in avoid:
            continue
        if name in context.vars:
            if _type_hint(name, context) == hint:
                return name
            continue
        if name in context.bdd.vars:
            continue
        context.declare(**{name: hint})
        return name


def disjoint(*carriers):
    """Return `True` if no variable is shared."""
    vrs = [var for c in carriers for var in c.vars]
    return len(vrs) == len(set(vrs))


def _type_hint(var, context):
    d = context.vars[var]
    if d['type'] == 'bool':
        return 'bool'
    return tuple(d['dom'])


def _format_value(var, value, context):
    if context.vars[var]['type'] == 'bool':
        if value:
            return var
        return f'~ {var}'
    return f'{var} = {value}'
