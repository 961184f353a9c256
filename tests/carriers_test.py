"""Test `eventually.carriers`."""
import logging
import warnings

from omega.symbolic import fol as _fol
import pytest

from eventually import carriers as _crr


log = logging.getLogger('dd')
log.setLevel(logging.WARNING)
log = logging.getLogger('omega')
log.setLevel(logging.WARNING)


def test_declare():
    ctx = _fol.Context()
    c = _crr.declare(ctx, x=(0, 2), b='bool')
    assert c.vars == ('b', 'x'), c.vars
    assert 'x' in ctx.vars, ctx.vars
    assert 'b' in ctx.vars, ctx.vars
    # the bitfield of `x` represents also 3
    u = ctx.add_expr('x = 3')
    assert u != ctx.bdd.false
    assert (u & c.care) == ctx.bdd.false
    u = c.add_expr('x <= 3')
    v = ctx.add_expr(r'x \in 0..2')
    assert u == v, (u, v)
    # equality of carriers
    d = _crr.Carrier(ctx, ['x', 'b'])
    assert c == d
    assert hash(c) == hash(d)
    e = _crr.Carrier(ctx, ['x'])
    assert c != e
    # mismatch with existing declaration
    with pytest.raises(ValueError):
        _crr.declare(ctx, x=(0, 5))


def test_undeclared():
    ctx = _fol.Context()
    with pytest.raises(ValueError):
        _crr.Carrier(ctx, ['y'])


def test_add_expr_support():
    ctx = _fol.Context()
    c = _crr.declare(ctx, x=(0, 3))
    ctx.declare(y=(0, 3))
    with pytest.raises(ValueError):
        c.add_expr('x = y')
    u = ctx.add_expr('y = 1')
    with pytest.raises(ValueError):
        c.to_set(u)
    u = c.to_set('x = 1')
    v = c.to_set(ctx.add_expr('x = 1'))
    assert u == v, (u, v)


def test_subset():
    ctx = _fol.Context()
    c = _crr.declare(ctx, x=(0, 5))
    u = c.add_expr('x < 2')
    v = c.add_expr('x < 4')
    assert c.issubset(u, v)
    assert not c.issubset(v, u)
    assert c.issubset(c.empty, u)
    # values outside the type hints are ignored
    assert c.issubset(c.care, ctx.add_expr('x <= 5'))
    # family of sets indexed by `k`
    ctx.declare(k=(0, 7))
    w = ctx.add_expr('x < k')
    r = c.subset(u, w)
    r_ = ctx.add_expr('k >= 2')
    assert r == r_, (r, r_)


def test_elements():
    ctx = _fol.Context()
    c = _crr.declare(ctx, x=(0, 5))
    u = c.add_expr('x > 2')
    r = c.elements(u)
    r_ = [dict(x=3), dict(x=4), dict(x=5)]
    assert r == r_, r
    r = c.elements(ctx.bdd.true)
    assert len(r) == 6, r
    r = c.elements(c.empty)
    assert r == list(), r
    # the carrier without variables has one element
    unit = _crr.Carrier(ctx, ())
    r = unit.elements(ctx.bdd.true)
    assert r == [dict()], r


def test_point():
    ctx = _fol.Context()
    c = _crr.declare(ctx, x=(0, 5), b='bool')
    u = c.point(dict(x=3, b=True))
    u_ = c.add_expr(r'(x = 3) /\ b')
    assert u == u_, (u, u_)
    u = c.point(dict(x=0, b=False))
    u_ = c.add_expr(r'(x = 0) /\ ~ b')
    assert u == u_, (u, u_)
    # outside the type hint
    with pytest.raises(ValueError):
        c.point(dict(x=7, b=True))
    # missing variable
    with pytest.raises(ValueError):
        c.point(dict(x=1))


def test_copy():
    ctx = _fol.Context()
    c = _crr.declare(ctx, x=(0, 5), b='bool')
    d, rename = c.copy(avoid=set())
    assert rename == dict(x='x_c1', b='b_c1'), rename
    assert d.vars == ('b_c1', 'x_c1'), d.vars
    assert tuple(ctx.vars['x_c1']['dom']) == (0, 5), ctx.vars
    assert ctx.vars['b_c1']['type'] == 'bool', ctx.vars
    # copies declared earlier are reused
    e, rename = c.copy(avoid={'x_c1'})
    assert rename == dict(x='x_c2', b='b_c1'), rename
    # a copy of a copy is named after the declared variable
    f, rename = d.copy(avoid=set())
    assert rename == dict(x_c1='x_c2', b_c1='b_c2'), rename
    # names with different type hints are skipped
    ctx.declare(y=(0, 3), y_c1=(0, 7))
    g = _crr.Carrier(ctx, ['y'])
    _, rename = g.copy(avoid=set())
    assert rename == dict(y='y_c2'), rename


def test_disjoint():
    ctx = _fol.Context()
    a = _crr.declare(ctx, x=(0, 3))
    b = _crr.declare(ctx, y=(0, 3))
    c = _crr.Carrier(ctx, ['x', 'y'])
    assert _crr.disjoint(a, b)
    assert not _crr.disjoint(a, c)
    assert _crr.disjoint()


def test_str():
    ctx = _fol.Context()
    c = _crr.declare(ctx, x=(-2, 5), b='bool')
    s = str(c)
    s_ = r'b \in BOOLEAN /\ x \in -2 .. 5'
    assert s == s_, s
    unit = _crr.Carrier(ctx, ())
    assert str(unit) == 'TRUE', str(unit)


def test_docstrings_compile_without_warnings():
    fname = _crr.__file__
    with open(fname) as f:
        source = f.read()
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        compile(source, fname, 'exec')
    assert r'`x \in 0..2`' in _crr.__doc__, _crr.__doc__
