"""Test `eventually.convergence`."""
import itertools
import logging

from omega.symbolic import fol as _fol
import pytest

from eventually import carriers as _crr
from eventually import convergence as _cnv
from eventually import filters as _flt
from eventually import lattice as _lat
from eventually import maps as _maps
from eventually import standard as _std


log = logging.getLogger('dd')
log.setLevel(logging.WARNING)
log = logging.getLogger('omega')
log.setLevel(logging.WARNING)


def make_sequences():
    ctx = _fol.Context()
    x = _crr.declare(ctx, n=(0, 31))
    y = _crr.declare(ctx, m=(0, 15))
    half = _maps.from_expr(x, y, dict(m='n / 2'))
    const = _maps.from_expr(x, y, dict(m='3'))
    return x, y, half, const


def test_tendsto_at_top():
    x, y, half, const = make_sequences()
    F = _std.at_top(x, index='N')
    G = _std.at_top(y, index='M')
    assert _cnv.tendsto(half, F, G)
    assert _cnv.tendsto_comap(half, F, G)
    # a constant sequence converges to its value
    H = _flt.principal(y, 'm = 3')
    assert _cnv.tendsto(const, F, H)
    assert not _cnv.tendsto(const, F, G)
    assert not _cnv.tendsto(half, F, H)
    # every function tends to the top filter
    assert _cnv.tendsto(half, F, _lat.top(y))
    assert _cnv.tendsto(const, _lat.bottom(x), G)


def test_tendsto_comap_equivalence():
    x, y, half, const = make_sequences()
    xs = [
        _std.at_top(x, index='N'),
        _std.at_bot(x, index='N'),
        _flt.principal(x, r'n \in 6..9'),
        _lat.bottom(x)]
    ys = [
        _std.at_top(y, index='M'),
        _std.at_bot(y, index='M'),
        _flt.principal(y, 'm = 3'),
        _flt.principal(y, r'm \in 3..4'),
        _lat.top(y)]
    for f in (half, const):
        for F, G in itertools.product(xs, ys):
            a = _cnv.tendsto(f, F, G)
            b = _cnv.tendsto_comap(f, F, G)
            assert a == b, (f, F, G)
    F = _flt.principal(x, r'n \in 6..9')
    G = _flt.principal(y, r'm \in 3..4')
    assert _cnv.tendsto(half, F, G)


def test_composition_of_limits():
    x, y, half, const = make_sequences()
    ctx = x.context
    z = _crr.declare(ctx, k=(0, 7))
    g = _maps.from_expr(y, z, dict(k='m / 2'))
    F = _std.at_top(x, index='N')
    G = _std.at_top(y, index='M')
    H = _std.at_top(z, index='K')
    assert _cnv.tendsto(half, F, G)
    assert _cnv.tendsto(g, G, H)
    f = _maps.compose(g, half)
    assert _cnv.tendsto(f, F, H)
    # a constant sequence, through `g`
    f = _maps.compose(g, const)
    assert _cnv.tendsto(f, F, _flt.principal(z, 'k = 1'))


def test_limit_at_point():
    ctx = _fol.Context()
    x = _crr.declare(ctx, x=(-8, 7))
    y = _crr.declare(ctx, y=(0, 15))
    absolute = _maps.from_callable(
        x, y, lambda d: dict(y=abs(d['x'])))
    F = _std.nhds(x, 0, 3)
    G = _std.nhds(y, 0, 3)
    assert _cnv.tendsto(absolute, F, G)
    assert _cnv.tendsto(absolute, F, _flt.principal(y, 'y <= 3'))
    assert not _cnv.tendsto(absolute, F, _std.nhds(y, 1, 3))
    # away from 0
    F = _std.nhds(x, -5, 2)
    G = _std.nhds(y, 5, 2)
    assert _cnv.tendsto(absolute, F, G)
    assert not _cnv.tendsto(absolute, F, _std.nhds(y, 0, 3))


def test_carrier_mismatch():
    x, y, half, const = make_sequences()
    F = _std.at_top(x, index='N')
    G = _std.at_top(y, index='M')
    with pytest.raises(ValueError):
        _cnv.tendsto(half, G, G)
    with pytest.raises(ValueError):
        _cnv.tendsto(half, F, F)
    with pytest.raises(ValueError):
        _cnv.tendsto_comap(half, G, F)
