r"""Convergence of functions relative to filters.

A function `f` tends to the filter `G` along the filter `F`
when the pushforward of `F` along `f` is below `G`:

```
tendsto(f, F, G)  iff  map_(f, F) <= G
```

Equivalently, for each member `V` of `G`, the preimage
of `V` under `f` is a member of `F`. With suitable filters,
this relation expresses the limit of a sequence (`F` the
tails of the natural numbers), the limit of a function at
a point (`F` the neighborhoods of the point), and the
limits at infinity.

Composition of limits follows from the monotonicity and
functoriality of `map_`:

```
tendsto(f, F, G) /\ tendsto(g, G, H)
=> tendsto(compose(g, f), F, H)
```
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
from eventually import lattice as _lat
from eventually import maps as _maps


def tendsto(f, F, G):
    """Return `True` if `f` tends to `G` along `F`.

    @type f: `Map`
    @type F: `Filter` on `f.source`
    @type G: `Filter` on `f.target`
    """
    _assert_carriers(f, F, G)
    return _lat.leq(_maps.map_(f, F), G)


def tendsto_comap(f, F, G):
    """Return `True` if `F <= comap(f, G)`.

    Equivalent to `tendsto(f, F, G)`,
    by the Galois connection of `map_` and `comap`.
    """
    _assert_carriers(f, F, G)
    return _lat.leq(F, _maps.comap(f, G))


def _assert_carriers(f, F, G):
    if F.carrier != f.source:
        raise ValueError(
            f'filter on {F.carrier}, but '
            f'{f} has source {f.source}')
    if G.carrier != f.target:
        raise ValueError(
            f'filter on {G.carrier}, but '
            f'{f} has target {f.target}')
