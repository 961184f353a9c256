r"""Statements that hold "for all sufficiently large `n`".

The filter `at_top` has as basis the tails `n >= N`.
A predicate holds eventually in this filter when
some tail is contained in the predicate:

```tla
\E N:  \A n:  (n >= N) => P(n)
```

The carrier is bounded (`n \in 0..31`), so the tails
are bounded too, and the witness `N` is an integer
within the type hint of `n`.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
from omega.symbolic import fol as _fol

from eventually import carriers
from eventually import quantifiers as qnt
from eventually import standard


def even_or_large():
    ctx = _fol.Context()
    naturals = carriers.declare(ctx, n=(0, 31))
    tails = standard.at_top(naturals, index='N')
    p = r'(n % 2 = 0) \/ (n >= 10)'
    assert qnt.eventually(p, tails)
    w = qnt.witness(p, tails)
    print(f'"{p}" holds for all `n >= {w["N"]}`')


def conjunction():
    """Intersect two tails."""
    ctx = _fol.Context()
    naturals = carriers.declare(ctx, n=(0, 31))
    tails = standard.at_top(naturals, index='N')
    p = 'n >= 5'
    q = 'n >= 7'
    assert qnt.eventually(p, tails)
    assert qnt.eventually(q, tails)
    # so the conjunction holds eventually too
    pq = rf'({p}) /\ ({q})'
    assert qnt.eventually(pq, tails)
    w = qnt.witness(pq, tails)
    assert w == dict(N=7), w
    print(f'"{pq}" holds for all `n >= {w["N"]}`')
    # the tails that witness the conjunction
    u = qnt.witnesses(pq, tails)
    indices = naturals.context.pick_iter(u)
    print(sorted(d['N'] for d in indices))


if __name__ == '__main__':
    even_or_large()
    conjunction()
