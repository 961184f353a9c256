"""Enumerate bases of filters and orders among filters."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under 3-clause BSD.
#
import logging

import natsort
import networkx as nx

from eventually import lattice as _lat


log = logging.getLogger(__name__)


def basis_sets(F):
    """Return selected indices with their basis sets.

    @type F: `Filter`
    @return: `list` of pairs `(index, elements)`,
        where `index` is a `dict` that assigns values
        to index variables, and `elements` is the
        `list` of elements in the basis set at `index`
    """
    ctx = F.context
    r = list()
    for i in F.index.elements(F.selector):
        u = ctx.let(i, F.basis)
        r.append((i, F.carrier.elements(u)))
    return r


def order_graph(filters):
    """Return Hasse diagram of filters.

    Equal filters are merged into one node.
    Each edge `(u, v)` means that the filters of `u`
    are covered by the filters of `v`.

    @param filters: maps names to filters
        on the same carrier
    @type filters: `dict`
    @return: graph with integer nodes that have
        attributes `names` (`list`) and `label` (`str`)
    @rtype: `networkx.DiGraph`
    """
    log.info('++ order of filters')
    classes = list()
    for name in natsort.natsorted(filters):
        f = filters[name]
        for c in classes:
            if filters[c[0]] == f:
                c.append(name)
                break
        else:
            classes.append([name])
    g = nx.DiGraph()
    for u, c in enumerate(classes):
        g.add_node(u, names=c, label=', '.join(c))
    for u, cu in enumerate(classes):
        for v, cv in enumerate(classes):
            if u == v:
                continue
            if _lat.leq(filters[cu[0]], filters[cv[0]]):
                g.add_edge(u, v)
    h = nx.transitive_reduction(g)
    h.add_nodes_from(g.nodes(data=True))
    log.info('-- order of filters')
    return h


def dump_order(filters, fname='filters.pdf'):
    """Dump Hasse diagram of `filters` as PDF."""
    h = order_graph(filters)
    pd = nx.drawing.nx_pydot.to_pydot(h)
    pd.set_rankdir('BT')
    pd.write_pdf(fname)
