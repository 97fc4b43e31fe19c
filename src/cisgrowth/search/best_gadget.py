from __future__ import annotations

import os
import random
import sys
from dataclasses import dataclass
from multiprocessing import Pool
from typing import Iterable, Iterator, List, Optional, Tuple

import networkx as nx

from cisgrowth.errors import DegenerateGadgetError
from cisgrowth.gadgets.gadget import Gadget
from cisgrowth.generators.gadgets import random_cycle_gadget
from cisgrowth.transfer.growth import GrowthEstimate

# Redraws allowed per candidate before the parameters are declared hopeless.
MAX_ATTEMPTS = 1000


def default_processes() -> int:
    """Worker count: $CISGROWTH_PROCESSES if set, else 1."""
    return max(1, int(os.environ.get("CISGROWTH_PROCESSES", "1")))


@dataclass(frozen=True)
class SearchResult:
    """
    Best gadget found by search_best_gadget.

    evaluated: candidates scored
    rejected:  candidates whose estimate failed the sanity cap
    """

    gadget: Gadget
    estimate: GrowthEstimate
    n: int
    d: int
    links: int
    evaluated: int
    rejected: int

    @property
    def lower_bound(self) -> float:
        """#CIS of the chained family is Omega(lower_bound^|V|)."""
        return self.estimate.base


def evaluate_gadget(gadget: Gadget) -> Tuple[Gadget, Optional[GrowthEstimate]]:
    """Score one candidate. Returns the gadget too, with its path values filled in."""
    return gadget, gadget.growth_estimate()


def _candidates(n: int, d: int, links: int, iterations: int, rng: random.Random) -> Iterator[Gadget]:
    for _ in range(iterations):
        for _attempt in range(MAX_ATTEMPTS):
            gadget = random_cycle_gadget(n, d, links, rng)
            if nx.is_connected(gadget.graph):
                break
        else:
            raise DegenerateGadgetError(
                f"No connected gadget with n={n}, d={d}, links={links} in {MAX_ATTEMPTS} attempts."
            )
        yield gadget


def _chunked(it: Iterable[Gadget], size: int) -> Iterable[List[Gadget]]:
    buf: List[Gadget] = []
    for x in it:
        buf.append(x)
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf


def search_best_gadget(
    *,
    n: int,
    d: int,
    links: int,
    iterations: int,
    seed: Optional[int] = None,
    notify_interval: int = 0,
    processes: Optional[int] = None,
    batch_size: int = 50,
) -> Optional[SearchResult]:
    """
    Sample *iterations* connected random-cycle gadgets and keep the best.

    Gadgets have n vertices, maximum degree d and 2 * links link nodes.
    Candidates are drawn in this process from random.Random(seed) and
    scored in order, so the result does not depend on *processes*.

    Returns None if every candidate was rejected by the sanity cap.
    """
    rng = random.Random(seed)
    if processes is None:
        processes = default_processes()

    best: Optional[Tuple[Gadget, GrowthEstimate]] = None
    evaluated = rejected = 0

    def consume(results: Iterable[Tuple[Gadget, Optional[GrowthEstimate]]]) -> None:
        nonlocal best, evaluated, rejected
        for gadget, est in results:
            evaluated += 1
            if notify_interval and evaluated < iterations and evaluated % notify_interval == 0:
                print(f"[n={n} d={d} l={links}] {evaluated}/{iterations}", file=sys.stderr)
            if est is None:
                rejected += 1
                continue
            if best is None or est.spectral_radius > best[1].spectral_radius:
                best = (gadget, est)

    gen = _candidates(n, d, links, iterations, rng)
    if processes <= 1:
        consume(evaluate_gadget(g) for g in gen)
    else:
        with Pool(processes=processes) as pool:
            for batch in _chunked(gen, batch_size):
                consume(pool.imap(evaluate_gadget, batch, chunksize=1))

    if best is None:
        print(f"[n={n} d={d} l={links}] no valid bound in {evaluated} candidates.", file=sys.stderr)
        return None

    gadget, est = best
    if notify_interval:
        print(
            f"[n={n} d={d} l={links}] #CIS = Omega({est.base}^n), max eigenvalue {est.spectral_radius}",
            file=sys.stderr,
        )
    return SearchResult(
        gadget=gadget,
        estimate=est,
        n=n,
        d=d,
        links=links,
        evaluated=evaluated,
        rejected=rejected,
    )
