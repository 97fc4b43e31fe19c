"""
Sweep gadget sizes, degree caps and link counts, keeping the best random
gadget for each combination.

For every (d, n, l) the lower bound #CIS = Omega(base^n) of the best gadget
is printed; with --prefix the bounds and the winning adjacency matrices are
also written to <prefix>_values.csv and <prefix>_graphs.csv.
"""
import argparse
import csv
import os

from cisgrowth.io.graph6 import adjacency_matrix_string, gadget_to_g6
from cisgrowth.search.best_gadget import search_best_gadget


def _span(lo: int, hi: int) -> str:
    return str(lo) if lo == hi else f"{lo}-{hi}"


def sweep(n_min, n_max, d_min, d_max, l_min, l_max, iterations, *, seed=None,
          notify_interval=0, processes=None, draw_dir=None):
    """Returns {(d, n, l): SearchResult or None}; combinations too small for l are skipped."""
    results = {}
    for d in range(d_min, d_max + 1):
        for n in range(n_min, n_max + 1, 2):
            for l in range(l_min, l_max + 1):
                if 2 * (l + 1) > n:
                    continue
                res = search_best_gadget(
                    n=n,
                    d=d,
                    links=l,
                    iterations=iterations,
                    seed=seed,
                    notify_interval=notify_interval,
                    processes=processes,
                )
                results[(d, n, l)] = res
                print(f"n = {n}, d = {d}, l = {l}")
                if res is None:
                    print("    no valid bound")
                    continue
                g6, links = gadget_to_g6(res.gadget)
                print(f"    #CIS = Omega({res.lower_bound}^n)")
                print(f"    Max. eigenvalue: {res.estimate.spectral_radius}")
                print(f"    graph6: {g6}  links: {links}")
                print()

                if draw_dir:
                    from cisgrowth.viz.draw import draw_gadget

                    os.makedirs(draw_dir, exist_ok=True)
                    draw_gadget(res.gadget, save_path=os.path.join(draw_dir, f"best_d{d}_n{n}_l{l}.png"))
    return results


def write_csv(results, prefix, d_range, n_range, l_range):
    links = list(range(l_range[0], l_range[1] + 1))
    with open(f"{prefix}_values.csv", "w", newline="") as fv, open(f"{prefix}_graphs.csv", "w", newline="") as fg:
        values = csv.writer(fv, delimiter=";")
        graphs = csv.writer(fg, delimiter=";")
        for d in range(d_range[0], d_range[1] + 1):
            values.writerow([""] + links)
            graphs.writerow([""] + links)
            for n in range(n_range[0], n_range[1] + 1, 2):
                vrow, grow = [n], [n]
                for l in links:
                    res = results.get((d, n, l))
                    vrow.append(res.lower_bound if res is not None else -1)
                    grow.append(adjacency_matrix_string(res.gadget.graph) if res is not None else "")
                values.writerow(vrow)
                graphs.writerow(grow)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--n-min", type=int, default=10)
    parser.add_argument("--n-max", type=int, default=10)
    parser.add_argument("--d-min", type=int, default=3)
    parser.add_argument("--d-max", type=int, default=3)
    parser.add_argument("--l-min", type=int, default=2)
    parser.add_argument("--l-max", type=int, default=2)
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--notify", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--processes", type=int, default=None)
    parser.add_argument("--prefix", default=None, help="write <prefix>_values.csv and <prefix>_graphs.csv")
    parser.add_argument("--draw-dir", default=None)
    args = parser.parse_args()

    results = sweep(
        args.n_min, args.n_max, args.d_min, args.d_max, args.l_min, args.l_max, args.iterations,
        seed=args.seed,
        notify_interval=args.notify,
        processes=args.processes,
        draw_dir=args.draw_dir,
    )

    if args.prefix is not None:
        prefix = (
            f"{args.prefix}D{_span(args.d_min, args.d_max)}_N{_span(args.n_min, args.n_max)}"
            f"_L{_span(args.l_min, args.l_max)}_I{args.iterations}"
        )
        write_csv(results, prefix, (args.d_min, args.d_max), (args.n_min, args.n_max), (args.l_min, args.l_max))
        print(f"wrote {prefix}_values.csv and {prefix}_graphs.csv")


if __name__ == "__main__":
    main()
