"""Best and worst #CIS among random linked cycles C_n + chords of max degree d."""
import argparse
import random

from cisgrowth.cis.enumerator import count_cis
from cisgrowth.generators.graphs import random_linked_cycle
from cisgrowth.io.graph6 import graph_to_g6


def best_and_worst(n, d, iterations, rng, notify_interval=0):
    best = worst = None
    for i in range(iterations):
        if notify_interval and i < iterations - 1 and (i + 1) % notify_interval == 0:
            print(i + 1)
        G = random_linked_cycle(n, d, rng)
        cis = count_cis(G)
        if best is None or cis > best[0]:
            best = (cis, G)
        if worst is None or cis < worst[0]:
            worst = (cis, G)
    return best, worst


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--n", type=int, default=14)
    parser.add_argument("--d", type=int, default=3)
    parser.add_argument("--iterations", type=int, default=200)
    parser.add_argument("--notify", type=int, default=50)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--draw", action="store_true")
    args = parser.parse_args()

    best, worst = best_and_worst(args.n, args.d, args.iterations, random.Random(args.seed), args.notify)
    print(f"BEST:  {best[0]}  {graph_to_g6(best[1])}")
    print(f"WORST: {worst[0]}  {graph_to_g6(worst[1])}")

    if args.draw:
        import matplotlib.pyplot as plt
        import networkx as nx

        from cisgrowth.viz.layouts import base_layout

        fig, axes = plt.subplots(1, 2, figsize=(10, 5))
        for ax, (cis, G), name in zip(axes, (best, worst), ("best", "worst")):
            nx.draw_networkx(G, pos=base_layout(G), ax=ax, node_size=250)
            ax.set_title(f"{name}: #CIS={cis}")
            ax.set_axis_off()
        plt.show()


if __name__ == "__main__":
    main()
