#!/usr/bin/env python3
"""
Demo: Derivations of a One-Parameter Family

Walks through the computation behind a study report for the family

    [e1, e2] = e3,  [e1, e3] = lambda e4

which is filiform for lambda != 0 and splits as heisenberg + R at lambda = 0.

- Brackets the derivations between an inner and an outer space
- Compares both with the exact derivations at a few values of lambda
- Finds the affine space containing the Nikolayevsky derivation, then its centralizer

Exact symbolic arithmetic throughout.
"""

import sympy

from nilmatrix import (
    GL,
    LieAlgebra,
    Nikolayevsky,
    centralizer,
    derivations,
    derivations_parametric,
    nikolayevsky_like_derivations_parametric,
    study_group,
)


def demo_bounds(G, gl):
    """Inner and outer bounds against specializations."""
    print("=" * 60)
    print("DERIVATIONS BETWEEN TWO SPACES")
    print("=" * 60)

    between = derivations_parametric(G, gl)
    print(f"  inner bound: dimension {between.smaller.dimension}")
    print(f"  outer bound: dimension {between.larger.dimension}")
    for value in (0, 1, 2):
        exact = derivations(G.specialize({"lambda": value}), gl)
        print(f"  lambda = {value}: dimension {exact.dimension}")
    print()


def demo_nikolayevsky(G, gl):
    """N + W and the centralizer of N in W."""
    print("=" * 60)
    print("NIKOLAYEVSKY DERIVATION")
    print("=" * 60)

    nik_space = nikolayevsky_like_derivations_parametric(G, gl)
    nik = Nikolayevsky(G, gl, nik_space.N)
    print(f"  kind: {nik.kind.name}")
    print(f"  N = {nik.to_string('plain')}")
    if nik.derivation_when:
        conditions = sorted(nik.derivation_when, key=sympy.default_sort_key)
        print(f"  a derivation only when zero: {conditions}")
    print(f"  directions W: dimension {nik_space.dimension}")

    C = centralizer(nik_space.N, nik_space.W, gl)
    print(f"  centralizer of N in W: dimension {C.dimension}")
    print()


def demo_report(G):
    """The report printed by python -m nilmatrix."""
    print("=" * 60)
    print("REPORT")
    print("=" * 60)
    print(study_group(G).render('plain'))


if __name__ == "__main__":
    G = LieAlgebra("0,0,12,[lambda]*13", ["lambda"])
    gl = GL(G.dimension)
    print(f"\n{G!r}\n")
    demo_bounds(G, gl)
    demo_nikolayevsky(G, gl)
    demo_report(G)
