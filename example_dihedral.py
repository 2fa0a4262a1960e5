import logging
import re

from schreiersims import (
    Group, Config, SLPPermutation, Generator, Identity, permute, morphism,
)

# The dihedral group of the hexagon acting on its 6 corners, generated by a
# reflection and a rotation.
T = permute(0, 1, 1, 0, 2, 5, 3, 4, 4, 3, 5, 2)
R = permute(0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 0)

# A single transposition, which does not preserve the hexagon.
SWAP = permute(0, 1, 1, 0, 2, 2, 3, 3, 4, 4, 5, 5)

GSET = list(range(6))


def fmt_large_num(x):
    return re.subn(r'(?<=\d)(?=(\d{3})+$)', ',', str(x))[0]


def print_sgs_stats(grp):
    print(f"  group order = {fmt_large_num(grp.order())}")
    print(f"  strong generating set base = {grp.base()}")
    print(f"  strong generating set size = {len(grp.generators())}")


def print_performance_stats(grp):
    print(f"  took {fmt_large_num(grp.cfg.stats.products)} group products")
    print(f"  took {grp.cfg.stats.levels} stabilizer chain levels")


def main():
    print("""
We build a stabilizer chain for the dihedral group of order 12, acting on the
corners of a hexagon, and test a few permutations for membership.
""")

    d6 = Group(GSET, [T, R], Config())
    print_sgs_stats(d6)
    print_performance_stats(d6)

    for name, p in [('t', T), ('r t r', R.times(T).times(R)), ('swap', SWAP)]:
        print(f"  {name} = {p} is a member: {d6.is_member(p)}")

    print("""
Now we do the same with permutations that remember how they were calculated.
The 6 corners are generated by the transposition (0 1) and the rotation
(0 1 2 3 4 5), which generate the whole symmetric group. Stripping the
reflection t through the chain gives a word in both generators that equals t.
""")

    tagged = [SLPPermutation(Generator(0), SWAP), SLPPermutation(Generator(1), R)]
    s6 = Group(GSET, tagged, Config())
    print_sgs_stats(s6)
    print_performance_stats(s6)

    stripped = s6.strip(SLPPermutation(Identity(), T))
    word = stripped.transform(morphism(0, 't', 1, 'r')).inverse()
    print(f"  {stripped.permutation.inverse()} {word}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    main()
