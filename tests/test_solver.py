import pytest
from hanoi8pr import Puzzle, solve, moveCount, InvalidLevel, IllegalMove
from hanoi8pr.solver import Move, moveDisks


def test_one_disk():
    assert list(solve(1, 0, 2, 1)) == [(0, 2)]


def test_two_disks():
    assert list(solve(2, 0, 2, 1)) == [(0, 1), (0, 2), (1, 2)]


def test_three_disks():
    moves = list(solve(3, 0, 2, 1))
    assert len(moves) == 7
    assert moves[0] == (0, 2)
    assert moves[-1] == (0, 2)
    p = Puzzle(3)
    assert p.state == ([3, 2, 1], [], [])
    for m in moves: p.move(*m)
    assert p.state == ([], [], [3, 2, 1])


@pytest.mark.parametrize("n", range(1, 11))
def test_move_count(n):
    s = solve(n)
    assert len(s) == 2 ** n - 1
    assert sum(1 for m in s) == 2 ** n - 1
    assert moveCount(n) == 2 ** n - 1


@pytest.mark.parametrize("piles", [(0, 1, 2), (2, 0, 1), (1, 0, 2)])
def test_other_piles(piles):
    src, dst, aux = piles
    p = Puzzle(4)
    if src != 0:
        for m in solve(4, 0, src, 3 - src): p.move(*m)
    for m in solve(4, src, dst, aux): p.move(*m)
    assert p.isSolved(dst)


def test_restartable_and_deterministic():
    s = solve(5)
    first = list(s)
    assert list(s) == first
    assert list(solve(5)) == first


def test_lazy():
    it = iter(solve(40))
    assert next(it) == (0, 1)
    assert next(it) == (0, 2)


@pytest.mark.parametrize("n", [1200, 5001])
def test_deep_level_starts_immediately(n):
    it = iter(solve(n))
    first = (0, 2) if n % 2 else (0, 1)
    assert next(it) == first
    p = Puzzle(n)
    p.move(*first)
    for m in [next(it) for i in range(6)]: p.move(*m)
    assert p.moves == 7


def test_moves_are_named():
    m = next(iter(solve(1, 1, 0, 2)))
    assert isinstance(m, Move)
    assert (m.source, m.destination) == (1, 0)


def test_move_disks_generator():
    assert list(moveDisks(2, 0, 1, 2)) == [(0, 2), (0, 1), (2, 1)]


@pytest.mark.parametrize("n", [0, -1, 2.5, "3", None, True])
def test_invalid_level(n):
    with pytest.raises(InvalidLevel):
        solve(n)


@pytest.mark.parametrize("piles", [(0, 0, 1), (0, 2, 3), (-1, 1, 2)])
def test_bad_piles(piles):
    with pytest.raises(ValueError):
        solve(3, *piles)


@pytest.mark.parametrize("n", range(1, 8))
def test_every_move_is_legal(n):
    p = Puzzle(n)
    count = 0
    for state in solve(n).apply(p):
        count += 1
        for pile in state.piles:
            sizes = pile.sizes
            assert sizes == sorted(sizes, reverse=True)
            assert len(set(sizes)) == len(sizes)
        assert sum(len(pile) for pile in state.piles) == n
    assert count == 2 ** n - 1
    assert p.isSolved(2)
    assert p.moves == count


def test_apply_can_stop_early():
    p = Puzzle(4)
    gen = solve(4).apply(p)
    for i in range(5): next(gen)
    assert p.moves == 5
    assert not p.isSolved(2)
    assert sorted(sum(p.state, [])) == [1, 2, 3, 4]


def test_apply_to_wrong_state():
    p = Puzzle(3)
    p.move(0, 1)
    with pytest.raises(IllegalMove):
        list(solve(3).apply(p))
