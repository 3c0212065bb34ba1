"""
Tests for the Chopsticks rules and the symmetric pair table.
"""

import pytest

from games.chopsticks import (
    DEAD, INITIAL_STATE, ChopsticksGame, Perspective, canonical, get_successors, is_terminal, swap,
)
from models.symmetric_table import SymmetricPairTable


def test_initial_state_successors():
    """Transfers from the opening collapse to one state, the 2 -> (0, 2) split is also legal."""
    print("Testing successors of the initial state...")

    successors = get_successors(INITIAL_STATE)
    assert successors == [((1, 1), (2, 1)), ((0, 2), (1, 1))], successors

    transfers = [s for s in successors if s[0] == (1, 1)]
    assert transfers == [((1, 1), (2, 1))]
    # (1, 1) itself is never produced by a split
    assert all(s[0] != (1, 1) for s in successors if s not in transfers)

    print("✓ Initial state successor tests passed")


def test_dead_hand_cannot_be_tapped():
    print("\nTesting transfers onto a dead hand...")

    successors = get_successors(((4, 4), (1, 0)))
    # 4 + 1 = 5 resets to 0, the dead away hand is never targeted, 8 -> (4, 4) is a no-op
    assert successors == [((4, 4), (0, 0))], successors

    print("✓ Dead hand tests passed")


def test_reset_is_ceiling_to_zero():
    print("\nTesting the over-4 reset rule...")

    successors = get_successors(((4, 3), (4, 1)))
    # 4 + 4 = 8 and 4 + 3 = 7 both reset to 0, not 3 and 2
    assert successors == [((4, 3), (0, 1)), ((4, 3), (4, 0)), ((4, 3), (4, 4))], successors
    for _, away in successors:
        assert all(0 <= count <= 4 for count in away)

    print("✓ Reset rule tests passed")


def test_redistribution():
    print("\nTesting redistribution moves...")

    # One dead hand: split 3 as (1, 2), (0, 3) reproduces the current hands
    assert get_successors(((3, 0), (1, 1))) == [((3, 0), (4, 1)), ((1, 2), (1, 1))]

    # 4 may be split onto a dead hand, (2, 2) keeps nothing to skip but itself
    home_splits = [s[0] for s in get_successors(((2, 2), (3, 3))) if s[1] == (3, 3)]
    assert home_splits == [(0, 4), (1, 3)]

    # 8 fingers can only be (4, 4)
    assert all(s[0] == (4, 4) for s in get_successors(((4, 4), (2, 1))))

    print("✓ Redistribution tests passed")


def test_no_legal_move():
    print("\nTesting states without moves...")

    assert get_successors(((0, 0), (2, 3))) == []
    assert get_successors((DEAD, DEAD)) == []

    print("✓ No legal move tests passed")


def test_successors_are_distinct_up_to_hand_order():
    print("\nTesting successor uniqueness over every state...")

    for h0 in range(5):
        for h1 in range(5):
            for a0 in range(5):
                for a1 in range(5):
                    state = ((h0, h1), (a0, a1))
                    successors = get_successors(state)
                    keys = [canonical(s) for s in successors]
                    assert len(keys) == len(set(keys)), state
                    for home, away in successors:
                        assert ChopsticksGame.is_valid((home, away))
                        # exactly one side changes per ply
                        assert home == state[0] or away == state[1]

    print("✓ Uniqueness tests passed")


def test_terminal_and_winner():
    print("\nTesting terminal detection...")

    assert not is_terminal(INITIAL_STATE)
    assert is_terminal(((2, 1), DEAD))
    assert ChopsticksGame.winner(((2, 1), DEAD)) is Perspective.HOME
    assert ChopsticksGame.winner((DEAD, (0, 3))) is Perspective.AWAY
    assert ChopsticksGame.winner(((1, 0), (0, 1))) is None
    with pytest.raises(ValueError):
        ChopsticksGame.winner((DEAD, DEAD))

    print("✓ Terminal tests passed")


def test_perspective():
    state = ((1, 2), (3, 4))
    assert swap(state) == ((3, 4), (1, 2))
    assert Perspective.HOME.orient(state) == state
    assert Perspective.AWAY.orient(Perspective.AWAY.orient(state)) == state


def test_symmetric_table_generation():
    print("\nTesting SymmetricPairTable construction...")

    calls = []

    def new_element(i, j):
        calls.append((i, j))
        return i * 10 + j

    table = SymmetricPairTable(5, new_element)
    assert len(calls) == 15
    assert all(i >= j for i, j in calls)
    assert len(table) == 5
    assert table[3, 1] == 31
    assert table[1, 3] == 31
    assert [key for key, _ in table.cells()] == calls
    assert table.to_list()[2] == [20, 21, 22]
    assert repr(table).startswith("SymmetricPairTable([[0], [10, 11]")

    print("✓ Construction tests passed")


def test_symmetric_table_invariant():
    print("\nTesting SymmetricPairTable symmetry...")

    table = SymmetricPairTable(5, lambda i, j: [i, j])
    for i in range(5):
        for j in range(5):
            assert table[i, j] is table[j, i]

    table[0, 4] = "written"
    assert table[4, 0] == "written"
    table[2, 2] = 7
    assert table[2, 2] == 7

    nested = SymmetricPairTable(3, lambda i, j: SymmetricPairTable(3, lambda k, l: (i, j, k, l)))
    for i in range(3):
        for j in range(3):
            for k in range(3):
                for l in range(3):
                    assert nested[i, j][k, l] == nested[j, i][l, k]

    print("✓ Symmetry tests passed")


def test_symmetric_table_out_of_range():
    table = SymmetricPairTable(5, lambda i, j: 0)
    with pytest.raises(IndexError):
        table[5, 0]
    with pytest.raises(IndexError):
        table[0, -1]
    with pytest.raises(IndexError):
        table[-1, 2] = 1


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("Running Chopsticks Rule Tests")
    print("=" * 60)

    try:
        test_initial_state_successors()
        test_dead_hand_cannot_be_tapped()
        test_reset_is_ceiling_to_zero()
        test_redistribution()
        test_no_legal_move()
        test_successors_are_distinct_up_to_hand_order()
        test_terminal_and_winner()
        test_perspective()
        test_symmetric_table_generation()
        test_symmetric_table_invariant()
        test_symmetric_table_out_of_range()

        print("\n" + "=" * 60)
        print("All tests passed! ✓")
        print("=" * 60)
        return True

    except Exception as e:
        print(f"\n✗ Test failed with error: {e}")
        import traceback
        traceback.print_exc()
        return False


if __name__ == "__main__":
    success = run_all_tests()
    exit(0 if success else 1)
