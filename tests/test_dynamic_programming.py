import pytest

from algodrills.dynamic_programming import (
    coin_changes1,
    coin_changes2,
    common_sub_seq,
    convert_count,
    edit_distance,
    fibonacci_dp,
    fibonacci_matrix,
    fibonacci_recursion,
    get_init_health,
    hanoi_moves,
    hanoi_step,
    jump_count,
    longest_consecutive,
    longest_increasing_subsequence,
    matrix_power,
    min_path_sum,
    multi_matrix,
    n_queen,
    winner_score,
)


def _is_subsequence(sub, text):
    it = iter(text)
    return all(ch in it for ch in sub)


@pytest.mark.parametrize("n", range(0, 20))
def test_fibonacci_methods_agree(n):
    assert fibonacci_dp(n) == fibonacci_matrix(n) == fibonacci_recursion(n)


def test_fibonacci_recurrence():
    assert fibonacci_dp(0) == 0
    assert fibonacci_dp(1) == 1
    for n in range(2, 60):
        assert fibonacci_matrix(n) == fibonacci_matrix(n - 1) + fibonacci_matrix(n - 2)


def test_matrix_power_identity_and_product():
    base = [[2, 3], [1, 4]]
    assert matrix_power(base, 0) == [[1, 0], [0, 1]]
    assert matrix_power(base, 1) == base
    assert matrix_power(base, 3) == multi_matrix(multi_matrix(base, base), base)


def test_multi_matrix_dimension_mismatch():
    with pytest.raises(ValueError):
        multi_matrix([[1, 2]], [[1, 2]])


def test_min_path_sum_single_row_and_ones():
    assert min_path_sum([[4, 5, 6]]) == sum([4, 5, 6])
    assert min_path_sum([[1] * 5 for _ in range(3)]) == 5 + 3 - 1
    with pytest.raises(ValueError):
        min_path_sum([])


def test_coin_changes1():
    assert coin_changes1([3], 9) == 3
    assert coin_changes1([2], 3) == -1
    assert coin_changes1([1, 5], 0) == 0
    assert coin_changes1([1], 17) == 17


def test_coin_changes2():
    assert coin_changes2([1], 5) == 1
    assert coin_changes2([3], 0) == 1
    for aim in range(20):
        assert coin_changes2([1, 2], aim) == aim // 2 + 1


def test_longest_increasing_subsequence():
    assert longest_increasing_subsequence([2, 1, 5, 3, 6, 4, 8, 9, 7]) == [1, 3, 4, 8, 9]
    assert longest_increasing_subsequence([]) == []
    result = longest_increasing_subsequence([5, 4, 3])
    assert len(result) == 1


@pytest.mark.parametrize("n", range(1, 6))
def test_hanoi_moves_are_valid_and_step_matches(n):
    moves = hanoi_moves(n, 1, 2, 3)
    assert len(moves) == 2**n - 1
    pegs = [1] * n
    assert hanoi_step(pegs) == 0
    for index, (src, dst) in enumerate(moves, start=1):
        disk = pegs.index(src)
        assert all(p != dst for p in pegs[:disk])
        pegs[disk] = dst
        assert hanoi_step(pegs) == index
    assert pegs == [3] * n


def test_hanoi_step_invalid():
    assert hanoi_step([]) == -1
    assert hanoi_step([2]) == -1
    with pytest.raises(ValueError):
        hanoi_step([4])


def test_common_sub_seq():
    assert common_sub_seq("abc", "abc") == "abc"
    assert common_sub_seq("abc", "xyz") == ""
    a, b = "1A2C3D4B56", "B1D23CA45B6A"
    result = common_sub_seq(a, b)
    assert _is_subsequence(result, a)
    assert _is_subsequence(result, b)
    assert len(result) >= len(common_sub_seq(b, a)) - 0 and len(result) == len(common_sub_seq(b, a))


def test_edit_distance():
    assert edit_distance("abc", "abc", 5, 3, 2) == 0
    assert edit_distance("abc", "adc", 5, 3, 2) == 2
    assert edit_distance("ab", "b", 5, 3, 2) == 3
    assert edit_distance("", "abc", 5, 3, 2) == 3 * 5
    assert edit_distance("abc", "", 5, 3, 2) == 3 * 3


def test_get_init_health():
    assert get_init_health([[-2, -3, 3], [-5, -10, 1], [0, 30, -5]]) == 7
    assert get_init_health([[5]]) == 1
    assert get_init_health([[-5]]) == 6
    with pytest.raises(ValueError):
        get_init_health([[]])


def test_convert_count():
    assert convert_count("") == 0
    assert convert_count("0") == 0
    assert convert_count("30") == 0
    assert convert_count("10") == 1
    assert convert_count("27") == 1
    assert convert_count("12") == 2
    for n in range(1, 15):
        assert convert_count("1" * n) == fibonacci_dp(n + 1)
    with pytest.raises(ValueError):
        convert_count("1a")


def test_winner_score():
    assert winner_score([]) == 0
    assert winner_score([5]) == 5
    assert winner_score([1, 2]) == 2
    assert winner_score([1, 100, 2]) == 100
    cards = [4, 7, 1, 9, 3, 8]
    assert 2 * winner_score(cards) >= sum(cards)


def test_jump_count():
    assert jump_count([]) == 0
    assert jump_count([5]) == 0
    for n in range(1, 10):
        assert jump_count([1] * n) == n - 1
    assert jump_count([9, 0, 0, 0, 0]) == 1


def test_longest_consecutive():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([]) == 0
    assert longest_consecutive([5, 5, 5]) == 1
    assert longest_consecutive(list(range(10, 0, -1))) == 10


def test_n_queen():
    assert n_queen(1) == 1
    assert n_queen(2) == 0
    assert n_queen(3) == 0
    assert n_queen(8) == 92
    with pytest.raises(ValueError):
        n_queen(-1)