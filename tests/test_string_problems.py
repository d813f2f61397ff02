import re
from itertools import permutations

import pytest

from algodrills.string_problems import (
    Trie,
    find_str_index,
    get_char_count,
    get_num,
    get_palindrome,
    is_trans_words,
    is_unique1,
    is_unique2,
    is_valid,
    lowest_string,
    match,
    max_unique_str,
    max_valid_str,
    min_contain_str_length,
    min_cut,
    min_distance,
    new_char_at,
    remove_k_zero,
    replace_str,
    str_num_sum,
    str_to_int32,
)


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


def test_is_trans_words():
    assert is_trans_words("listen", "silent")
    assert not is_trans_words("abc", "abd")
    assert not is_trans_words("abc", "abcc")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A1CD2E33", 1 + 2 + 33),
        ("A-1B--2C--D6E", -1 + 2 + 6),
        ("1-2", 1 - 2),
        ("12.5", 12 + 5),
        ("---7", -7),
        ("abc", 0),
    ],
)
def test_str_num_sum(text, expected):
    assert str_num_sum(text) == expected


def test_remove_k_zero():
    assert remove_k_zero("A00B", 2) == "AB"
    assert remove_k_zero("A0000B000", 3) == "A0000B000"[:-3]
    assert remove_k_zero("A00B", 0) == "A00B"


@pytest.mark.parametrize("text", ["123", "-45", "0", "2147483647", "-2147483648"])
def test_str_to_int32_valid(text):
    assert str_to_int32(text) == int(text)


@pytest.mark.parametrize("text", ["", "012", "A13", "1a", "-", "2147483648", "-2147483649"])
def test_str_to_int32_invalid(text):
    assert str_to_int32(text) == 0


def test_replace_str():
    assert replace_str("123abc", "abc", "4567") == "123" + "4567"
    assert replace_str("123abcabc", "abc", "X") == "123" + "X"
    assert replace_str("abc1abc", "abc", "X") == "X1X"


def test_replace_str_empty_source():
    with pytest.raises(ValueError):
        replace_str("abc", "", "x")


def test_get_char_count_example():
    assert get_char_count("aaabbadd") == "a3b2a1d2"
    assert get_char_count("") == ""


@pytest.mark.parametrize("text", ["aaabbadd", "z", "abcabc", "xxxxxxxxxxxxy"])
def test_get_char_count_round_trip(text):
    summary = get_char_count(text)
    decoded = "".join(ch * int(n) for ch, n in re.findall(r"(\D)(\d+)", summary))
    assert decoded == text


@pytest.mark.parametrize("items", [b"abc", b"abca", b"", list("hello"), list("world")])
def test_is_unique(items):
    expected = len(set(items)) == len(items)
    assert is_unique1(items) == expected
    assert is_unique2(items) == expected


def test_find_str_index_leftmost():
    arr = [None, "a", None, "a", None, "b", None, "c", ""]
    for target in ("a", "b", "c"):
        assert find_str_index(arr, target) == arr.index(target)
    assert find_str_index(arr, "d") == -1
    assert find_str_index([], "a") == -1


def test_min_distance():
    strs = ["a", "x", "b", "x", "x", "a"]
    assert min_distance(strs, "a", "b") == strs.index("b") - strs.index("a")
    assert min_distance(strs, "a", "q") == -1
    assert min_distance(strs, None, "a") == -1
    assert min_distance(strs, "a", "a") == 0


@pytest.mark.parametrize("text", ["AB", "ABC", "A1B21C", "racecar", "x", "abcdcbx"])
def test_get_palindrome_invariants(text):
    result = get_palindrome(text)
    assert result == result[::-1]
    assert _is_subsequence(text, result)


def test_get_palindrome_minimal():
    assert get_palindrome("racecar") == "racecar"
    assert len(get_palindrome("AB")) == len("AB") + 1
    assert get_palindrome("") == ""


def test_is_valid():
    assert is_valid("(()())")
    assert is_valid("")
    assert not is_valid("())(")
    assert not is_valid("(a)")


def test_max_valid_str():
    inner = "(()())"
    result = max_valid_str(")" + inner + "(")
    assert result == inner
    assert is_valid(max_valid_str("())()()("))
    assert max_valid_str("((((") == ""


def test_get_num_recurrence():
    assert get_num(0) == 0
    assert get_num(1) == 1
    assert get_num(2) == 2
    for n in range(3, 15):
        assert get_num(n) == get_num(n - 1) + get_num(n - 2)


@pytest.mark.parametrize("strs", [["de", "abc"], ["b", "ba"], ["c", "cb", "cba", "a"]])
def test_lowest_string_is_minimum(strs):
    best = min("".join(p) for p in permutations(strs)).upper()
    assert lowest_string(strs) == best


def test_max_unique_str():
    text = "abcabcbb"
    assert max_unique_str(text) == text[:3]
    other = "pwwkew"
    result = max_unique_str(other)
    assert result == other[2:5]
    assert len(set(result)) == len(result)
    assert max_unique_str("") == ""


@pytest.mark.parametrize(
    "k, expected",
    [(0, slice(0, 1)), (1, slice(1, 2)), (2, slice(2, 4)), (3, slice(2, 4)), (4, slice(4, 6)), (5, slice(4, 6))],
)
def test_new_char_at(k, expected):
    text = "kaCCBi"
    assert new_char_at(text, k) == text[expected]


def test_new_char_at_out_of_range():
    assert new_char_at("kaCCBi", 6) == ""
    assert new_char_at("kaCCBi", -1) == ""


def test_min_contain_str_length():
    assert min_contain_str_length("abcde", "ac") == len("abc")
    assert min_contain_str_length("adabbca", "acb") == len("bca")
    assert min_contain_str_length("12345", "344") == 0
    assert min_contain_str_length("ab", "abc") == 0


def test_min_cut():
    assert min_cut("ABA") == 0
    assert min_cut("ACDCDCDAD") == len(["A", "CDCDC", "DAD"]) - 1
    for text in ("abc", "aab", "xyzzy"):
        assert min_cut(text) <= len(text) - 1
        assert min_cut(text + text[::-1]) == 0


@pytest.mark.parametrize(
    "text, exp",
    [
        ("abc", "abc"),
        ("abcd", ".*"),
        ("", "..*"),
        ("abc", "a.c"),
        ("aab", "c*a*b"),
        ("mississippi", "mis*is*p*."),
        ("mississippi", "mis*is*ip*."),
        ("ab", "a"),
    ],
)
def test_match_agrees_with_re(text, exp):
    assert match(text, exp) == (re.fullmatch(exp, text) is not None)


def test_match_rejects_invalid_input():
    assert not match("a.", "a.")
    assert not match("a", "*a")
    assert not match("aa", "a**")


def test_trie_operations():
    trie = Trie()
    for word in ("abc", "abd", "abc", "b"):
        trie.insert(word)
    assert trie.search("abc")
    assert not trie.search("ab")
    assert trie.prefix_number("ab") == 3
    assert trie.prefix_number("") == 4
    trie.delete("abc")
    assert trie.search("abc")
    assert trie.prefix_number("abc") == 1
    trie.delete("abc")
    assert not trie.search("abc")
    assert trie.prefix_number("abc") == 0
    assert trie.search("abd")


def test_trie_delete_absent_word_keeps_counts():
    trie = Trie()
    trie.insert("word")
    trie.delete("wor")
    assert trie.prefix_number("w") == 1
    assert trie.search("word")