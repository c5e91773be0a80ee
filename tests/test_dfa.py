from fuzzycoll.dfa import Dfa


def ab_dfa():
    return Dfa(
        start_id=0,
        final_ids={2},
        transitions={0: {"a": 1}, 1: {"b": 2}},
        any_transitions={},
    )


def single_char_dfa():
    return Dfa(
        start_id=0,
        final_ids={1},
        transitions={0: {"a": 1}},
        any_transitions={0: 1},
    )


def test_sorted_chars_built_from_transitions():
    dfa = Dfa(0, {1}, {0: {"c": 1, "a": 1, "b": 1}}, {})
    assert dfa.sorted_chars == {0: ["a", "b", "c"]}


def test_accepted_string_is_returned_unchanged():
    assert ab_dfa().next_valid_string("ab") == "ab"


def test_search_from_nul_finds_smallest():
    assert ab_dfa().next_valid_string("\0") == "ab"


def test_search_skips_forward():
    assert ab_dfa().next_valid_string("aa") == "ab"


def test_nothing_after_last_accepted():
    assert ab_dfa().next_valid_string("b") is None
    assert ab_dfa().next_valid_string("abc") is None


def test_any_transition_accepts_arbitrary_char():
    dfa = single_char_dfa()
    assert dfa.next_valid_string("c") == "c"
    assert dfa.next_valid_string("a") == "a"


def test_any_transition_advances_to_next_char():
    assert single_char_dfa().next_valid_string("cc") == "d"


def test_results_are_not_smaller_than_input():
    dfa = single_char_dfa()
    for word in ["", "a", "ab", "zz", "\0"]:
        found = dfa.next_valid_string(word)
        assert found >= word
        assert dfa.next_valid_string(found) == found


def test_equality_of_identical_automata():
    assert ab_dfa() == ab_dfa()
    assert ab_dfa() != single_char_dfa()