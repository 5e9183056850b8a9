from shakesearch.snippet import trim_sentences


def test_drops_partial_sentences_at_both_ends():
    full = "entence. This is the second complete sentence. This is the third complete sentence. Thi"
    assert trim_sentences(full) == (
        "This is the second complete sentence. This is the third complete sentence."
    )


def test_single_separator_yields_empty():
    assert trim_sentences("only one sentence.") == ""
    assert trim_sentences("no separators at all") == ""


def test_whitespace_counts_as_separator_for_short_windows():
    assert trim_sentences("o be or no", cut_at_whitespace=False) == ""
    assert trim_sentences("o be or no", cut_at_whitespace=True) == "be or"


def test_line_break_marker_is_kept_verbatim():
    assert trim_sentences("ay, answer me<br>stand, and") == "answer me<br>stand,"
