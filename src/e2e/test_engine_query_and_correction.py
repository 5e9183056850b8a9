import pytest
from shakesearch.engine import Engine, build_message, parse_window_size
from shakesearch.loader import build_corpus
from shakesearch.provenance import attribution
from shakesearch.search import find_matches
from shakesearch.snippet import extract_snippet


class RecordingCorrector:
    def __init__(self, answer=None, error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    def __call__(self, query, api_key):
        self.calls.append((query, api_key))
        if self.error:
            raise self.error
        return self.answer


def test_found_query_message_and_attribution(works):
    resp = Engine(works).query("question", window_size=100)
    assert resp.query == "question"
    assert resp.match_whole_word is False
    assert resp.message == 'You searched for "question". The search returned a total of 1 result.'
    assert resp.results[0].attribution == "THE TRAGEDY OF HAMLET, PRINCE OF DENMARK - ACT III"


def test_empty_query_is_a_client_error(works):
    with pytest.raises(ValueError):
        Engine(works).query("")


def test_correction_reruns_search(works):
    fix = RecordingCorrector(answer="to be, or not")
    resp = Engine(works, corrector=fix).query("tbe or not", window_size=100, api_key="sk-test")
    assert fix.calls == [("tbe or not", "sk-test")]
    assert resp.query == "to be, or not"
    assert len(resp.results) == 1
    assert resp.message == (
        'Your search was corrected to "to be, or not". The search returned a total of 1 result.'
    )


def test_no_key_means_no_correction(works):
    fix = RecordingCorrector(answer="to be, or not")
    resp = Engine(works, corrector=fix).query("tbe or not")
    assert fix.calls == []
    assert resp.results == []
    assert resp.message == (
        'You searched for "tbe or not". The search returned no results. '
        "Please try with another sentence or word."
    )


def test_results_found_skip_correction(works):
    fix = RecordingCorrector(answer="whatever")
    Engine(works, corrector=fix).query("Castle", api_key="sk-test")
    assert fix.calls == []


@pytest.mark.parametrize("fix", [
    RecordingCorrector(answer=None),
    RecordingCorrector(answer=""),
    RecordingCorrector(answer="tbe or not"),
    RecordingCorrector(error=RuntimeError("service down")),
])
def test_failed_correction_degrades_to_empty_result(works, fix):
    resp = Engine(works, corrector=fix).query("tbe or not", api_key="sk-test")
    assert resp.query == "tbe or not"
    assert resp.results == []
    assert resp.message.startswith('You searched for "tbe or not".')


def test_window_size_parsing_and_defaults(works):
    assert parse_window_size(None) == 500
    assert parse_window_size("abc") == 500
    assert parse_window_size("") == 500
    assert parse_window_size("50") == 50
    assert parse_window_size(7) == 7

    eng = Engine(works)
    assert eng.query("Castle", window_size=-10).results == eng.query("Castle").results


def test_message_pluralisation():
    assert build_message("x", 2).endswith("a total of 2 results.")
    assert build_message("x", 1).endswith("a total of 1 result.")
    assert build_message("x", 0, corrected="y").startswith('Your search was corrected to "y".')


@pytest.mark.e2e
def test_every_present_query_returns_clean_snippets(works):
    eng = Engine(works)
    for q in ("castle", "BERNARDO", "nobler", "the", "Contents"):
        results = eng.search(q, 80)
        assert results, q
        for r in results:
            assert r.text
            assert "\r" not in r.text and "\n" not in r.text


@pytest.mark.e2e
def test_repeated_queries_are_identical(works_file):
    eng = Engine.from_file(works_file, corrector=None)
    first = eng.query("the", window_size=60, whole_word=True).to_dict()
    again = eng.query("the", window_size=60, whole_word=True).to_dict()
    assert first == again


@pytest.mark.e2e
def test_single_letter_query_attributes_every_match(works):
    # many works, one very common letter
    corpus = build_corpus(works.text * 40)
    results = Engine(corpus).search("e", 50)
    kept = [i for i in find_matches(corpus, "e") if extract_snippet(corpus, i, 50)]
    assert len(kept) > 500
    assert [r.attribution for r in results] == [attribution(corpus, i) for i in kept]
