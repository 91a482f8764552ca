import pytest

from textrecovery.word_prob import WordContextAnalyzer, WordProb

UINT64_MAX = (1 << 64) - 1


@pytest.fixture
def prob():
    return WordProb()


@pytest.fixture
def analyzer():
    return WordContextAnalyzer()


def test_word_prob_empty_has_nothing(prob):
    assert prob.has_before_word("cat") is False
    assert prob.has_after_word("cat") is False


def test_word_prob_add_default_count_is_one(prob):
    prob.add_before_word("the")
    prob.add_after_word("sat")
    assert prob.before_word_count("the") == 1
    assert prob.after_word_count("sat") == 1


def test_word_prob_before_and_after_are_separate(prob):
    prob.add_before_word("the", 5)
    assert prob.has_before_word("the") is True
    assert prob.has_after_word("the") is False


def test_word_prob_add_does_not_overwrite(prob):
    prob.add_before_word("the", 5)
    prob.add_before_word("the", 9)
    assert prob.before_word_count("the") == 5
    prob.add_after_word("ran", 7)
    prob.add_after_word("ran", 2)
    assert prob.after_word_count("ran") == 7


def test_word_prob_missing_count_raises(prob):
    with pytest.raises(KeyError):
        prob.before_word_count("missing")
    with pytest.raises(KeyError):
        prob.after_word_count("missing")


def test_word_prob_increase_adds_value(prob):
    prob.add_before_word("a", 4)
    prob.increase_before_word_count("a", 6)
    assert prob.before_word_count("a") == 4 + 6
    prob.add_after_word("b", 3)
    prob.increase_after_word_count("b")
    assert prob.after_word_count("b") == 3 + 1


def test_word_prob_increase_missing_does_not_add(prob):
    prob.increase_before_word_count("ghost", 3)
    prob.increase_after_word_count("ghost", 3)
    assert not prob.has_before_word("ghost")
    assert not prob.has_after_word("ghost")


def test_word_prob_counts_wrap_at_uint64(prob):
    prob.add_before_word("x", UINT64_MAX)
    prob.increase_before_word_count("x", 1)
    assert prob.before_word_count("x") == 0


def test_word_prob_negative_value_rejected(prob):
    with pytest.raises(ValueError):
        prob.add_before_word("x", -1)
    with pytest.raises(ValueError):
        prob.increase_after_word_count("x", -2)


def test_analyzer_add_word(analyzer):
    assert analyzer.has_word("cat") is False
    analyzer.add_word("cat")
    assert analyzer.has_word("cat") is True
    assert "cat" in analyzer


def test_analyzer_add_word_keeps_existing_counts(analyzer):
    analyzer.add_before_word("cat", "the", 3)
    analyzer.add_word("cat")
    assert analyzer.before_word_count("cat", "the") == 3


def test_analyzer_add_before_word_creates_word(analyzer):
    analyzer.add_before_word("cat", "the")
    assert analyzer.has_word("cat")
    assert analyzer.has_before_word("cat", "the")
    assert not analyzer.has_after_word("cat", "the")
    assert analyzer.before_word_count("cat", "the") == 1


def test_analyzer_add_after_word(analyzer):
    analyzer.add_after_word("cat", "sat", 4)
    assert analyzer.has_after_word("cat", "sat")
    assert analyzer.after_word_count("cat", "sat") == 4
    analyzer.add_after_word("cat", "sat", 10)
    assert analyzer.after_word_count("cat", "sat") == 4


def test_analyzer_has_checks_unknown_word(analyzer):
    assert analyzer.has_before_word("nope", "the") is False
    assert analyzer.has_after_word("nope", "the") is False


def test_analyzer_missing_counts_raise(analyzer):
    with pytest.raises(KeyError):
        analyzer.before_word_count("nope", "the")
    with pytest.raises(KeyError):
        analyzer.after_word_count("nope", "the")
    analyzer.add_word("cat")
    with pytest.raises(KeyError):
        analyzer.before_word_count("cat", "the")
    with pytest.raises(KeyError):
        analyzer.after_word_count("cat", "the")


def test_analyzer_increase_counts(analyzer):
    analyzer.add_before_word("cat", "the", 2)
    analyzer.add_after_word("cat", "sat", 5)
    analyzer.increase_before_word_count("cat", "the")
    analyzer.increase_after_word_count("cat", "sat", 10)
    assert analyzer.before_word_count("cat", "the") == 2 + 1
    assert analyzer.after_word_count("cat", "sat") == 5 + 10


def test_analyzer_increase_missing_is_noop(analyzer):
    analyzer.increase_before_word_count("cat", "the", 3)
    analyzer.increase_after_word_count("cat", "sat", 3)
    assert not analyzer.has_word("cat")
    analyzer.add_word("dog")
    analyzer.increase_before_word_count("dog", "a", 3)
    assert not analyzer.has_before_word("dog", "a")


def test_analyzer_words_are_independent(analyzer):
    analyzer.add_before_word("cat", "the", 7)
    analyzer.add_before_word("dog", "the", 2)
    analyzer.increase_before_word_count("cat", "the", 1)
    assert analyzer.before_word_count("dog", "the") == 2
    assert analyzer.before_word_count("cat", "the") == 7 + 1


def test_analyzer_negative_value_rejected(analyzer):
    with pytest.raises(ValueError):
        analyzer.add_after_word("cat", "sat", -5)
    assert not analyzer.has_word("cat")