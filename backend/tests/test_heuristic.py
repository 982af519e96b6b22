import math
from unittest.mock import patch

import pytest

from config.settings import HeuristicConfig
from core.generate.heuristic import HeuristicSummarizer, truncate_sentences
from core.generate.length_options import DETAILED, MEDIUM, SHORT, resolve_length


def test_resolve_length_defaults_to_medium():
    assert resolve_length("short") is SHORT
    assert resolve_length("detailed") is DETAILED
    assert resolve_length("medium") is MEDIUM
    assert resolve_length(None) is MEDIUM
    assert resolve_length("SHORT") is MEDIUM
    assert resolve_length("tiny") is MEDIUM


def test_length_profiles():
    assert (SHORT.fraction, SHORT.max_tokens, SHORT.instruction) == (0.2, 100, "in about 2-3 sentences")
    assert (MEDIUM.fraction, MEDIUM.max_tokens, MEDIUM.instruction) == (0.4, 150, "in about 4-5 sentences")
    assert (DETAILED.fraction, DETAILED.max_tokens, DETAILED.instruction) == (0.6, 300, "in a detailed paragraph")


def test_medium_keeps_two_of_five_sentences():
    assert truncate_sentences("A. B. C. D. E.", 0.4) == "A. B."


def test_final_sentence_gets_double_period():
    assert truncate_sentences("Just one sentence here.", 0.2) == "Just one sentence here.."
    # detailed on three fragments: floor(3 * 0.6) = 1
    assert truncate_sentences("First. Second. Third.", 0.6) == "First."


def test_at_least_one_sentence_is_kept():
    assert truncate_sentences("No delimiter in this text at all", 0.2) == "No delimiter in this text at all."


@pytest.mark.parametrize("profile", [SHORT, MEDIUM, DETAILED])
@pytest.mark.parametrize("count", [1, 2, 3, 5, 7, 10, 23])
def test_summary_length_formula(profile, count):
    fragments = [f"Sentence number {i}" for i in range(count)]
    text = ". ".join(fragments) + "."

    summary = truncate_sentences(text, profile.fraction)

    expected_length = max(1, math.floor(count * profile.fraction))
    parts = text.split(". ")
    assert summary == ". ".join(parts[:expected_length]) + "."


def test_summarizer_returns_summary_and_stats():
    summarizer = HeuristicSummarizer()
    text = "The cat sat. The dog ran. The bird flew. The fish swam. The end."

    result = summarizer.summarize(text, "medium")

    assert result.summary == "The cat sat. The dog ran."
    assert result.stats.original_word_count == 14
    assert result.stats.summary_word_count == 6
    assert result.stats.reduction == 57
    assert result.stats.time_saved == 0


def test_summarizer_is_deterministic():
    summarizer = HeuristicSummarizer()
    text = "Alpha beta. Gamma delta. Epsilon zeta. Eta theta."

    first = summarizer.summarize(text, "detailed")
    second = summarizer.summarize(text, "detailed")

    assert first.model_dump_json() == second.model_dump_json()


def test_simulated_delay():
    summarizer = HeuristicSummarizer(HeuristicConfig(simulated_delay_seconds=1.5))
    with patch("core.generate.heuristic.time.sleep") as mock_sleep:
        summarizer.summarize("Some text here. And more.", "short")
    mock_sleep.assert_called_once_with(1.5)
