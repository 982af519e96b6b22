import math
from models.summary import SummaryStats

WORDS_PER_MINUTE = 200

def count_words(text: str) -> int:
    return len(text.split())

def _round_half_up(value: float) -> int:
    # Same tie-breaking as the browser client (Math.round), not banker's rounding
    return int(math.floor(value + 0.5))

def compute_stats(text: str, summary: str) -> SummaryStats:
    """
    Word-count statistics shared by every summarization strategy.
    reduction = round(100 * (1 - summary_words / original_words))
    time_saved = round((original_words - summary_words) / 200), in minutes.
    """
    original_word_count = count_words(text)
    summary_word_count = count_words(summary)

    if original_word_count == 0:
        reduction = 0
    else:
        reduction = _round_half_up(100 * (1 - summary_word_count / original_word_count))
    time_saved = _round_half_up((original_word_count - summary_word_count) / WORDS_PER_MINUTE)

    return SummaryStats(
        reduction=reduction,
        time_saved=time_saved,
        original_word_count=original_word_count,
        summary_word_count=summary_word_count
    )
