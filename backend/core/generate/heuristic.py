import math
import time
from config.settings import HeuristicConfig
from core.generate.length_options import LengthProfile
from core.generate.summarizer import Summarizer

SENTENCE_DELIMITER = ". "

def truncate_sentences(text: str, fraction: float) -> str:
    """
    Keeps the leading `fraction` of the ". "-delimited fragments (at least one),
    rejoins them and appends a period.
    The period is appended unconditionally, so a summary that reaches the
    final sentence ends in ".." when the text itself ends with a period.
    """
    sentences = text.split(SENTENCE_DELIMITER)
    summary_length = max(1, math.floor(len(sentences) * fraction))
    return SENTENCE_DELIMITER.join(sentences[:summary_length]) + "."

class HeuristicSummarizer(Summarizer):
    """Offline, deterministic summarizer: the first N sentences of the text."""
    name = "heuristic"

    def __init__(self, config: HeuristicConfig | None = None):
        self.config = config or HeuristicConfig()

    def generate_summary(self, text: str, profile: LengthProfile) -> str:
        if self.config.simulated_delay_seconds > 0:
            time.sleep(self.config.simulated_delay_seconds)
        return truncate_sentences(text, profile.fraction)
