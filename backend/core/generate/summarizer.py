import logging
from abc import ABC, abstractmethod
from config.settings import AppSettings, LLMConfig
from core.generate.length_options import LengthProfile, resolve_length
from core.generate.llm_client import LLMClient
from core.generate.prompt_builder import PromptBuilder
from core.generate.stats import compute_stats
from models.summary import SummarizeResponse

logger = logging.getLogger(__name__)

class Summarizer(ABC):
    """
    Summarization strategy. Subclasses only produce the summary text;
    length resolution and statistics are shared.
    Core logic only (No FastAPI).
    """
    name = "base"

    def summarize(self, text: str, length: str | None) -> SummarizeResponse:
        profile = resolve_length(length)
        logger.info(f"Summarizing {len(text)} chars with strategy={self.name} length={profile.name}")

        summary = self.generate_summary(text, profile)
        stats = compute_stats(text, summary)

        logger.info(
            f"Summary ready: {stats.original_word_count} -> {stats.summary_word_count} words "
            f"({stats.reduction}% reduction)"
        )
        return SummarizeResponse(summary=summary, stats=stats)

    @abstractmethod
    def generate_summary(self, text: str, profile: LengthProfile) -> str:
        pass

class LLMSummarizer(Summarizer):
    """Delegates summarization to the chat-completion API."""
    name = "llm"

    def __init__(self, llm: LLMClient, config: LLMConfig):
        self.llm = llm
        self.config = config

    def generate_summary(self, text: str, profile: LengthProfile) -> str:
        messages = PromptBuilder.build_summarization_prompt(text, profile, self.config.system_prompt)
        # SummarizationError propagates to the route untouched
        output = self.llm.generate(messages, max_tokens=profile.max_tokens)
        return output.strip()

def build_summarizer(settings: AppSettings) -> Summarizer:
    """Selects the summarization strategy once, at startup."""
    # Imported here to avoid a cycle: heuristic subclasses Summarizer
    from core.generate.heuristic import HeuristicSummarizer

    strategy = settings.summarizer_strategy.lower()
    if strategy == "heuristic":
        return HeuristicSummarizer(settings.heuristic)
    if strategy == "llm":
        return LLMSummarizer(LLMClient(settings), settings.llm)
    raise ValueError(f"Unknown summarizer strategy: {settings.summarizer_strategy!r}")
