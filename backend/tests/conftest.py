import os
import sys

import pytest

# Add backend to sys.path so tests run without installing the package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import AppSettings, HeuristicConfig, LLMConfig, APIConfig


@pytest.fixture
def heuristic_settings():
    return AppSettings(
        summarizer_strategy="heuristic",
        heuristic=HeuristicConfig(),
        api=APIConfig(),
        _env_file=None
    )


@pytest.fixture
def llm_settings():
    return AppSettings(
        summarizer_strategy="llm",
        openai_api_key="sk-test",
        openai_api_url="https://llm.example.test/v1/chat/completions",
        openai_timeout=5.0,
        llm=LLMConfig(),
        _env_file=None
    )
