from pydantic import BaseModel

class LengthProfile(BaseModel):
    name: str
    fraction: float          # share of sentences kept by the local heuristic
    max_tokens: int          # completion budget for the LLM
    instruction: str         # appended to the LLM user prompt

SHORT = LengthProfile(name="short", fraction=0.2, max_tokens=100, instruction="in about 2-3 sentences")
MEDIUM = LengthProfile(name="medium", fraction=0.4, max_tokens=150, instruction="in about 4-5 sentences")
DETAILED = LengthProfile(name="detailed", fraction=0.6, max_tokens=300, instruction="in a detailed paragraph")

def resolve_length(length: str | None) -> LengthProfile:
    """Maps a length option to its profile. Anything but short/detailed is medium."""
    if length == "short":
        return SHORT
    if length == "detailed":
        return DETAILED
    return MEDIUM
