from core.generate.length_options import LengthProfile

class PromptBuilder:
    @staticmethod
    def build_summarization_prompt(text: str, profile: LengthProfile, system_prompt: str) -> list[dict]:
        """
        Builds the system + user message pair asking for a summary of the
        given length.
        """
        user_prompt = f"Please summarize the following text {profile.instruction}:\n\n{text}"

        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ]
