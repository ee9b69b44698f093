"""Single-shot writing agents for marketing copy and code snippets."""

from ..models import CodeParams, TextParams
from .base import BaseAgent


class CopywriterAgent(BaseAgent[TextParams, str]):
    """Writes a short marketing paragraph for a topic, tone and audience."""

    @property
    def name(self) -> str:
        return "CopywriterAgent"

    @property
    def system_prompt(self) -> str:
        return (
            "You are a professional content writer specializing in marketing copy and engaging text.\n"
            "Generate compelling, well-structured text that matches the specified tone and audience.\n"
            "Keep the output between 150-200 words unless otherwise specified.\n"
            "Focus on clarity, impact, and engagement."
        )

    def run(self, input_data: TextParams) -> str:
        prompt = "\n".join([
            "Create marketing text with the following specifications:",
            f"Topic: {input_data.topic}",
            f"Tone: {input_data.tone}",
            f"Target Audience: {input_data.audience}",
            f"Goal: {input_data.goal}",
            "",
            "Generate a compelling paragraph that achieves the goal while maintaining the specified tone.",
        ])
        return self._create_message(prompt)


class CodeWriterAgent(BaseAgent[CodeParams, str]):
    """Writes a commented code snippet for a task in a given language."""

    @property
    def name(self) -> str:
        return "CodeWriterAgent"

    @property
    def system_prompt(self) -> str:
        return (
            "You are an expert programmer who writes clean, functional, well-documented code.\n"
            "Generate concise code snippets that perform the specified task correctly.\n"
            "Include helpful comments explaining key parts of the code.\n"
            "Follow best practices for the specified programming language."
        )

    def run(self, input_data: CodeParams) -> str:
        prompt = "\n".join([
            "Create a code snippet with these specifications:",
            f"Task: {input_data.task}",
            f"Language: {input_data.language}",
            f"Context: {input_data.context}",
            "",
            "Generate clean, functional code that accomplishes the task. "
            "Include brief inline comments for clarity.",
            "Keep the code concise but complete enough to be immediately useful.",
        ])
        return self._create_message(prompt)
