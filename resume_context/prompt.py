"""Build the briefing handed to the interview agent."""

from __future__ import annotations

import textwrap
from typing import List, Optional

from .heuristics import ExtractionConfig, extract_resume_sections

PREAMBLE = "You are conducting a professional job interview. Below is the candidate's resume information."

INTERVIEW_INSTRUCTIONS = textwrap.dedent(
    """
    ---

    INTERVIEW INSTRUCTIONS:
    - Conduct a professional and thorough job interview
    - Ask relevant questions about their experience, skills, and projects mentioned in the resume
    - Probe deeper into specific accomplishments and responsibilities
    - Ask behavioral questions related to their background
    - Assess their problem-solving abilities and technical knowledge
    - Maintain a friendly but professional tone
    - Listen carefully to their answers and ask follow-up questions
    - Be encouraging and help the candidate feel comfortable
    """
).strip()

MAX_SKILL_HIGHLIGHTS = 5
MAX_FOCUS_AREAS = 3


def format_resume_for_ai(
    resume_text: str,
    candidate_name: Optional[str] = None,
    config: Optional[ExtractionConfig] = None,
) -> str:
    """Combine the resume text with fixed interview instructions and highlights.

    The resume text is embedded verbatim and never truncated.
    """

    sections = extract_resume_sections(resume_text, config)

    blocks: List[str] = [PREAMBLE]
    if candidate_name:
        blocks.append(f"CANDIDATE NAME: {candidate_name}")
    blocks.append(f"RESUME CONTENT:\n{resume_text}")
    blocks.append(INTERVIEW_INSTRUCTIONS)

    highlights: List[str] = []
    if sections.skills:
        highlights.append(f"Key skills to explore: {', '.join(sections.skills[:MAX_SKILL_HIGHLIGHTS])}")
    if sections.experience:
        highlights.append(f"Focus areas: {', '.join(sections.experience[:MAX_FOCUS_AREAS])}")
    if highlights:
        blocks.append("\n".join(highlights))

    return "\n\n".join(blocks).strip()


__all__ = ["format_resume_for_ai", "PREAMBLE", "INTERVIEW_INSTRUCTIONS"]
