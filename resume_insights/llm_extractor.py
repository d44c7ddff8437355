"""
LLM Extraction Module

Uses PhiData + OpenAI to turn raw resume text into a structured resume record.
Scoring and matching never call this module; they only consume its output.
"""

import json
import re
import logging
from typing import Dict, Any, Optional

from phi.agent import Agent
from phi.model.openai import OpenAIChat
from pydantic import ValidationError

from .models import ResumeRecord

logger = logging.getLogger(__name__)

LLM_CONFIG = {
    "temperature": 0,  # For maximum consistency
    "model": "gpt-4o",
    "max_retries": 3,
}

# Fields reported back as missing when the extractor leaves them empty
REQUIRED_FIELDS = {
    "basics.name": lambda r: bool(r.basics and r.basics.name),
    "basics.email": lambda r: bool(r.basics and r.basics.email),
    "education": lambda r: bool(r.education),
}


def get_model_config(model_name: str, temperature: float = 0) -> Dict[str, Any]:
    """
    Get model configuration with temperature support check.
    Some models don't support custom temperature.
    """
    config = {"id": model_name}

    models_without_temperature = ["o1", "o1-mini", "o1-preview", "gpt-5-mini", "gpt-5"]
    model_lower = model_name.lower()
    if not any(no_temp in model_lower for no_temp in models_without_temperature):
        config["temperature"] = temperature

    if "gpt-4" in model_lower:
        config["response_format"] = {"type": "json_object"}

    return config


def extract_json_from_response(text: str) -> Optional[Dict[str, Any]]:
    """Extract a JSON object from an LLM response, handling markdown fences."""
    if not text:
        return None

    fence = re.search(r'```(?:json)?\s*\n?(.*?)\n?```', text, re.DOTALL)
    if fence:
        text = fence.group(1).strip()

    try:
        parsed = json.loads(text)
        return parsed if isinstance(parsed, dict) else None
    except json.JSONDecodeError:
        pass

    # Fall back to the outermost brace pair
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        parsed = json.loads(text[start:end + 1])
        return parsed if isinstance(parsed, dict) else None
    except json.JSONDecodeError:
        return None


def build_resume_parser_agent(model_name: str = None) -> Agent:
    """Build PhiData agent for resume extraction."""
    model_name = model_name or LLM_CONFIG["model"]
    model_config = get_model_config(model_name, temperature=LLM_CONFIG["temperature"])

    return Agent(
        name="Resume Parser",
        role="Extract structured resume data",
        model=OpenAIChat(**model_config),
        instructions=[
            "Return ONLY a JSON object, no markdown or explanations.",
            "Keys: basics{name,email,phone,github,linkedin,portfolio},",
            "projects[]{name,description,highlights[],technologies[]},",
            "experience[]{company,position,responsibilities[],achievements[]},",
            "skills{programming_languages[],frameworks[],databases[],devops_tools[],other[]},",
            "education[]{institution,degree,achievements[],gpa},",
            "certifications[], extracurriculars[].",
            "Keep coursework lines verbatim in education achievements, e.g. 'Relevant Coursework: A, B'.",
            "Use empty strings, empty arrays or null for anything not present.",
        ],
        show_tool_calls=False,
        markdown=False,
    )


def response_text(response: Any) -> str:
    """Pull plain text out of a phi RunResponse (or anything printable)."""
    if hasattr(response, "content"):
        return str(response.content)
    if hasattr(response, "messages") and response.messages:
        last_msg = response.messages[-1]
        return str(last_msg.content if hasattr(last_msg, "content") else last_msg)
    return str(response)


def find_missing_fields(record: ResumeRecord) -> list:
    return [field for field, present in REQUIRED_FIELDS.items() if not present(record)]


def extract_resume_record(
    resume_text: str,
    model_name: str = None,
    max_retries: int = None,
    agent: Agent = None,
) -> Dict[str, Any]:
    """
    Extract a structured resume record from resume text.

    Args:
        resume_text: Full resume text
        model_name: Optional model name override
        max_retries: Optional retry count override
        agent: Optional prebuilt agent (anything with a run(prompt) method)

    Returns:
        {"details": resume record dict, "missing": [field paths left empty]}

    Raises:
        ValueError: If every attempt fails to produce a valid record
    """
    max_retries = max_retries or LLM_CONFIG["max_retries"]
    agent = agent or build_resume_parser_agent(model_name)
    prompt = f"Extract the following resume:\n\n{resume_text}"

    last_error: Optional[Exception] = None
    for attempt in range(max_retries):
        try:
            logger.info(f"Extraction attempt {attempt + 1}/{max_retries}")
            text = response_text(agent.run(prompt))
            logger.debug(f"Raw LLM response: {text[:500]}...")

            data = extract_json_from_response(text)
            if not data:
                raise ValueError("Could not extract valid JSON from LLM response")

            # Accept both a bare record and the {"details": ...} envelope
            record = ResumeRecord.model_validate(data.get("details", data))
            missing = find_missing_fields(record)
            if missing:
                logger.warning(f"Extracted resume is missing: {missing}")

            logger.info("Successfully extracted resume record")
            return {"details": record.model_dump(), "missing": missing}

        except (ValueError, ValidationError) as e:
            last_error = e
            logger.warning(f"Extraction attempt {attempt + 1} failed: {e}")

    raise ValueError(f"Failed to extract resume after {max_retries} attempts: {last_error}")
