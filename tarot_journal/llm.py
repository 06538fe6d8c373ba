from __future__ import annotations

import logging
from typing import Optional

# pip install google-generativeai python-dotenv
import google.generativeai as genai

from .config import get_settings

logger = logging.getLogger(__name__)


def chat(
    prompt: str,
    model: Optional[str] = None,
    temperature: float = 0.8,
    system_prompt: Optional[str] = None,
) -> str:
    """
    Single-turn text generation with Gemini. Returns plain text joined from the
    candidate parts ("" when the response carries none, e.g. a blocked prompt).
    Raises if the key is missing or the API call fails.
    """
    settings = get_settings()
    if not settings.gemini_token:
        raise RuntimeError(
            "Missing GEMINI_TOKEN in environment. "
            "Create one in Google AI Studio and set it in your .env."
        )

    genai.configure(api_key=settings.gemini_token)
    model_name = model or settings.gemini_model
    gmodel = genai.GenerativeModel(model_name=model_name, system_instruction=system_prompt)

    logger.debug("Requesting narrative from %s (%d prompt chars)", model_name, len(prompt))
    resp = gmodel.generate_content(prompt, generation_config={"temperature": float(temperature)})

    # resp.text raises ValueError on an empty candidate list, so read the parts
    chunks = [
        part.text
        for cand in resp.candidates or []
        if cand.content is not None
        for part in cand.content.parts
        if getattr(part, "text", None)
    ]
    if not chunks:
        logger.warning("Model %s returned no text parts", model_name)
    return "\n".join(chunks).strip()
