"""Optional AI summary of a note.

Uses the OpenAI chat API when a key is configured; otherwise, or on any
API error, returns a fixed Turkish fallback message. Never raises.
"""

from __future__ import annotations

import logging
from typing import Optional

from common.config import load_settings

logger = logging.getLogger(__name__)

MISSING_KEY_TEXT = "API Key eksik. Özetleme yapılamadı."
SERVICE_ERROR_TEXT = "Yapay zeka servisine ulaşırken bir hata oluştu."
EMPTY_TEXT = "Özet oluşturulamadı."

PROMPT = (
    "Aşağıdaki öğrenci notunu akademik ve öz bir dille, madde işaretleri "
    "kullanarak 3 cümlede özetle:\n\n\"{content}\""
)


def summarize_note(content: str, api_key: Optional[str] = None, model: Optional[str] = None) -> str:
    settings = load_settings()
    api_key = api_key or settings.openai_api_key
    model = model or settings.summary_model
    if not api_key:
        logger.warning("OPENAI_API_KEY not set; skipping summary")
        return MISSING_KEY_TEXT
    try:
        from openai import OpenAI  # OpenAI v1

        client = OpenAI(api_key=api_key)
        resp = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": PROMPT.format(content=content)}],
            temperature=0.2,
            max_tokens=300,
        )
        out = (resp.choices[0].message.content or "").strip()
    except Exception:
        logger.exception("summary request failed")
        return SERVICE_ERROR_TEXT
    return out or EMPTY_TEXT
