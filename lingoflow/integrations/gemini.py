"""Gemini integration via the REST generateContent API."""
from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

from ..errors import GeminiError

LESSON_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "word": {"type": "STRING", "description": "The word in the target language"},
            "phonetic": {"type": "STRING", "description": "Phonetic transcription or Pinyin"},
            "meaning": {"type": "STRING", "description": "Definition in Vietnamese"},
            "part_of_speech": {"type": "STRING", "description": "Noun, Verb, Adjective, etc."},
            "example": {
                "type": "STRING",
                "description": "An example sentence in the target language",
            },
            "example_translation": {
                "type": "STRING",
                "description": "The Vietnamese translation of the example sentence",
            },
            "tags": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
                "description": "Related sub-topics",
            },
        },
        "required": [
            "word",
            "phonetic",
            "meaning",
            "part_of_speech",
            "example",
            "example_translation",
            "tags",
        ],
    },
}


@dataclass(frozen=True)
class GeminiSettings:
    api_key: str
    base_url: str
    lesson_model: str
    tts_model: str
    timeout_seconds: int = 0


def _normalize_base_url(base_url: str) -> str:
    normalized = (base_url or "").strip().rstrip("/")
    if not normalized:
        raise GeminiError("Gemini base URL is empty.")
    return normalized


def _request_timeout(timeout_seconds: object) -> float | None:
    """Seconds for urlopen, or None when the setting disables the timeout."""
    try:
        seconds = float(timeout_seconds)
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None


def _decode_envelope(raw: bytes) -> dict[str, Any]:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GeminiError("Gemini response is not valid UTF-8.") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise GeminiError("Gemini returned invalid JSON.") from exc


def _post_generate_content(
    *,
    base_url: str,
    api_key: str,
    model: str,
    timeout_seconds: int,
    payload: dict[str, object],
) -> dict[str, Any]:
    model_id = (model or "").strip()
    if not model_id:
        raise GeminiError("Gemini model name is empty.")
    endpoint = f"{_normalize_base_url(base_url)}/models/{model_id}:generateContent"
    http_request = urllib.request.Request(
        endpoint,
        data=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
        headers={
            "Content-Type": "application/json",
            "x-goog-api-key": (api_key or "").strip(),
        },
        method="POST",
    )
    timeout = _request_timeout(timeout_seconds)
    open_kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        with urllib.request.urlopen(http_request, **open_kwargs) as response:
            raw = response.read()
    except urllib.error.HTTPError as exc:
        detail = exc.read().decode("utf-8", errors="replace").strip()
        raise GeminiError(f"Gemini HTTP {exc.code}: {detail[:500] or 'No body'}") from exc
    except urllib.error.URLError as exc:
        raise GeminiError(f"Failed to reach Gemini endpoint: {endpoint}") from exc
    except TimeoutError as exc:
        raise GeminiError("Gemini request timed out.") from exc
    except http.client.HTTPException as exc:
        # Truncated or malformed HTTP responses, e.g. IncompleteRead.
        raise GeminiError(f"Gemini response was interrupted: {exc!r}") from exc
    except OSError as exc:
        raise GeminiError(f"Gemini connection error: {exc}") from exc
    return _decode_envelope(raw)


def _first_candidate_parts(data: Any) -> list[Any]:
    if not isinstance(data, dict):
        return []
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return []
    first = candidates[0]
    if not isinstance(first, dict):
        return []
    content = first.get("content")
    if not isinstance(content, dict):
        return []
    parts = content.get("parts")
    return parts if isinstance(parts, list) else []


def extract_response_text(data: Any) -> str:
    """Join the answer text parts of the first candidate.

    Parts flagged ``thought`` carry model reasoning, not the answer, and are
    left out. Returns an empty string when there is no answer text.
    """
    chunks: list[str] = []
    for part in _first_candidate_parts(data):
        if not isinstance(part, dict) or part.get("thought"):
            continue
        if isinstance(part.get("text"), str):
            chunks.append(part["text"])
    return "".join(chunks).strip()


def extract_inline_audio(data: Any) -> str | None:
    """Return the base64 payload of the first part's inline data, if present."""
    parts = _first_candidate_parts(data)
    if not parts or not isinstance(parts[0], dict):
        return None
    inline = parts[0].get("inlineData") or parts[0].get("inline_data")
    if not isinstance(inline, dict):
        return None
    payload = inline.get("data")
    if not isinstance(payload, str) or not payload:
        return None
    return payload


def generate_structured_text(settings: GeminiSettings, prompt: str) -> str:
    """Request schema-constrained JSON text for a lesson prompt."""
    payload = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": LESSON_RESPONSE_SCHEMA,
        },
    }
    response = _post_generate_content(
        base_url=settings.base_url,
        api_key=settings.api_key,
        model=settings.lesson_model,
        timeout_seconds=settings.timeout_seconds,
        payload=payload,
    )
    return extract_response_text(response)


def synthesize_speech(settings: GeminiSettings, text: str, voice_name: str) -> dict[str, Any]:
    """Request an audio-modality response and return the raw envelope."""
    payload = {
        "contents": [{"parts": [{"text": text}]}],
        "generationConfig": {
            "responseModalities": ["AUDIO"],
            "speechConfig": {
                "voiceConfig": {
                    "prebuiltVoiceConfig": {"voiceName": voice_name},
                },
            },
        },
    }
    return _post_generate_content(
        base_url=settings.base_url,
        api_key=settings.api_key,
        model=settings.tts_model,
        timeout_seconds=settings.timeout_seconds,
        payload=payload,
    )
