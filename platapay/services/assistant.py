# platapay/services/assistant.py
"""
Form assistant: chat completions (Groq), voice listing and speech (ElevenLabs).

These are thin proxies. Upstream failures are logged with detail here and
reported to callers with a generic message.
"""

import requests
from flask import current_app
from openai import OpenAI, OpenAIError

ASSISTANT_SYSTEM_PROMPT = """
You are PlataPay's AI assistant helping users fill out the agent application form.
Be concise, helpful, and friendly. Focus on guiding users through the form fields.
For personal information, explain why it's needed but never insist if users are hesitant.
If users ask questions unrelated to the form or PlataPay services, politely redirect them.
Speak in simple, clear language and avoid technical jargon.
""".strip()

CHAT_ROLES = ('user', 'assistant')

TTS_MODEL_ID = 'eleven_multilingual_v2'
TTS_VOICE_SETTINGS = {
    "stability": 0.5,
    "similarity_boost": 0.75,
    "style": 0.0,
    "use_speaker_boost": True,
}


def _normalize_messages(messages):
    """Keeps only {role, content} pairs with a known role and text content."""
    normalized = []
    for message in messages:
        if not isinstance(message, dict):
            continue
        role = message.get('role')
        content = message.get('content')
        if role in CHAT_ROLES and isinstance(content, str) and content.strip():
            normalized.append({"role": role, "content": content})
    return normalized


def _chat_client():
    return OpenAI(
        api_key=current_app.config['GROQ_API_KEY'],
        base_url=current_app.config['GROQ_BASE_URL'],
        timeout=current_app.config['UPSTREAM_TIMEOUT'],
    )


def generate_chat_response(messages):
    """
    Sends the conversation to the language model and returns its reply.

    Returns:
        dict: {"success": True, "response": str}, or (error_dict, status).
    """
    if not isinstance(messages, list) or not messages:
        return {"success": False, "error": "Messages are required and must be an array"}, 400

    conversation = _normalize_messages(messages)
    if not conversation:
        return {"success": False, "error": "Messages must contain at least one user or assistant message"}, 400

    if not current_app.config.get('GROQ_API_KEY'):
        current_app.logger.error("GROQ_API_KEY is not configured")
        return {"success": False, "error": "Failed to generate response. Please try again."}, 500

    try:
        completion = _chat_client().chat.completions.create(
            model=current_app.config['GROQ_MODEL'],
            messages=[{"role": "system", "content": ASSISTANT_SYSTEM_PROMPT}] + conversation,
        )
    except OpenAIError as e:
        current_app.logger.error(f"Error generating AI response: {str(e)}")
        return {"success": False, "error": "Failed to generate response. Please try again."}, 500

    if not completion.choices:
        current_app.logger.error("AI response contained no choices")
        return {"success": False, "error": "Failed to generate response. Please try again."}, 500

    text = (completion.choices[0].message.content or '').strip()
    return {"success": True, "response": text}


def list_voices():
    """
    Fetches the voices available to the configured ElevenLabs account.

    Returns:
        dict: {"success": True, "voices": [...]}, or (error_dict, 500).
    """
    api_key = current_app.config.get('ELEVENLABS_API_KEY')
    if not api_key:
        current_app.logger.error("ELEVENLABS_API_KEY is not configured")
        return {"success": False, "error": "Failed to fetch voices"}, 500

    url = f"{current_app.config['ELEVENLABS_BASE_URL'].rstrip('/')}/v1/voices"
    try:
        response = requests.get(
            url,
            headers={"xi-api-key": api_key},
            timeout=current_app.config['UPSTREAM_TIMEOUT'],
        )
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        current_app.logger.error(f"ElevenLabs voices request failed: {str(e)}")
        return {"success": False, "error": "Failed to fetch voices"}, 500
    except ValueError:
        current_app.logger.error("ElevenLabs voices response was not valid JSON")
        return {"success": False, "error": "Failed to fetch voices"}, 500

    voices = payload.get('voices') if isinstance(payload, dict) else None
    if not isinstance(voices, list):
        current_app.logger.error("ElevenLabs voices response had an unexpected shape")
        return {"success": False, "error": "Failed to fetch voices"}, 500

    return {"success": True, "voices": voices}


def text_to_speech(text, voice_id=None):
    """
    Starts an ElevenLabs synthesis request for the given text.

    Args:
        text (str): Text to speak.
        voice_id (str, optional): Voice to use. Defaults to ELEVENLABS_VOICE_ID.

    Returns:
        requests.Response: The open, streaming upstream response on success,
        or (error_dict, status) on failure.
    """
    if not isinstance(text, str) or not text.strip():
        return {"success": False, "error": "Text is required"}, 400

    api_key = current_app.config.get('ELEVENLABS_API_KEY')
    voice = voice_id or current_app.config.get('ELEVENLABS_VOICE_ID')
    if not api_key or not voice:
        current_app.logger.error("ElevenLabs API key or default voice is not configured")
        return {"success": False, "error": "Failed to convert text to speech"}, 500

    url = f"{current_app.config['ELEVENLABS_BASE_URL'].rstrip('/')}/v1/text-to-speech/{voice}"
    try:
        response = requests.post(
            url,
            headers={"xi-api-key": api_key, "Content-Type": "application/json"},
            json={
                "text": text,
                "model_id": TTS_MODEL_ID,
                "voice_settings": TTS_VOICE_SETTINGS,
            },
            stream=True,
            timeout=current_app.config['UPSTREAM_TIMEOUT'],
        )
        response.raise_for_status()
    except requests.RequestException as e:
        current_app.logger.error(f"ElevenLabs text-to-speech request failed: {str(e)}")
        return {"success": False, "error": "Failed to convert text to speech"}, 500

    return response
