# platapay/api/assistant.py
# (This file holds the chat and voice assistant proxy routes.)

from flask import Blueprint, Response, request, jsonify, stream_with_context
from platapay.utils import _handle_service_result
from platapay.services.assistant import generate_chat_response, list_voices, text_to_speech

bp = Blueprint('assistant', __name__)

# Bytes per chunk when relaying synthesized audio
AUDIO_CHUNK_SIZE = 8192

@bp.route('/chat', methods=['POST'])
def chat_route():
    """
    Forwards a conversation to the language model.

    Request:  {"messages": [{"role": "user", "content": "..."}]}
    Response: {"success": true, "response": "..."}
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Request body must be a JSON object."}), 400

    result = generate_chat_response(data.get('messages'))
    return _handle_service_result(result)

@bp.route('/voices', methods=['GET'])
def voices_route():
    """Lists text-to-speech voices."""
    result = list_voices()
    return _handle_service_result(result)

@bp.route('/text-to-speech', methods=['POST'])
def text_to_speech_route():
    """
    Speaks text with the configured voice.

    Request:  {"text": "...", "voiceId": "optional"}
    Response: audio/mpeg stream
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Request body must be a JSON object."}), 400

    result = text_to_speech(data.get('text'), data.get('voiceId'))
    if isinstance(result, tuple):
        return _handle_service_result(result)

    def relay():
        try:
            for chunk in result.iter_content(chunk_size=AUDIO_CHUNK_SIZE):
                if chunk:
                    yield chunk
        finally:
            result.close()

    return Response(stream_with_context(relay()), mimetype='audio/mpeg')
