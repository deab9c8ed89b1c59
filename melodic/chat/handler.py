"""
Chat Handler
API endpoint for the Melodic assistant.
"""

# Python Packages
import logging

from flask_restx import Namespace, Resource

# Validations
from .validations import ChatValidation

# Requests
from .requests import ChatRequest

# Controller
from .controller import ChatController

# Exceptions
from ..util.exceptions import AppException, InternalServerException

# Config
from .config import chat_config

logger = logging.getLogger(__name__)

# Namespace
chat_namespace = Namespace("chat", path = "/api", description = "Chat with context memory")





# ── POST /api/chat ────────────────────────────────────────────────────────────
@chat_namespace.route("/chat")
class Chat(Resource):
    """ Send a message, get the assistant's reply... """

    @ChatRequest.apply(chat_namespace)
    def post(self):
        """
        Chat with the assistant.

        Request:
        {
            "message":             "Hi, my name is Dana",
            "apiKey":              "use_env",
            "model":               "gpt-4o",          // optional
            "sessionId":           "abc-xyz",         // optional — omit to start a new session
            "conversationHistory": [{"role": "user", "content": "..."}],  // optional
            "systemPrompt":        "...",             // optional
            "userId":              1                  // optional, signed-in user
        }

        Response:
        {
            "id": "...", "model": "...",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": "..."}, "finish_reason": "stop"}],
            "usage": {...},
            "sessionId": "abc-xyz"
        }
        """

        try:
            data = ChatRequest.get_data()
            ChatValidation.validate_body(data)

            message              = data.get("message")
            api_key              = data.get("apiKey")
            model                = data.get("model") or chat_config.CHAT_DEFAULT_MODEL
            session_id           = data.get("sessionId")
            conversation_history = data.get("conversationHistory")
            system_prompt        = data.get("systemPrompt")
            user_id              = data.get("userId")

            ChatValidation.validate_message(message)
            ChatValidation.validate_api_key(api_key)
            ChatValidation.validate_model(model)
            ChatValidation.validate_session_id(session_id)
            ChatValidation.validate_history(conversation_history)
            ChatValidation.validate_system_prompt(system_prompt)
            ChatValidation.validate_user_id(user_id)

            result = ChatController(api_key = api_key).chat(
                message              = message.strip(),
                model                = model,
                session_id           = session_id,
                conversation_history = conversation_history,
                system_prompt        = system_prompt,
                user_id              = user_id
            )

            return result, 200

        except AppException as error:
            if error.status_code >= 500:
                logger.error("Chat failed: %s", error.message)
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Unexpected chat error")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
