"""
Messages Handler
API endpoints for stored chat history.
"""

# Python Packages
from flask import request
from flask_restx import Namespace, Resource

# Validations
from .validations import MessageValidation

# Requests
from .requests import CreateMessageRequest

# Controller
from .controller import MessagesController

# Exceptions
from ..util.exceptions import AppException, InternalServerException

# Config
from ..chat.config import chat_config

# Namespace
messages_namespace = Namespace("messages", path = "/api/messages", description = "Chat history")





# ── POST /api/messages ────────────────────────────────────────────────────────
@messages_namespace.route("")
class CreateMessage(Resource):
    """ Append one message to a session... """

    @CreateMessageRequest.apply(messages_namespace)
    def post(self):
        """
        Request:
        {
            "sessionId": "abc-xyz",
            "role":      "user",
            "content":   "Hello",
            "userId":    1          // optional
        }

        Response (201): the stored message.
        """

        try:
            data = CreateMessageRequest.get_data()
            MessageValidation.validate_body(data)

            MessageValidation.validate_session_id(data["sessionId"])
            MessageValidation.validate_role(data["role"])
            MessageValidation.validate_content(data["content"])
            MessageValidation.validate_user_id(data["userId"])

            result = MessagesController().create_message(data)

            return result, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── GET / DELETE /api/messages/<session_id> ───────────────────────────────────
@messages_namespace.route("/<session_id>")
class SessionMessages(Resource):
    """ Read or clear the history of one session... """

    def get(self, session_id):
        """ Most recent messages, oldest first (?limit=50)... """

        try:
            limit = MessageValidation.validate_limit(
                request.args.get("limit", chat_config.MESSAGES_DEFAULT_LIMIT)
            )

            result = MessagesController().get_messages(session_id = session_id, limit = limit)
            return result, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, session_id):
        """ Delete every message of the session. Idempotent... """

        try:
            result = MessagesController().delete_messages(session_id)
            return result, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
