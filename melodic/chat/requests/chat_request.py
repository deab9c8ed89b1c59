"""
Chat Request Definition
Handles:
    - message (JSON body)
    - apiKey ("use_env" for the server-held key)
    - model, sessionId, conversationHistory, systemPrompt, userId (optional)
"""

# Python Packages
from flask import request as flask_request
from flask_restx import fields





class ChatRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        turn = namespace.model("ChatTurn", {
            "role":    fields.String(required = True, enum = ["user", "assistant"]),
            "content": fields.String(required = True)
        })

        body = namespace.model("ChatRequest", {
            "message":             fields.String(required = True, description = "User message"),
            "apiKey":              fields.String(required = True, description = '"use_env" to use the server key'),
            "model":               fields.String(default = "gpt-4o"),
            "sessionId":           fields.String(description = "Omit to start a new session"),
            "conversationHistory": fields.List(fields.Nested(turn)),
            "systemPrompt":        fields.String(description = "Replaces the default persona"),
            "userId":              fields.Integer(description = "Signed-in user, stored on both turns")
        })

        def decorator(func):
            # validate=False: ChatValidation owns the error format
            return namespace.expect(body, validate = False)(func)

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return flask_request.get_json(silent = True)
