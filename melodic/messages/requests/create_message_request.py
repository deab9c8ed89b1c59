"""
Create Message Request Definition
Handles:
    - sessionId, role, content (JSON body)
    - userId (optional)
"""

# Python Packages
from flask import request as flask_request
from flask_restx import fields





class CreateMessageRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        body = namespace.model("CreateMessageRequest", {
            "sessionId": fields.String(required = True),
            "role":      fields.String(required = True, enum = ["user", "assistant"]),
            "content":   fields.String(required = True),
            "userId":    fields.Integer(description = "Owning user, optional")
        })

        def decorator(func):
            return namespace.expect(body, validate = False)(func)

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        data = flask_request.get_json(silent = True)

        if not isinstance(data, dict):
            return data

        return {
            "sessionId": data.get("sessionId"),
            "role":      data.get("role"),
            "content":   data.get("content"),
            "userId":    data.get("userId")
        }
