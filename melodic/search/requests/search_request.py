"""
Search Request Definition
Handles:
    - message (JSON body)
    - systemPrompt (optional)
"""

# Python Packages
from flask import request as flask_request
from flask_restx import fields





class SearchRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        body = namespace.model("SearchRequest", {
            "message":      fields.String(required = True, description = "Question to search the web for"),
            "systemPrompt": fields.String(description = "Overrides the provider's default prompt")
        })

        def decorator(func):
            return namespace.expect(body, validate = False)(func)

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return flask_request.get_json(silent = True)
