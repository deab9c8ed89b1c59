"""
Search Handler
Web-search endpoint. Errors use the short {error, needsApiKey?} shape the
search client reads.
"""

# Python Packages
import logging

from flask_restx import Namespace, Resource

# Validations
from .validations import SearchValidation

# Requests
from .requests import SearchRequest

# Controller
from .controller import SearchController

# Exceptions
from ..util.exceptions import AppException

logger = logging.getLogger(__name__)

# Namespace
search_namespace = Namespace("search", path = "/api", description = "Web search with citations")





def _error_response(error: AppException):
    body = {"error": error.message}

    if error.needs_api_key:
        body["needsApiKey"] = True

    return body, error.status_code





# ── POST /api/search ──────────────────────────────────────────────────────────
@search_namespace.route("/search")
class Search(Resource):
    """ Ask a question answered from the live web... """

    @SearchRequest.apply(search_namespace)
    def post(self):
        """
        Request:
        {
            "message":      "Latest Python release?",
            "systemPrompt": "..."    // optional
        }

        Response:
        {
            "content":   "...",
            "citations": ["https://..."],
            "model":     "...",
            "usage":     {...}
        }
        """

        try:
            data = SearchRequest.get_data()
            SearchValidation.validate_message(data)

            system_prompt = data.get("systemPrompt")
            SearchValidation.validate_system_prompt(system_prompt)

            result = SearchController().search(
                message       = data["message"].strip(),
                system_prompt = system_prompt
            )

            return result, 200

        except AppException as error:
            if error.status_code >= 500:
                logger.error("Search failed: %s", error.message)
            return _error_response(error)

        except Exception as error:
            logger.exception("Unexpected search error")
            return {"error": str(error)}, 500
