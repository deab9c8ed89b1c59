"""
Chat Controller
Orchestrates between handler and service layer.
"""

# Python Packages
import logging
from typing import List, Dict, Optional

# Services
from .services.conversation_service import ConversationService
from ..users.services.user_service import UserService

# Vendors
from ..vendors import get_chat_service

# Constants
from ..base import constants

# Exceptions
from ..util.exceptions import NotFoundException
from ..util import messages

logger = logging.getLogger(__name__)





class ChatController:

    def __init__(self, api_key: str = constants.USE_ENV_API_KEY):
        """ Initialize services for the key mode of this request... """

        self.conversation_service = ConversationService(
            chat_service = self._resolve_chat_service(api_key)
        )
        self.user_service = UserService()



    def chat(
        self,
        message: str,
        model: Optional[str] = None,
        session_id: Optional[str] = None,
        conversation_history: Optional[List[Dict]] = None,
        system_prompt: Optional[str] = None,
        user_id: Optional[int] = None
    ) -> dict:
        """
        Run one chat turn.

        Args:
            message: The user's message.
            model: Provider model id.
            session_id: Existing session; None starts a new one.
            conversation_history: Client-held prior turns; None uses stored history.
            system_prompt: Optional persona override.
            user_id: Signed-in user; must exist when given.

        Returns:
            Normalized completion plus sessionId.
        """

        if user_id is not None and not self.user_service.get_user(user_id):
            raise NotFoundException(messages.ERROR["USER_NOT_FOUND"])

        return self.conversation_service.chat(
            message              = message,
            session_id           = session_id,
            conversation_history = conversation_history,
            model                = model,
            system_prompt        = system_prompt,
            user_id              = user_id
        )



    @staticmethod
    def _resolve_chat_service(api_key: str):
        """
        "use_env" → configured provider with the server key.
        Anything else is a legacy client key, used only when
        ALLOW_CLIENT_API_KEYS is on; otherwise the server key still applies.
        """

        if api_key == constants.USE_ENV_API_KEY:
            return get_chat_service()

        if constants.ALLOW_CLIENT_API_KEYS:
            return get_chat_service(api_key = api_key)

        logger.warning("Client-supplied API key ignored (ALLOW_CLIENT_API_KEYS is off)")
        return get_chat_service()
