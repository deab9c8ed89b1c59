"""
Messages Controller
Orchestrates between handler and service layer.
"""

# Python Packages
from typing import List, Dict

# Services
from .services.message_service import MessageService
from ..users.services.user_service import UserService

# Exceptions
from ..util.exceptions import NotFoundException
from ..util import messages

# Config
from ..chat.config import chat_config





class MessagesController:

    def __init__(self):
        """ Initialize services... """

        self.message_service = MessageService()
        self.user_service    = UserService()



    def get_messages(self, session_id: str, limit: int = chat_config.MESSAGES_DEFAULT_LIMIT) -> List[Dict]:
        """
        Most recent *limit* messages of the session, oldest first.
        """

        return self.message_service.get_messages(session_id = session_id, limit = limit)



    def create_message(self, data: Dict) -> Dict:
        """
        Store one message. A given userId must belong to an existing user.
        """

        if data.get("userId") is not None and not self.user_service.get_user(data["userId"]):
            raise NotFoundException(messages.ERROR["USER_NOT_FOUND"])

        return self.message_service.create_message(data)



    def delete_messages(self, session_id: str) -> Dict:
        """
        Clear the session's history. Context memory is left untouched.
        """

        deleted = self.message_service.delete_all_messages(session_id)

        return {
            "sessionId": session_id,
            "deleted":   deleted,
            "message":   messages.SUCCESS["MESSAGES_DELETE_SUCCESS"]
        }
