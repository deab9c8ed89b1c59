""" Urls of the modules define here... """

# Swagger API...
from ..config.swagger import api

# All Namespaces...
from ..chat.handler import chat_namespace
from ..messages.handler import messages_namespace
from ..search.handler import search_namespace
from ..health.handler import health_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces():
        """ Function for adding namespaces... """

        api.add_namespace(chat_namespace)
        api.add_namespace(messages_namespace)
        api.add_namespace(search_namespace)
        api.add_namespace(health_namespace)
