import logging
import threading

from bloodportal.errors import ApiError
from bloodportal.models.chat_message_model import ChatMessage

logger = logging.getLogger(__name__)


class ContactLog:
    """Local contact/chat stream. Messages are kept whether or not the backend accepts them."""

    def __init__(self, client):
        self.client = client
        self._messages = []
        self._lock = threading.Lock()

    def messages(self):
        with self._lock:
            return list(self._messages)

    def send(self, text, sender='You'):
        text = (text or '').strip()
        if not text:
            raise ValueError('Message text is empty')

        message = ChatMessage(text, sender=sender)
        with self._lock:
            self._messages.append(message)

        try:
            self.client.send_contact(message)
        except ApiError as e:
            # Local copy stays for usability
            logger.warning('Contact message %s not delivered: %s', message.id, e)
        return message
