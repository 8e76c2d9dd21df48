from bloodportal.utils import now_millis, utc_now_iso


class ChatMessage:
    def __init__(self, text, sender='You', id=None, at=None):
        self.id = id if id is not None else now_millis()
        self.sender = sender
        self.text = text
        self.at = at or utc_now_iso()

    def to_dict(self):
        return {
            'id': self.id,
            'from': self.sender,
            'text': self.text,
            'at': self.at,
        }

    def __repr__(self):
        return f'<ChatMessage {self.id} from {self.sender}>'
