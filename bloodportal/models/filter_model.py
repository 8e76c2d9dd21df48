from bloodportal.utils import form_text


class FilterState:
    """Feed filters. An empty value matches everything."""

    def __init__(self, city='', blood_type='', urgency=''):
        self.city = city or ''
        self.blood_type = blood_type or ''
        self.urgency = urgency or ''

    @classmethod
    def from_dict(cls, data):
        """Raises ValueError when a criterion is not a string."""
        return cls(
            city=form_text(data, 'city'),
            blood_type=form_text(data, 'bloodType'),
            urgency=form_text(data, 'urgency'),
        )

    def is_empty(self):
        return not (self.city or self.blood_type or self.urgency)

    def matches(self, blood_request):
        by_city = not self.city or self.city.lower() in (blood_request.city or '').lower()
        by_blood = not self.blood_type or blood_request.blood_type == self.blood_type
        by_urgency = not self.urgency or blood_request.urgency == self.urgency
        return by_city and by_blood and by_urgency

    def to_dict(self):
        return {
            'city': self.city,
            'bloodType': self.blood_type,
            'urgency': self.urgency,
        }

    def __repr__(self):
        return f'<FilterState {self.to_dict()}>'
