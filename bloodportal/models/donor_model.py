from datetime import datetime

from bloodportal.models.choices import BloodType
from bloodportal.utils import form_text, utc_now_iso


class Donor:
    """A donor registration. Sent to the backend once and never kept locally."""

    def __init__(self, name, blood_type, city='', phone='', last_donated=None, registered_at=None):
        self.name = name
        self.blood_type = blood_type
        self.city = city
        self.phone = phone
        self.last_donated = last_donated  # date or None
        self.registered_at = registered_at or utc_now_iso()

    @classmethod
    def from_form(cls, data):
        last_donated = form_text(data, 'lastDonated') or None
        if last_donated:
            try:
                last_donated = datetime.strptime(last_donated, '%Y-%m-%d').date()
            except ValueError:
                raise ValueError(f'Invalid lastDonated date: {last_donated!r}. Expected YYYY-MM-DD')

        return cls(
            name=form_text(data, 'name'),
            blood_type=BloodType.parse(data['bloodType']).value,
            city=form_text(data, 'city'),
            phone=form_text(data, 'phone'),
            last_donated=last_donated,
        )

    def to_dict(self):
        return {
            'name': self.name,
            'bloodType': self.blood_type,
            'city': self.city,
            'phone': self.phone,
            'lastDonated': self.last_donated.isoformat() if self.last_donated else None,
            'registeredAt': self.registered_at,
        }

    def __repr__(self):
        return f'<Donor {self.name} {self.blood_type}>'
