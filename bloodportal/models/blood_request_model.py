from bloodportal.models.choices import BloodType, Urgency
from bloodportal.utils import as_text, form_text, utc_now_iso


class BloodRequest:
    """A patient's request for blood, as shown in the active requests feed"""

    # Submission status of locally created requests; backend rows carry none
    STATUS_PENDING = 'pending'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_FAILED = 'failed'

    def __init__(self, patient_name, blood_type, city, urgency, contact='', note=None,
                 created_at=None, id=None, status=None):
        self.id = id
        self.patient_name = patient_name
        self.blood_type = blood_type
        self.city = city
        self.urgency = urgency
        self.contact = contact
        self.note = note
        self.created_at = created_at or utc_now_iso()
        self.status = status

    @property
    def key(self):
        # Falls back to the timestamp when the backend has not assigned an id yet
        return self.id if self.id is not None else self.created_at

    @property
    def severity(self):
        """0 (Low) to 3 (Critical); None for an urgency the portal does not know."""
        try:
            return Urgency(self.urgency).severity
        except ValueError:
            return None

    @property
    def is_critical(self):
        return self.severity == Urgency.CRITICAL.severity

    @classmethod
    def from_dict(cls, data):
        """Build from a backend row. Lenient: values are not validated, only coerced to text."""
        return cls(
            id=data.get('id'),
            patient_name=as_text(data.get('patientName')),
            blood_type=as_text(data.get('bloodType')),
            city=as_text(data.get('city')),
            urgency=as_text(data.get('urgency')),
            contact=as_text(data.get('contact')),
            note=as_text(data.get('note')) or None,
            created_at=as_text(data.get('createdAt')) or None,
        )

    @classmethod
    def from_form(cls, data):
        """Build from a user submission. Raises ValueError on a non-string field or a bad blood type or urgency."""
        return cls(
            patient_name=form_text(data, 'patientName'),
            blood_type=BloodType.parse(data['bloodType']).value,
            city=form_text(data, 'city'),
            urgency=Urgency.parse(data['urgency']).value,
            contact=form_text(data, 'contact'),
            note=form_text(data, 'note') or None,
        )

    def to_dict(self):
        data = {
            'patientName': self.patient_name,
            'bloodType': self.blood_type,
            'city': self.city,
            'urgency': self.urgency,
            'note': self.note,
            'contact': self.contact,
            'createdAt': self.created_at,
        }
        if self.id is not None:
            data['id'] = self.id
        return data

    def to_view(self):
        """Wire fields plus what the feed needs to render a card."""
        data = self.to_dict()
        data.update({
            'key': self.key,
            'status': self.status,
            'severity': self.severity,
            'critical': self.is_critical,
            'callLink': f'tel:{self.contact}',
            'shareText': f'Request for {self.blood_type} in {self.city}. Contact: {self.contact}',
        })
        return data

    def __repr__(self):
        return f'<BloodRequest {self.patient_name} {self.blood_type} {self.city}>'


def sample_requests():
    """Two fixed entries shown while the backend cannot be reached"""
    created_at = utc_now_iso()
    return [
        BloodRequest(id='r1', patient_name='Ali Khan', blood_type='A+', city='Karachi', urgency='High',
                     note='Accident - OR waiting', contact='+92-300-0000000', created_at=created_at),
        BloodRequest(id='r2', patient_name='Sara Ahmed', blood_type='O-', city='Lahore', urgency='Critical',
                     note='Neonate transfusion', contact='+92-300-1111111', created_at=created_at),
    ]
