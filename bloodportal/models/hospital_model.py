from collections import namedtuple

Hospital = namedtuple('Hospital', ['id', 'name', 'phone', 'city'])


def hospital_to_dict(hospital):
    return hospital._asdict()


# Static directory; /api/hospitals on the backend is not consulted yet
HOSPITALS = (
    Hospital(1, 'City General Hospital', '+92-21-111-000-111', 'Karachi'),
    Hospital(2, 'Downtown Blood Bank', '+92-21-222-222-222', 'Karachi'),
    Hospital(3, 'Lahore Central Hospital', '+92-42-333-333-333', 'Lahore'),
)


def get_hospital(hospital_id):
    for hospital in HOSPITALS:
        if hospital.id == hospital_id:
            return hospital
    return None
