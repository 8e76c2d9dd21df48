from enum import Enum


class BloodType(str, Enum):
    A_POS = 'A+'
    A_NEG = 'A-'
    B_POS = 'B+'
    B_NEG = 'B-'
    AB_POS = 'AB+'
    AB_NEG = 'AB-'
    O_POS = 'O+'
    O_NEG = 'O-'

    @classmethod
    def values(cls):
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value):
        """Accept ' ab+ ' style input; raise ValueError for anything else."""
        if not isinstance(value, str):
            raise ValueError(f'Invalid blood type: {value!r}. Expected a string')
        normalized = value.upper().replace(' ', '')
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f'Invalid blood type: {value!r}. Expected one of {", ".join(cls.values())}')


class Urgency(str, Enum):
    LOW = 'Low'
    MEDIUM = 'Medium'
    HIGH = 'High'
    CRITICAL = 'Critical'

    @property
    def severity(self):
        return list(Urgency).index(self)

    @classmethod
    def values(cls):
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value):
        if not isinstance(value, str):
            raise ValueError(f'Invalid urgency: {value!r}. Expected a string')
        normalized = value.strip().capitalize()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f'Invalid urgency: {value!r}. Expected one of {", ".join(cls.values())}')
