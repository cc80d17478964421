"""Reference data offered to booking clients.

Nothing here constrains what the appointment store accepts; a client may
submit any department, doctor or slot string.
"""

DEPARTMENT_DOCTORS = {
    'Cardiology': ['Dr. Priya Sharma', 'Dr. Rajesh Mehta', 'Dr. Ananya Iyer', 'Dr. Vikram Singh'],
    'Neurology': ['Dr. Sneha Kapoor', 'Dr. Arjun Nair', 'Dr. Divya Reddy', 'Dr. Suresh Pillai'],
    'Orthopedics': ['Dr. Meera Joshi', 'Dr. Karan Malhotra', 'Dr. Pooja Verma', 'Dr. Amit Bose'],
    'General': ['Dr. Neha Gupta', 'Dr. Rohit Desai', 'Dr. Kavya Nambiar', 'Dr. Sanjay Patil'],
    'Dermatology': ['Dr. Ritu Agarwal', 'Dr. Manish Khanna', 'Dr. Swati Rao', 'Dr. Deepak Tiwari'],
    'Endocrinology': ['Dr. Shreya Nair', 'Dr. Arun Pillai', 'Dr. Lakshmi Iyer', 'Dr. Harsh Bose'],
    'Gastroenterology': ['Dr. Amit Desai', 'Dr. Priyanka Mehta', 'Dr. Rajiv Nair', 'Dr. Sunita Patel'],
}

FIRST_SLOT_HOUR = 8
SLOTS_PER_PERIOD = 8
SLOT_INCREMENT_MINUTES = 30
PERIODS = ('morning', 'afternoon', 'evening')


def _format_slot(minutes_since_midnight: int) -> str:
    hours, minutes = divmod(minutes_since_midnight, 60)
    return f'{hours:02d}:{minutes:02d}'


def build_time_slots() -> dict[str, list[str]]:
    """Bookable slots as 24-hour HH:MM strings, grouped by period of day."""
    slots: dict[str, list[str]] = {}
    current = FIRST_SLOT_HOUR * 60
    for period in PERIODS:
        slots[period] = []
        for _ in range(SLOTS_PER_PERIOD):
            slots[period].append(_format_slot(current))
            current += SLOT_INCREMENT_MINUTES
    return slots


TIME_SLOTS = build_time_slots()


def list_departments() -> list[dict]:
    return [
        {'department': department, 'doctors': list(doctors)}
        for department, doctors in DEPARTMENT_DOCTORS.items()
    ]


def list_time_slots() -> list[dict]:
    return [
        {'period': period, 'slots': list(slots)}
        for period, slots in TIME_SLOTS.items()
    ]
