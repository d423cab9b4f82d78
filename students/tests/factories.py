from datetime import date

from students.services import credentials


def make_student(email='ada@example.com', password='P@ssw0rd1', **overrides):
    fields = dict(
        full_name='Ada Lovelace',
        email=email,
        password_hash=credentials.hash_password(password),
        phone_number='0700000001',
        parent_contact='Byron 0700000002',
        dob=date(2006, 12, 10),
        high_school='Analytical High',
    )
    fields.update(overrides)
    return credentials.create_student(**fields)
