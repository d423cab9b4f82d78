import pytest
from django.db import DatabaseError

from students.exceptions import DuplicateEmail, Forbidden, InvalidToken, StorageError
from students.models import AuditEvent, CodingTestScore, Student
from students.services import audit, credentials, records
from students.services.tokens import issue_for, issue_token, require_admin, require_student, verify_token
from students.tests.factories import make_student

pytestmark = pytest.mark.django_db


# ---------------------------------------------------------------------
# Credential store
# ---------------------------------------------------------------------
def test_duplicate_student_email_raises():
    first = make_student(email='dup@example.com')
    with pytest.raises(DuplicateEmail) as exc:
        make_student(email='dup@example.com', full_name='Second')
    assert exc.value.kind == 'student'
    assert Student.objects.get(email='dup@example.com').id == first.id


def test_duplicate_admin_email_raises():
    credentials.create_admin(email='a@example.com', password_hash=credentials.hash_password('x'))
    with pytest.raises(DuplicateEmail):
        credentials.create_admin(email='a@example.com', password_hash=credentials.hash_password('y'))


def test_duplicate_email_is_a_storage_error():
    make_student(email='dup@example.com')
    with pytest.raises(StorageError):
        make_student(email='dup@example.com')


def test_find_by_email_per_kind():
    student = make_student(email='same@example.com')
    assert credentials.find_by_email('student', 'same@example.com') == student
    assert credentials.find_by_email('admin', 'same@example.com') is None
    with pytest.raises(ValueError):
        credentials.find_by_email('teacher', 'same@example.com')


def test_authenticate_checks_password():
    student = make_student(password='right-one')
    assert credentials.authenticate('student', student.email, 'right-one') == student
    assert credentials.authenticate('student', student.email, 'wrong-one') is None
    assert credentials.authenticate('student', 'missing@example.com', 'right-one') is None


def test_password_hash_is_bcrypt_cost_10():
    hashed = credentials.hash_password('secret')
    assert hashed.startswith('bcrypt$$2b$10$')
    assert 'secret' not in hashed


def test_storage_failure_is_translated(monkeypatch):
    def broken(**kwargs):
        raise DatabaseError('disk I/O error')
    monkeypatch.setattr(Student.objects, 'create', broken)
    with pytest.raises(StorageError) as exc:
        make_student()
    assert not isinstance(exc.value, DuplicateEmail)


# ---------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------
def test_student_token_round_trip():
    student = make_student()
    claims = verify_token(issue_for(student))
    assert claims['id'] == student.id
    assert 'role' not in claims
    require_student(claims)
    with pytest.raises(Forbidden):
        require_admin(claims)


def test_admin_token_carries_role():
    admin = credentials.create_admin(email='a@example.com', password_hash=credentials.hash_password('x'))
    claims = verify_token(issue_for(admin))
    assert claims == {**claims, 'id': admin.id, 'role': 'admin'}
    require_admin(claims)
    with pytest.raises(Forbidden):
        require_student(claims)


def test_extra_claims_and_bytes_tokens():
    token = issue_token(7, cohort='2025')
    claims = verify_token(token.encode())
    assert claims['id'] == 7
    assert claims['cohort'] == '2025'
    assert 'exp' in claims


def test_tampered_token_fails():
    token = issue_token(1)
    head, body, sig = token.split('.')
    with pytest.raises(InvalidToken):
        verify_token('.'.join([head, body, sig[::-1]]))
    with pytest.raises(InvalidToken):
        verify_token('')


# ---------------------------------------------------------------------
# Domain records
# ---------------------------------------------------------------------
def test_aggregate_statistics_empty():
    assert records.aggregate_statistics() == {'totalStudents': 0, 'totalReportedIncome': 0}


def test_aggregate_statistics_ignores_missing_income():
    for i, income in enumerate([100, None, 50]):
        s = make_student(email=f's{i}@example.com')
        records.report_income(s.id, income)
    assert records.aggregate_statistics() == {'totalStudents': 3, 'totalReportedIncome': 150}


def test_report_income_unknown_student_touches_nothing():
    assert records.report_income(999, 10) == 0


def test_coding_scores_round_trip():
    records.add_coding_score(1, 87.5)
    records.add_coding_score(2, 40)
    records.add_coding_score(1, 91)
    scores = records.list_coding_scores(1)
    assert [s.score for s in scores] == [87.5, 91]
    assert all(s.date is not None for s in scores)
    formatted = records.format_score(scores[0])
    assert formatted['studentId'] == 1 and formatted['score'] == 87.5 and formatted['date']


def test_coding_scores_do_not_require_a_student_row():
    records.add_coding_score(42, 10)
    assert CodingTestScore.objects.filter(student_id=42).exists()
    assert not Student.objects.exists()


def test_projects_are_append_only_per_student():
    records.add_project(3, 'Difference Engine', 'brass')
    records.add_project(3, 'Difference Engine')
    records.add_project(4, 'Other')
    listed = [records.format_project(p) for p in records.list_projects(3)]
    assert [p['projectName'] for p in listed] == ['Difference Engine', 'Difference Engine']
    assert listed[0]['description'] == 'brass'
    assert listed[1]['description'] is None


def test_statistics_storage_failure(monkeypatch):
    def broken(*args, **kwargs):
        raise DatabaseError('gone')
    monkeypatch.setattr(Student.objects, 'aggregate', broken)
    with pytest.raises(StorageError):
        records.aggregate_statistics()


# ---------------------------------------------------------------------
# Audit
# ---------------------------------------------------------------------
def test_log_action_records_principal():
    student = make_student()
    event = audit.log_action(principal=student, action='login', detail={'result': 'ok'})
    assert event.principal_kind == 'student'
    assert event.principal_id == student.id
    anonymous = audit.log_action(action='login')
    assert anonymous.principal_kind == '' and anonymous.principal_id is None and anonymous.detail == {}


def test_log_action_failure_is_not_raised(monkeypatch):
    def broken(**kwargs):
        raise DatabaseError('read-only')
    monkeypatch.setattr(AuditEvent.objects, 'create', broken)
    assert audit.log_action(action='login') is None
