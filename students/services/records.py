from __future__ import annotations

from typing import Optional

from django.db.models import Count, Sum

from students.exceptions import storage_errors
from students.models import CodingTestScore, Project, Student


def report_income(student_id: int, amount: Optional[float]) -> int:
    """Overwrite the student's reported income.

    Returns the number of rows touched; an unknown id updates nothing
    and is not an error.
    """
    with storage_errors():
        return Student.objects.filter(id=student_id).update(reported_income=amount)


def add_coding_score(student_id: int, score: float) -> CodingTestScore:
    with storage_errors():
        return CodingTestScore.objects.create(student_id=student_id, score=score)


def add_project(student_id: int, name: str, description: Optional[str] = None) -> Project:
    with storage_errors():
        return Project.objects.create(student_id=student_id, project_name=name, description=description)


def list_coding_scores(student_id: int) -> list[CodingTestScore]:
    with storage_errors():
        return list(CodingTestScore.objects.filter(student_id=student_id).order_by('date', 'id'))


def list_projects(student_id: int) -> list[Project]:
    with storage_errors():
        return list(Project.objects.filter(student_id=student_id).order_by('id'))


def aggregate_statistics() -> dict:
    with storage_errors():
        agg = Student.objects.aggregate(total=Count('id'), income=Sum('reported_income'))
    return {
        'totalStudents': agg['total'],
        # SUM over no non-null rows is NULL
        'totalReportedIncome': agg['income'] or 0,
    }


def format_score(entry: CodingTestScore) -> dict:
    return {
        'id': entry.id,
        'studentId': entry.student_id,
        'score': entry.score,
        'date': entry.date.isoformat(),
    }


def format_project(project: Project) -> dict:
    return {
        'id': project.id,
        'studentId': project.student_id,
        'projectName': project.project_name,
        'description': project.description,
    }
