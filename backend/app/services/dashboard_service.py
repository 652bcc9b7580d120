"""
Indicateurs du tableau de bord, calculés en mémoire sur la liste des élèves.
"""

from collections import Counter
from typing import List

from app.schemas.student import CountEntry, DashboardStats, StudentResponse

TOP_MAJORS_LIMIT = 5


def compute_dashboard_stats(students: List[StudentResponse]) -> DashboardStats:
    total = len(students)
    gpas = [s.gpa for s in students if s.gpa is not None]
    average_gpa = round(sum(gpas) / len(gpas), 2) if gpas else 0.0

    # Counter conserve l'ordre de première apparition ; most_common est un tri stable
    majors = Counter(s.major for s in students if s.major)
    statuses = Counter(s.status for s in students if s.status)

    return DashboardStats(
        total=total,
        active=statuses.get("Active", 0),
        probation=statuses.get("Probation", 0),
        average_gpa=average_gpa,
        top_majors=[CountEntry(name=name, value=count) for name, count in majors.most_common(TOP_MAJORS_LIMIT)],
        status_distribution=[CountEntry(name=name, value=count) for name, count in statuses.items()],
    )
