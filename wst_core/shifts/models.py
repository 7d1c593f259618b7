# wst_core/shifts/models.py
from django.db import models

from wst_core.common.lifecycle import Lifecycle
from wst_core.employees.models import Employee
from wst_core.positions.models import Position


class Shift(models.Model):
    """
    One employee at one position on one calendar day.
    The (employee, date) unique constraint is the real double-booking guarantee;
    the pre-check in wst_core.shifts.conflicts only produces the friendlier 409.
    """

    lifecycle = Lifecycle.HARD

    employee = models.ForeignKey(Employee, on_delete=models.PROTECT, related_name="shifts")
    position = models.ForeignKey(Position, on_delete=models.PROTECT, related_name="shifts")
    date = models.DateField(db_index=True)
    notes = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "shifts"
        ordering = ["date", "id"]
        constraints = [
            models.UniqueConstraint(fields=["employee", "date"], name="uq_shift_employee_date"),
        ]

    def __str__(self) -> str:
        return f"{self.employee_id}@{self.date} -> {self.position_id}"
