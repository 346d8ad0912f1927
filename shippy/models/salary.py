# models/salary.py
from dataclasses import dataclass
from datetime import date

# Fields the salary screen lets the user edit
EDITABLE_FIELDS = ("current_salary", "next_salary_date", "next_salary_amount", "total_earnings")


@dataclass(frozen=True)
class SalaryState:
    current_salary: float
    next_salary_date: date
    next_salary_amount: float
    total_earnings: float
    last_update: date

    def to_dict(self):
        return {
            "currentSalary": self.current_salary,
            "nextSalaryDate": self.next_salary_date.isoformat(),
            "nextSalaryAmount": self.next_salary_amount,
            "totalEarnings": self.total_earnings,
            "lastUpdate": self.last_update.isoformat(),
        }

    @staticmethod
    def from_dict(data):
        return SalaryState(
            current_salary=data["currentSalary"],
            next_salary_date=date.fromisoformat(data["nextSalaryDate"]),
            next_salary_amount=data["nextSalaryAmount"],
            total_earnings=data["totalEarnings"],
            last_update=date.fromisoformat(data["lastUpdate"]),
        )
