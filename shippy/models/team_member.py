# models/team_member.py
from dataclasses import dataclass
from datetime import date
from typing import Optional

ROLE_OPTIONS = ["Admin", "Manager", "Employee", "Intern", "Contractor"]


@dataclass(frozen=True)
class TeamMember:
    id: str
    name: str
    email: str
    phone: str = ""
    role: str = "Employee"
    join_date: Optional[date] = None

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role,
            "joinDate": self.join_date.isoformat() if self.join_date else "",
        }

    @staticmethod
    def from_dict(data):
        raw = data["joinDate"]
        return TeamMember(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            role=data["role"],
            join_date=date.fromisoformat(raw) if raw else None,
        )
