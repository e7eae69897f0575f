"""Example: evaluate check-ins with the service layer only (no Flask, no MySQL)."""

from datetime import datetime

from src.geo_attendance.geo_attendance.academic_calendar.model import AcademicCalendar
from src.geo_attendance.geo_attendance.container import assemble


class PrintingStore:
    def insert_many(self, records):
        for r in records:
            print("stored:", r.to_dict())
        return len(records)

    def list_all(self):
        return []


def main():
    calendar = AcademicCalendar.load({"holidays": ["2024-01-01"], "extraClasses": []})
    container = assemble(attendance_repo=PrintingStore(), calendar=calendar)
    service = container.attendance_service
    new_year = datetime(2024, 1, 1, 9, 0, 0)

    print(service.mark(user_id=5, role="Student", latitude=12.9, longitude=77.6, now=new_year).to_dict())
    container.calendar_service.add_extra_class("2024-01-01")
    print(service.mark(user_id=5, role="Student", latitude=12.9, longitude=77.6, now=new_year).to_dict())
    print(service.mark(user_id="TCH7", role="Teacher", latitude=200.0, longitude=0.0, now=new_year).to_dict())

    service.flush()


if __name__ == "__main__":
    main()
