"""Example: drive the portal through its request seam, without any web layer.

Logs in as a demo teacher, records a scan and prints who is still missing.
"""

from attendance_portal.main import create_app


def main():
    portal = create_app("attendance_portal.config.development")

    login = portal.login("bob.teacher@example.com", "teacher123", as_teacher=True)
    if not login.ok:
        print(login.message)
        return

    token = login.value.token
    print(portal.scan(token, "FP-0002").message)
    print(portal.scan(token, "FP-0002").message)

    today = portal.container.attendance_service.today()
    for absentee in portal.absentees(token, today).value:
        print(f"{absentee.person.roll_number} {absentee.person.name}: {absentee.status.label} ({absentee.subject})")


if __name__ == "__main__":
    main()
