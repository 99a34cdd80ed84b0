"""
Onboarding Example - Project manager login through to the dashboard.

Runs against the backend configured by LEGASI_API_BASE_URL.
"""

import getpass

from legasi_dms import DashboardClient, UserRole, configure_logging
from legasi_dms.adapters import MemorySessionRepository
from legasi_dms.sdk import WizardState


def main():
    configure_logging()

    # In-memory sessions: nothing is left on disk after the demo
    client = DashboardClient.from_settings(sessions=MemorySessionRepository())

    wizard = client.start_login(UserRole.PROJECT_MANAGER)
    email = input("Email: ")
    outcome = wizard.login(email, getpass.getpass("Password: "))

    if outcome.error:
        print(f"\nLogin failed: {outcome.error}")
        return

    while outcome.state == WizardState.NEEDS_EMAIL_VERIFICATION:
        code = input("\nVerification PIN (blank to resend): ")
        outcome = wizard.resend_code() if not code else wizard.verify_email(code)
        print(outcome.error or outcome.notice or "")

    while outcome.state == WizardState.NEEDS_PASSWORD_RESET:
        new_password = getpass.getpass("\nNew password: ")
        checks = wizard.password_requirements(new_password)
        print(f"Requirements: {checks.to_dict()}")
        outcome = wizard.reset_password(new_password, getpass.getpass("Confirm: "))
        print(outcome.error or outcome.notice)

    print(f"\nRedirect to: {outcome.redirect_to}")
    print(f"Access: {client.check_access(UserRole.PROJECT_MANAGER).reason}")

    # Dashboard landing page
    overview = client.overview().load()
    print(f"\nProjects: {[p.name for p in overview.projects] or overview.projects_error}")
    print(f"Data entries: {overview.stats.data_entry_count}")

    client.logout()
    client.close()
    print("\nLogged out")


if __name__ == "__main__":
    main()
