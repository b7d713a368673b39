"""
Master Database Seeding Script
Recreates the database tables and populates them with demo data
"""

import sys

from task_tracker.config.settings import Settings
from task_tracker.container import build_container
from task_tracker.exceptions import ConfigurationError
from task_tracker.seed import DEMO_PASSWORD, DEMO_USERS, seed_demo_data


def main():
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"\n{'='*60}")
    print("Seeding demo data")
    print(f"{'='*60}")

    container = build_container(settings)
    try:
        counts = seed_demo_data(container)
    finally:
        container.close()

    print(f"[SUCCESS] Created {counts['employees']} employees, {counts['users']} users, {counts['tasks']} tasks")
    print("Demo accounts:")
    for user in DEMO_USERS:
        print(f"  {user['role'].value:<9} {user['email']} / {DEMO_PASSWORD}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
