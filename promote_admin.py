"""
Script to give an existing account the admin role.
Usage: python promote_admin.py <email>
"""

import sys

from gymdesk.db.database import SessionLocal
from gymdesk.domain.enums import Role
from gymdesk.services.profile_service import ProfileService


def promote_admin(email: str):
    """Set the profile role for ``email`` to admin."""
    db = SessionLocal()
    try:
        profile = ProfileService(db).set_role(email, Role.ADMIN)
        if profile is None:
            print(f"No account found for {email}. Sign up first.")
            return
        print(f"{email} is now an admin.")
    except Exception as e:
        db.rollback()
        print(f"Error occurred: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python promote_admin.py <email>")
        sys.exit(1)

    target_email = sys.argv[1]
    print("=" * 50)
    print(f"WARNING: {target_email} will get full admin access!")
    print("=" * 50)

    response = input("Are you sure you want to continue? (yes/no): ")

    if response.lower() in ["yes", "y"]:
        promote_admin(target_email)
    else:
        print("Operation cancelled.")
