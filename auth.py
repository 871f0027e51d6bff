# auth.py
# Admin allow-list checks. The signed-in user is whatever the session holds
# after /api/admin/session verified the identity-provider token.

UNINITIALIZED = "uninitialized"
ADMIN = "admin"
DENIED = "denied"


def parse_admin_emails(raw):
    if isinstance(raw, str):
        raw = raw.split(",")
    return frozenset(e.strip().lower() for e in raw or () if e and e.strip())

def is_admin(email, allow_list):
    # nobody gets in while the allow-list is empty
    if not email or not allow_list:
        return False
    return email.strip().lower() in allow_list

def admin_access(user, allow_list):
    """Classify a session user as UNINITIALIZED, ADMIN or DENIED."""
    if not user:
        return UNINITIALIZED
    if is_admin(user.get("email"), allow_list):
        return ADMIN
    return DENIED
