"""
Core constants — **Single Source of Truth** for project-wide magic numbers.

Any business rule that references an identifier prefix, a seed value or a
list size should import it from here instead of hardcoding.  This avoids
drift between apps that use the same value.
"""

# ── Sequential identifiers ──────────────────────────────────────────
# Case codes look like ``CA-0001``; report codes like ``RPT-1026``.
CASE_ID_PREFIX: str = "CA-"
CASE_ID_SEED: int = 1
REPORT_ID_PREFIX: str = "RPT-"
REPORT_ID_SEED: int = 1026
SEQUENCE_PAD_WIDTH: int = 4

# ── Accounts ────────────────────────────────────────────────────────
MIN_PASSWORD_LENGTH: int = 6
GENERATED_PASSWORD_LENGTH: int = 10
GENERATED_PASSWORD_ALPHABET: str = (
    "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789!@#$%"
)

# ── Listing / dashboard sizes ───────────────────────────────────────
DEFAULT_PAGE_SIZE: int = 50
DEFAULT_ACTIVITY_LIMIT: int = 10
RECENT_CASES_LIMIT: int = 5
PERSONNEL_STATUS_LIMIT: int = 4

UNASSIGNED_OFFICER_LABEL: str = "Unassigned"
SYSTEM_ACTOR_LABEL: str = "System"
UNKNOWN_AUTHOR_LABEL: str = "Unknown"

# ── Roles ───────────────────────────────────────────────────────────
# Values stored in ``accounts.User.role``.
ROLE_ADMIN: str = "admin"
ROLE_OFFICER: str = "officer"
