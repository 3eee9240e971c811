"""Security utilities for password hashing and log masking.

Password hashing uses passlib's bcrypt scheme. ``mask_email`` keeps email
addresses out of structured logs.
"""

from passlib.context import CryptContext


def create_password_context(rounds: int = 12) -> CryptContext:
    """Build a bcrypt password context.

    Args:
        rounds: bcrypt work factor (4-31)

    Returns:
        CryptContext: Context used to hash and verify passwords
    """
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=rounds,
    )


def mask_email(email: str) -> str:
    """Mask an email address for safe logging.

    ``alice@example.com`` becomes ``al***@ex***.com``.
    """
    if not email:
        return "[empty]"

    if "@" not in email:
        return email[:2] + "***"

    local, domain = email.split("@", 1)
    domain_parts = domain.split(".")
    if len(domain_parts) > 1:
        masked_domain = f"{domain_parts[0][:2]}***.{domain_parts[-1]}"
    else:
        masked_domain = f"{domain[:2]}***"
    return f"{local[:2]}***@{masked_domain}"
