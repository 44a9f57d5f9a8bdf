"""
Validation utilities for waitlist signups (name, email)
"""
import re
import dns.exception
import dns.resolver
from typing import Any, Tuple

REQUIRED_ERROR = "Name and email are required"
EMAIL_FORMAT_ERROR = "Invalid email format"
EMAIL_DOMAIN_ERROR = "Invalid email domain"

EMAIL_REGEX = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def is_present(value: Any) -> bool:
    """Non-empty string. Anything else counts as missing."""
    return isinstance(value, str) and value != ""


def is_valid_email(email: str) -> bool:
    return EMAIL_REGEX.fullmatch(email) is not None


def validate_email_mx(email: str) -> Tuple[bool, str]:
    """
    Validate email domain has valid MX records.
    Returns (is_valid, error_message).
    """
    if '@' not in email:
        return False, EMAIL_FORMAT_ERROR

    domain = email.rsplit('@', 1)[-1].strip().lower()

    try:
        mx_records = dns.resolver.resolve(domain, 'MX')
        if not mx_records:
            return False, EMAIL_DOMAIN_ERROR
        return True, ""
    except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
        return False, EMAIL_DOMAIN_ERROR
    except dns.exception.DNSException:
        # Timeouts and resolver failures could be temporary
        return True, ""


def validate_signup_data(name: Any, email: Any, check_mx: bool = False) -> Tuple[bool, str]:
    """
    Validate signup data (both name and email).
    Checks run in order and the first failure wins.
    Returns (is_valid, error_message).
    """
    if not is_present(name) or not is_present(email):
        return False, REQUIRED_ERROR

    if not is_valid_email(email):
        return False, EMAIL_FORMAT_ERROR

    if check_mx:
        return validate_email_mx(email)

    return True, ""
