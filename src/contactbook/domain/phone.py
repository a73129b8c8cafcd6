"""Phone and email normalization for duplicate detection and equality predicates."""

import phonenumbers


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """Return the canonical digit string of a phone number, or None if it has no digits.

    Numbers that parse as valid (with a leading + or with default_region,
    e.g. "202 555 1234" with "US") are rendered E.164 without the "+", so
    "+1 202 555 1234" and "(202) 555-1234" in region US compare equal.
    Anything else, including short local numbers like "111", falls back to
    its digits only.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    if raw.startswith("+") or default_region:
        try:
            parsed = phonenumbers.parse(raw, default_region)
        except phonenumbers.NumberParseException:
            parsed = None
        if parsed is not None and phonenumbers.is_valid_number(parsed):
            e164 = phonenumbers.format_number(
                parsed, phonenumbers.PhoneNumberFormat.E164
            )
            return e164.lstrip("+")
    digits = phonenumbers.normalize_digits_only(raw)
    return digits or None


def normalize_email(raw: str) -> str | None:
    """Stripped, case-folded email, or None if empty."""
    if not raw or not str(raw).strip():
        return None
    return str(raw).strip().casefold()
