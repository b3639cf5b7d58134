"""Phone number display formatting."""

import phonenumbers


def format_phone(raw: str, region: str | None = None) -> str:
    """Return the national format of the number for region, or raw unchanged.

    Stored phones are bare digit strings without a country code, so region
    decides how they are read (e.g. "2025551234" with region "US" becomes
    "(202) 555-1234"). Numbers that do not parse or are not valid for the
    region are returned as given.
    """
    if not raw or not str(raw).strip():
        return raw
    try:
        parsed = phonenumbers.parse(str(raw).strip(), region)
    except phonenumbers.NumberParseException:
        return raw
    if not phonenumbers.is_valid_number(parsed):
        return raw
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.NATIONAL)
