from typing import Any, List

EXPECTED_FIELDS = ("personal_info", "summary")


def _filled(value: Any) -> bool:
    # an empty section ({} or []) still counts as present
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def validate_document(document: Any) -> List[str]:
    """
    Basic structural check of CV data.

    Missing sections are reported as warnings only, so partial data can
    still be rendered while it is being edited.

    Returns:
        list[str]: Human-readable warnings, in check order.
    """
    if not isinstance(document, dict):
        return [f"Missing '{field}' in data" for field in EXPECTED_FIELDS]

    warnings = []
    for field in EXPECTED_FIELDS:
        if not _filled(document.get(field)):
            warnings.append(f"Missing '{field}' in data")

    personal_info = document.get("personal_info")
    if _filled(personal_info) and not (isinstance(personal_info, dict) and personal_info.get("name")):
        warnings.append("Missing 'name' in personal_info")

    return warnings


def check_contact_details(document: Any) -> List[str]:
    """Stricter check used by the editor: a CV needs a name and an email."""
    personal_info = document.get("personal_info") if isinstance(document, dict) else None
    if not isinstance(personal_info, dict):
        personal_info = {}

    errors = []
    if not personal_info.get("name"):
        errors.append("Name is required")
    if not personal_info.get("email"):
        errors.append("Email is required")
    return errors
