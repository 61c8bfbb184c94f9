"""
Editing session for CV data: the state behind an interactive form editor.

A session keeps the current role, the CV document and the template used for
previews. Every change is persisted to a LocalStore so a draft survives a
restart. Role starter data lives in ``<data_dir>/<role>/cv-schema.json``.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from markupsafe import escape

from jobpare_cv.binder import TemplateBinder
from jobpare_cv.config import Settings, get_settings
from jobpare_cv.document import get_path, set_path
from jobpare_cv.exceptions import CVGeneratorError, InputMalformed, InputNotFound, RoleDataNotFound
from jobpare_cv.loader import load_document, parse_document
from jobpare_cv.storage import LocalStore
from jobpare_cv.validator import check_contact_details

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "backend"
DEFAULT_TEMPLATE = Path(__file__).parent / "templates" / "cv.html"

FORM_SECTIONS = [
    {
        "title": "Personal Information",
        "fields": [
            {"name": "personal_info.name", "label": "Full Name", "type": "text", "required": True},
            {"name": "personal_info.position", "label": "Position", "type": "text", "required": True},
            {"name": "personal_info.email", "label": "Email", "type": "email", "required": True},
            {"name": "personal_info.phone", "label": "Phone", "type": "text"},
            {"name": "personal_info.location", "label": "Location", "type": "text"},
            {"name": "personal_info.linkedin", "label": "LinkedIn", "type": "url"},
            {"name": "personal_info.github", "label": "GitHub", "type": "url"},
            {"name": "personal_info.portfolio", "label": "Portfolio", "type": "url"},
        ],
    },
    {
        "title": "Professional Summary",
        "fields": [
            {"name": "summary.professional_summary", "label": "Summary", "type": "textarea",
             "help": "2-3 sentences about your background and career goals"},
        ],
    },
    {"title": "Work Experience", "fields": [{"name": "experience", "label": "Experience (JSON array)", "type": "textarea"}]},
    {"title": "Education", "fields": [{"name": "education", "label": "Education (JSON array)", "type": "textarea"}]},
    {"title": "Skills", "fields": [{"name": "skills", "label": "Skills (JSON object)", "type": "textarea"}]},
    {"title": "Projects", "fields": [{"name": "projects", "label": "Projects (JSON array)", "type": "textarea"}]},
    {"title": "Certifications", "fields": [{"name": "certifications", "label": "Certifications (JSON array)", "type": "textarea"}]},
    {"title": "Languages", "fields": [{"name": "languages", "label": "Languages (JSON array)", "type": "textarea"}]},
]


def form_fields() -> List[Dict[str, Any]]:
    return [field for section in FORM_SECTIONS for field in section["fields"]]


def field_type(path: str) -> Optional[str]:
    """Input type of the form field bound to ``path``, or None if no field is."""
    for field in form_fields():
        if field["name"] == path:
            return field["type"]
    return None


def load_role_data(data_dir: Union[str, Path], role: str) -> Dict[str, Any]:
    """
    Loads the starter CV data for a role.

    Raises:
        RoleDataNotFound: If there is no data file for the role.
        InputMalformed: If the data file is not valid JSON.
    """
    path = Path(data_dir) / role / "cv-schema.json"
    try:
        data = load_document(path)
    except InputNotFound as e:
        raise RoleDataNotFound(f"No data for role '{role}' ({path})") from e
    if not isinstance(data, dict):
        raise InputMalformed(f"Role data in '{path}' must be a JSON object")
    return data


class EditorSession:
    def __init__(self, store: Optional[LocalStore] = None, settings: Optional[Settings] = None,
                 template_source: Optional[str] = None, binder: Optional[TemplateBinder] = None):
        self.settings = settings or get_settings()
        self.store = store or LocalStore(self.settings.storage_dir)
        self.binder = binder or TemplateBinder()
        self.template_source = template_source
        self.role = DEFAULT_ROLE
        self.data: Dict[str, Any] = {}

    def start(self) -> None:
        """Restore the saved role and draft, on top of the role's starter data."""
        saved_role = self.store.load("currentRole")
        if isinstance(saved_role, str) and saved_role:
            self.role = saved_role

        try:
            self.load_role(self.role)
        except CVGeneratorError as e:
            logger.error("Error loading role data: %s", e)

        saved_data = self.store.load("cvData")
        if isinstance(saved_data, dict):
            self.data = {**self.data, **saved_data}

    def select_role(self, role: str) -> None:
        self.store.save("currentRole", role)
        self.load_role(role)

    def load_role(self, role: str) -> None:
        """Replace the document with the role's starter data."""
        data = load_role_data(self.settings.data_dir, role)
        self.role = role
        self.data = data
        if self.template_source is None:
            self.template_source = DEFAULT_TEMPLATE.read_text(encoding="utf-8")

    def field_value(self, path: str) -> Optional[str]:
        """Value of a form field as text; lists and objects as indented JSON."""
        value = get_path(self.data, path)
        if value is None:
            return None
        if isinstance(value, (dict, list)):
            return json.dumps(value, indent=2, ensure_ascii=False)
        return str(value)

    def update_field(self, path: str, raw: str) -> None:
        """
        Store a form value. Top-level textarea fields hold JSON (experience,
        skills...) and are parsed when possible; otherwise the raw text is kept.
        """
        value: Any = raw
        if field_type(path) == "textarea" and "." not in path:
            try:
                value = json.loads(raw)
            except ValueError:
                pass  # keep the text while the user is still typing
        set_path(self.data, path, value)
        self.save()

    def update_from_json(self, text: str) -> Optional[str]:
        """Replace the whole document. Returns an error message if the JSON is invalid."""
        try:
            data = parse_document(text, source="editor")
        except InputMalformed:
            return "Invalid JSON format"
        if not isinstance(data, dict):
            return "CV data must be a JSON object"
        self.data = data
        self.save()
        return None

    def load_file(self, path: Union[str, Path]) -> Optional[str]:
        """Load a JSON file into the session. Returns an error message on failure."""
        try:
            data = load_document(path)
        except CVGeneratorError as e:
            return f"Error loading file: {e}"
        if not isinstance(data, dict):
            return "Error loading file: CV data must be a JSON object"
        self.data = data
        self.save()
        return None

    def to_json(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False)

    def save(self) -> bool:
        return self.store.save("cvData", self.data)

    def preview(self) -> str:
        """Render the current document. Template problems are shown inline."""
        if self.template_source is None:
            self.template_source = DEFAULT_TEMPLATE.read_text(encoding="utf-8")
        try:
            return self.binder.render_source(self.template_source, self.data, name="preview")
        except CVGeneratorError as e:
            logger.debug("Preview failed: %s", e)
            return (
                '<div class="preview-placeholder"><p>Error generating preview</p>'
                f"<small>{escape(str(e))}</small></div>"
            )

    def validate(self) -> List[str]:
        return check_contact_details(self.data)

    def export_filename(self, today: Optional[date] = None) -> str:
        today = today or date.today()
        return f"cv-{self.role}-{today.isoformat()}.pdf"
