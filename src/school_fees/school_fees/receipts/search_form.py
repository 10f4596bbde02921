from __future__ import annotations

from typing import Callable, Iterable, Optional

from wtforms import Form, SelectField, StringField

from ..core.constants import SECTIONS
from ..students.model import SchoolClass, SearchCriteria


def _strip(value):
    # JSON bodies may carry numbers; the field is always text.
    return value if value is None else str(value).strip()


class ReceiptSearchForm(Form):
    """Find the student to issue a receipt for.

    Every field is optional, but at least one must be filled in before the
    search can run. `searching` mirrors an in-flight search and blocks
    re-submission.
    """

    class_id = SelectField("Class", choices=[("", "Select Class")], default="")
    section = SelectField(
        "Section",
        choices=[("", "Select Section")] + [(s, s) for s in SECTIONS],
        default="",
    )
    admission_number = StringField("Admission Number", filters=[_strip], default="")

    def __init__(self, formdata=None, *, classes: Iterable[SchoolClass] = (), searching: bool = False, **kwargs):
        super().__init__(formdata, **kwargs)
        self.class_id.choices = [("", "Select Class")] + [(str(c.class_id), c.name) for c in classes]
        self.searching = searching

    @property
    def search_enabled(self) -> bool:
        return bool(self.class_id.data or self.section.data or self.admission_number.data)

    def validate(self, extra_validators=None) -> bool:
        if not super().validate(extra_validators=extra_validators):
            return False
        if not self.search_enabled:
            self.form_errors.append("Select a class, section or admission number")
            return False
        return True

    def to_criteria(self) -> SearchCriteria:
        class_id: Optional[int] = int(self.class_id.data) if self.class_id.data else None
        return SearchCriteria(
            class_id=class_id,
            section=self.section.data or None,
            admission_number=self.admission_number.data or None,
        )

    def submit(self, on_search: Callable[[SearchCriteria], None]) -> bool:
        """Validate and hand the parsed criteria to `on_search`.

        Returns False without calling back when a search is already running
        or the form is invalid.
        """
        if self.searching or not self.validate():
            return False
        on_search(self.to_criteria())
        return True
