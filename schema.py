from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import config
from errors import ValidationFailure
from export import Column
from identity import FieldPolicy, IdentityPolicy

DEFAULT_MESSAGES = {
    "created": ("{singular} Created", "Record {identity} added to the registry"),
    "updated": ("{singular} Updated", "Record {identity} saved"),
    "removed": ("{singular} Removed", "Record {identity} removed from the registry"),
    "exported": ("Export Successful", "{count} records saved to {filename}"),
}


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    required: bool = False
    choices: Optional[Sequence[str]] = None
    kind: str = "text"  # text | date | number
    placeholder: str = ""

    def default(self):
        if self.choices:
            return self.choices[0]
        return ""


@dataclass
class EntitySchema:
    name: str
    title: str
    singular: str
    identity_field: str
    identity_policy: IdentityPolicy
    searchable_fields: Sequence[str]
    columns: List[Column]
    fields: List[FormField]
    filters: Dict[str, str] = field(default_factory=dict)  # field -> sentinel label
    page_size: int = config.DEFAULT_PAGE_SIZE
    export_name: Optional[str] = None
    icon: str = ""
    messages: Dict[str, tuple] = field(default_factory=dict)
    seed: List[dict] = field(default_factory=list)

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"{self.name}: page_size must be positive")
        self.export_name = self.export_name or self.name

    @property
    def generates_identity(self):
        return not isinstance(self.identity_policy, FieldPolicy)

    def message(self, event, **values):
        title, detail = self.messages.get(event) or DEFAULT_MESSAGES[event]
        values.setdefault("singular", self.singular)
        return title.format(**values), detail.format(**values)

    def blank_record(self):
        record = {f.name: f.default() for f in self.fields}
        record.setdefault(self.identity_field, "")
        return record

    def clean(self, record):
        """Copy of ``record`` with surrounding whitespace stripped from strings."""
        return {k: v.strip() if isinstance(v, str) else v for k, v in dict(record).items()}

    def validate(self, record):
        for f in self.fields:
            if f.name == self.identity_field:
                continue
            value = record.get(f.name)
            if f.required and (value is None or (isinstance(value, str) and not value)):
                raise ValidationFailure(f"{f.label} is required", field=f.name)
            if f.choices and value not in (None, "") and value not in f.choices:
                raise ValidationFailure(f"{f.label} must be one of: {', '.join(f.choices)}", field=f.name)
        self.identity_policy.validate(record.get(self.identity_field))
        return record
